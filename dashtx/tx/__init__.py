"""
Transaction records shared by the envelope and the special payloads
"""

# tx/__init__.py
from dashtx.tx.tx import *
from dashtx.tx.tx_types import *
