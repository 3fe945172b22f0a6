"""
The transaction envelope that carries special payloads
"""

# chain/__init__.py
from dashtx.chain.transaction import *
