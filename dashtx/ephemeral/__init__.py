"""
Messages that are relayed between nodes but never mined
"""

# ephemeral/__init__.py
from dashtx.ephemeral.instant_lock import *
