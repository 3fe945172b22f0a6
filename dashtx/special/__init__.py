"""
Dash special transaction payloads and the tagged union that dispatches between them
"""

# special/__init__.py
from dashtx.special.asset_lock import *
from dashtx.special.base import *
from dashtx.special.payload import *
from dashtx.special.provider_update_service import *
from dashtx.special.quorum_commitment import *
