"""
All primitive codecs used to build dashtx payloads
"""

# data/__init__.py
from dashtx.data.bitset import *
from dashtx.data.compact_size import *
from dashtx.data.fixed_bytes import *
from dashtx.data.ip_utils import *
