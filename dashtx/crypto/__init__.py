"""
crypto folder used to house the hash functions and the fixed size cryptographic types
"""

# crypto/__init__.py
from dashtx.crypto.bls import *
from dashtx.crypto.hash_functions import *
from dashtx.crypto.hash_types import *
