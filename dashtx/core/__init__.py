"""
Contains the core elements that are used within dashtx

Core:
    -Provides the standard protocol for dashtx wire elements
    -Provides the reference formats and consensus constants
    -Provides custom exceptions for encoding and decoding
    -Provides the logger factory
"""
# core/__init__.py
from dashtx.core.byte_stream import *
from dashtx.core.exceptions import *
from dashtx.core.formats import *
from dashtx.core.logging import *
from dashtx.core.serializable import *
