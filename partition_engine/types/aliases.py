"""
Type aliases for the partition engine.

This module defines the aliases used throughout the package
for process identifiers and block sizes.
"""

from typing import NewType

ProcessID = NewType('ProcessID', str)
BlockSize = NewType('BlockSize', int)
Address = NewType('Address', int)
