"""Core modules for debcrates"""

from .version import Version, VersionError
from .record import Record
from .parser import parse_block, ParseError
from .pipeline import collect, inventory

__all__ = [
    'Version', 'VersionError', 'Record',
    'parse_block', 'ParseError', 'collect', 'inventory',
]
