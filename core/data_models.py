"""
Data models shared by data providers.

This module defines the small value types passed between the format
resolver, the key/value parser and the provider load/save paths:
- FormatTag: closed set of supported key/value file types
- ParseOptions: per-format parser configuration
- LoadResult: records plus an optional diagnostic from a load attempt
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from core.file_utils import get_data_file_type

# A single row of tabular data handed to the host
Record = Dict[str, Any]


class FormatTag(Enum):
    """Key/value file types, keyed by file extension."""
    ENV = '.env'
    INI = '.ini'
    PROPERTIES = '.properties'

    @classmethod
    def from_path(cls, data_url: str) -> Optional['FormatTag']:
        """
        Derive the format tag from the trailing extension of a path or url.

        Args:
            data_url: Local data file path or remote data url

        Returns:
            Matching FormatTag, or None for unknown or missing extensions
        """
        extension = get_data_file_type(data_url)
        for tag in cls:
            if tag.value == extension:
                return tag
        return None


@dataclass(frozen=True)
class ParseOptions:
    """
    Key/value parser configuration.

    comments=None leaves comment markers at the parser defaults.
    """
    sections: bool = False
    comments: Optional[Tuple[str, ...]] = None


@dataclass
class LoadResult:
    """Outcome of a fail-soft load: records are always usable."""
    records: List[Record] = field(default_factory=list)
    diagnostic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None
