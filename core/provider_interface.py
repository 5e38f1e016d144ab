"""
Data provider interface.

A data provider loads one family of data files into records for the host
and saves edited records back. Every provider implements the same
capability set:
- get_data: load a file and hand records to a callback
- get_data_table_names: list tables for multi-table sources
- get_data_schema: return a JSON schema where the format provides one
- save_data: persist records

Table names and schema default to empty/None for single-table formats.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from core.data_models import LoadResult, Record
from core.file_utils import get_data_file_type

LoadDataCallback = Callable[[List[Record]], Any]
ShowDataCallback = Callable[[Optional[BaseException]], Any]


class DataProvider(ABC):
    """Base class for data file providers."""

    @property
    @abstractmethod
    def supported_data_file_types(self) -> List[str]:
        """File extensions handled by this provider (e.g. ['.ini'])."""
        pass

    def can_handle(self, data_url: str) -> bool:
        """Check if this provider handles the given file path or url."""
        return get_data_file_type(data_url) in self.supported_data_file_types

    @abstractmethod
    async def load(self, data_url: str) -> LoadResult:
        """
        Load a data file into records.

        Implementations report unreadable or malformed files through the
        result diagnostic instead of raising.
        """
        pass

    async def get_data(self, data_url: str, parse_options: Any,
                       load_data: LoadDataCallback) -> None:
        """
        Load data and pass the resulting records to load_data.

        Args:
            data_url: Local data file path or remote data url
            parse_options: Caller-supplied parse options
            load_data: Load data callback, called once with the records
        """
        result = await self.load(data_url)
        load_data(result.records)

    def get_data_table_names(self, data_url: str) -> List[str]:
        """Gets data table names for data sources with multiple data sets."""
        return []

    def get_data_schema(self, data_url: str) -> Optional[Any]:
        """Gets data schema in json format for file types that provide it."""
        return None

    @abstractmethod
    async def save_data(self, file_path: str, file_data: Any, table_name: Optional[str],
                        show_data: Optional[ShowDataCallback] = None) -> None:
        """
        Save records to a data file.

        Args:
            file_path: Local data file path
            file_data: Records to save
            table_name: Table name for data files with multiple tables support
            show_data: Callback receiving the write error, or None on success
        """
        pass
