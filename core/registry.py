"""
Data provider registry.

Routes data files to providers by file extension.
"""

from typing import Dict, List, Optional

from core.file_utils import get_data_file_type
from core.provider_interface import DataProvider


class DataProviderRegistry:
    """Registry of data providers keyed by supported file extension."""

    def __init__(self):
        self._providers: Dict[str, DataProvider] = {}

    def register(self, provider: DataProvider):
        """
        Register a provider for all of its supported file types.

        Raises:
            ValueError: If any of its file types is already registered
        """
        for file_type in provider.supported_data_file_types:
            if file_type in self._providers:
                raise ValueError(f"Data file type '{file_type}' is already registered")
        for file_type in provider.supported_data_file_types:
            self._providers[file_type] = provider

    def unregister(self, file_type: str):
        """Remove the provider for a file type (no-op if not registered)."""
        self._providers.pop(file_type, None)

    def get_provider(self, file_type: str) -> Optional[DataProvider]:
        """Get provider by file extension (e.g. '.ini')."""
        return self._providers.get(file_type)

    def detect_provider(self, data_url: str) -> Optional[DataProvider]:
        """Find the provider for a file path or url, if any."""
        return self._providers.get(get_data_file_type(data_url))

    def list_file_types(self) -> List[str]:
        """List all registered file extensions."""
        return list(self._providers.keys())
