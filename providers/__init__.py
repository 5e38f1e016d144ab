"""
Data providers for loading and saving data files.

Each provider implements the DataProvider interface for one family of
file types:
- PropertiesDataProvider: .env, .ini and .properties config files

Adding a new provider:
1. Add yourformat.py with a DataProvider subclass
2. Register it with DataProviderRegistry in cli/main.py
"""

from .properties import PropertiesDataProvider

__all__ = [
    'PropertiesDataProvider',
]
