"""
Properties data provider for .properties, .ini and .env data files.

Loads key/value config files as key/value records for the data preview
host and saves edited records back as .properties text.

Parse options per file type:
- .env: sections, '#' comments
- .ini: sections, ';' and '#' comments
- .properties: sections, parser default comments ('#', '!')

Load is fail-soft: read and parse errors are logged and shown to the user,
and the host still receives an empty record list.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any, List, Optional

from core.config import Settings, load_settings
from core.data_models import FormatTag, LoadResult, ParseOptions
from core.file_utils import read_data_file, write_data_file
from core.json_utils import convert_json_data
from core.kv_parser import parse
from core.logging_config import get_logger
from core.notifications import ConsoleNotifier, Notifier
from core.provider_interface import DataProvider, ShowDataCallback

LOGGER_NAME = 'properties.data.provider'

NOT_PROPERTIES_WARNING = ('Data loaded in Preview is not a Properties collection. '
                          'Use other data formats to Save this data.')

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


def get_data_parse_options(data_url: str) -> Optional[ParseOptions]:
    """
    Gets data parse options for the file type of the given path or url.

    Args:
        data_url: Local data file path or remote data url

    Returns:
        ParseOptions for .env/.ini/.properties files, None (parser
        defaults) for anything else
    """
    format_tag = FormatTag.from_path(data_url)
    if format_tag is FormatTag.ENV:
        return ParseOptions(sections=True, comments=('#',))
    if format_tag is FormatTag.INI:
        # some INI files use # for comments too
        return ParseOptions(sections=True, comments=(';', '#'))
    if format_tag is FormatTag.PROPERTIES:
        return ParseOptions(sections=True)
    return None


def is_properties_collection(file_data: Any) -> bool:
    """Check if data is a non-empty record list with key/value records."""
    if isinstance(file_data, (str, bytes)) or not isinstance(file_data, Sequence):
        return False
    if len(file_data) == 0:
        return False
    first = file_data[0]
    return isinstance(first, Mapping) and 'key' in first and 'value' in first


def serialize_properties(records: Sequence[Mapping[str, Any]]) -> str:
    """
    Convert key/value records to .properties text.

    Each record becomes one key=value entry. Line breaks inside an entry
    are prefixed with a backslash so multi-line values continue on the
    next physical line. Entries that are not mappings are skipped.
    """
    lines = []
    for record in records:
        if not isinstance(record, Mapping):
            continue
        line = f"{_to_text(record.get('key'))}={_to_text(record.get('value'))}"
        line = _LINE_BREAK.sub(lambda match: '\\' + match.group(0), line)
        lines.append(f"{line}\n")
    return ''.join(lines)


def _to_text(value: Any) -> str:
    return '' if value is None else str(value)


class PropertiesDataProvider(DataProvider):
    """
    Data provider for .env, .ini and .properties config files.

    get_data() ignores caller parse options: they always come from the
    file type via get_data_parse_options().
    """

    def __init__(self, settings: Optional[Settings] = None,
                 notifier: Optional[Notifier] = None):
        """
        Args:
            settings: Provider settings (loaded from the settings file if omitted)
            notifier: User notification channel (console if omitted)
        """
        self.settings = settings or load_settings()
        self.notifier = notifier or ConsoleNotifier()
        self.logger = get_logger(LOGGER_NAME, self.settings.log_level_value)
        self.logger.debug('created for: %s', self.supported_data_file_types)

    @property
    def supported_data_file_types(self) -> List[str]:
        return [format_tag.value for format_tag in FormatTag]

    async def load(self, data_url: str) -> LoadResult:
        """
        Read, parse and normalize a data file.

        Never raises for unreadable or malformed files; the error message is
        returned as the result diagnostic instead.
        """
        try:
            content = await read_data_file(data_url, self.settings.encoding)
            data = parse(content, get_data_parse_options(data_url))
        except (OSError, ValueError) as error:
            self.logger.error("getData(): Error parsing '%s' \n\t Error: %s", data_url, error)
            self.notifier.show_error_message(
                f"Unable to parse data file: '{data_url}'. \n\t Error: {error}")
            return LoadResult(diagnostic=str(error))
        return LoadResult(records=convert_json_data(data))

    def get_data_table_names(self, data_url: str) -> List[str]:
        return []  # none for properties data files

    def get_data_schema(self, data_url: str) -> Optional[Any]:
        return None  # none for properties data files

    async def save_data(self, file_path: str, file_data: Any, table_name: Optional[str],
                        show_data: Optional[ShowDataCallback] = None) -> None:
        """
        Saves key/value records as .properties text.

        Data that is not a key/value record list is not written; a warning
        is shown instead and show_data is not called.
        """
        if is_properties_collection(file_data):
            content = serialize_properties(file_data)
        else:
            content = ''
            self.notifier.show_warning_message(NOT_PROPERTIES_WARNING)

        if not content:
            return

        error = None
        try:
            await write_data_file(file_path, content, self.settings.encoding)
        except (OSError, ValueError) as e:
            error = e
            self.logger.error("saveData(): Error writing '%s' \n\t Error: %s", file_path, e)

        if show_data is not None:
            show_data(error)
