"""
Unit tests for the key/value text parser.

Tests cover:
- Separators (=, :, whitespace) and empty values
- Comment markers (defaults and configured)
- Sections
- Line continuation and escapes
- Malformed input errors
"""

import pytest

from core.data_models import ParseOptions
from core.kv_parser import KVParseError, parse

SECTIONS = ParseOptions(sections=True)
INI = ParseOptions(sections=True, comments=(';', '#'))
ENV = ParseOptions(sections=True, comments=('#',))


class TestEntries:

    def test_separators(self):
        text = "a=1\nb:2\nc 3\nd = 4\ne\t:\t5\n"
        assert parse(text) == {'a': '1', 'b': '2', 'c': '3', 'd': '4', 'e': '5'}

    def test_value_keeps_later_separators(self):
        assert parse("url=http://host:80/?q=1") == {'url': 'http://host:80/?q=1'}

    def test_key_without_value(self):
        assert parse("flag\nempty=\n") == {'flag': '', 'empty': ''}

    def test_blank_lines_and_indentation(self):
        assert parse("\n   \n   a = 1   \n\n") == {'a': '1'}

    def test_duplicate_key_last_wins(self):
        assert parse("a=1\na=2") == {'a': '2'}

    def test_crlf_line_breaks(self):
        assert parse("a=1\r\nb=2\rc=3") == {'a': '1', 'b': '2', 'c': '3'}

    def test_escaped_separator_in_key(self):
        assert parse("first\\=name=John\nx\\ y=1") == {'first=name': 'John', 'x y': '1'}

    def test_empty_text(self):
        assert parse("") == {}


class TestComments:

    def test_default_markers(self):
        assert parse("# one\n! two\n  # three\na=1") == {'a': '1'}

    def test_default_markers_keep_semicolon(self):
        assert parse("; not a comment") == {';': 'not a comment'}

    def test_ini_markers(self):
        assert parse("; one\n# two\na=1", INI) == {'a': '1'}

    def test_env_markers(self):
        assert parse("# comment\n;key=1\n!bang=2", ENV) == {';key': '1', '!bang': '2'}

    def test_empty_comment_marker_ignored(self):
        options = ParseOptions(comments=('', '#'))
        assert parse("a=1\n#b=2", options) == {'a': '1'}

    def test_comment_not_continued(self):
        assert parse("# comment \\\na=1") == {'a': '1'}


class TestSections:

    def test_sections_nest_entries(self):
        text = "top=1\n[db]\nhost=localhost\n[ web ]\nport=80\n"
        assert parse(text, SECTIONS) == {
            'top': '1',
            'db': {'host': 'localhost'},
            'web': {'port': '80'},
        }

    def test_reopened_section_merges(self):
        text = "[db]\nhost=a\n[web]\nport=80\n[db]\nuser=root\n"
        assert parse(text, SECTIONS)['db'] == {'host': 'a', 'user': 'root'}

    def test_section_lines_are_keys_without_sections(self):
        assert parse("[db]\nhost=a") == {'[db]': '', 'host': 'a'}

    def test_unterminated_section(self):
        with pytest.raises(KVParseError, match="unterminated section header") as exc_info:
            parse("a=1\n[db\nhost=a", SECTIONS)
        assert exc_info.value.line_number == 2

    def test_empty_section_name(self):
        with pytest.raises(KVParseError, match="empty section name"):
            parse("[ ]", SECTIONS)

    def test_section_conflicts_with_key(self):
        with pytest.raises(KVParseError, match="conflicts"):
            parse("db=1\n[db]\nhost=a", SECTIONS)


class TestContinuationAndEscapes:

    def test_continuation_strips_leading_whitespace(self):
        assert parse("a=one \\\n    two \\\n  three") == {'a': 'one two three'}

    def test_escaped_backslash_is_not_continuation(self):
        assert parse("path=C:\\\\\nb=2") == {'path': 'C:\\', 'b': '2'}

    def test_continuation_at_end_of_text(self):
        assert parse("a=1\\") == {'a': '1'}

    def test_escapes(self):
        assert parse("a=tab\\there\\nnew\\r\\f\nb=caf\\u00e9") == {
            'a': 'tab\there\nnew\r\f',
            'b': 'café',
        }

    def test_unknown_escape_keeps_char(self):
        assert parse("a=\\q\\#") == {'a': 'q#'}

    def test_malformed_unicode_escape(self):
        with pytest.raises(KVParseError, match="malformed"):
            parse("a=\\u12G4")

    def test_short_unicode_escape(self):
        with pytest.raises(KVParseError):
            parse("a=\\u12")


class TestErrors:

    def test_missing_key(self):
        with pytest.raises(KVParseError, match="missing key") as exc_info:
            parse("a=1\n=value")
        assert exc_info.value.line_number == 2

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("=oops")
