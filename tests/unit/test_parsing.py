"""
Unit tests for configuration and record parsing.

Tests the parsing logic including:
- Buffer layout lines in the client configuration
- Truncated record detection pattern
- Record date and author extraction
- Cutoff date validation
"""

from datetime import date

import pytest

from irc_log_manager.channels import parse_channels, parse_display_index
from irc_log_manager.config import default_cutoff_date, normalize_date
from irc_log_manager.exceptions import ConfigurationError
from irc_log_manager.models import ChannelDescriptor
from irc_log_manager.patterns import (
    BUFFER_PATTERN,
    FOOTER_WIDTH,
    RECORD_PATTERN,
    TRUNCATED_RECORD_PATTERN,
)


class TestBufferPattern:
    """Tests for BUFFER_PATTERN."""

    def test_irc_channel_buffer(self):
        match = BUFFER_PATTERN.match('default.buffer = "irc;freenode.#python;5"')
        assert match is not None
        assert match.groups() == ("freenode", "python", "5")

    def test_channel_with_dash(self):
        match = BUFFER_PATTERN.match('default.buffer = "irc;ozinger.#rust-lang;12"')
        assert match.groups() == ("ozinger", "rust-lang", "12")

    def test_non_channel_buffers(self):
        assert BUFFER_PATTERN.match('default.buffer = "core;weechat;1"') is None
        assert BUFFER_PATTERN.match('default.buffer = "irc;server.freenode;1"') is None
        assert BUFFER_PATTERN.match('default.buffer = "irc;freenode.alice;3"') is None


class TestParseChannels:
    """Tests for channel extraction from configuration lines."""

    def test_channels_in_config_order(self):
        lines = [
            "[layout]\n",
            'default.buffer = "irc;freenode.#python;5"\n',
            'default.buffer = "core;weechat;1"\n',
            'default.buffer = "irc;Ozinger.#Rust;2"\n',
        ]
        assert parse_channels(lines) == [
            ChannelDescriptor("freenode", "python", 5),
            ChannelDescriptor("Ozinger", "Rust", 2),
        ]

    def test_out_of_range_index_skipped(self):
        lines = [
            'default.buffer = "irc;freenode.#python;99999999999"',
            'default.buffer = "irc;freenode.#rust;4294967295"',
        ]
        assert parse_channels(lines) == [ChannelDescriptor("freenode", "rust", 4294967295)]

    def test_parse_display_index(self):
        assert parse_display_index("7") == 7
        assert parse_display_index("4294967296") is None


class TestChannelDescriptor:
    """Tests for transcript naming."""

    def test_file_name_is_lowercase(self):
        channel = ChannelDescriptor("Freenode", "Python", 3)
        assert channel.file_name("weechatlog") == "irc.freenode.#python.weechatlog"

    def test_buffer_name_keeps_case(self):
        assert ChannelDescriptor("Freenode", "Python", 3).buffer_name == "Freenode.#Python"


class TestTruncatedRecordPattern:
    """Tests for the bare timestamp pattern."""

    def test_footer_width(self):
        assert len("2019-02-18 21:06:38\t\n") == FOOTER_WIDTH

    def test_bare_timestamp_matches(self):
        assert TRUNCATED_RECORD_PATTERN.match(b"2019-02-18 21:06:38\t\n")

    def test_complete_record_does_not_match(self):
        assert TRUNCATED_RECORD_PATTERN.match(b"2019-02-18 21:06:38\tbob\thi\n") is None
        assert TRUNCATED_RECORD_PATTERN.match(b"2019-02-18 21:06:38 \n") is None

    def test_undecodable_bytes_do_not_match(self):
        assert TRUNCATED_RECORD_PATTERN.match(b"\xff" * 20 + b"\n") is None


class TestRecordPattern:
    """Tests for RECORD_PATTERN captures."""

    def test_message_record(self):
        match = RECORD_PATTERN.match("2019-02-18 21:06:38\tbob\thello there")
        assert match.group("date") == "2019-02-18"
        assert match.group("name") == "bob"

    def test_operator_marker_stripped(self):
        match = RECORD_PATTERN.match("2019-02-18 21:06:38\t@alice\thi")
        assert match.group("name") == "alice"

    def test_name_without_message(self):
        match = RECORD_PATTERN.match("2019-02-18 21:06:38\t--")
        assert match.group("name") == "--"

    def test_empty_name_rejected(self):
        assert RECORD_PATTERN.match("2020-01-01 00:00:01\t") is None
        assert RECORD_PATTERN.match("2020-01-01 00:00:01\t\thello") is None

    def test_missing_timestamp_rejected(self):
        assert RECORD_PATTERN.match("bob\thello") is None


class TestCutoffDates:
    """Tests for cutoff date validation."""

    def test_valid_date(self):
        assert normalize_date("2019-02-18") == "2019-02-18"

    @pytest.mark.parametrize(
        "value",
        ["2019-2-18", "2019-13-01", "2019-02-30", "18/02/2019", "", "２０１９-０２-１８"],
    )
    def test_invalid_dates(self, value):
        with pytest.raises(ConfigurationError):
            normalize_date(value)

    def test_default_cutoff(self):
        assert default_cutoff_date(date(2019, 3, 20)) == "2019-02-18"
