"""
Pytest configuration and shared fixtures for IRC log manager tests.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


# =============================================================================
# SAMPLE TRANSCRIPT FIXTURES
# =============================================================================

@pytest.fixture
def sample_records():
    """Well-formed transcript records, oldest first."""
    return [
        "2019-02-10 09:00:00\t-->\talice (~alice@host) has joined #python",
        "2019-02-17 23:59:59\t@alice\tgood night",
        "2019-02-18 00:00:00\tbob\tmorning",
        "2019-02-18 08:15:00\t@alice\tmorning bob",
        "2019-02-19 10:30:00\t--\tMode #python [+o bob] by alice",
        "2019-02-19 10:31:00\talice\tthanks",
    ]


@pytest.fixture
def sample_transcript(sample_records):
    """Transcript bytes with every record newline-terminated."""
    return ("\n".join(sample_records) + "\n").encode("utf-8")


# =============================================================================
# CLIENT DIRECTORY FIXTURES
# =============================================================================

class WeechatDir:
    """Builds a throwaway client directory with config and transcripts."""

    def __init__(self, root):
        self.root = root
        self.logs = root / "logs"
        self.logs.mkdir(parents=True, exist_ok=True)
        self.buffers = []

    @property
    def config_path(self):
        return self.root / "weechat.conf"

    def add_channel(self, server, channel, index, content=None):
        """Register a buffer in the config and optionally write its transcript."""
        self.buffers.append(f'default.buffer = "irc;{server}.#{channel};{index}"')
        self.write_config()
        if content is not None:
            if isinstance(content, str):
                content = content.encode("utf-8")
            path = self.logs / f"irc.{server.lower()}.#{channel.lower()}.weechatlog"
            path.write_bytes(content)
            return path
        return None

    def write_config(self, extra_lines=()):
        lines = [
            "[layout]",
            'default.buffer = "core;weechat;1"',
            'default.buffer = "irc;server.freenode;1"',
            *self.buffers,
            *extra_lines,
            'default.window = "1;0;0;0;irc;freenode.#python"',
        ]
        self.config_path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def weechat_dir(tmp_path):
    """Empty client directory with a logs/ subdirectory."""
    return WeechatDir(tmp_path / "weechat")
