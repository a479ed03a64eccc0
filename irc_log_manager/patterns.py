"""
Regex patterns and byte constants for WeeChat configuration and transcript parsing.
"""

import re

# =============================================================================
# CLIENT CONFIGURATION
# =============================================================================

# Buffer layout entry: default.buffer = "irc;freenode.#python;5"
BUFFER_PATTERN = re.compile(r'^default\.buffer = "irc;(\w+?)\.#([-\w]+?);([0-9]+)"$')

# =============================================================================
# TRANSCRIPT RECORDS
# =============================================================================

NEWLINE = 0x0A

FIELD_SEPARATOR = "\t"

# "YYYY-MM-DD HH:MM:SS<tab>\n": the bytes a record occupies when the client
# wrote its timestamp and nothing else.
FOOTER_WIDTH = 21

# Record consisting of a bare timestamp and separator (interrupted write),
# matched against raw bytes so undecodable records are never decoded
TRUNCATED_RECORD_PATTERN = re.compile(rb"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\t\n\Z")

# Complete record: 2019-02-18 21:06:38<tab>@nick<tab>message
# ASCII digits only, dates are compared as strings against the cutoff
RECORD_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2}) \d{2}:\d{2}:\d{2}\t@?(?P<name>[^\t]+)(?:\t|$)",
    re.ASCII,
)

# ISO 8601 calendar date, the only format the cutoff is compared in
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$", re.ASCII)
