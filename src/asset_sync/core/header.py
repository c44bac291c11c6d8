"""Header block parsing for asset documents.

Assets start with a block of ``key: value`` lines fenced by ``---`` marker
lines. Values are taken verbatim (no YAML interpretation), which keeps the
parser tolerant of documents that are not valid YAML.
"""

import re
from dataclasses import dataclass, field

HEADER_DELIMITER = "---"

# Matches "key: value" at the start of a line; the value may be empty
FIELD_PATTERN = re.compile(r"^([A-Za-z_][\w-]*):[ \t]*(.*)$")


@dataclass(frozen=True)
class HeaderBlock:
    """Parsed header block.

    Attributes:
        fields: First value seen for each key inside the block
        start: 1-based line number of the opening delimiter, or None
        end: 1-based line number of the closing delimiter, or None
    """

    fields: dict[str, str] = field(default_factory=dict)
    start: int | None = None
    end: int | None = None

    @property
    def is_closed(self) -> bool:
        return self.end is not None and self.end > 1

    def get(self, key: str) -> str | None:
        """Return a field's value, treating blank values as missing."""
        value = self.fields.get(key, "").strip()
        return value or None


def find_delimiters(lines: list[str]) -> list[int]:
    """Return 1-based line numbers of every delimiter line."""
    return [
        number
        for number, line in enumerate(lines, start=1)
        if line.rstrip("\r") == HEADER_DELIMITER
    ]


def parse_header(lines: list[str]) -> HeaderBlock:
    """Parse the header block from a document's lines.

    The block spans from the first delimiter line to the second one. If no
    closing delimiter exists, everything after the opening delimiter is
    scanned so that a malformed header still yields its fields.

    Args:
        lines: Document lines without trailing newlines

    Returns:
        HeaderBlock with the fields found (empty if no delimiter at all)
    """
    delimiters = find_delimiters(lines)
    if not delimiters:
        return HeaderBlock()

    start = delimiters[0]
    end = delimiters[1] if len(delimiters) > 1 else None
    block = lines[start:end - 1] if end is not None else lines[start:]

    fields: dict[str, str] = {}
    for line in block:
        match = FIELD_PATTERN.match(line.rstrip("\r"))
        if match and match.group(1) not in fields:
            fields[match.group(1)] = match.group(2).strip()

    return HeaderBlock(fields=fields, start=start, end=end)


def read_header_field(text: str, key: str) -> str | None:
    """Read a single field from a document's header block.

    Args:
        text: Full document text
        key: Field name, e.g. 'description'

    Returns:
        The stripped value, or None if the document has no header block
        or the field is absent/blank
    """
    return parse_header(text.splitlines()).get(key)
