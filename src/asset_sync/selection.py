"""Selection grammar for picking catalog entries.

A selection is a whitespace-separated list of tokens, each either a single
index (``3``) or an inclusive range (``1-4``). The keyword ``all`` selects
the whole catalog.

Ranges only count upwards: ``2-5`` yields 2, 3, 4, 5 while a reversed
range such as ``5-2`` yields nothing. Indices outside the catalog and
malformed tokens are dropped without error so that a user may overshoot
a range; duplicates keep their first position.
"""

import re
from collections.abc import Sequence

from .catalog import AssetEntry
from .errors import SelectionEmptyError

ALL_KEYWORD = "all"

TOKEN_PATTERN = re.compile(r"^(\d+)(?:-(\d+))?$")


def expand_token(token: str, catalog_size: int | None = None) -> range:
    """Expand one token into the indices it names.

    Args:
        token: A single index or an ``a-b`` range
        catalog_size: If given, the range is clipped to ``1..catalog_size``
            so a huge upper bound costs nothing

    Returns:
        The indices in increasing order (empty for malformed tokens and
        reversed ranges)
    """
    match = TOKEN_PATTERN.match(token)
    if not match:
        return range(0)

    low = int(match.group(1))
    high = int(match.group(2)) if match.group(2) is not None else low
    if catalog_size is not None:
        low, high = max(low, 1), min(high, catalog_size)
    return range(low, high + 1)


def parse_selection(raw: str, catalog_size: int) -> list[int]:
    """Parse a raw selection string into catalog indices.

    Args:
        raw: User input, e.g. ``"1 3 5-7"``
        catalog_size: Number of entries in the catalog

    Returns:
        Deduplicated indices within ``1..catalog_size``, in order of first
        appearance

    Example:
        >>> parse_selection("3 1-2 2", 5)
        [3, 1, 2]
    """
    if raw.strip().lower() == ALL_KEYWORD:
        return list(range(1, catalog_size + 1))

    selected: dict[int, None] = {}
    for token in raw.split():
        for index in expand_token(token, catalog_size):
            selected.setdefault(index, None)

    return list(selected)


def select_entries(catalog: Sequence[AssetEntry], raw: str) -> list[AssetEntry]:
    """Resolve a raw selection string against a catalog.

    Raises:
        SelectionEmptyError: If no valid index survives parsing
    """
    indices = parse_selection(raw, len(catalog))
    if not indices:
        raise SelectionEmptyError(f"No valid entries selected from: {raw.strip() or '(empty)'}")

    return [catalog[index - 1] for index in indices]
