"""
Number list input helpers

The canvas takes its array from a comma-separated text field
("64, 34, 25, 12, 22, 11, 90"). Entries that do not start with an integer
are dropped rather than rejected, so a half-typed list still animates.
"""

import re
from typing import Iterable, List

# Leading integer of an entry, like a lenient integer parse
_LEADING_INT = re.compile(r'^[+-]?\d+')


def parse_number_list(text: str) -> List[int]:
    """
    Parse comma-separated integers.

    Examples:
        "64, 34, 25"  -> [64, 34, 25]
        "5, , abc, 7" -> [5, 7]
        "12abc, -3"   -> [12, -3]
    """
    if not text:
        return []

    values = []
    for entry in text.split(','):
        match = _LEADING_INT.match(entry.strip())
        if not match:
            continue
        try:
            values.append(int(match.group(0)))
        except ValueError:
            # Past the interpreter's int string conversion limit
            continue
    return values


def format_number_list(values: Iterable[int]) -> str:
    return ", ".join(str(v) for v in values)
