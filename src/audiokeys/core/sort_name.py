"""Sort name derivation for audio tracks."""

from typing import Optional


def index_prefix(number: Optional[int]) -> str:
    """Four digit zero-padded prefix, e.g. 3 -> "0003 - "; "" when absent.

    The sign sits outside the padding, so -3 -> "-0003 - ". Numbers of 10000
    and up overflow the width and sort out of order.
    """
    if number is None:
        return ""
    sign = "-" if number < 0 else ""
    return f"{sign}{abs(number):04d} - "


def sort_name(
    name: str, index_number: Optional[int], parent_index_number: Optional[int]
) -> str:
    """Disc, then track, then name: "0001 - 0003 - Track"."""
    return index_prefix(parent_index_number) + index_prefix(index_number) + name
