"""
Utility functions and helpers
"""

from typing import Optional

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 10


def parse_int(value: Optional[str], default: int = 0) -> int:
    """Parse a query-string integer, falling back to default when absent or malformed"""
    if value is None:
        return default
    # Optional sign, then ASCII digits only
    digits = value[1:] if value[:1] in ("+", "-") else value
    if not (digits.isascii() and digits.isdigit()):
        return default
    return int(value)


def clamp_page_size(count: Optional[str]) -> int:
    """Page size within [MIN_PAGE_SIZE, MAX_PAGE_SIZE]; anything else means MAX_PAGE_SIZE"""
    size = parse_int(count)
    if size < MIN_PAGE_SIZE or size > MAX_PAGE_SIZE:
        return MAX_PAGE_SIZE
    return size


def clamp_offset(start: Optional[str]) -> int:
    """Non-negative row offset; negative or malformed values mean 0"""
    return max(parse_int(start), 0)
