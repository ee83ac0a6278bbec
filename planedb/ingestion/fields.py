"""
Fixed-column field extraction.

Every extractor is best-effort: garbled or missing content degrades to
0 or an empty string instead of raising, so one bad column never aborts
a load of the whole FAA export.
"""

HEX_DIGITS = '0123456789abcdefABCDEF'
DEC_DIGITS = '0123456789'
ASCII_WHITESPACE = ' \t\n\v\f\r'

# Maximum characters consumed by the numeric extractors
MAX_HEX_CHARS = 8
MAX_DEC_CHARS = 10


def parse_hex(text: str, offset: int = 0) -> int:
    """
    Parse up to 8 hex characters starting at offset.

    Stops at the first non-hex character. E.g., '1A2B,junk' -> 0x1A2B.
    Returns 0 if no hex digits are present.
    """
    val = 0
    for c in text[offset:offset + MAX_HEX_CHARS]:
        if c not in HEX_DIGITS:
            break
        val = (val << 4) + int(c, 16)
    return val


def parse_int(text: str, offset: int = 0) -> int:
    """Parse up to 10 decimal digits starting at offset, 0 if none."""
    val = 0
    for c in text[offset:offset + MAX_DEC_CHARS]:
        if c not in DEC_DIGITS:
            break
        val = val * 10 + (ord(c) - ord('0'))
    return val


def pickup(text: str, start: int, end: int) -> str:
    """
    Read the characters in [start, end) with trailing whitespace removed.

    Leading whitespace is kept: pickup('  ABC   ', 0, 8) -> '  ABC'.
    Only ASCII whitespace counts; control bytes and NBSP are kept.
    """
    return text[start:end].rstrip(ASCII_WHITESPACE)
