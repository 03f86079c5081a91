import re
import sys

# Stands in for "price unknown"; compares greater than or equal to every parsed price.
PRICE_SENTINEL = sys.maxsize

_SENTINEL_WIDTH = len(str(PRICE_SENTINEL))

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_price(raw: str | None) -> int:
    """Normalize free-form price text such as ``"CHF 19'900.-"`` to an integer.

    Every character that is not an ASCII digit is dropped, so currency symbols,
    thousands separators, decimal markers and trailing text all disappear.
    Absent text, text without digits, and values beyond the numeric ceiling
    resolve to ``PRICE_SENTINEL``.
    """
    if raw is None:
        return PRICE_SENTINEL
    digits = _NON_DIGITS.sub("", raw)
    if not digits:
        return PRICE_SENTINEL
    significant = digits.lstrip("0") or "0"
    # int() rejects very long digit strings, anything this wide is past the ceiling anyway
    if len(significant) > _SENTINEL_WIDTH:
        return PRICE_SENTINEL
    return min(int(significant), PRICE_SENTINEL)


def is_cheap(raw: str | None, threshold: int) -> bool:
    return parse_price(raw) < threshold
