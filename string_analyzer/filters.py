"""
Query interpretation for the list and natural-language endpoints.

Both functions work over a snapshot list of records and narrow it step
by step.  They return the filtered records together with the filters
that were actually applied, using parsed (not raw) values.
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import InvalidFilterValue
from .schemas import StringRecord

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]*|\d+)", re.ASCII)

LONGER_THAN = re.compile(r"longer than (\d+)", re.ASCII)
CONTAINING_LETTER = re.compile(r"containing the letter (\w)", re.ASCII | re.IGNORECASE)
FIRST_VOWEL = re.compile(r"first vowel", re.IGNORECASE)


def parse_int(raw: str) -> Optional[int]:
    """Parse the leading integer of ``raw``.

    Trailing garbage is ignored (``"12abc"`` -> 12, ``"5.9"`` -> 5) and a
    ``0x`` prefix switches to hexadecimal (``"0x1A"`` -> 26).  Returns None
    when no digits lead the string.
    """
    m = _LEADING_INT.match(raw)
    if not m:
        return None
    sign, digits = m.groups()
    if digits[:2].lower() == "0x":
        if len(digits) == 2:
            return None
        n = int(digits[2:], 16)
    else:
        n = int(digits)
    return -n if sign == "-" else n


def _int_param(params: Mapping[str, str], name: str) -> int:
    n = parse_int(params[name])
    if n is None:
        raise InvalidFilterValue()
    return n


def apply_query_filters(
    records: List[StringRecord], params: Mapping[str, str]
) -> Tuple[List[StringRecord], Dict[str, Any]]:
    """Apply the list endpoint's filters in their fixed order.

    Only parameters present in ``params`` are applied.  Raises
    ``InvalidFilterValue`` on the first integer parameter that does not
    parse, before any result is returned.
    """
    results = list(records)
    applied: Dict[str, Any] = {}

    if "is_palindrome" in params:
        wanted = params["is_palindrome"] == "true"
        results = [r for r in results if r.properties.is_palindrome == wanted]
        applied["is_palindrome"] = wanted
    if "min_length" in params:
        min_length = _int_param(params, "min_length")
        results = [r for r in results if r.properties.length >= min_length]
        applied["min_length"] = min_length
    if "max_length" in params:
        max_length = _int_param(params, "max_length")
        results = [r for r in results if r.properties.length <= max_length]
        applied["max_length"] = max_length
    if "word_count" in params:
        word_count = _int_param(params, "word_count")
        results = [r for r in results if r.properties.word_count == word_count]
        applied["word_count"] = word_count
    if "contains_character" in params:
        needle = params["contains_character"]
        results = [r for r in results if needle in r.value]
        applied["contains_character"] = needle

    return results, applied


def interpret_natural_language(
    records: List[StringRecord], query: str
) -> Tuple[List[StringRecord], Dict[str, Any]]:
    """Keyword heuristics over the raw query text.

    Every rule that matches narrows the results further.  "first vowel"
    records ``contains_character: "a"`` even when "containing the letter X"
    matched earlier; both substring filters still apply.
    """
    results = list(records)
    parsed: Dict[str, Any] = {}

    if "palindromic" in query:
        parsed["is_palindrome"] = True
        results = [r for r in results if r.properties.is_palindrome]
    if "single word" in query:
        parsed["word_count"] = 1
        results = [r for r in results if r.properties.word_count == 1]

    m = LONGER_THAN.search(query)
    if m:
        min_length = int(m.group(1)) + 1
        parsed["min_length"] = min_length
        results = [r for r in results if r.properties.length >= min_length]

    m = CONTAINING_LETTER.search(query)
    if m:
        char = m.group(1)
        parsed["contains_character"] = char
        results = [r for r in results if char in r.value]

    if FIRST_VOWEL.search(query):
        parsed["contains_character"] = "a"
        results = [r for r in results if "a" in r.value]

    return results, parsed
