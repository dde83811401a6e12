import hashlib
from typing import Dict, Any, List


def compute_sha256(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def utf16_units(s: str) -> List[bytes]:
    raw = s.encode("utf-16-le", "surrogatepass")
    return [raw[i:i + 2] for i in range(0, len(raw), 2)]


def utf16_length(s: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(utf16_units(s))


def is_palindrome(s: str) -> bool:
    # case-sensitive, spaces and punctuation included; reversed per UTF-16
    # code unit, so surrogate pairs do not survive reversal
    units = utf16_units(s)
    return len(units) > 0 and units == units[::-1]


def count_words(s: str) -> int:
    trimmed = s.strip()
    if not trimmed:
        return 0
    return len(trimmed.split())


def character_frequency(s: str) -> Dict[str, int]:
    """Occurrences per character, spaces removed, in first-seen order."""
    freq: Dict[str, int] = {}
    for ch in s.replace(" ", ""):
        freq[ch] = freq.get(ch, 0) + 1
    return freq


def analyze_string(s: str) -> Dict[str, Any]:
    # unique_characters counts spaces while the frequency map drops them
    return {
        "length": utf16_length(s),
        "is_palindrome": is_palindrome(s),
        "unique_characters": len(set(s)),
        "word_count": count_words(s),
        "sha256_hash": compute_sha256(s),
        "character_frequency_map": character_frequency(s),
    }
