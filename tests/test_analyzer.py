from string_analyzer.analyzer import (
    analyze_string,
    compute_sha256,
    count_words,
    character_frequency,
    is_palindrome,
    utf16_length,
)


def test_palindrome_matches_reversal():
    for s in ["level", "racecar", "a", "abba", "ab", "Level", "nurses run", "a b a"]:
        assert is_palindrome(s) == (s == s[::-1])


def test_empty_string_is_not_palindrome():
    assert is_palindrome("") is False


def test_palindrome_is_case_sensitive():
    assert is_palindrome("Aba") is False


def test_palindrome_reverses_utf16_code_units():
    assert is_palindrome("\U0001F600") is False
    assert is_palindrome("a\U0001F600a") is False
    assert is_palindrome("\u00e9t\u00e9") is True


def test_word_count():
    assert count_words("") == 0
    assert count_words("   ") == 0
    assert count_words("a  b   c") == 3
    assert count_words("  hello\tworld\n") == 2


def test_frequency_map_drops_spaces_but_unique_counts_them():
    props = analyze_string("a a")
    assert props["unique_characters"] == 2
    assert props["character_frequency_map"] == {"a": 2}


def test_frequency_map_keeps_first_seen_order_and_other_whitespace():
    freq = character_frequency("hello\tworld")
    assert list(freq) == ["h", "e", "l", "o", "\t", "w", "r", "d"]
    assert freq["l"] == 3


def test_length_counts_utf16_code_units():
    assert utf16_length("abc") == 3
    assert utf16_length("\U0001F600") == 2
    assert analyze_string("hé")["length"] == 2


def test_hash_is_sha256_hex():
    # sha256("hello")
    expected = "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
    assert compute_sha256("hello") == expected
    assert analyze_string("hello")["sha256_hash"] == expected


def test_analyze_string_full_property_set():
    props = analyze_string("hello world")
    assert props == {
        "length": 11,
        "is_palindrome": False,
        "unique_characters": 8,
        "word_count": 2,
        "sha256_hash": compute_sha256("hello world"),
        "character_frequency_map": {"h": 1, "e": 1, "l": 3, "o": 2, "w": 1, "r": 1, "d": 1},
    }
