import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.libft.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

text = st.text(alphabet="abc xyz", max_size=30)


def test_strlen_counts_characters():
    assert strlen("push_swap") == len("push_swap")


def test_strlen_of_none_is_zero():
    assert strlen(None) == 0


def test_strchr_finds_first_occurrence():
    s = "hello world"
    index = strchr(s, "o")
    assert s[index] == "o"
    assert "o" not in s[:index]


def test_strchr_missing_returns_none():
    assert strchr("abc", "z") is None


def test_strchr_terminator_is_end_of_string():
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", 0) == len("abc")


def test_strchr_accepts_integer_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_integer_code_is_taken_modulo_256():
    assert strchr("abc", ord("c") + 256) == strchr("abc", "c")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    s = "hello world"
    index = strrchr(s, "o")
    assert s[index] == "o"
    assert "o" not in s[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_stops_after_n():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_reports_code_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string_compares_lower():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_zero_length_is_equal():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_negative_n_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


@given(text, text)
def test_strncmp_sign_matches_ordering(a, b):
    result = strncmp(a, b, max(len(a), len(b)) + 1)
    assert (result < 0) == (a < b)
    assert (result == 0) == (a == b)


def test_strnstr_finds_within_length():
    big = "lorem ipsum dolor"
    index = strnstr(big, "ipsum", len(big))
    assert big[index:index + len("ipsum")] == "ipsum"


def test_strnstr_match_must_fit_in_length():
    big = "lorem ipsum"
    assert strnstr(big, "ipsum", len(big) - 1) is None


def test_strnstr_empty_needle_is_found_at_start():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "d", 3) is None


def test_strdup_copies_value():
    assert strdup("copy me") == "copy me"


def test_substr_basic_and_clipped():
    assert substr("abcdef", 2, 3) == "cde"
    assert substr("abcdef", 4, 100) == "ef"


def test_substr_start_past_end_is_empty():
    assert substr("abc", 10, 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


@given(text, text)
def test_strjoin_parts_round_trip(a, b):
    joined = strjoin(a, b)
    assert substr(joined, 0, len(a)) == a
    assert substr(joined, len(a), len(b)) == b


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("xxhixyx", "xy") == "hi"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


@given(text)
def test_strtrim_result_has_no_set_characters_at_ends(s):
    trimmed = strtrim(s, " a")
    assert trimmed == "" or (trimmed[0] not in " a" and trimmed[-1] not in " a")
    assert trimmed in s


def test_split_drops_empty_fields():
    assert split("  3 1  2 ", " ") == ["3", "1", "2"]


def test_split_only_separators():
    assert split("   ", " ") == []


def test_split_empty_string():
    assert split("", " ") == []


@given(st.lists(st.text(alphabet="abc", min_size=1, max_size=5), max_size=8))
def test_split_round_trip(words):
    assert split("  ".join(words), " ") == words


def test_strmapi_passes_index_and_char():
    assert strmapi("abc", lambda i, c: c * (i + 1)) == "abbccc"


def test_strmapi_rejects_non_callable():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_striteri_replaces_returned_values():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_sees_every_index_in_order():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]
    assert chars == list("xyz")