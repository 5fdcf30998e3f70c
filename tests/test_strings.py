import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.strings import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

text = st.text(alphabet="abc xyz-", max_size=30)
char = st.sampled_from(list("abc xyz-"))


# strchr / strrchr


@given(text, char)
def test_strchr_finds_first(s, c):
    idx = strchr(s, c)
    if c in s:
        assert s[idx] == c
        assert c not in s[:idx]
    else:
        assert idx is None


@given(text, char)
def test_strrchr_finds_last(s, c):
    idx = strrchr(s, c)
    if c in s:
        assert s[idx] == c
        assert c not in s[idx + 1 :]
    else:
        assert idx is None


def test_search_for_nul_gives_end():
    s = "hello"
    assert strchr(s, "\0") == len(s)
    assert strrchr(s, "\0") == len(s)
    assert strchr(s, 0) == len(s)


def test_strchr_accepts_int_code():
    assert strchr("abcabc", ord("b")) == strchr("abcabc", "b")
    assert strrchr("abcabc", ord("b")) == strrchr("abcabc", "b")


def test_strchr_int_code_wraps_like_char():
    assert strchr("abc", ord("a") + 256) == strchr("abc", "a")


def test_strchr_rejects_multichar():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


# strncmp


def test_strncmp_equal_and_zero_length():
    assert strncmp("same", "same", 10) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_of_codes():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_stops_at_n():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0


def test_strncmp_shorter_string_ends_with_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


@given(text, text, st.integers(min_value=0, max_value=40))
def test_strncmp_antisymmetric(a, b, n):
    assert strncmp(a, b, n) == -strncmp(b, a, n)


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


# strnstr


def test_strnstr_empty_little():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_respects_length():
    big = "lorem ipsum"
    assert strnstr(big, "ipsum", len(big) - 1) is None
    idx = strnstr(big, "ipsum", len(big))
    assert big[idx : idx + len("ipsum")] == "ipsum"


def test_strnstr_not_found():
    assert strnstr("lorem ipsum", "dolor", 100) is None


@given(text, text, st.integers(min_value=0, max_value=40))
def test_strnstr_match_lies_within_length(big, little, length):
    idx = strnstr(big, little, length)
    if idx is not None and little:
        assert big[idx : idx + len(little)] == little
        assert idx + len(little) <= length


# strlcpy / strlcat


def test_strlcpy_truncates():
    src = "hello"
    assert strlcpy(src, 3) == (src[:2], len(src))


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


@given(text, st.integers(min_value=1, max_value=40))
def test_strlcpy_invariants(src, size):
    copied, total = strlcpy(src, size)
    assert total == len(src)
    assert len(copied) <= size - 1
    assert src.startswith(copied)


def test_strlcat_fits():
    assert strlcat("abc", "def", 10) == ("abcdef", 6)


def test_strlcat_truncates():
    result, total = strlcat("abc", "def", 5)
    assert result == "abcd"
    assert total == len("abcdef")


def test_strlcat_size_not_above_dst():
    assert strlcat("abc", "def", 2) == ("abc", 2 + len("def"))


@given(text, text, st.integers(min_value=0, max_value=60))
def test_strlcat_invariants(dst, src, size):
    result, total = strlcat(dst, src, size)
    assert result.startswith(dst)
    assert (dst + src).startswith(result)
    if size > len(dst):
        assert total == len(dst) + len(src)
        assert len(result) <= size - 1


# substr / strjoin / strtrim


def test_substr_past_end_is_empty():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""


def test_substr_clamps_length():
    assert substr("hello world", 6, 100) == "world"


def test_substr_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


@given(text, st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_substr_is_contained(s, start, length):
    part = substr(s, start, length)
    assert len(part) <= length
    if part:
        assert s[start:].startswith(part)


@given(text, text)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined[len(a) :] == b


def test_strtrim_both_ends():
    assert strtrim("--xx hello xx--", "-x ") == "hello"


def test_strtrim_everything_and_nothing():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("  keep  ", "") == "  keep  "


@given(text, st.text(alphabet="abc -", max_size=4))
def test_strtrim_invariants(s, charset):
    trimmed = strtrim(s, charset)
    assert trimmed in s
    if trimmed:
        assert trimmed[0] not in charset
        assert trimmed[-1] not in charset


# split


def test_split_drops_empty_pieces():
    assert split("  hello   world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_nul_separator_gives_whole_string():
    assert split("abc def", "\0") == ["abc def"]


@given(text, char)
def test_split_invariants(s, sep):
    pieces = split(s, sep)
    assert all(pieces)
    assert all(sep not in p for p in pieces)
    assert "".join(pieces) == s.replace(sep, "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


# strmapi / striteri


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


@given(text)
def test_strmapi_identity(s):
    assert strmapi(s, lambda i, c: c) == s


def test_striteri_str_returns_new_string():
    assert striteri("abc", lambda i, c: c.upper()) == "ABC"


def test_striteri_mutates_list_in_place():
    chars = list("abcd")
    returned = striteri(chars, lambda i, c: "_" if i == 1 else None)
    assert returned is chars
    assert chars == ["a", "_", "c", "d"]


def test_striteri_visits_in_order():
    seen = []
    striteri("xyz", lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_striteri_none_passthrough():
    assert striteri(None, lambda i, c: c) is None