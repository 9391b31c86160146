import pytest

from pipex.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# atoi / itoa


@pytest.mark.parametrize("n", [0, 7, -7, 42, -2147483648, 2147483647, 123456789])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [0, -1, 2147483647, -2147483648])
def test_itoa_matches_decimal_text(n):
    assert int(itoa(n)) == n
    assert itoa(n).lstrip("-").isdigit()


def test_atoi_skips_leading_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r-42") == -42
    assert atoi("+42") == 42


def test_atoi_stops_at_first_non_digit():
    assert atoi("12ab34") == 12


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


def test_atoi_only_one_sign_allowed():
    assert atoi("+-3") == 0


# split


def test_split_drops_empty_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_path_like():
    assert split("/usr/bin:/bin::/sbin", ":") == ["/usr/bin", "/bin", "/sbin"]


def test_split_only_separators_gives_empty_list():
    assert split("::::", ":") == []
    assert split("", ":") == []


def test_split_accepts_character_code():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_split_join_invariant():
    text = "ls -l -a"
    words = split(text, " ")
    assert " ".join(words) == text


# strchr / strrchr


def test_strchr_first_and_strrchr_last():
    s = "abcabc"
    assert strchr(s, "b") == 1
    assert strrchr(s, "b") == 4


def test_strchr_missing_is_none():
    assert strchr("abc", "z") is None
    assert strrchr("abc", "z") is None


def test_strchr_nul_matches_end():
    s = "abc"
    assert strchr(s, 0) == len(s)
    assert strrchr(s, "\0") == len(s)


def test_strchr_accepts_code():
    assert strchr("abc", ord("c")) == 2


# strdup / strlen / strjoin


def test_strdup_equal_copy():
    assert strdup("hello") == "hello"


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)


def test_strlen_counts_characters():
    assert strlen("") == 0
    assert strlen("hello") == len("hello")


def test_strjoin_concatenates():
    assert strjoin("/bin", "/") == "/bin/"
    joined = strjoin("ab", "cd")
    assert joined.startswith("ab") and joined.endswith("cd")
    assert strlen(joined) == 4


def test_strjoin_missing_first_is_none():
    assert strjoin(None, "x") is None


def test_strjoin_missing_second_raises():
    with pytest.raises(TypeError):
        strjoin("x", None)


# striteri / strmapi


def test_striteri_replaces_items_in_place():
    buf = list("abc")
    striteri(buf, lambda i, ch: ch.upper())
    assert "".join(buf) == "abc".upper()


def test_striteri_none_keeps_item():
    buf = list("abc")
    striteri(buf, lambda i, ch: "x" if i == 1 else None)
    assert "".join(buf) == "axc"


def test_striteri_rejects_immutable_string():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, ch: ch)


def test_striteri_passes_indices_in_order():
    seen = []
    buf = list("xyz")
    striteri(buf, lambda i, ch: seen.append(i))
    assert seen == list(range(len(buf)))


def test_strmapi_maps_with_index():
    result = strmapi("abc", lambda i, ch: ch * (i + 1))
    assert result == "abbccc"


def test_strmapi_missing_arguments():
    assert strmapi(None, lambda i, ch: ch) is None
    assert strmapi("abc", None) is None


def test_strmapi_identity_round_trip():
    s = "hello world"
    assert strmapi(s, lambda i, ch: ch) == s


# strlcpy / strlcat


def test_strlcpy_truncates_and_returns_source_length():
    copied, total = strlcpy("", "hello", 3)
    assert copied == "he"
    assert total == len("hello")


def test_strlcpy_size_zero_leaves_dest():
    copied, total = strlcpy("keep", "hello", 0)
    assert copied == "keep"
    assert total == len("hello")


def test_strlcpy_large_buffer_copies_all():
    copied, total = strlcpy("", "hello", 100)
    assert copied == "hello"
    assert total == len(copied)


def test_strlcat_appends_within_size():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_strlcat_empty_source_returns_dest_length():
    result, total = strlcat("abc", "", 10)
    assert result == "abc"
    assert total == len("abc")


def test_strlcat_size_smaller_than_dest():
    result, total = strlcat("abcdef", "xyz", 2)
    assert result == "abcdef"
    assert total == len("xyz") + 2


def test_strlcat_full_fit():
    result, total = strlcat("ab", "cd", 10)
    assert result == "abcd"
    assert total == strlen(result)


def test_strlcat_negative_size_raises():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


# strncmp


def test_strncmp_equal_prefix_is_zero():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string_is_less():
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strncmp_antisymmetric():
    a, b = "PATH=/bin", "PWD=/home"
    assert strncmp(a, b, 4) == -strncmp(b, a, 4)


# strnstr


def test_strnstr_finds_within_length():
    assert strnstr("PATH=/bin", "PATH", 4) == 0
    assert strnstr("hello world", "world", 11) == 6


def test_strnstr_match_must_fit_in_length():
    assert strnstr("hello world", "world", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "z", 3) is None


def test_strnstr_slash_detection():
    cmd = "/bin/ls"
    assert strnstr(cmd, "/", strlen(cmd)) == 0
    assert strnstr("ls", "/", 2) is None


# strtrim / substr


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_all_trimmed():
    assert strtrim("xxxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("  a  ", "") == "  a  "


def test_strtrim_missing_arguments():
    assert strtrim(None, "x") is None
    assert strtrim("x", None) is None


def test_strtrim_result_has_no_set_chars_at_ends():
    result = strtrim(" \t word \t", " \t")
    assert result == "word"


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clamps_length():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_beyond_end():
    assert substr("hello", 10, 3) == ""


def test_substr_missing_string():
    assert substr(None, 0, 1) is None


def test_substr_negative_start_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_substr_whole_string_round_trip():
    s = "pipeline"
    assert substr(s, 0, strlen(s)) == s