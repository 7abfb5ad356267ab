import pytest

from cpufeat.string_view import (
    get_attribute_key_value,
    has_word,
    index_of,
    index_of_char,
    parse_positive_number,
    trim_whitespace,
    truncate,
)


def test_index_of_char_found_and_missing():
    assert index_of_char("thead,c906", ",") == len("thead")
    assert index_of_char("rv64imafdc", ",") == -1
    assert index_of_char("", "a") == -1


def test_index_of_char_stops_at_nul():
    assert index_of_char("ab\0c", "c") == -1
    assert index_of_char("ab\0c", "b") == 1


def test_index_of():
    text = "rv64imafdcvh_zba_zbb"
    assert index_of(text, "_zba") == text.find("_zba")
    assert index_of(text, "_zicsr") == -1
    assert index_of(text, "") == -1
    assert index_of("", "x") == -1


def test_index_of_first_occurrence():
    text = "abcabc"
    assert index_of(text, "bc") == 1


def test_has_word_space_separated():
    flags = "fpu sse sse2 pni ssse3 sse4_1 sse4_2"
    assert has_word(flags, "sse", " ")
    assert has_word(flags, "sse2", " ")
    assert has_word(flags, "pni", " ")
    assert has_word(flags, "sse4_2", " ")
    assert not has_word(flags, "sse3", " ")
    assert not has_word(flags, "avx", " ")


def test_has_word_comma_separated():
    csv = "PSE36,MMX,FXSR,SSE,SSE2,HTT"
    assert has_word(csv, "SSE", ",")
    assert has_word(csv, "SSE2", ",")
    assert has_word(csv, "PSE36", ",")
    assert has_word(csv, "HTT", ",")
    assert not has_word(csv, "SSE3", ",")
    assert not has_word(csv, "SS", ",")


def test_has_word_later_occurrence_counts():
    assert has_word("abc ab", "ab", " ")
    assert not has_word("abc abd", "ab", " ")
    assert not has_word("", "ab", " ")
    assert not has_word("ab", "", " ")


def test_trim_whitespace():
    assert trim_whitespace("  \tvalue \n") == "value"
    assert trim_whitespace("   ") == ""
    assert trim_whitespace("a b") == "a b"


def test_get_attribute_key_value():
    assert get_attribute_key_value("isa   : rv64imafdc") == ("isa", "rv64imafdc")
    assert get_attribute_key_value("uarch : thead,c906") == ("uarch", "thead,c906")
    assert get_attribute_key_value("processor\t: 0 ") == ("processor", "0")


def test_get_attribute_key_value_uses_first_separator():
    line = "Hardware Watchpoint\t: yes, iwatch count: 8"
    assert get_attribute_key_value(line) == (
        "Hardware Watchpoint",
        "yes, iwatch count: 8",
    )


def test_get_attribute_key_value_without_separator():
    assert get_attribute_key_value("no separator here") is None
    assert get_attribute_key_value("key:value") is None


def test_parse_positive_number_decimal_and_hex():
    assert parse_positive_number("3") == 3
    assert parse_positive_number("0x41") == 0x41
    assert parse_positive_number("0xd03") == 0xD03
    assert parse_positive_number("0xD03") == 0xD03
    assert parse_positive_number("0x0") == 0


@pytest.mark.parametrize("text", ["", "12a", "-1", "0xg", "1.5", " 3"])
def test_parse_positive_number_rejects(text):
    with pytest.raises(ValueError):
        parse_positive_number(text)


def test_parse_positive_number_round_trip():
    for number in (0, 7, 1234, 65535):
        assert parse_positive_number(str(number)) == number
        assert parse_positive_number(f"0x{number:x}") == number


def test_truncate():
    assert truncate("thead", 64) == "thead"
    assert truncate("thead", 3) == "th"
    assert truncate("thead", 1) == ""
    assert truncate("thead", 0) == ""
    long_text = "x" * 100
    assert len(truncate(long_text, 64)) == 63