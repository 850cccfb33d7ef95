"""
Tests for query string encoding.
"""

from urllib.parse import parse_qs

import pytest

from podcast_index import EncodingError, encode_query, to_array


def test_scalars_flags_and_omitted_values():
    encoded = encode_query({"max": 10, "fulltext": True, "clean": False})

    assert "max=10" in encoded.split("&")
    assert "fulltext" in encoded.split("&")
    assert "clean" not in encoded


def test_none_is_omitted():
    assert encode_query({"q": "news", "val": None}) == "q=news"


def test_sequence_uses_array_marker_and_commas():
    assert encode_query({"ids": ["12", "34"]}) == "ids[]=12,34"


def test_sequence_accepts_numbers():
    assert encode_query({"id": [75075, 920666]}) == "id[]=75075,920666"


def test_commas_inside_sequence_elements_are_escaped():
    encoded = encode_query({"cat": ["News,Politics", "Tech"]})

    assert encoded == "cat[]=News%2CPolitics,Tech"


def test_values_are_percent_encoded():
    encoded = encode_query({"q": "batman & robin", "url": "https://example.com/feed?a=1"})

    assert "q=batman%20%26%20robin" in encoded
    assert "url=https%3A%2F%2Fexample.com%2Ffeed%3Fa%3D1" in encoded


def test_entries_follow_mapping_order():
    assert encode_query({"b": 1, "a": "x", "c": True}) == "b=1&a=x&c"


def test_empty_mapping_encodes_to_empty_string():
    assert encode_query({}) == ""
    assert encode_query({"clean": False, "val": None}) == ""


def test_floats():
    assert encode_query({"since": 10.0, "ratio": 0.5}) == "since=10&ratio=0.5"


@pytest.mark.parametrize(
    "value",
    [{"nested": 1}, {1, 2}, b"bytes", float("nan"), float("inf"), [["a"]], [True], [None]],
)
def test_unsupported_values_fail_fast(value):
    with pytest.raises(EncodingError):
        encode_query({"bad": value})


def test_encoding_parses_back_to_the_same_parameters():
    options = {
        "q": "podcasting 2.0",
        "max": 25,
        "lang": ["en", "es"],
        "fulltext": True,
        "aponly": False,
        "val": None,
    }

    parsed = parse_qs(encode_query(options), keep_blank_values=True)

    assert parsed == {
        "q": ["podcasting 2.0"],
        "max": ["25"],
        "lang[]": ["en,es"],
        "fulltext": [""],
    }


def test_to_array():
    assert to_array(None) == []
    assert to_array("en") == ["en"]
    assert to_array(5) == [5]
    assert to_array(["en", "es"]) == ["en", "es"]
    assert to_array(("a",)) == ["a"]


def test_empty_sequences_are_omitted():
    assert encode_query({"id": [], "cat": (), "q": "news"}) == "q=news"
