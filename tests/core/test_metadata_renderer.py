import datetime

import pytest

from random_note_viewer.core.metadata_renderer import (
    FragmentKind,
    ValueFragment,
    render_metadata,
    render_metadata_value,
)


def test_wikilink_becomes_internal_link():
    frag = render_metadata_value("[[Note A]]")
    assert frag == ValueFragment(FragmentKind.INTERNAL_LINK, "Note A", "Note A")
    assert frag.is_link


def test_http_string_becomes_external_link():
    frag = render_metadata_value("https://example.com")
    assert frag.kind is FragmentKind.EXTERNAL_LINK
    assert frag.text == frag.target == "https://example.com"


def test_plain_string_is_verbatim_text():
    frag = render_metadata_value("plain value")
    assert frag == ValueFragment(FragmentKind.TEXT, "plain value")
    assert not frag.is_link


def test_list_is_joined_in_order():
    assert render_metadata_value(["a", "b", "c"]).text == "a, b, c"


def test_non_string_scalar_is_coerced():
    assert render_metadata_value(42) == ValueFragment(FragmentKind.TEXT, "42")


@pytest.mark.parametrize(
    "value, expected",
    [
        ([1, ["x", "y"], None], "1, ['x', 'y'], null"),
        ([], ""),
        ((1, 2), "1, 2"),
        (datetime.date(2024, 5, 1), "2024-05-01"),
        ({"k": "v"}, "{'k': 'v'}"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        ([True, False, 0], "true, false, 0"),
        (1.5, "1.5"),
    ],
)
def test_fallback_shapes_render_as_text(value, expected):
    frag = render_metadata_value(value)
    assert frag.kind is FragmentKind.TEXT
    assert frag.text == expected


def test_wikilink_check_precedes_http_check():
    frag = render_metadata_value("[[http://x]]")
    assert frag.kind is FragmentKind.INTERNAL_LINK
    assert frag.target == "http://x"


@pytest.mark.parametrize("value", ["[[Half", "Half]]", " [[Padded]]", "see [[x]] here"])
def test_partial_brackets_stay_plain(value):
    assert render_metadata_value(value) == ValueFragment(FragmentKind.TEXT, value)


def test_empty_wikilink():
    assert render_metadata_value("[[]]") == ValueFragment(FragmentKind.INTERNAL_LINK, "", "")


def test_any_http_prefix_is_external():
    assert render_metadata_value("httpish").kind is FragmentKind.EXTERNAL_LINK


def test_render_metadata_keeps_mapping_order():
    rows = render_metadata({"b": 1, "a": "[[A]]"})
    assert [k for k, _ in rows] == ["b", "a"]
    assert rows[1][1].kind is FragmentKind.INTERNAL_LINK
    assert render_metadata(None) == []
    assert render_metadata({}) == []


def test_yaml_booleans_render_as_written():
    rows = render_metadata({"draft": True, "parent": None})
    assert [(k, f.text) for k, f in rows] == [("draft", "true"), ("parent", "null")]
