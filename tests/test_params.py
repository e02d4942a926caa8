"""Tests for query-parameter removal."""

import pytest

from urisolve.params import remove_query_parameter


@pytest.mark.parametrize(
    "uri, name, expected",
    [
        ("http://a/b?x=1&y=2&x=3#f", "y", "http://a/b?x=1&x=3#f"),
        ("http://a/b?x=1&y=2", "x", "http://a/b?y=2"),
        ("http://a/b?x=1&y=2", "z", "http://a/b?x=1&y=2"),
        ("http://a/b?x=1", "x", "http://a/b"),
        ("http://a/b?x=1#f", "x", "http://a/b#f"),
        ("http://a/b?", "x", "http://a/b"),
    ],
)
def test_remove_query_parameter(uri, name, expected):
    """Test parameter removal keeps the rest of the URI."""
    assert remove_query_parameter(uri, name) == expected


def test_no_query_is_unchanged():
    """A '?' inside the fragment is not a query."""
    uri = "http://a/b#f?x=1"
    assert remove_query_parameter(uri, "x") == uri


def test_remaining_parameters_grouped_by_name():
    """Values of one name stay together, in first-appearance order."""
    uri = "http://a/?a=1&b=2&a=3&c=4"
    assert remove_query_parameter(uri, "c") == "http://a/?a=1&a=3&b=2"


def test_values_are_reencoded():
    uri = "http://a/b?q=a%20b&drop=1"
    assert remove_query_parameter(uri, "drop") == "http://a/b?q=a%20b"


def test_encoded_name_matches_decoded():
    uri = "http://a/b?my%20key=1&keep=2"
    assert remove_query_parameter(uri, "my key") == "http://a/b?keep=2"


def test_plus_is_literal():
    """A '+' in a kept value is not decoded as a space."""
    uri = "http://a/b?q=c++&drop=1"
    assert remove_query_parameter(uri, "drop") == "http://a/b?q=c%2B%2B"


def test_slash_in_value_is_encoded():
    uri = "http://a/b?path=x/y&drop=1"
    assert remove_query_parameter(uri, "drop") == "http://a/b?path=x%2Fy"
