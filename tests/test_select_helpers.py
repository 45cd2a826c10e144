"""Tests for select widget helpers."""
from catalog_admin.models import Option
from catalog_admin.services.select_helpers import (
    create_default_options,
    filter_options,
    get_selected_option,
    group_options,
    sort_options,
    validate_option,
    with_placeholder,
)

OPTIONS = [
    Option(value="c-1", label="Cabin Standard"),
    Option(value=42, label="engine Euro 6"),
    Option(value="a-9", label="Axle Rear"),
]


def test_filter_options_matches_label_case_insensitive():
    assert filter_options(OPTIONS, "  EURO ") == [OPTIONS[1]]


def test_filter_options_matches_value():
    assert filter_options(OPTIONS, "a-9") == [OPTIONS[2]]
    assert filter_options(OPTIONS, "42") == [OPTIONS[1]]


def test_filter_options_blank_query_returns_everything():
    assert filter_options(OPTIONS, "") == OPTIONS
    assert filter_options(OPTIONS, None) == OPTIONS
    assert filter_options(OPTIONS, "   ") == OPTIONS


def test_get_selected_option_compares_as_text():
    assert get_selected_option("42", OPTIONS) == OPTIONS[1]
    assert get_selected_option("missing", OPTIONS) is None
    assert get_selected_option("", OPTIONS) is None
    assert get_selected_option(None, OPTIONS) is None


def test_validate_option():
    assert validate_option("c-1", OPTIONS) is True
    assert validate_option("", OPTIONS) is False


def test_sort_options():
    assert [o.label for o in sort_options(OPTIONS)] == ["Axle Rear", "Cabin Standard", "engine Euro 6"]
    assert [o.label for o in sort_options(OPTIONS, "desc")][0] == "engine Euro 6"


def test_group_options():
    groups = group_options(OPTIONS, lambda option: option.label[0].lower())

    assert set(groups) == {"c", "e", "a"}
    assert groups["e"] == [OPTIONS[1]]


def test_default_and_placeholder_options():
    assert create_default_options("Select cabin") == [Option(value="", label="Select cabin")]
    assert create_default_options(include_empty=False) == []
    assert with_placeholder(OPTIONS)[0] == Option(value="", label="Select Type")
    assert len(with_placeholder(OPTIONS)) == 4
