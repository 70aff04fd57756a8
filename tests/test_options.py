"""Tests for query option normalization."""

from src.avatar.options import normalize_options


def test_single_value_unwrapped():
    assert normalize_options({"size": ["128"]}) == {"size": "128"}


def test_multiple_values_kept_in_order():
    assert normalize_options({"x": ["1", "2"]}) == {"x": ["1", "2"]}


def test_format_removed():
    result = normalize_options({"format": ["json"], "size": ["64"]})
    assert result == {"size": "64"}


def test_unknown_keys_pass_through():
    assert normalize_options({"whatever": ["yes"]}) == {"whatever": "yes"}


def test_input_not_mutated():
    raw = {"x": ["1", "2"], "format": ["svg"]}
    result = normalize_options(raw)

    result["x"].append("3")
    assert raw == {"x": ["1", "2"], "format": ["svg"]}
