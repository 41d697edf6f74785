from enum import auto

import pytest

from advinput.core import enums
from advinput.core.enums import (
    PromptableEnum,
    add_spaces_before_caps,
    from_input_str,
    render_variant_list,
    variants_as_strings,
    wrap_variants,
)


class Weather(PromptableEnum):
    Sunny = auto()
    PartlyCloudy = auto()
    HeavyRainShowers = auto()
    HTTPServer = auto()


class Shape:
    """Minimal non-Enum type providing the prompt capability."""

    _all = []

    def __init__(self, raw):
        self._raw = raw

    @classmethod
    def variants(cls):
        return list(cls._all)

    @property
    def raw_name(self):
        return self._raw

    @classmethod
    def from_raw(cls, raw):
        for shape in cls._all:
            if shape.raw_name == raw:
                return shape
        raise KeyError(raw)


Shape._all = [Shape("Circle"), Shape("RoundedSquare")]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("North", "North"),
        ("PartlyCloudy", "Partly Cloudy"),
        ("HeavyRainShowers", "Heavy Rain Showers"),
        ("HTTPServer", "HTTP Server"),
        ("ABC", "ABC"),
        ("lowerCamel", "lower Camel"),
        ("", ""),
    ],
)
def test_add_spaces_before_caps(raw, expected):
    assert add_spaces_before_caps(raw) == expected


def test_add_spaces_before_caps_reapplied():
    assert add_spaces_before_caps(add_spaces_before_caps("Up")) == "Up"
    # the space already in place is followed by a new qualifying boundary
    assert add_spaces_before_caps("Partly Cloudy") == "Partly  Cloudy"


def test_variants_as_strings_keeps_declaration_order():
    assert variants_as_strings(Weather) == [
        "Sunny",
        "Partly Cloudy",
        "Heavy Rain Showers",
        "HTTP Server",
    ]
    assert Weather.variants_as_strings() == variants_as_strings(Weather)


@pytest.mark.parametrize("variant", list(Weather))
def test_display_and_raw_names_parse_back(variant):
    assert from_input_str(Weather, variant.display_name) is variant
    assert from_input_str(Weather, variant.raw_name) is variant
    assert from_input_str(Weather, variant.display_name.upper()) is variant
    assert from_input_str(Weather, variant.raw_name.swapcase()) is variant


def test_from_input_str_rejects_unknown_text():
    assert Weather.from_input_str("Snow") is None
    assert Weather.from_input_str("Partly") is None
    assert Weather.from_input_str("partlycloudy") is Weather.PartlyCloudy


def test_capability_without_enum_base():
    assert variants_as_strings(Shape) == ["Circle", "Rounded Square"]
    assert from_input_str(Shape, "rounded square") is Shape._all[1]
    assert from_input_str(Shape, "ROUNDEDSQUARE") is Shape._all[1]
    assert from_input_str(Shape, "Triangle") is None


def test_render_variant_list_marks_default():
    names = ["North", "South", "West"]

    assert render_variant_list(names) == "North, South, West"
    assert render_variant_list(names, default_name="South") == "North, South(*), West"
    assert render_variant_list(names, default_name="South", marker=" <-") == "North, South <-, West"


def test_wrap_variants_short_text_is_one_line():
    assert wrap_variants("North, South") == ["North, South"]
    assert wrap_variants("x" * 100) == ["x" * 100]


def test_wrap_variants_cuts_at_last_space():
    text = ", ".join(f"Variant{index:02d}" for index in range(30))

    lines = wrap_variants(text)

    assert len(lines) > 1
    assert all(len(line) <= 100 for line in lines)
    assert all(line.endswith(",") for line in lines[:-1])
    assert " ".join(lines) == text


def test_wrap_variants_without_space_keeps_remainder():
    text = "y" * 150

    assert wrap_variants(text) == [text]
    assert wrap_variants("a " + "z" * 150) == ["a", "z" * 150]


def test_wrap_variants_custom_width():
    assert wrap_variants("aa bb cc", width=5) == ["aa", "bb cc"]


def test_display_name_helper_uses_raw_name(monkeypatch):
    calls = []

    def fake_spaces(text):
        calls.append(text)
        return text.lower()

    monkeypatch.setattr(enums, "add_spaces_before_caps", fake_spaces)

    assert enums.display_name(Weather.HTTPServer) == "httpserver"
    assert calls == ["HTTPServer"]


def test_parsing_reads_identifiers_through_raw_name(monkeypatch):
    seen = []

    def recording_raw_name(variant):
        seen.append(variant)
        return variant.raw_name

    monkeypatch.setattr(enums, "raw_name", recording_raw_name)

    assert from_input_str(Weather, "partly cloudy") is Weather.PartlyCloudy
    assert Weather.Sunny in seen
    assert Weather.PartlyCloudy in seen


def test_raw_name_returns_declared_identifier():
    assert enums.raw_name(Weather.HeavyRainShowers) == "HeavyRainShowers"
    assert enums.raw_name(Shape._all[1]) == "RoundedSquare"
