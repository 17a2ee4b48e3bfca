import pytest

from sprite_atlas.entry import AtlasEntry, Rect, parse_coordinate, parse_entry
from sprite_atlas.errors import MalformedEntryError


def test_parse_coordinate_accepts_integers_and_decimal_strings() -> None:
    assert parse_coordinate(10) == 10
    assert parse_coordinate("10") == 10
    assert parse_coordinate(" 7 ") == 7
    assert parse_coordinate(12.0) == 12
    assert parse_coordinate("-3") == -3


@pytest.mark.parametrize(
    "value",
    ["NaN", "", "1.5", "10px", "\u0661\u0660", "\uff11", None, True, 1.5, float("nan")],
)
def test_parse_coordinate_rejects_non_integers(value: object) -> None:
    with pytest.raises(ValueError):
        parse_coordinate(value)


def test_parse_entry_converts_string_fields() -> None:
    entry = parse_entry(
        "hero_walk", {"url": "a.png", "x": "0", "y": "4", "w": "32", "h": "48"}
    )
    assert entry == AtlasEntry(url="a.png", rect=Rect(0, 4, 32, 48))
    assert (entry.x, entry.y, entry.w, entry.h) == (0, 4, 32, 48)


def test_parse_entry_nan_field_is_malformed() -> None:
    with pytest.raises(MalformedEntryError) as excinfo:
        parse_entry("bad", {"url": "a.png", "x": "NaN", "y": "0", "w": "32", "h": "48"})
    assert excinfo.value.name == "bad"
    assert excinfo.value.field == "x"


def test_parse_entry_missing_field_is_malformed() -> None:
    with pytest.raises(MalformedEntryError) as excinfo:
        parse_entry("bad", {"url": "a.png", "x": 0, "y": 0, "w": 32})
    assert excinfo.value.field == "h"


def test_parse_entry_missing_url_is_malformed() -> None:
    with pytest.raises(MalformedEntryError) as excinfo:
        parse_entry("bad", {"x": 0, "y": 0, "w": 32, "h": 32})
    assert excinfo.value.field == "url"


def test_parse_entry_rejects_out_of_range_values() -> None:
    with pytest.raises(MalformedEntryError):
        parse_entry("neg", {"url": "a.png", "x": -1, "y": 0, "w": 1, "h": 1})
    with pytest.raises(MalformedEntryError):
        parse_entry("empty", {"url": "a.png", "x": 0, "y": 0, "w": 0, "h": 1})


def test_parse_entry_rejects_non_mapping() -> None:
    with pytest.raises(MalformedEntryError):
        parse_entry("bad", "a.png")  # type: ignore[arg-type]


def test_malformed_entry_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_entry("bad", {"url": "a.png", "x": "x", "y": 0, "w": 1, "h": 1})


def test_rect_box_is_pillow_crop_box() -> None:
    assert Rect(2, 3, 10, 20).box() == (2, 3, 12, 23)


def test_parse_entry_rejects_non_ascii_digits() -> None:
    with pytest.raises(MalformedEntryError) as excinfo:
        parse_entry("bad", {"url": "a.png", "x": "١٠", "y": 0, "w": 1, "h": 1})
    assert excinfo.value.field == "x"
