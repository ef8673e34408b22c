"""Tests for the rectangle value and JSON helpers."""

import json

import pytest

from selector_builder import Rectangle, SimpleSelector, from_json, to_json


class Circle:
    def __init__(self, radius: float) -> None:
        raise AssertionError("from_json must not call __init__")

    def get_circumference(self) -> float:
        return 2 * 3.14 * self.radius


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields_and_area(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20
        assert r.area() == 200

    def test_zero_area(self):
        assert Rectangle(0, 5).area() == 0


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert json.loads(to_json({"width": 10, "height": 20})) == {"width": 10, "height": 20}

    def test_dataclass(self):
        assert json.loads(to_json(Rectangle(10, 20))) == {"width": 10, "height": 20}

    def test_selector(self):
        data = json.loads(to_json(SimpleSelector().element("a").class_("x")))
        assert data["fragments"]["element"] == "a"
        assert data["fragments"]["classes"] == ["x"]

    def test_unserializable_raises(self):
        with pytest.raises(TypeError):
            to_json(object())


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_stamps_class(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == pytest.approx(62.8)

    def test_frozen_dataclass(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_round_trip(self):
        r = from_json(Rectangle, to_json(Rectangle(3, 4)))
        assert r == Rectangle(3, 4)

    def test_non_object_rejected(self):
        with pytest.raises(ValueError):
            from_json(Rectangle, "[1, 2]")

    def test_malformed_json(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Rectangle, "{not json")
