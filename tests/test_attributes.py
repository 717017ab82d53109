"""Tests for Attribute, Attributes and Style."""

from __future__ import annotations

import pytest

from htmldsl.attributes import Align, Attribute, Attributes, Direction, Style, Target
from htmldsl.elements import H1, Div


class TestAttribute:
    """Attribute is an immutable name/value pair."""

    def test_create(self) -> None:
        attr = Attribute("href", "https://google.com")
        assert attr.key == "href"
        assert attr.value == "https://google.com"
        assert str(attr) == 'href="https://google.com"'

    def test_equality_uses_key_and_value(self) -> None:
        assert Attribute("a", "1") == Attribute("a", "1")
        assert Attribute("a", "1") != Attribute("a", "2")
        assert len({Attribute("a", "1"), Attribute("a", "1"), Attribute("a", "2")}) == 2

    def test_frozen(self) -> None:
        attr = Attribute("a", "1")
        with pytest.raises(AttributeError):
            attr.value = "2"  # type: ignore[misc]

    def test_value_not_escaped(self) -> None:
        assert str(Attribute("title", 'say "hi"')) == 'title="say "hi""'


class TestAttributes:
    """Attributes is ordered and unique by key."""

    def test_add_attribute(self) -> None:
        attributes = Attributes()
        attributes["background-color"] = "gold"
        assert Attribute("background-color", "gold") in attributes
        attributes["href"] = "https://google.com"
        assert attributes["href"] == "https://google.com"

    def test_render_in_insertion_order(self) -> None:
        attributes = Attributes()
        attributes["href"] = "https://google.com"
        attributes["target"] = "_blank"
        attributes["background-color"] = "gold"
        expected = 'href="https://google.com" target="_blank" background-color="gold"'
        assert attributes.render() == expected
        assert str(attributes) == expected

    def test_empty_renders_empty_string(self) -> None:
        assert Attributes().render() == ""
        assert not Attributes()

    def test_set_replaces_existing_key(self) -> None:
        attributes = Attributes()
        attributes["color"] = "red"
        attributes["color"] = "blue"
        assert len(attributes) == 1
        assert attributes.get("color") == "blue"
        assert attributes.render() == 'color="blue"'

    def test_replaced_key_moves_to_end(self) -> None:
        attributes = Attributes()
        attributes["a"] = "1"
        attributes["b"] = "2"
        attributes["a"] = "3"
        assert attributes.render() == 'b="2" a="3"'

    def test_add_replaces_by_key(self) -> None:
        attributes = Attributes()
        attributes.add(Attribute("a", "1"))
        attributes.add(Attribute("a", "2"))
        assert list(attributes) == [Attribute("a", "2")]

    def test_add_identical_pair_reports_unchanged(self) -> None:
        attributes = Attributes()
        assert attributes.add(Attribute("a", "1")) is True
        assert attributes.add(Attribute("a", "1")) is False

    def test_set_none_removes(self) -> None:
        attributes = Attributes()
        attributes["href"] = "https://google.com"
        attributes["href"] = None
        assert len(attributes) == 0
        assert attributes.get("href") is None

    def test_remove_by_name(self) -> None:
        attributes = Attributes()
        attributes["href"] = "https://google.com"
        assert attributes.remove("href") is True
        assert len(attributes) == 0

    def test_remove_unknown_key_is_not_an_error(self) -> None:
        attributes = Attributes()
        assert attributes.remove("missing") is False
        assert attributes.get("missing") is None
        assert attributes.get("missing", "fallback") == "fallback"

    def test_getitem_missing_raises_key_error(self) -> None:
        with pytest.raises(KeyError):
            Attributes()["missing"]

    def test_contains_key_or_pair(self) -> None:
        attributes = Attributes()
        attributes["a"] = "1"
        assert "a" in attributes
        assert Attribute("a", "1") in attributes
        assert Attribute("a", "2") not in attributes
        assert "b" not in attributes
        assert 42 not in attributes

    def test_discard_only_matching_pair(self) -> None:
        attributes = Attributes()
        attributes["a"] = "1"
        attributes.discard(Attribute("a", "2"))
        assert "a" in attributes
        attributes.discard(Attribute("a", "1"))
        assert "a" not in attributes

    def test_enum_values_are_unwrapped(self) -> None:
        attributes = Attributes()
        attributes["target"] = Target.BLANK
        attributes["dir"] = Direction.RTL
        attributes["align"] = Align.CENTER
        assert attributes.render() == 'target="_blank" dir="rtl" align="center"'

    def test_union_last_value_wins(self) -> None:
        first = Attributes()
        first["id"] = "a"
        first["class"] = "wide"
        second = Attributes()
        second["id"] = "b"
        merged = first | second
        assert isinstance(merged, Attributes)
        assert merged.render() == 'class="wide" id="b"'
        assert first.render() == 'id="a" class="wide"'

    def test_intersection_and_difference(self) -> None:
        first = Attributes()
        first["id"] = "a"
        first["class"] = "wide"
        second = Attributes()
        second["id"] = "a"
        second["class"] = "narrow"
        assert list(first & second) == [Attribute("id", "a")]
        assert list(first - second) == [Attribute("class", "wide")]
        assert isinstance(first ^ second, Attributes)

    def test_union_of_empty(self) -> None:
        assert len(Attributes() | Attributes()) == 0

    def test_clear(self) -> None:
        attributes = Attributes()
        attributes["a"] = "1"
        attributes["b"] = "2"
        attributes.clear()
        assert len(attributes) == 0


class TestStyle:
    """The style attribute is a concatenated key:value; string."""

    def test_create_style_attribute(self) -> None:
        style = Style(H1("header"))
        style.align(Align.CENTER)
        assert style.render() == "align:center;"

    def test_append_style_attribute(self) -> None:
        style = Style(H1())
        style.align(Align.CENTER)
        style.background(0xFFFF0000)
        assert style.render() == "align:center;background-color:#FF0000;"

    def test_style_written_to_element_attribute(self) -> None:
        div = Div()
        div.style.color(0x1DA1F2).strikethrough()
        assert div.attributes["style"] == "color:#1DA1F2;text-decoration:line-through;"
        assert div.html() == '<div style="color:#1DA1F2;text-decoration:line-through;"></div>'

    def test_text_align(self) -> None:
        div = Div()
        div.style.text_align(Align.RIGHT)
        assert div.style.get("text-align") == "right"

    def test_get_value(self) -> None:
        div = Div()
        div.style["background-color"] = "gold"
        div.style["color"] = "red"
        assert div.style["background-color"] == "gold"
        assert div.style.get("color") == "red"

    def test_get_absent(self) -> None:
        div = Div()
        assert div.style.get("color") is None
        div.style.set("color", "red")
        assert div.style.get("margin") is None

    def test_call_shortcut(self) -> None:
        div = Div()
        div.style("color", "red")
        assert div.style.render() == "color:red;"

    def test_duplicate_key_keeps_both_fragments(self) -> None:
        div = Div()
        div.style.set("color", "red")
        div.style.set("color", "blue")
        assert div.style.render() == "color:red;color:blue;"
        assert div.style.get("color") == "red"

    def test_style_keeps_attribute_unique(self) -> None:
        div = Div()
        div.style.set("color", "red")
        div.style.set("margin", "0")
        assert len(div.attributes) == 1

    def test_malformed_style_yields_none(self) -> None:
        div = Div()
        div.attr("style", ";;: nothing here")
        assert div.style.get("nothing") is None
        assert div.style.get("") is None

    def test_none_value_appends_nothing(self) -> None:
        div = Div()
        div.style.set("color", None)
        assert "style" not in div.attributes
        div.style.set("color", "red").set("margin", None)
        assert div.style.render() == "color:red;"

    def test_empty_render(self) -> None:
        assert str(Style(Div())) == ""
