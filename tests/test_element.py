"""Tests for the element tree model."""

from __future__ import annotations

import gc

import pytest

from htmldsl import HTML
from htmldsl.attributes import Attribute, Direction, Target
from htmldsl.element import HtmlElement, InlineTextElement, Node, TextElement
from htmldsl.elements import A, B, Br, Div, Font, H1, Heading, Img, Li, P, Span, Strong, Sup, Ul
from htmldsl.errors import HtmlDslError, MissingAttributeError


class TestTagDescriptor:
    """Tag name and classification are fixed at construction."""

    def test_concrete_tag_names(self) -> None:
        assert A().tag_name == "a"
        assert Br().tag_name == "br"
        assert H1().tag_name == "h1"
        assert Ul().tag_name == "ul"

    def test_classification(self) -> None:
        assert Strong().inline is True
        assert Strong().void is False
        assert P().inline is False
        assert Br().void is True
        assert Img().void is True
        assert Img().inline is True

    def test_tag_spec_reports_text_slot(self) -> None:
        assert P().tag_spec.has_text is True
        assert Span().tag_spec.has_text is False

    def test_tag_name_is_read_only(self) -> None:
        with pytest.raises(AttributeError):
            P().tag_name = "div"  # type: ignore[misc]

    def test_generic_element_with_unknown_tag(self) -> None:
        element = HtmlElement("marquee")
        assert element.tag_name == "marquee"
        assert element.inline is False
        assert element.void is False

    def test_generic_element_requires_tag(self) -> None:
        with pytest.raises(TypeError):
            HtmlElement()

    def test_heading_levels(self) -> None:
        from htmldsl.elements import H2, H3, H4, H5, H6

        for level, cls in enumerate((H1, H2, H3, H4, H5, H6), start=1):
            heading = cls("x")
            assert isinstance(heading, Heading)
            assert heading.level == level
            assert heading.tag_name == f"h{level}"

    def test_inline_text_elements(self) -> None:
        assert isinstance(B(), InlineTextElement)
        assert isinstance(A(), InlineTextElement)
        assert not isinstance(P(), InlineTextElement)


class TestTreeStructure:
    """Children, parents and the attach protocol."""

    def test_add_does_not_set_parent(self) -> None:
        div = Div()
        p = P("text")
        div.add(p)
        assert div.children == (p,)
        assert p.parent is None

    def test_attach_sets_parent(self) -> None:
        div = Div()
        p = P("text")
        assert div.attach(p) is p
        assert div.children == (p,)
        assert p.parent is div

    def test_document_attach_keeps_parent_none(self) -> None:
        doc = HTML()
        p = P("text")
        doc.attach(p)
        assert doc.children == (p,)
        assert p.parent is None
        assert doc.parent is None

    def test_remove_by_identity(self) -> None:
        div = Div()
        first = P("same")
        second = P("same")
        div.attach(first)
        div.attach(second)
        assert div.remove(second) is True
        assert div.children == (first,)
        assert div.remove(second) is False

    def test_children_is_a_copy(self) -> None:
        div = Div()
        div.attach(P())
        children = div.children
        div.attach(P())
        assert len(children) == 1
        assert len(div.children) == 2

    def test_parent_is_not_owning(self) -> None:
        p = P("orphan")
        div = Div()
        div.attach(p)
        del div
        gc.collect()
        assert p.parent is None

    def test_ancestors(self) -> None:
        outer = Div()
        inner = Div()
        leaf = P()
        outer.attach(inner)
        inner.attach(leaf)
        assert list(leaf.ancestors()) == [inner, outer]
        assert list(outer.ancestors()) == []

    def test_ul_items_are_attached(self) -> None:
        first, second = Li("one"), Li("two")
        items = Ul(first, second)
        assert items.children == (first, second)
        assert first.parent is items

    def test_nodes_satisfy_protocol(self) -> None:
        assert isinstance(HTML(), Node)
        assert isinstance(Div(), Node)


class TestText:
    """Text content and the unsafe flag."""

    def test_default_text_is_empty(self) -> None:
        assert P().text == ""

    def test_text_element_is_reparented(self) -> None:
        p = P()
        strong = Strong("bold")
        p.attach(strong)
        p.text = strong
        assert p.children == ()
        assert strong.parent is p
        assert p.html() == "<p><strong>bold</strong></p>"

    def test_unsafe_defaults_to_false(self) -> None:
        assert P("x").unsafe is False

    def test_unsafe_inherited_from_ancestor(self) -> None:
        div = Div()
        p = P("<b>")
        div.attach(p)
        div.unsafe = True
        assert p.unsafe is True
        assert p.marked_unsafe is False

    def test_unattached_element_does_not_inherit(self) -> None:
        div = Div()
        div.unsafe = True
        p = P("<b>")
        div.add(p)
        assert p.unsafe is False

    def test_document_root_does_not_pass_unsafe(self) -> None:
        doc = HTML()
        p = P("<b>")
        doc.attach(p)
        assert p.unsafe is False

    def test_non_text_ancestors_are_skipped(self) -> None:
        outer = Div()
        span = Span()
        p = P("<b>")
        outer.attach(span)
        span.attach(p)
        outer.unsafe = True
        assert p.unsafe is True

    def test_setting_text_resets_own_flag(self) -> None:
        p = P()
        p.unsafe_text("<b>x</b>")
        assert p.unsafe is True
        p.text = "<i>y</i>"
        assert p.unsafe is False

    def test_unsafe_text_with_value(self) -> None:
        p = P().unsafe_text(f"I am {Sup('high')} right now")
        assert p.html() == "<p>I am <sup>high</sup> right now</p>"

    def test_unsafe_text_with_block(self) -> None:
        p = P()

        def fill(el: P) -> None:
            el.text = "<tt>raw</tt>"

        assert p.unsafe_text(fill) is p
        assert p.html() == "<p><tt>raw</tt></p>"

    def test_unsafe_text_block_sets_flag_on_error(self) -> None:
        p = P()

        def fail(el: P) -> None:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            p.unsafe_text(fail)
        assert p.unsafe is True


class TestElementAttributes:
    """Attribute helpers on elements."""

    def test_attr_forms(self) -> None:
        div = Div()
        div.attr("id", "main")
        div.attr(("class", "wide"))
        div.attr(Attribute("title", "Main"))
        assert div.attributes.render() == 'id="main" class="wide" title="Main"'

    def test_attr_none_removes(self) -> None:
        div = Div()
        div.attr("id", "main")
        assert div.attr("id", None) is True
        assert "id" not in div.attributes

    def test_attr_with_enum(self) -> None:
        a = A("https://example.com")
        a.attr("target", Target.TOP)
        assert a.target == "_top"

    def test_direction(self) -> None:
        p = P("text")
        p.direction = Direction.RTL
        assert p.direction == "rtl"
        assert p.html() == '<p dir="rtl">text</p>'

    def test_required_href_raises_when_unset(self) -> None:
        a = A()
        with pytest.raises(MissingAttributeError) as exc_info:
            _ = a.href
        assert exc_info.value.tag_name == "a"
        assert exc_info.value.attribute == "href"
        assert isinstance(exc_info.value, HtmlDslError)
        assert isinstance(exc_info.value, LookupError)

    def test_optional_attribute_reads_none(self) -> None:
        assert A("https://example.com").target is None
        assert Img().src is None
        assert Div().align is None

    def test_font_color_from_int(self) -> None:
        font = Font(color=0xFF333333)
        assert font.color == "#333333"
        font.color = "red"
        assert font.color == "red"
        font.color = None
        assert "color" not in font.attributes

    def test_reassigning_attribute_property_replaces(self) -> None:
        a = A("https://one.example")
        a.href = "https://two.example"
        assert a.html() == '<a href="https://two.example"></a>'


class TestHtmlAccessors:
    """outer_html, inner_html and str()."""

    def test_outer_html(self) -> None:
        a = A("https://google.com", text="Google")
        assert a.outer_html == '<a href="https://google.com">Google</a>'
        assert str(a) == a.outer_html

    def test_inner_html_with_text_and_children(self) -> None:
        p = P("a < b ")
        p.attach(Strong("c"))
        assert p.inner_html == "a &lt; b <strong>c</strong>"

    def test_inner_html_with_element_text(self) -> None:
        p = P()
        p.text = B("bold")
        assert p.inner_html == "<b>bold</b>"

    def test_inner_html_of_non_text_element(self) -> None:
        items = Ul(Li("one"), Li("two"))
        assert items.inner_html == "<li>one</li><li>two</li>"

    def test_render_is_pure(self) -> None:
        div = Div()
        div.attach(P("x"))
        before = div.children
        div.html()
        div.inner_html
        assert div.children == before

    def test_repr(self) -> None:
        assert repr(Div()) == "Div(tag_name='div', children=0)"

    def test_text_element_is_html_element(self) -> None:
        assert issubclass(TextElement, HtmlElement)
