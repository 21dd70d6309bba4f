"""Tests for SVG parser and serializer."""

import pytest

from tests.conftest import BAR_CHART_SVG, CIRCLE_SVG, DIRTY_SVG, FOREIGN_SVG, SMILEY_SVG

from svgbuilder.errors import MalformedDocument
from svgbuilder.svg.parser import parse_svg
from svgbuilder.svg.serializer import serialize_svg, used_prefixes
from svgbuilder.svg.tree import Comment, Element, RootElement, Text


def test_parse_circle():
    root = parse_svg(CIRCLE_SVG)
    assert isinstance(root, RootElement)
    assert root.width == 24.0
    assert root.height == 24.0
    circles = [el for el in root.iter() if el.tag == "circle"]
    assert len(circles) == 1
    assert circles[0].get("r") == "10"
    assert circles[0].parent is root


def test_parse_smiley():
    root = parse_svg(SMILEY_SVG)
    tags = [el.tag for el in root.element_children]
    assert tags == ["circle", "circle", "circle", "path"]


def test_parse_bar_chart():
    root = parse_svg(BAR_CHART_SVG)
    lines = [el for el in root.iter() if el.tag == "line"]
    assert len(lines) == 3
    assert lines[0].get("x1") == "18"


def test_svg_namespace_is_stripped():
    root = parse_svg(CIRCLE_SVG)
    assert root.tag == "svg"
    assert root.namespaces == {"": "http://www.w3.org/2000/svg"}


def test_foreign_namespaces_keep_prefix():
    root = parse_svg(DIRTY_SVG)
    assert root.get("inkscape:version") == "1.3"
    assert root.namespaces["inkscape"] == "http://www.inkscape.org/namespaces/inkscape"
    assert root.namespaces["rdf"] == "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
    tags = {el.tag for el in root.iter()}
    assert "sodipodi:namedview" in tags
    assert "rdf:RDF" in tags
    assert {"inkscape", "sodipodi", "rdf"} <= used_prefixes(root)


def test_rebound_default_namespace_gets_fresh_prefix():
    root = parse_svg(FOREIGN_SVG)
    div = next(el for el in root.iter() if el.tag.endswith(":div"))
    prefix = div.tag.split(":")[0]
    assert root.namespaces[prefix] == "http://www.w3.org/1999/xhtml"


def test_comments_and_text_preserved():
    root = parse_svg(DIRTY_SVG)
    comments = [c for el in root.iter() for c in el.children if isinstance(c, Comment)]
    assert [c.value for c in comments] == [" layer 1 "]
    assert any(isinstance(c, Text) for c in root.children)


def test_ids_parsed_into_identifier():
    root = parse_svg(DIRTY_SVG)
    fade = root.find_by_id("fade")
    assert fade.tag == "linearGradient"
    assert "id" not in fade.attributes


def test_invalid_markup():
    with pytest.raises(MalformedDocument):
        parse_svg("<svg><g></svg>")


def test_non_svg_root():
    with pytest.raises(MalformedDocument, match="expected <svg>"):
        parse_svg("<html><body/></html>")


def test_serialize_fresh_canvas():
    root = RootElement.create(10, 10)
    root.append_child(Element("rect", {"width": "5", "height": "5"}, id="r"))
    assert serialize_svg(root) == (
        '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10" viewBox="0 0 10 10">'
        '<rect id="r" width="5" height="5"/></svg>'
    )


def test_serialize_escapes():
    root = RootElement()
    text = root.append_child(Element("text", {"font-family": 'say "hi" & bye'}))
    text.append_child(Text("a < b & c"))
    out = serialize_svg(root)
    assert 'font-family="say &quot;hi&quot; &amp; bye"' in out
    assert "<text" in out and ">a &lt; b &amp; c</text>" in out


def test_serialize_declares_known_prefix_in_use():
    root = RootElement()
    root.append_child(Element("use", {"xlink:href": "#a", "x": "0"}))
    out = serialize_svg(root)
    assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in out


def test_serialize_xml_declaration():
    out = serialize_svg(RootElement(), xml_declaration=True)
    assert out.startswith('<?xml version="1.0" encoding="UTF-8"?>')


@pytest.mark.parametrize("svg", [CIRCLE_SVG, SMILEY_SVG, DIRTY_SVG, FOREIGN_SVG])
def test_round_trip(svg):
    root = parse_svg(svg)
    again = parse_svg(serialize_svg(root))
    assert again == root
