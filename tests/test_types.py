"""Tests for identifier, label and arrow value types."""

import pytest

from graphdot.types import (
    Arrow,
    ArrowVertex,
    CompassPoint,
    GraphKind,
    Id,
    IdError,
    RankDir,
    ShapeFill,
    Side,
    Style,
    Text,
)


class TestId:
    """DOT identifier validation."""

    def test_simple_id_construction(self):
        assert Id("hello").name == "hello"
        assert str(Id("_x1")) == "_x1"

    def test_badly_formatted_id(self):
        with pytest.raises(IdError) as exc_info:
            Id("Weird { struct : ure } !!!")
        assert exc_info.value.reason == "invalid char"
        assert exc_info.value.char == " "

    def test_empty_id(self):
        with pytest.raises(IdError, match="cannot be empty"):
            Id("")

    def test_leading_digit(self):
        with pytest.raises(IdError) as exc_info:
            Id("1abc")
        assert exc_info.value.reason == "invalid start char"
        assert exc_info.value.char == "1"

    def test_id_error_is_value_error(self):
        with pytest.raises(ValueError):
            Id("a-b")


class TestText:
    """Label text delimiting and escaping."""

    def test_label_is_quoted_and_escaped(self):
        assert Text.label('a "b"\\c').to_escaped_string() == '"a \\"b\\"\\\\c"'

    def test_esc_keeps_backslashes(self):
        assert Text.esc("line\\l").to_escaped_string() == '"line\\l"'

    def test_html_is_not_escaped(self):
        assert Text.html("<b>bold</b>").to_escaped_string() == "<<b>bold</b>>"

    def test_empty_label(self):
        assert Text.label("").to_escaped_string() == '""'

    def test_label_escapes_control_characters(self):
        assert Text.label("x\x07").to_escaped_string() == '"x&#7;"'
        assert Text.label("a\tb").to_escaped_string() == '"a\\tb"'

    def test_esc_escapes_quotes_and_newlines_next_to_justification(self):
        text = Text.esc('say "hi"\\l\nnext\\r')
        assert text.to_escaped_string() == r'"say \"hi\"\l\nnext\r"'

    def test_esc_escapes_control_characters(self):
        assert Text.esc("a\x00\\l").to_escaped_string() == r'"a&#0;\l"'


class TestArrows:
    """Arrow shape rendering."""

    def test_default_arrow(self):
        assert Arrow().is_default()
        assert Arrow().to_dot_string() == ""
        assert not Arrow.none().is_default()

    def test_simple_shapes(self):
        assert Arrow.none().to_dot_string() == "none"
        assert Arrow.normal().to_dot_string() == "normal"
        assert ArrowVertex.boxed().to_dot_string() == "box"
        assert ArrowVertex.icurve().to_dot_string() == "icurve"

    def test_modifiers(self):
        assert ArrowVertex.boxed(ShapeFill.OPEN, Side.LEFT).to_dot_string() == "olbox"
        assert ArrowVertex.dot(ShapeFill.OPEN).to_dot_string() == "odot"
        assert ArrowVertex.crow(Side.RIGHT).to_dot_string() == "rcrow"
        assert ArrowVertex.diamond(ShapeFill.OPEN).to_dot_string() == "odiamond"

    def test_multiple_shapes(self):
        arrow = Arrow.of(ArrowVertex.tee(), ArrowVertex.inv(ShapeFill.OPEN))
        assert arrow.to_dot_string() == "teeoinv"

    def test_invalid_modifiers(self):
        with pytest.raises(ValueError):
            ArrowVertex("dot", side=Side.LEFT)
        with pytest.raises(ValueError):
            ArrowVertex("crow", fill=ShapeFill.OPEN)
        with pytest.raises(ValueError):
            ArrowVertex("arrowish")

    def test_at_most_four_shapes(self):
        with pytest.raises(ValueError):
            Arrow.of(*[ArrowVertex.normal()] * 5)


class TestEnums:
    """Keyword and attribute values of the enums."""

    def test_graph_kind(self):
        assert GraphKind.DIRECTED.keyword == "digraph"
        assert GraphKind.DIRECTED.edge_op == "->"
        assert GraphKind.UNDIRECTED.keyword == "graph"
        assert GraphKind.UNDIRECTED.edge_op == "--"

    def test_graph_kind_from_keyword(self):
        assert GraphKind("digraph") is GraphKind.DIRECTED
        assert GraphKind("graph") is GraphKind.UNDIRECTED
        with pytest.raises(ValueError):
            GraphKind("tree")

    def test_rank_dir_values(self):
        assert [r.value for r in RankDir] == ["TB", "LR", "BT", "RL"]

    def test_style_none_is_empty(self):
        assert Style.NONE.value == ""
        assert Style("wedged") is Style.WEDGED

    def test_compass_point(self):
        assert CompassPoint.SOUTH_WEST.to_dot_string() == ":sw"
        assert CompassPoint.CENTER.to_dot_string() == ":c"
