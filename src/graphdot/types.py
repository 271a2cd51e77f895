"""Value types used when describing a graph to the DOT renderer."""

import re
from dataclasses import dataclass, field
from enum import Enum

from .escape import escape_esc_string, escape_label

_ID_START = re.compile(r"[A-Za-z_]")
_ID_CHAR = re.compile(r"[A-Za-z0-9_]")


class GraphKind(str, Enum):
    """Directed graphs use `digraph`/`->`, undirected ones `graph`/`--`."""
    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def _missing_(cls, value):
        # Accept the DOT keywords as well as the member values.
        return {"digraph": cls.DIRECTED, "graph": cls.UNDIRECTED}.get(value)

    @property
    def keyword(self) -> str:
        return "digraph" if self is GraphKind.DIRECTED else "graph"

    @property
    def edge_op(self) -> str:
        return "->" if self is GraphKind.DIRECTED else "--"


class RankDir(str, Enum):
    """Direction in which ranks are laid out."""
    TOP_BOTTOM = "TB"
    LEFT_RIGHT = "LR"
    BOTTOM_TOP = "BT"
    RIGHT_LEFT = "RL"


class Style(str, Enum):
    """Graphviz `style` values. Some of them are not valid for edges."""
    NONE = ""
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BOLD = "bold"
    ROUNDED = "rounded"
    DIAGONALS = "diagonals"
    FILLED = "filled"
    STRIPED = "striped"
    WEDGED = "wedged"


class IdError(ValueError):
    """Raised when a string is not a plain DOT identifier."""

    def __init__(self, reason: str, char: str | None = None):
        self.reason = reason
        self.char = char
        if reason == "empty name":
            message = "Id cannot be empty"
        elif reason == "invalid start char":
            message = f"Id cannot begin with {char!r}"
        else:
            message = f"Id cannot contain {char!r}"
        super().__init__(message)


@dataclass(frozen=True)
class Id:
    """A DOT identifier that is emitted verbatim.

    The name must be non-empty, made of ASCII letters, digits and
    underscores, and must not begin with a digit (``[A-Za-z_][A-Za-z0-9_]*``).

    Raises:
        IdError: If the name does not follow that format
    """
    name: str

    def __post_init__(self):
        if not self.name:
            raise IdError("empty name")
        if not _ID_START.fullmatch(self.name[0]):
            raise IdError("invalid start char", self.name[0])
        for char in self.name[1:]:
            if not _ID_CHAR.fullmatch(char):
                raise IdError("invalid char", char)

    def __str__(self) -> str:
        return self.name


class TextKind(str, Enum):
    LABEL = "label"
    ESC = "esc"
    HTML = "html"


@dataclass(frozen=True)
class Text:
    """Label text for a node, edge or cluster.

    ``Text.label`` keeps the text as-is: backslashes are escaped and appear
    literally in the drawing. ``Text.esc`` is a Graphviz escString, so
    ``\\l``, ``\\r`` and ``\\n`` keep their justification meaning.
    ``Text.html`` is printed between ``<`` and ``>`` without any escaping.
    """
    value: str
    kind: TextKind = TextKind.LABEL

    @classmethod
    def label(cls, value: str) -> "Text":
        return cls(value, TextKind.LABEL)

    @classmethod
    def esc(cls, value: str) -> "Text":
        return cls(value, TextKind.ESC)

    @classmethod
    def html(cls, value: str) -> "Text":
        return cls(value, TextKind.HTML)

    def to_escaped_string(self) -> str:
        """Render as a DOT attribute value, including delimiters."""
        if self.kind == TextKind.HTML:
            return f"<{self.value}>"
        if self.kind == TextKind.ESC:
            return f'"{escape_esc_string(self.value)}"'
        return f'"{escape_label(self.value)}"'


class ShapeFill(str, Enum):
    """Whether an arrow shape is drawn open or filled."""
    OPEN = "o"
    FILLED = ""


class Side(str, Enum):
    """Which half of an arrow shape is visible."""
    LEFT = "l"
    RIGHT = "r"
    BOTH = ""


# Arrow kinds and the modifiers each one accepts.
_FILLABLE = {"normal", "box", "icurve", "diamond", "dot", "inv"}
_SIDED = {"normal", "box", "crow", "curve", "icurve", "diamond", "inv", "tee", "vee"}


@dataclass(frozen=True)
class ArrowVertex:
    """One arrow shape; see https://graphviz.org/doc/info/arrows.html."""
    kind: str
    fill: ShapeFill = ShapeFill.FILLED
    side: Side = Side.BOTH

    def __post_init__(self):
        if self.kind != "none" and self.kind not in _FILLABLE | _SIDED:
            raise ValueError(f"Unknown arrow shape: {self.kind}")
        if self.fill != ShapeFill.FILLED and self.kind not in _FILLABLE:
            raise ValueError(f"Arrow shape '{self.kind}' cannot be open")
        if self.side != Side.BOTH and self.kind not in _SIDED:
            raise ValueError(f"Arrow shape '{self.kind}' cannot be clipped")

    @classmethod
    def none(cls) -> "ArrowVertex":
        return cls("none")

    @classmethod
    def normal(cls, fill: ShapeFill = ShapeFill.FILLED, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("normal", fill, side)

    @classmethod
    def boxed(cls, fill: ShapeFill = ShapeFill.FILLED, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("box", fill, side)

    @classmethod
    def crow(cls, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("crow", side=side)

    @classmethod
    def curve(cls, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("curve", side=side)

    @classmethod
    def icurve(cls, fill: ShapeFill = ShapeFill.FILLED, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("icurve", fill, side)

    @classmethod
    def diamond(cls, fill: ShapeFill = ShapeFill.FILLED, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("diamond", fill, side)

    @classmethod
    def dot(cls, fill: ShapeFill = ShapeFill.FILLED) -> "ArrowVertex":
        return cls("dot", fill)

    @classmethod
    def inv(cls, fill: ShapeFill = ShapeFill.FILLED, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("inv", fill, side)

    @classmethod
    def tee(cls, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("tee", side=side)

    @classmethod
    def vee(cls, side: Side = Side.BOTH) -> "ArrowVertex":
        return cls("vee", side=side)

    def to_dot_string(self) -> str:
        return f"{self.fill.value}{self.side.value}{self.kind}"


@dataclass(frozen=True)
class Arrow:
    """Arrow drawn at one end of an edge, made of up to four shapes.

    The empty arrow means "renderer default" and emits no attribute.
    """
    vertices: tuple[ArrowVertex, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if len(self.vertices) > 4:
            raise ValueError("An arrow is made of at most 4 shapes")

    @classmethod
    def of(cls, *vertices: ArrowVertex) -> "Arrow":
        return cls(tuple(vertices))

    @classmethod
    def none(cls) -> "Arrow":
        return cls.of(ArrowVertex.none())

    @classmethod
    def normal(cls) -> "Arrow":
        return cls.of(ArrowVertex.normal())

    def is_default(self) -> bool:
        return not self.vertices

    def to_dot_string(self) -> str:
        return "".join(vertex.to_dot_string() for vertex in self.vertices)


class CompassPoint(str, Enum):
    """Side of a node (or port) an edge attaches to."""
    NORTH = "n"
    NORTH_EAST = "ne"
    EAST = "e"
    SOUTH_EAST = "se"
    SOUTH = "s"
    SOUTH_WEST = "sw"
    WEST = "w"
    NORTH_WEST = "nw"
    CENTER = "c"

    def to_dot_string(self) -> str:
        return f":{self.value}"
