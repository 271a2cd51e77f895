"""graphdot - render any in-memory graph as a Graphviz DOT document.

Callers describe their own structure through two small contracts,
GraphWalk (nodes, edges, endpoints) and Labeller (ids, labels, styling),
and hand it to `render` together with a writable sink.
"""

__version__ = "0.1.0"
__author__ = "rpapub"
__email__ = "contact@rpapub.dev"
__description__ = "Render in-memory graphs as Graphviz DOT documents"

from graphdot.config import GraphdotConfig, RenderOptions, load_config
from graphdot.edgelist import ClusterSpec, EdgeListGraph, EdgeSpec, NodeSpec
from graphdot.escape import escape_esc_string, escape_html, escape_id, escape_label, is_safe_id
from graphdot.render import render, render_edges, render_nodes, render_subgraphs, render_to_string
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
    TextKind,
)
from graphdot.walk import GraphWalk, Labeller

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
    "GraphdotConfig",
    "RenderOptions",
    "load_config",
    "ClusterSpec",
    "EdgeListGraph",
    "EdgeSpec",
    "NodeSpec",
    "escape_esc_string",
    "escape_html",
    "escape_id",
    "escape_label",
    "is_safe_id",
    "render",
    "render_edges",
    "render_nodes",
    "render_subgraphs",
    "render_to_string",
    "Arrow",
    "ArrowVertex",
    "CompassPoint",
    "GraphKind",
    "Id",
    "IdError",
    "RankDir",
    "ShapeFill",
    "Side",
    "Style",
    "Text",
    "TextKind",
    "GraphWalk",
    "Labeller",
]
