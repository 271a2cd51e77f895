"""Capability contracts a caller's graph implements to be rendered.

Conformance is structural: the renderer only calls the methods below, so any
object providing them works. Subclassing the ABCs is a convenience that
brings the default hooks along.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from .types import Arrow, CompassPoint, GraphKind, Id, RankDir, Style, Text


class GraphWalk(ABC):
    """Enumerates the nodes and edges of a graph.

    Sequences may be lazy; the renderer iterates each of them once and keeps
    the order they are yielded in.
    """

    @abstractmethod
    def nodes(self) -> Iterable[Any]:
        """All nodes of the graph."""
        pass

    @abstractmethod
    def edges(self) -> Iterable[Any]:
        """All edges of the graph."""
        pass

    @abstractmethod
    def source(self, edge: Any) -> Any:
        """The node `edge` starts from."""
        pass

    @abstractmethod
    def target(self, edge: Any) -> Any:
        """The node `edge` points to."""
        pass

    def subgraphs(self) -> Iterable[Any]:
        """Clusters of the graph, drawn before any node."""
        return ()

    def subgraph_nodes(self, subgraph: Any) -> Iterable[Any]:
        """Nodes belonging to `subgraph`."""
        return ()


class Labeller(ABC):
    """Supplies identifiers, labels and styling for a graph.

    Every hook except `node_id` is optional. Returning None (or the default
    value) means no attribute is emitted for it.
    """

    @abstractmethod
    def node_id(self, node: Any) -> Id | str:
        """Unique identifier of `node`.

        An `Id` is written verbatim; a plain string is escaped as needed.
        """
        pass

    def kind(self) -> GraphKind:
        return GraphKind.DIRECTED

    def graph_id(self) -> Id | str | None:
        return None

    def rank_direction(self) -> RankDir | None:
        """Explicit layout direction; None keeps the renderer default (TB)."""
        return None

    def graph_attrs(self) -> Mapping[str, str]:
        return {}

    def node_label(self, node: Any) -> Text | str | None:
        return None

    def node_shape(self, node: Any) -> Text | str | None:
        """One of the Graphviz shape names, e.g. ``box``."""
        return None

    def node_color(self, node: Any) -> Text | str | None:
        return None

    def node_style(self, node: Any) -> Style:
        return Style.NONE

    def node_attrs(self, node: Any) -> Mapping[str, str]:
        return {}

    def edge_label(self, edge: Any) -> Text | str | None:
        return None

    def edge_style(self, edge: Any) -> Style:
        return Style.NONE

    def edge_color(self, edge: Any) -> Text | str | None:
        return None

    def edge_start_arrow(self, edge: Any) -> Arrow:
        return Arrow()

    def edge_end_arrow(self, edge: Any) -> Arrow:
        return Arrow()

    def edge_start_port(self, edge: Any) -> Id | str | None:
        return None

    def edge_end_port(self, edge: Any) -> Id | str | None:
        return None

    def edge_start_point(self, edge: Any) -> CompassPoint | None:
        return None

    def edge_end_point(self, edge: Any) -> CompassPoint | None:
        return None

    def edge_attrs(self, edge: Any) -> Mapping[str, str]:
        return {}

    def subgraph_id(self, subgraph: Any) -> Id | str | None:
        """Identifier of a cluster. Prefix it with ``cluster_`` to get a box drawn around it."""
        return None

    def subgraph_label(self, subgraph: Any) -> Text | str | None:
        return None

    def subgraph_style(self, subgraph: Any) -> Style:
        return Style.NONE

    def subgraph_color(self, subgraph: Any) -> Text | str | None:
        return None

    def subgraph_shape(self, subgraph: Any) -> Text | str | None:
        return None

    def subgraph_attrs(self, subgraph: Any) -> Mapping[str, str]:
        return {}
