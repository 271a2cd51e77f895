"""Ready-made graph backed by plain lists, loadable from a JSON document."""

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import GraphKind, RankDir, Style
from .walk import GraphWalk, Labeller

logger = logging.getLogger(__name__)


@dataclass
class NodeSpec:
    """Display attributes of one node."""
    id: str
    label: str | None = None
    shape: str | None = None
    color: str | None = None
    style: Style = Style.NONE


@dataclass
class EdgeSpec:
    """A directed connection between two node ids."""
    source: str
    target: str
    label: str | None = None
    color: str | None = None
    style: Style = Style.NONE


@dataclass
class ClusterSpec:
    """A named group of nodes drawn as a subgraph."""
    id: str
    label: str | None = None
    nodes: list[str] = field(default_factory=list)


class _NodeEntry(BaseModel):
    id: str
    label: str | None = None
    shape: str | None = None
    color: str | None = None
    style: Style = Style.NONE

    model_config = ConfigDict(extra="forbid")


class _EdgeEntry(BaseModel):
    source: str
    target: str
    label: str | None = None
    color: str | None = None
    style: Style = Style.NONE

    model_config = ConfigDict(extra="forbid")


class _ClusterEntry(BaseModel):
    id: str
    label: str | None = None
    nodes: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class _GraphDocument(BaseModel):
    name: str | None = None
    kind: GraphKind = GraphKind.DIRECTED
    rankdir: RankDir | None = None
    nodes: list[str | _NodeEntry] = Field(default_factory=list)
    edges: list[tuple[str, str] | _EdgeEntry] = Field(default_factory=list)
    clusters: list[_ClusterEntry] = Field(default_factory=list)

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v):
        # "digraph" and "graph" are accepted as well as the enum values
        return GraphKind(v)

    model_config = ConfigDict(extra="forbid")


@dataclass
class EdgeListGraph(GraphWalk, Labeller):
    """Graph whose nodes are string ids kept in insertion order.

    Nodes are the id strings themselves, so `node_id` is the identity and the
    renderer takes care of quoting.
    """
    name: str | None = None
    graph_kind: GraphKind = GraphKind.DIRECTED
    rankdir: RankDir | None = None
    node_specs: dict[str, NodeSpec] = field(default_factory=dict)
    edge_specs: list[EdgeSpec] = field(default_factory=list)
    clusters: list[ClusterSpec] = field(default_factory=list)

    def add_node(self, node: NodeSpec) -> None:
        """Add a node, replacing the attributes of an existing one with the same id."""
        self.node_specs[node.id] = node

    def add_edge(self, edge: EdgeSpec) -> None:
        """Add an edge. Endpoints not seen before become plain nodes."""
        for node_id in (edge.source, edge.target):
            if node_id not in self.node_specs:
                self.node_specs[node_id] = NodeSpec(id=node_id)
        self.edge_specs.append(edge)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EdgeListGraph":
        """Build a graph from a parsed edge-list document.

        Raises:
            ValueError: If the document does not match the expected layout
        """
        document = _GraphDocument.model_validate(data)
        graph = cls(name=document.name, graph_kind=document.kind, rankdir=document.rankdir)

        for entry in document.nodes:
            if isinstance(entry, str):
                graph.add_node(NodeSpec(id=entry))
            else:
                graph.add_node(NodeSpec(**entry.model_dump()))

        for entry in document.edges:
            if isinstance(entry, tuple):
                graph.add_edge(EdgeSpec(source=entry[0], target=entry[1]))
            else:
                graph.add_edge(EdgeSpec(**entry.model_dump()))

        for entry in document.clusters:
            graph.clusters.append(ClusterSpec(**entry.model_dump()))

        logger.info(f"Loaded graph with {len(graph.node_specs)} nodes and {len(graph.edge_specs)} edges")
        return graph

    @classmethod
    def from_json_file(cls, path: str | Path) -> "EdgeListGraph":
        """Load a graph from an edge-list JSON file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or not a valid document
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in graph file {path}: {e}")
        if not isinstance(data, dict):
            raise ValueError(f"Graph file {path} must contain a JSON object")
        return cls.from_dict(data)

    # GraphWalk

    def nodes(self) -> Iterator[str]:
        return iter(self.node_specs)

    def edges(self) -> Iterator[EdgeSpec]:
        return iter(self.edge_specs)

    def source(self, edge: EdgeSpec) -> str:
        return edge.source

    def target(self, edge: EdgeSpec) -> str:
        return edge.target

    def subgraphs(self) -> Iterator[ClusterSpec]:
        return iter(self.clusters)

    def subgraph_nodes(self, subgraph: ClusterSpec) -> list[str]:
        return subgraph.nodes

    # Labeller

    def kind(self) -> GraphKind:
        return self.graph_kind

    def graph_id(self) -> str | None:
        return self.name

    def rank_direction(self) -> RankDir | None:
        return self.rankdir

    def node_id(self, node: str) -> str:
        return node

    def node_label(self, node: str) -> str | None:
        return self.node_specs[node].label

    def node_shape(self, node: str) -> str | None:
        return self.node_specs[node].shape

    def node_color(self, node: str) -> str | None:
        return self.node_specs[node].color

    def node_style(self, node: str) -> Style:
        return self.node_specs[node].style

    def edge_label(self, edge: EdgeSpec) -> str | None:
        return edge.label

    def edge_color(self, edge: EdgeSpec) -> str | None:
        return edge.color

    def edge_style(self, edge: EdgeSpec) -> Style:
        return edge.style

    def subgraph_id(self, subgraph: ClusterSpec) -> str:
        return subgraph.id

    def subgraph_label(self, subgraph: ClusterSpec) -> str | None:
        return subgraph.label
