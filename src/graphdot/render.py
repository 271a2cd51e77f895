"""Walks a graph once and writes it to a sink in DOT syntax."""

import io
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .config import RenderOptions
from .escape import escape_id
from .types import Arrow, CompassPoint, GraphKind, Id, RankDir, Style, Text

logger = logging.getLogger(__name__)

INDENT = "    "


def render(graph: Any, sink: Any, options: RenderOptions | None = None, *, labeller: Any = None) -> None:
    """Render `graph` into `sink` in DOT syntax.

    The document is written in one pass: header, clusters, nodes, edges,
    closing brace. Each statement is a single ``write`` call on the sink;
    whatever the sink raises propagates unchanged, and nothing already
    written is taken back.

    Args:
        graph: Object implementing the GraphWalk contract, and the Labeller
            contract unless `labeller` is given
        sink: Text or binary file-like object with a ``write`` method
        options: Rendering switches (defaults to everything enabled)
        labeller: Separate Labeller implementation, if `graph` is not one
    """
    labeller = graph if labeller is None else labeller
    options = options or RenderOptions()
    write = _writer(sink)

    _render_header(write, labeller, options)
    subgraphs = graph.subgraphs() if hasattr(graph, "subgraphs") else ()
    clusters = render_subgraphs(sink, graph, subgraphs, options, labeller=labeller)
    nodes = render_nodes(sink, labeller, graph.nodes(), options)
    edges = render_edges(sink, graph, graph.edges(), options, labeller=labeller)
    write("}\n")

    logger.debug(f"Rendered {nodes} nodes, {edges} edges and {clusters} clusters")


def render_to_string(graph: Any, options: RenderOptions | None = None, *, labeller: Any = None) -> str:
    """Render `graph` and return the DOT document as a string."""
    buffer = io.StringIO()
    render(graph, buffer, options, labeller=labeller)
    return buffer.getvalue()


def render_subgraphs(sink: Any, graph: Any, subgraphs: Iterable[Any], options: RenderOptions | None = None,
                     *, labeller: Any = None) -> int:
    """Write one ``subgraph`` block per cluster. Returns the number written."""
    labeller = graph if labeller is None else labeller
    options = options or RenderOptions()
    write = _writer(sink)
    inner = INDENT * 2
    count = 0

    for subgraph in subgraphs:
        lines = []
        subgraph_id = _hook(labeller, "subgraph_id", subgraph)
        header = f"{INDENT}subgraph {_format_id(subgraph_id)} {{" if subgraph_id is not None else f"{INDENT}subgraph {{"
        lines.append(header)

        label = _hook(labeller, "subgraph_label", subgraph)
        if label is not None and not options.no_node_labels:
            lines.append(f"{inner}label={_format_text(label)};")

        style = _style(_hook(labeller, "subgraph_style", subgraph))
        if style != Style.NONE and not options.no_node_styles:
            lines.append(f'{inner}style="{style.value}";')

        color = _hook(labeller, "subgraph_color", subgraph)
        if color is not None and not options.no_node_colors:
            lines.append(f"{inner}color={_format_text(color)};")

        shape = _hook(labeller, "subgraph_shape", subgraph)
        if shape is not None:
            lines.append(f"{inner}shape={_format_text(shape)};")

        for name, value in _extra_attrs(_hook(labeller, "subgraph_attrs", subgraph)):
            lines.append(f"{inner}{name}={value};")

        for node in graph.subgraph_nodes(subgraph):
            lines.append(f"{inner}{_format_id(labeller.node_id(node))};")

        lines.append(f"{INDENT}}}")
        write("\n".join(lines) + "\n")
        count += 1

    return count


def render_nodes(sink: Any, labeller: Any, nodes: Iterable[Any], options: RenderOptions | None = None) -> int:
    """Write one statement per node, in iteration order. Returns the number written."""
    options = options or RenderOptions()
    write = _writer(sink)
    count = 0

    for node in nodes:
        attrs = []

        label = _hook(labeller, "node_label", node)
        if label is not None and not options.no_node_labels:
            attrs.append(("label", _format_text(label)))

        style = _style(_hook(labeller, "node_style", node))
        if style != Style.NONE and not options.no_node_styles:
            attrs.append(("style", f'"{style.value}"'))

        color = _hook(labeller, "node_color", node)
        if color is not None and not options.no_node_colors:
            attrs.append(("color", _format_text(color)))

        shape = _hook(labeller, "node_shape", node)
        if shape is not None:
            attrs.append(("shape", _format_text(shape)))

        attrs.extend(_extra_attrs(_hook(labeller, "node_attrs", node)))

        write(f"{INDENT}{_format_id(labeller.node_id(node))}{_format_attr_list(attrs)};\n")
        count += 1

    return count


def render_edges(sink: Any, graph: Any, edges: Iterable[Any], options: RenderOptions | None = None,
                 *, labeller: Any = None) -> int:
    """Write one statement per edge, in iteration order. Returns the number written."""
    labeller = graph if labeller is None else labeller
    options = options or RenderOptions()
    write = _writer(sink)
    edge_op = _kind(labeller).edge_op
    count = 0

    for edge in edges:
        source = _endpoint(
            labeller.node_id(graph.source(edge)),
            _hook(labeller, "edge_start_port", edge),
            _hook(labeller, "edge_start_point", edge),
        )
        target = _endpoint(
            labeller.node_id(graph.target(edge)),
            _hook(labeller, "edge_end_port", edge),
            _hook(labeller, "edge_end_point", edge),
        )
        attrs = []

        label = _hook(labeller, "edge_label", edge)
        if label is not None and not options.no_edge_labels:
            attrs.append(("label", _format_text(label)))

        style = _style(_hook(labeller, "edge_style", edge))
        if style != Style.NONE and not options.no_edge_styles:
            attrs.append(("style", f'"{style.value}"'))

        color = _hook(labeller, "edge_color", edge)
        if color is not None and not options.no_edge_colors:
            attrs.append(("color", _format_text(color)))

        if not options.no_arrows:
            start_arrow = _hook(labeller, "edge_start_arrow", edge, default=Arrow())
            end_arrow = _hook(labeller, "edge_end_arrow", edge, default=Arrow())
            if not end_arrow.is_default():
                attrs.append(("arrowhead", f'"{end_arrow.to_dot_string()}"'))
            if not start_arrow.is_default():
                attrs.append(("dir", '"both"'))
                attrs.append(("arrowtail", f'"{start_arrow.to_dot_string()}"'))

        attrs.extend(_extra_attrs(_hook(labeller, "edge_attrs", edge)))

        write(f"{INDENT}{source} {edge_op} {target}{_format_attr_list(attrs)};\n")
        count += 1

    return count


def _render_header(write: Callable[[str], Any], labeller: Any, options: RenderOptions) -> None:
    kind = _kind(labeller)
    graph_id = _hook(labeller, "graph_id")
    if graph_id is None:
        write(f"{kind.keyword} {{\n")
    else:
        write(f"{kind.keyword} {_format_id(graph_id)} {{\n")

    rank_direction = _hook(labeller, "rank_direction")
    if rank_direction is not None:
        write(f'{INDENT}rankdir="{RankDir(rank_direction).value}";\n')

    for name, value in _extra_attrs(_hook(labeller, "graph_attrs")):
        write(f"{INDENT}{name}={value};\n")

    graph_attrs = []
    content_attrs = []
    if options.fontname:
        font = ("fontname", Text.label(options.fontname).to_escaped_string())
        graph_attrs.append(font)
        content_attrs.append(font)
    if options.dark_theme:
        graph_attrs.extend([("bgcolor", '"black"'), ("fontcolor", '"white"')])
        content_attrs.extend([("color", '"white"'), ("fontcolor", '"white"')])
    if graph_attrs:
        write(f"{INDENT}graph{_format_attr_list(graph_attrs)};\n")
        write(f"{INDENT}node{_format_attr_list(content_attrs)};\n")
        write(f"{INDENT}edge{_format_attr_list(content_attrs)};\n")


def _writer(sink: Any) -> Callable[[str], Any]:
    """Adapt text output to the sink, encoding to UTF-8 for binary sinks."""
    mode = getattr(sink, "mode", "")
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)) or (isinstance(mode, str) and "b" in mode):
        return lambda text: sink.write(text.encode("utf-8"))
    return sink.write


def _hook(labeller: Any, name: str, *args: Any, default: Any = None) -> Any:
    """Call an optional Labeller hook, falling back to `default` when absent or None."""
    method = getattr(labeller, name, None)
    if method is None:
        return default
    value = method(*args)
    return default if value is None else value


def _kind(labeller: Any) -> GraphKind:
    return GraphKind(_hook(labeller, "kind", default=GraphKind.DIRECTED))


def _style(value: Any) -> Style:
    return Style.NONE if value is None else Style(value)


def _format_id(value: Any) -> str:
    if isinstance(value, Id):
        return value.name
    return escape_id(str(value))


def _format_text(value: Any) -> str:
    if isinstance(value, Text):
        return value.to_escaped_string()
    return Text.label(str(value)).to_escaped_string()


def _endpoint(node_id: Any, port: Any, point: CompassPoint | str | None) -> str:
    text = _format_id(node_id)
    if port is not None:
        text += f":{_format_id(port)}"
    if point is not None:
        text += CompassPoint(point).to_dot_string()
    return text


def _extra_attrs(attrs: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """Escape free-form attributes supplied by the labeller."""
    if not attrs:
        return []
    result = []
    for name, value in attrs.items():
        if isinstance(value, Text):
            formatted = value.to_escaped_string()
        else:
            formatted = _format_id(value)
        result.append((escape_id(str(name)), formatted))
    return result


def _format_attr_list(attrs: list[tuple[str, str]]) -> str:
    if not attrs:
        return ""
    return " [" + ", ".join(f"{name}={value}" for name, value in attrs) + "]"
