"""Render a SonorityGraph as Graphviz DOT text."""

from monosyllable.types import Endpoint, Partition, SonorityGraph

_CLUSTER_LABELS = {
    Partition.ONSET: "onset",
    Partition.NUCLEUS: "vowel",
    Partition.CODA: "coda",
}


def _quote(s: str) -> str:
    return '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _node_id(partition: Partition, symbol: str) -> str:
    return _quote(f"{_CLUSTER_LABELS[partition]}_{symbol}")


def _resolve(graph: SonorityGraph, target: Endpoint, at_or_after: Partition) -> Partition:
    """Partition the sampler would look `target` up in, walking from `at_or_after`."""
    for p in Partition:
        if p >= at_or_after and target in graph.table(p):
            return p
    return at_or_after


def graph_to_dot(graph: SonorityGraph, name: str = "Sonority") -> str:
    """Return a DOT digraph with one cluster per partition.

    Nodes are qualified by partition, so a phone used both as an onset and as
    a coda shows up twice. Edge labels are transition counts.
    """
    nodes: dict[Partition, list[str]] = {p: [] for p in Partition}

    def node(partition: Partition, symbol: str) -> str:
        if symbol not in nodes[partition]:
            nodes[partition].append(symbol)
        return _node_id(partition, symbol)

    def target_id(target: Endpoint, at_or_after: Partition) -> str:
        if target.is_stop:
            return "end"
        return node(_resolve(graph, target, at_or_after), target.symbol)

    edges = []
    for partition in Partition:
        for source, out in graph.table(partition).items():
            src = "st" if source.is_start else node(partition, source.symbol)
            for edge in out:
                dst = target_id(edge.target, partition)
                edges.append(f'    {src} -> {dst} [label="{edge.count}"];')

    lines = [
        f"digraph {_quote(name)} {{",
        "    rankdir=LR;",
        '    graph [fontsize=10 fontname="Verdana" compound=true];',
        '    node [shape=record fontsize=10 fontname="Verdana"];',
        "",
        '    st [label="Start"];',
        '    end [label="End"];',
        "",
    ]
    lines.extend(edges)
    for partition in Partition:
        label = _CLUSTER_LABELS[partition]
        lines.append("")
        lines.append(f"    subgraph cluster_{int(partition)} {{")
        lines.append('        color = "blue";')
        lines.append(f'        label = "{label}";')
        for symbol in nodes[partition]:
            lines.append(f"        {_node_id(partition, symbol)} [label={_quote(symbol)}];")
        lines.append("    }")
    lines.append("}")
    return "\n".join(lines) + "\n"
