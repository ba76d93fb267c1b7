# backend/rumor_check/services/propagation_graph.py
"""
Propagation graph checks.
The model draws the graph; here we only decide whether what came back is
usable. Anything partial or inconsistent is dropped (None) instead of failing
the whole analysis.
"""
import logging
from typing import Any, Optional

import networkx as nx
from pydantic import ValidationError

from rumor_check.models.schema import GraphData

logger = logging.getLogger("propagation_graph")


def _to_digraph(graph: GraphData) -> nx.DiGraph:
    G = nx.DiGraph()
    for n in graph.nodes:
        G.add_node(n.id, label=n.label, group=n.group, time=n.time)
    for l in graph.links:
        G.add_edge(l.source, l.target, value=l.value)
    return G


def validate_graph(raw: Any) -> Optional[GraphData]:
    """
    Return a well-formed GraphData or None.
    None when: graphData is missing / not an object, nodes missing or empty,
    a node or link field is invalid, node ids repeat, or a link points at an
    unknown node. A missing 'links' list next to real nodes is read as [].
    """
    if not raw or not isinstance(raw, dict):
        return None
    nodes = raw.get("nodes")
    if not nodes:
        return None

    try:
        graph = GraphData.model_validate(raw)
    except ValidationError as e:
        logger.warning("graphData rejected: %s", str(e)[:300])
        return None

    node_ids = [n.id for n in graph.nodes]
    if len(set(node_ids)) != len(node_ids):
        logger.warning("graphData rejected: duplicate node ids %s", node_ids)
        return None

    # edges to unknown ids would add phantom nodes to the digraph
    G = _to_digraph(graph)
    if G.number_of_nodes() != len(node_ids):
        dangling = sorted(set(G.nodes) - set(node_ids))
        logger.warning("graphData rejected: links reference unknown nodes %s", dangling)
        return None

    return graph
