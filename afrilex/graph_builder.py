"""Turns a list of translation records into the cognate graph.

The graph is a networkx MultiGraph so that the redundant hub/chain edges
inside a cognate cluster survive as separate edges.
"""
import enum
import logging

import networkx as nx

logger = logging.getLogger(__name__)

ROOT_ID = "ROOT"

# Edge weights. Anything above STRONG_LINK_THRESHOLD is a cluster tie.
ROOT_WEIGHT = 1
CHAIN_WEIGHT = 4
STAR_WEIGHT = 8
STRONG_LINK_THRESHOLD = 2


class Category(enum.Enum):
    ROOT = "root"
    ANCHOR_A = "anchor_a"  # Ancient Egyptian / Coptic
    ANCHOR_B = "anchor_b"  # Mandingue
    DEFAULT = "default"


ANCHOR_A_MARKERS = ("egypt", "coptic", "kemetic")
ANCHOR_B_MARKERS = ("bambara", "manding", "dioula", "malinke")

RADIUS = {
    Category.ROOT: 45,
    Category.ANCHOR_A: 35,
    Category.ANCHOR_B: 30,
    Category.DEFAULT: 18,
}


def classify(language_name):
    name = (language_name or "").lower()
    if any(marker in name for marker in ANCHOR_A_MARKERS):
        return Category.ANCHOR_A
    if any(marker in name for marker in ANCHOR_B_MARKERS):
        return Category.ANCHOR_B
    return Category.DEFAULT


def node_id(index):
    return f"node-{index}"


def is_strong(weight):
    return weight > STRONG_LINK_THRESHOLD


def build_graph(records, source_word):
    """Builds the node/edge graph for one research result.

    Deterministic: the same records in the same order give the same node
    ids and the same edge list.
    """
    graph = nx.MultiGraph(source_word=source_word)

    graph.add_node(
        ROOT_ID,
        group=0,
        family="Source",
        language="Source",
        word=source_word,
        category=Category.ROOT,
        radius=RADIUS[Category.ROOT],
        record=None,
    )

    for i, record in enumerate(records):
        category = classify(record.language)
        graph.add_node(
            node_id(i),
            group=record.similarity_group,
            family=record.family,
            language=record.language,
            word=record.translated_word,
            category=category,
            radius=RADIUS[category],
            record=record,
        )

    # 1. Weak tether from every record to the root
    for i in range(len(records)):
        _link(graph, ROOT_ID, node_id(i), ROOT_WEIGHT)

    # 2. Cognate clusters: star from the first member, then a chain
    groups = {}
    for i, record in enumerate(records):
        if record.similarity_group is None:
            continue
        groups.setdefault(record.similarity_group, []).append(node_id(i))

    for ids in groups.values():
        if len(ids) < 2:
            continue
        hub = ids[0]
        for other in ids[1:]:
            _link(graph, hub, other, STAR_WEIGHT)
        for a, b in zip(ids, ids[1:]):
            _link(graph, a, b, CHAIN_WEIGHT)

    logger.debug("Built cognate graph for %r: %d nodes, %d edges",
                 source_word, graph.number_of_nodes(), graph.number_of_edges())
    return graph


def edge_list(graph):
    """Edges as (u, v, weight) in insertion order."""
    # MultiGraph.edges() walks adjacency, so sort back by creation sequence
    edges = sorted(graph.edges(data=True), key=lambda e: e[2]["seq"])
    return [(u, v, data["weight"]) for u, v, data in edges]


def _link(graph, u, v, weight):
    graph.add_edge(u, v, weight=weight, seq=graph.number_of_edges())
