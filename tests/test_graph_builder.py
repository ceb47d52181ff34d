import random
import unittest

import networkx as nx

from afrilex.graph_builder import (
    CHAIN_WEIGHT, RADIUS, ROOT_ID, ROOT_WEIGHT, STAR_WEIGHT,
    Category, build_graph, classify, edge_list, is_strong,
)
from afrilex.models import TranslationRecord


def record(language, group=None, word="w", family="Niger-Congo", region="West Africa"):
    data = {"language": language, "translatedWord": word, "family": family, "region": region}
    if group is not None:
        data["similarityGroup"] = group
    return TranslationRecord.model_validate(data)


def random_records(seed, count):
    rng = random.Random(seed)
    records = []
    for i in range(count):
        group = rng.choice([None, 1, 2, 3, 4, 5])
        records.append(record(f"Lang{i}", group))
    return records


class TestClassify(unittest.TestCase):

    def test_anchor_a_markers(self):
        for name in ["Ancient Egyptian", "Coptic (Sahidic)", "KEMETIC", "Egyptian Arabic"]:
            self.assertIs(classify(name), Category.ANCHOR_A, name)

    def test_anchor_b_markers(self):
        for name in ["Bambara", "Mandinka (Manding)", "Dioula", "Malinke"]:
            self.assertIs(classify(name), Category.ANCHOR_B, name)

    def test_default(self):
        for name in ["Wolof", "Yoruba", "Swahili", ""]:
            self.assertIs(classify(name), Category.DEFAULT, name)

    def test_radius_tiers_ordered(self):
        self.assertGreater(RADIUS[Category.ROOT], RADIUS[Category.ANCHOR_A])
        self.assertGreater(RADIUS[Category.ANCHOR_A], RADIUS[Category.ANCHOR_B])
        self.assertGreater(RADIUS[Category.ANCHOR_B], RADIUS[Category.DEFAULT])


class TestBuildGraph(unittest.TestCase):

    def test_single_coptic_record(self):
        records = [TranslationRecord.model_validate({
            "language": "Coptic", "translatedWord": "X", "family": "Egyptian",
            "region": "Egypt", "similarityGroup": 1,
        })]
        graph = build_graph(records, "root")

        self.assertEqual(set(graph.nodes), {ROOT_ID, "node-0"})
        self.assertEqual(edge_list(graph), [(ROOT_ID, "node-0", ROOT_WEIGHT)])
        self.assertEqual(graph.nodes["node-0"]["radius"], RADIUS[Category.ANCHOR_A])
        self.assertEqual(graph.nodes[ROOT_ID]["word"], "root")
        self.assertEqual(graph.nodes[ROOT_ID]["radius"], RADIUS[Category.ROOT])

    def test_shared_group_gets_duplicate_edges(self):
        records = [record("Wolof", 3), record("Fula", 3), record("Zulu", 7)]
        graph = build_graph(records, "water")
        edges = edge_list(graph)

        self.assertEqual(graph.number_of_nodes(), 4)
        root_edges = [e for e in edges if ROOT_ID in e[:2]]
        self.assertEqual(len(root_edges), 3)

        pair = [e for e in edges if {e[0], e[1]} == {"node-0", "node-1"}]
        self.assertEqual(sorted(w for _, _, w in pair), [CHAIN_WEIGHT, STAR_WEIGHT])

        zulu = [e for e in edges if "node-2" in e[:2] and ROOT_ID not in e[:2]]
        self.assertEqual(zulu, [])
        self.assertEqual(len(edges), 5)

    def test_empty_records(self):
        graph = build_graph([], "sun")
        self.assertEqual(list(graph.nodes), [ROOT_ID])
        self.assertEqual(edge_list(graph), [])

    def test_missing_group_is_singleton(self):
        records = [record("Hausa"), record("Akan"), record("Twi", 2)]
        graph = build_graph(records, "mother")
        for u, v, weight in edge_list(graph):
            self.assertIn(ROOT_ID, (u, v))
            self.assertEqual(weight, ROOT_WEIGHT)
        self.assertIsNone(graph.nodes["node-0"]["group"])

    def test_node_and_root_edge_counts(self):
        for seed in range(10):
            records = random_records(seed, 1 + seed * 3)
            graph = build_graph(records, "fire")
            edges = edge_list(graph)

            roots = [n for n, data in graph.nodes(data=True) if data["category"] is Category.ROOT]
            self.assertEqual(roots, [ROOT_ID])
            self.assertEqual(graph.number_of_nodes(), len(records) + 1)

            root_targets = [v if u == ROOT_ID else u for u, v, w in edges if ROOT_ID in (u, v)]
            self.assertEqual(len(root_targets), len(records))
            self.assertEqual(len(set(root_targets)), len(records))
            self.assertTrue(all(w == ROOT_WEIGHT for u, v, w in edges if ROOT_ID in (u, v)))

    def test_groups_connected_and_never_crossed(self):
        for seed in range(10):
            records = random_records(seed, 25)
            graph = build_graph(records, "earth")
            edges = edge_list(graph)

            groups = {}
            for i, r in enumerate(records):
                if r.similarity_group is not None:
                    groups.setdefault(r.similarity_group, []).append(f"node-{i}")

            for u, v, weight in edges:
                if ROOT_ID in (u, v):
                    continue
                self.assertTrue(is_strong(weight))
                self.assertIsNotNone(graph.nodes[u]["group"])
                self.assertEqual(graph.nodes[u]["group"], graph.nodes[v]["group"])

            for ids in groups.values():
                sub = nx.Graph()
                sub.add_nodes_from(ids)
                sub.add_edges_from((u, v) for u, v, w in edges
                                   if u in ids and v in ids and is_strong(w))
                if len(ids) == 1:
                    self.assertEqual(sub.number_of_edges(), 0)
                else:
                    self.assertTrue(nx.is_connected(sub))

    def test_deterministic(self):
        records = random_records(42, 30)
        first = build_graph(records, "sky")
        second = build_graph(records, "sky")
        self.assertEqual(list(first.nodes), list(second.nodes))
        self.assertEqual(edge_list(first), edge_list(second))

    def test_radius_depends_on_category_only(self):
        records = [record("Coptic", 1, word="short"), record("Coptic", 2, word="a much longer word"),
                   record("Bambara", 1), record("Swahili", 9, family="Bantu")]
        graph = build_graph(records, "x")
        self.assertEqual(graph.nodes["node-0"]["radius"], graph.nodes["node-1"]["radius"])
        self.assertEqual(graph.nodes["node-2"]["radius"], RADIUS[Category.ANCHOR_B])
        self.assertEqual(graph.nodes["node-3"]["radius"], RADIUS[Category.DEFAULT])
