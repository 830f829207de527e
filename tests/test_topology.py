"""
Tests for node-id issuance, node merging and ground selection.
"""

import itertools
import unittest

from circuit.topology import CircuitGraph, NodeIdAllocator
from circuit.wire import Wire
from devices import Battery, Resistor


def _attached(graph, *components):
    for c in components:
        graph.attach(c)
    return list(components)


class TestNodeIdAllocator(unittest.TestCase):

    def test_issue_is_monotonic(self):
        alloc = NodeIdAllocator()
        self.assertEqual([alloc.issue() for _ in range(4)], [1, 2, 3, 4])
        self.assertEqual(alloc.issued, 4)

    def test_reset_restarts_at_one(self):
        alloc = NodeIdAllocator()
        alloc.issue()
        alloc.issue()
        alloc.reset()
        self.assertEqual(alloc.issue(), 1)


class TestNodeMerging(unittest.TestCase):

    def setUp(self):
        self.graph = CircuitGraph()
        self.r1, self.r2, self.r3 = _attached(
            self.graph, Resistor(100.0), Resistor(200.0), Resistor(300.0),
        )
        self.components = [self.r1, self.r2, self.r3]

    def test_attach_issues_distinct_ids(self):
        ids = [t.base_node for c in self.components for t in c.terminals]
        self.assertEqual(ids, [1, 2, 3, 4, 5, 6])

    def test_wire_merges_to_smaller_id(self):
        wire = Wire(self.r3, 0, self.r1, 1)
        self.graph.rebuild(self.components, [wire])
        self.assertEqual(self.r3.terminals[0].node, 2)
        self.assertEqual(self.r1.terminals[1].node, 2)
        self.assertNotIn(5, self.graph.nodes)

    def test_partition_is_order_independent(self):
        wires = [
            Wire(self.r1, 1, self.r2, 0),
            Wire(self.r2, 1, self.r3, 0),
            Wire(self.r3, 1, self.r1, 0),
        ]
        self.graph.rebuild(self.components, wires)
        reference = self.graph.partition()

        for order in itertools.permutations(wires):
            self.graph.rebuild(self.components, list(order))
            self.assertEqual(self.graph.partition(), reference)
        self.assertEqual(len(reference), 3)

    def test_merging_is_idempotent(self):
        wire = Wire(self.r1, 1, self.r2, 0)
        self.graph.rebuild(self.components, [wire])
        once = self.graph.partition()
        self.graph.rebuild(self.components, [wire, wire, Wire(self.r2, 0, self.r1, 1)])
        self.assertEqual(self.graph.partition(), once)

    def test_chain_merge_collapses_to_one_node(self):
        wires = [Wire(self.r1, 0, self.r2, 0), Wire(self.r2, 0, self.r3, 0)]
        self.graph.rebuild(self.components, wires)
        nodes = {c.terminals[0].node for c in self.components}
        self.assertEqual(nodes, {1})

    def test_every_terminal_in_exactly_one_node(self):
        wires = [Wire(self.r1, 1, self.r2, 0), Wire(self.r2, 1, self.r3, 1)]
        self.graph.rebuild(self.components, wires)
        seen = [id(t) for node in self.graph.nodes.values() for t in node.terminals]
        self.assertEqual(len(seen), 6)
        self.assertEqual(len(set(seen)), 6)

    def test_rebuild_without_wire_unmerges(self):
        wire = Wire(self.r1, 1, self.r2, 0)
        self.graph.rebuild(self.components, [wire])
        self.assertEqual(self.graph.size, 5)
        self.graph.rebuild(self.components, [])
        self.assertEqual(self.graph.size, 6)
        self.assertEqual(self.r2.terminals[0].node, self.r2.terminals[0].base_node)

    def test_wire_to_missing_component_is_ignored(self):
        wire = Wire(self.r1, 1, self.r2, 0)
        self.graph.rebuild([self.r1, self.r3], [wire])
        self.assertEqual(self.graph.size, 4)


class TestGroundSelection(unittest.TestCase):

    def test_ground_is_source_negative_terminal(self):
        graph = CircuitGraph()
        r, b = _attached(graph, Resistor(), Battery())
        graph.rebuild([r, b], [Wire(b, 1, r, 1)])
        self.assertEqual(graph.ground, b.terminals[1].node)
        self.assertNotIn(graph.ground, graph.non_ground_ids())

    def test_ground_without_source_is_smallest_id(self):
        graph = CircuitGraph()
        r1, r2 = _attached(graph, Resistor(), Resistor())
        graph.rebuild([r1, r2], [])
        self.assertEqual(graph.ground, 1)
        self.assertEqual(graph.non_ground_ids(), [2, 3, 4])

    def test_empty_graph(self):
        graph = CircuitGraph()
        graph.rebuild([], [])
        self.assertIsNone(graph.ground)
        self.assertEqual(graph.size, 0)
        self.assertEqual(graph.non_ground_ids(), [])

    def test_clear_resets_counter(self):
        graph = CircuitGraph()
        _attached(graph, Resistor(), Resistor())
        graph.clear()
        r = Resistor()
        graph.attach(r)
        self.assertEqual([t.base_node for t in r.terminals], [1, 2])


if __name__ == '__main__':
    unittest.main()
