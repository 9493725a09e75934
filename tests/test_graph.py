import networkx as nx
import pytest

from redblack import RedBlackTree
from redblack.graph import to_digraph


@pytest.fixture
def tree():
    yield RedBlackTree([45, 26, 72, 18, 30, 60])


def test_export(tree: RedBlackTree):
    graph = to_digraph(tree)

    assert graph.graph["root"] == 45
    assert set(graph.nodes) == {18, 26, 30, 45, 60, 72}
    assert graph.nodes[45]["colour"] == "BLACK"
    assert graph.nodes[18]["colour"] == "RED"
    assert graph.edges[26, 18]["direction"] == "LEFT"
    assert graph.edges[26, 30]["direction"] == "RIGHT"
    assert graph.number_of_edges() == len(tree) - 1


def test_export_is_a_tree(tree: RedBlackTree, rng):
    values = list(range(100, 300))
    rng.shuffle(values)
    tree.update(values)

    graph = to_digraph(tree)

    assert nx.is_arborescence(graph)
    assert nx.dag_longest_path_length(graph) == tree.height(tree.root)
    assert graph.in_degree(graph.graph["root"]) == 0


def test_export_red_nodes_have_black_children(tree: RedBlackTree, rng):
    values = list(range(100, 300))
    rng.shuffle(values)
    tree.update(values)

    graph = to_digraph(tree)

    for parent, child in graph.edges:
        if graph.nodes[parent]["colour"] == "RED":
            assert graph.nodes[child]["colour"] == "BLACK"


def test_export_empty_tree():
    graph = to_digraph(RedBlackTree())

    assert graph.graph["root"] is None
    assert graph.number_of_nodes() == 0
