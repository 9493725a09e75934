import networkx as nx

from .rbtree import Direction, RedBlackTree


def to_digraph(tree: RedBlackTree) -> nx.DiGraph:
    """Exports the tree as a directed graph of values for inspection

    Args:
        tree (RedBlackTree): the tree to export

    Returns:
        nx.DiGraph: one graph node per stored value with a ``colour``
            attribute, and an edge from every parent to each of its children
            with a ``direction`` attribute. the ``root`` graph attribute holds
            the root value, or None for an empty tree
    """
    root = tree.root.value if tree.root is not None else None
    graph = nx.DiGraph(root=root)

    for node in tree.level_order():
        graph.add_node(node.value, colour=node.colour.name)
        for direction in (Direction.LEFT, Direction.RIGHT):
            child = node.get_child(direction)
            if child is not None:
                graph.add_edge(node.value, child.value, direction=direction.name)

    return graph
