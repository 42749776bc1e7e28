import networkx as nx

from .tree import RedBlackTree


def to_graph(tree: RedBlackTree) -> nx.DiGraph:
    """Exports the tree structure as a directed graph

    Every key becomes a graph node with a `colour` attribute, and every
    parent/child link an edge from parent to child with a `direction`
    attribute. The result is an arborescence rooted at `tree.root`.

    Args:
        tree (RedBlackTree): tree to export

    Returns:
        nx.DiGraph: the exported graph, empty for an empty tree
    """
    G = nx.DiGraph()
    stack = [tree.root] if tree.root is not None else []

    while stack:
        node = stack.pop()
        G.add_node(node.key, colour=node.colour)
        for child in (node.left, node.right):
            if child is None:
                continue
            G.add_edge(node.key, child.key, direction=child.get_direction())
            stack.append(child)

    return G
