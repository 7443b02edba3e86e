"""
Unit tests for maze graphs.

Tests graph construction from grids, edge validation, neighbor queries
and the sparse adjacency representation.
"""

import pytest

import numpy as np

from mazepath.geometry.graph import Edge, MazeGraph, Node, build_graph
from mazepath.geometry.mazes import Direction, Grid, generate_maze


class TestNodeAndEdge:
    def test_node_ordering(self):
        assert Node(0, 5) < Node(1, 0)
        assert Node(1, 2) == (1, 2)
        assert Node.coerce((3, 4)) == Node(3, 4)

    def test_edge_canonical_order(self):
        edge = Edge(Node(0, 1), Node(0, 0))
        assert edge.u == Node(0, 0)
        assert edge.v == Node(0, 1)
        assert edge == Edge(Node(0, 0), Node(0, 1))

    def test_edge_accepts_tuples(self):
        edge = Edge((2, 1), (1, 1), 2.0)
        assert edge.key == (Node(1, 1), Node(2, 1))
        assert edge.weight == 2.0

    def test_edge_other(self):
        edge = Edge(Node(0, 0), Node(1, 0))
        assert edge.other(Node(0, 0)) == Node(1, 0)
        assert edge.other(Node(1, 0)) == Node(0, 0)
        with pytest.raises(ValueError):
            edge.other(Node(5, 5))


class TestMazeGraphValidation:
    """Test edge consistency checks."""

    def test_unknown_node(self):
        with pytest.raises(ValueError, match="outside the graph"):
            MazeGraph.from_edge_list([(0, 0)], [((0, 0), (0, 1))])

    def test_non_adjacent_edge(self):
        with pytest.raises(ValueError, match="adjacent"):
            MazeGraph.from_edge_list([(0, 0), (1, 1)], [((0, 0), (1, 1))])

    def test_self_loop(self):
        with pytest.raises(ValueError, match="Self-loop"):
            MazeGraph.from_edge_list([(0, 0)], [((0, 0), (0, 0))])

    def test_duplicate_edge(self):
        with pytest.raises(ValueError, match="Duplicate"):
            MazeGraph.from_edge_list([(0, 0), (0, 1)], [((0, 0), (0, 1)), ((0, 1), (0, 0))])

    @pytest.mark.parametrize("weight", [0.0, -1.0])
    def test_non_positive_weight(self, weight):
        with pytest.raises(ValueError, match="non-positive"):
            MazeGraph.from_edge_list([(0, 0), (0, 1)], [((0, 0), (0, 1))], weight=weight)

    def test_plain_tuple_edges_accepted(self):
        graph = MazeGraph(nodes=((0, 0), (0, 1)), edges=(((0, 0), (0, 1)),))
        assert graph.num_edges == 1
        assert graph.edge_weight((0, 1), (0, 0)) == 1.0
        assert all(isinstance(e, Edge) for e in graph.edges)

    def test_weighted_tuple_edge_accepted(self):
        graph = MazeGraph(nodes=((0, 0), (1, 0)), edges=(((1, 0), (0, 0), 2.0),))
        assert graph.edges == (Edge(Node(0, 0), Node(1, 0), 2.0),)

    @pytest.mark.parametrize("bad", ["abc", 5, ((0, 0),)])
    def test_malformed_edge_rejected(self, bad):
        with pytest.raises(ValueError, match="edge"):
            MazeGraph(nodes=((0, 0), (0, 1)), edges=(bad,))


class TestMazeGraphQueries:
    @pytest.fixture
    def square(self):
        """2x2 cycle with one heavier edge."""
        return MazeGraph(
            nodes=(Node(0, 0), Node(0, 1), Node(1, 0), Node(1, 1)),
            edges=(
                Edge(Node(0, 0), Node(0, 1), 1.0),
                Edge(Node(0, 0), Node(1, 0), 1.0),
                Edge(Node(0, 1), Node(1, 1), 3.0),
                Edge(Node(1, 0), Node(1, 1), 0.5),
            ),
        )

    def test_counts(self, square):
        assert square.num_nodes == 4
        assert square.num_edges == 4
        assert square.min_edge_weight == 0.5

    def test_has_node(self, square):
        assert square.has_node((1, 1))
        assert Node(0, 1) in square
        assert not square.has_node((2, 0))
        assert not square.has_node(None)
        assert not square.has_node((1, 2, 3))

    def test_neighbors_sorted_with_weights(self, square):
        assert square.neighbors((1, 1)) == [(Node(0, 1), 3.0), (Node(1, 0), 0.5)]
        assert square.degree((0, 0)) == 2

    def test_edge_weight(self, square):
        assert square.edge_weight((1, 1), (0, 1)) == 3.0
        with pytest.raises(KeyError):
            square.edge_weight((0, 0), (1, 1))

    def test_path_cost(self, square):
        assert square.path_cost([(0, 0), (1, 0), (1, 1)]) == 1.5
        assert square.path_cost([(0, 0)]) == 0.0

    def test_adjacency_matrix(self, square):
        matrix = square.adjacency_matrix()

        assert matrix.shape == (4, 4)
        assert matrix.nnz == 2 * square.num_edges
        dense = matrix.toarray()
        np.testing.assert_array_equal(dense, dense.T)
        assert dense[2, 3] == 0.5

    def test_cycle_is_not_tree(self, square):
        assert square.connected_components() == 1
        assert not square.is_tree()

    def test_components(self):
        graph = MazeGraph.from_edge_list([(0, 0), (0, 1), (0, 2)], [((0, 0), (0, 1))])
        assert graph.connected_components() == 2
        assert not graph.is_tree()

    def test_edgeless_graph(self):
        graph = MazeGraph(nodes=(Node(0, 0),))
        assert graph.min_edge_weight == 1.0
        assert graph.is_tree()
        assert graph.neighbors((0, 0)) == []


class TestBuildGraph:
    """Test conversion of carved grids into graphs."""

    @pytest.mark.parametrize(("width", "height"), [(1, 1), (1, 5), (5, 1), (4, 6), (15, 15)])
    def test_perfect_maze_gives_tree(self, width, height):
        graph = build_graph(generate_maze(width, height, seed=8))

        assert graph.num_nodes == width * height
        assert graph.num_edges == width * height - 1
        assert graph.is_tree()

    def test_edges_match_open_walls(self):
        grid = generate_maze(7, 5, seed=21)
        graph = build_graph(grid)

        for edge in graph.edges:
            direction = Direction.SOUTH if edge.v.row > edge.u.row else Direction.EAST
            assert grid.neighbor(edge.u.row, edge.u.col, direction) == edge.v
            assert not grid.has_wall(edge.u.row, edge.u.col, direction)

        assert graph.num_edges == grid.passage_count()

    def test_fully_walled_grid(self):
        graph = build_graph(Grid(3, 2))
        assert graph.num_nodes == 6
        assert graph.num_edges == 0
        assert graph.connected_components() == 6

    def test_edge_weight_applied(self):
        graph = build_graph(generate_maze(4, 4, seed=2), edge_weight=2.5)
        assert all(edge.weight == 2.5 for edge in graph.edges)
        assert graph.min_edge_weight == 2.5

    @pytest.mark.parametrize("weight", [0, -2.0])
    def test_invalid_edge_weight(self, weight):
        with pytest.raises(ValueError):
            build_graph(Grid(2, 2), edge_weight=weight)

    def test_grid_not_modified(self):
        grid = generate_maze(6, 6, seed=13)
        east, south, visited = grid.east_walls.copy(), grid.south_walls.copy(), grid.visited.copy()

        build_graph(grid)

        np.testing.assert_array_equal(grid.east_walls, east)
        np.testing.assert_array_equal(grid.south_walls, south)
        np.testing.assert_array_equal(grid.visited, visited)

    def test_nodes_and_edges_sorted(self):
        graph = build_graph(generate_maze(5, 5, seed=17))
        assert list(graph.nodes) == sorted(graph.nodes)
        assert [edge.key for edge in graph.edges] == sorted(edge.key for edge in graph.edges)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
