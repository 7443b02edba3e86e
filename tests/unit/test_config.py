"""
Unit tests for configuration models and YAML I/O.
"""

import pytest
from pydantic import ValidationError

import yaml

from mazepath.config import (
    LoggingConfig,
    MazeConfig,
    MazepathConfig,
    SearchConfig,
    load_config,
    save_config,
    validate_yaml_config,
)


class TestMazeConfig:
    def test_defaults(self):
        config = MazeConfig()
        assert config.width == 20
        assert config.height == 20
        assert config.seed is None
        assert config.start == (0, 0)

    @pytest.mark.parametrize("field", ["width", "height"])
    @pytest.mark.parametrize("value", [0, -1, 10001])
    def test_dimension_bounds(self, field, value):
        with pytest.raises(ValidationError):
            MazeConfig(**{field: value})

    def test_start_outside_maze(self):
        with pytest.raises(ValidationError, match="outside"):
            MazeConfig(width=5, height=5, start=(5, 0))


class TestSearchConfig:
    @pytest.mark.parametrize("name", ["astar", "AStar", "A*", "a-star"])
    def test_algorithm_aliases(self, name):
        assert SearchConfig(algorithm=name).algorithm == "astar"

    def test_unknown_algorithm(self):
        with pytest.raises(ValidationError):
            SearchConfig(algorithm="dijkstra")

    @pytest.mark.parametrize("weight", [0, -0.5])
    def test_edge_weight_positive(self, weight):
        with pytest.raises(ValidationError):
            SearchConfig(edge_weight=weight)


class TestLoggingConfig:
    def test_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")


class TestMazepathConfig:
    def test_resolved_goal_defaults_to_corner(self):
        config = MazepathConfig(maze=MazeConfig(width=10, height=8))
        assert config.resolved_goal() == (7, 9)

    def test_explicit_goal(self):
        config = MazepathConfig(maze=MazeConfig(width=10, height=8), search=SearchConfig(goal=(3, 4)))
        assert config.resolved_goal() == (3, 4)

    def test_goal_outside_maze(self):
        with pytest.raises(ValidationError, match="goal"):
            MazepathConfig(maze=MazeConfig(width=4, height=4), search=SearchConfig(goal=(4, 4)))


class TestYamlIO:
    """Test configuration persistence."""

    def test_round_trip(self, tmp_path):
        config = MazepathConfig(
            maze=MazeConfig(width=30, height=12, seed=42),
            search=SearchConfig(goal=(11, 0), edge_weight=2.0),
            logging=LoggingConfig(level="INFO"),
        )
        path = tmp_path / "nested" / "maze.yaml"

        save_config(config, path)
        loaded = load_config(path)

        assert loaded == config

    def test_saved_file_is_plain_yaml(self, tmp_path):
        path = tmp_path / "maze.yaml"
        MazepathConfig(maze=MazeConfig(width=6, height=4)).to_yaml(path)

        data = yaml.safe_load(path.read_text())
        assert data["maze"]["width"] == 6
        assert data["maze"]["start"] == [0, 0]
        assert "seed" not in data["maze"]

    def test_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "maze.yaml"
        path.write_text("maze:\n  width: 7\n")

        config = MazepathConfig.from_yaml(path)

        assert config.maze.width == 7
        assert config.maze.height == 20
        assert config.search.algorithm == "astar"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == MazepathConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("maze: [width: 3\n")
        with pytest.raises(yaml.YAMLError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("maze:\n  width: 0\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)

    def test_validate_yaml_config(self, tmp_path):
        good = tmp_path / "good.yaml"
        good.write_text("search:\n  algorithm: astar\n")
        bad = tmp_path / "bad.yaml"
        bad.write_text("logging:\n  level: LOUD\n")

        assert validate_yaml_config(good) == (True, "Configuration is valid")

        is_valid, message = validate_yaml_config(bad)
        assert not is_valid
        assert message.startswith("Validation error")

        is_valid, _message = validate_yaml_config(tmp_path / "missing.yaml")
        assert not is_valid


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
