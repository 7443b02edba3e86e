"""
Command-line interface for mazepath.

Provides commands to generate perfect mazes and to solve them with A*,
printing the result as text.
"""

from __future__ import annotations

import sys

import click
import yaml
from pydantic import ValidationError

from mazepath import __version__
from mazepath.alg import PATHFINDERS
from mazepath.config import MAZE_DIMENSION_MAX, MAZE_DIMENSION_MIN, MazepathConfig, load_config
from mazepath.geometry import Grid, build_graph, generate_maze
from mazepath.utils import MazeError, get_logger

logger = get_logger(__name__)

WALL = "█"
PASSAGE = " "
START = "S"
END = "E"
PATH = "."

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

dimension = click.IntRange(MAZE_DIMENSION_MIN, MAZE_DIMENSION_MAX)


def render_maze(grid: Grid, path=None) -> str:
    """
    Render a maze as text, one line per row of the wall array.

    Cell ``(r, c)`` sits at character ``(2r + 1, 2c + 1)``. If ``path`` is
    given, its cells and the openings between consecutive cells are marked
    with ``.``, its first cell with ``S`` and its last with ``E``.
    """
    maze = grid.to_numpy_array()
    chars = [[WALL if value else PASSAGE for value in row] for row in maze]

    if path:
        cells = [(int(r), int(c)) for r, c in path]
        for (r0, c0), (r1, c1) in zip(cells, cells[1:]):
            chars[r0 + r1 + 1][c0 + c1 + 1] = PATH
        for r, c in cells:
            chars[2 * r + 1][2 * c + 1] = PATH
        r, c = cells[0]
        chars[2 * r + 1][2 * c + 1] = START
        r, c = cells[-1]
        chars[2 * r + 1][2 * c + 1] = END

    return "\n".join("".join(row) for row in chars)


def parse_position(ctx, param, value):
    """Click callback turning ``"R,C"`` into ``(R, C)``."""
    if value is None:
        return None
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise click.BadParameter(f"expected ROW,COL, got {value!r}") from None
    return (row, col)


def _build_config(config_path, overrides: dict) -> MazepathConfig:
    """Merge command-line overrides over a YAML file (or the defaults)."""
    try:
        config = load_config(config_path) if config_path else MazepathConfig()
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(str(e)) from e

    data = config.model_dump()
    for section, values in overrides.items():
        data[section].update({key: value for key, value in values.items() if value is not None})

    try:
        return MazepathConfig.model_validate(data)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e


def _config_options(func):
    func = click.option(
        "--log-level",
        type=click.Choice(LOG_LEVELS, case_sensitive=False),
        default=None,
        help="Logging level (default: WARNING, or the config file's level)",
    )(func)
    func = click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="YAML configuration file",
    )(func)
    func = click.option("--seed", type=int, default=None, help="Random seed for a reproducible maze")(func)
    func = click.argument("height", type=dimension, required=False)(func)
    func = click.argument("width", type=dimension, required=False)(func)
    return func


@click.group()
@click.version_option(version=__version__, prog_name="mazepath")
def main():
    """
    mazepath: perfect maze generation and A* path finding.
    """


@main.command()
@_config_options
def generate(width, height, seed, config_path, log_level):
    """
    Generate a perfect maze and print it.

    Examples:
        mazepath generate
        mazepath generate 30 15 --seed 42
        mazepath generate --config maze.yaml
    """
    config = _build_config(
        config_path,
        {"maze": {"width": width, "height": height, "seed": seed}, "logging": {"level": log_level}},
    )
    config.logging.apply()

    try:
        grid = generate_maze(config.maze.width, config.maze.height, seed=config.maze.seed, start=config.maze.start)
    except MazeError as e:
        raise click.ClickException(str(e)) from e

    click.echo(render_maze(grid))


@main.command()
@_config_options
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(sorted(PATHFINDERS), case_sensitive=False),
    default=None,
    help="Search algorithm (default: astar)",
)
@click.option("--start", callback=parse_position, default=None, metavar="R,C", help="Start cell (default: 0,0)")
@click.option("--goal", callback=parse_position, default=None, metavar="R,C", help="Goal cell (default: bottom-right)")
def solve(width, height, seed, config_path, log_level, algorithm, start, goal):
    """
    Generate a perfect maze, solve it and print the path.

    Examples:
        mazepath solve
        mazepath solve 40 20 --seed 7
        mazepath solve 10 10 --start 0,9 --goal 9,0
    """
    config = _build_config(
        config_path,
        {
            "maze": {"width": width, "height": height, "seed": seed},
            "search": {"algorithm": algorithm, "start": start, "goal": goal},
            "logging": {"level": log_level},
        },
    )
    config.logging.apply()

    try:
        grid = generate_maze(config.maze.width, config.maze.height, seed=config.maze.seed, start=config.maze.start)
        graph = build_graph(grid, edge_weight=config.search.edge_weight)
        finder = PATHFINDERS[config.search.algorithm](graph)
        result = finder.find_path(config.search.start, config.resolved_goal())
        logger.debug(f"Solved {config.maze.width} x {config.maze.height} maze with {config.search.algorithm}")
    except MazeError as e:
        raise click.ClickException(str(e)) from e

    if not result.found:
        click.echo(render_maze(grid))
        click.echo(f"No path from {config.search.start} to {config.resolved_goal()}", err=True)
        sys.exit(1)

    click.echo(render_maze(grid, result.positions()))
    click.echo(
        f"Path length: {len(result)} cells, cost {result.cost:g}, "
        f"{result.nodes_expanded} nodes expanded in {result.execution_time * 1000:.2f} ms"
    )


if __name__ == "__main__":
    main()
