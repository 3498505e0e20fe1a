"""Solve a grid maze with A* and write the solution."""

import argparse
import sys
from pathlib import Path

import yaml
from gridpathfinder.adapters.text import load_grid, save_grid, solved_path_for
from gridpathfinder.errors import PathfindingError
from gridpathfinder.generator import generate_grid
from gridpathfinder.grid import Grid
from gridpathfinder.logging_config import (
    logger,
    set_log_level,
)
from gridpathfinder.rendering import GridRenderer
from gridpathfinder.report.csv_export import export_search_to_csv
from gridpathfinder.report.plots import plot_net_cost_over_expansions, plot_solved_grid
from gridpathfinder.report.summary import summary
from gridpathfinder.solver import Solver, mark_explored
from gridpathfinder.theme import Theme
from gridpathfinder.utils.config_loader import (
    SolverConfig,
    configure_cost_model,
    configure_markers,
    configure_output,
    configure_search,
    load_solver_config,
)
from gridpathfinder.utils.seeding import ensure_seed

EXIT_NO_PATH = 1
EXIT_ERROR = 2
DEFAULT_GENERATED_NAME = "generated"


def parse_arguments() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Find a lowest-cost path through a grid maze.")
    parser.add_argument(
        "maze",
        type=str,
        nargs="?",
        help="Maze file to solve. The '.txt' suffix may be omitted.",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NONE"],
        help="Set the logging level (default: INFO). Use 'NONE' to disable logging.",
    )
    parser.add_argument(
        "--theme",
        type=str,
        choices=[theme.value for theme in Theme],
        help="Rendering theme (overrides the configuration file).",
    )
    parser.add_argument(
        "--mark-explored",
        action="store_true",
        help="Also mark every cell the search expanded.",
    )
    parser.add_argument(
        "--output",
        type=str,
        help="Where to write the solved maze (default: '<maze>_solved.txt').",
    )
    parser.add_argument(
        "--no-write",
        action="store_true",
        help="Do not write the solved maze to disk.",
    )
    parser.add_argument(
        "--export-dir",
        type=str,
        help="Directory for CSV exports of the expansion trace and route.",
    )
    parser.add_argument(
        "--plot-dir",
        type=str,
        help="Directory for plots of the solved grid and the expansion costs.",
    )
    parser.add_argument(
        "--generate",
        type=str,
        metavar="ROWSxCOLS",
        help="Solve a randomly generated grid of this size instead of a maze file.",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=0.2,
        help="Obstacle density for --generate (default: 0.2).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for --generate.",
    )

    args = parser.parse_args()
    if args.maze is None and args.generate is None:
        parser.error("either a maze file or --generate is required")
    return args


def parse_size(size: str) -> tuple[int, int]:
    """Parse a ``ROWSxCOLS`` string."""
    try:
        rows, cols = (int(part) for part in size.lower().split("x"))
    except ValueError as exc:
        error_message = f"Invalid grid size {size!r}, expected ROWSxCOLS."
        raise argparse.ArgumentTypeError(error_message) from exc
    return rows, cols


def main() -> int:  # noqa: C901
    """Run the solver from the command line."""
    args = parse_arguments()
    set_log_level(args.log_level)

    try:
        config = load_solver_config(args.config) if args.config else SolverConfig()
    except (ValueError, OSError, yaml.YAMLError) as exc:
        logger.error(f"Failed to load configuration: {exc}")
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        return EXIT_ERROR

    cost_model = configure_cost_model(config)
    search_config = configure_search(config)
    markers = configure_markers(config)
    output_config = configure_output(config)

    theme = Theme(args.theme) if args.theme else output_config.theme
    renderer = GridRenderer(theme)

    try:
        if args.generate:
            rows, cols = parse_size(args.generate)
            seed = ensure_seed(args.seed)
            logger.info(f"Generating {rows}x{cols} grid with seed {seed}")
            grid: Grid = generate_grid(rows, cols, args.density, seed=seed)
            source = Path(f"{DEFAULT_GENERATED_NAME}_{seed}")
        else:
            source = Path(args.maze)
            grid = load_grid(source, markers)

        renderer.render_frame(grid)

        result = Solver(grid, cost_model, max_expansions=search_config.max_expansions).solve()
    except (PathfindingError, argparse.ArgumentTypeError, ValueError, OSError) as exc:
        logger.error(f"Failed to solve maze: {exc}")
        print(f"Error: {exc}", file=sys.stderr)  # noqa: T201
        return EXIT_ERROR

    summary(result)

    if args.export_dir:
        export_search_to_csv(result, Path(args.export_dir), file_prefix=f"{source.stem}_")

    if args.plot_dir:
        plot_dir = Path(args.plot_dir)
        plot_solved_grid(result, grid, plot_dir, file_prefix=f"{source.stem}_")
        plot_net_cost_over_expansions(result, plot_dir, file_prefix=f"{source.stem}_")

    if not result.success:
        return EXIT_NO_PATH

    solved = result.solved_grid
    if args.mark_explored or output_config.mark_explored:
        solved = mark_explored(grid, result)

    print()  # noqa: T201
    renderer.render_frame(solved)

    if output_config.write_solution and not args.no_write:
        output = (
            Path(args.output)
            if args.output
            else solved_path_for(source, suffix=output_config.solved_suffix)
        )
        save_grid(solved, output, markers)

    return 0


if __name__ == "__main__":
    sys.exit(main())
