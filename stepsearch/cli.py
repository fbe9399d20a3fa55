import sys
import random
import argparse
from textwrap import dedent
from typing import List, Optional, TextIO

from stepsearch.config.config import DEFAULT_CONFIG_FILE, Config, ConfigError
from stepsearch.driver.inputs import DriverError, InputValidationError, parse_array, parse_target
from stepsearch.driver.session import SearchSession
from stepsearch.search.base import SearchStep
from stepsearch.search.registry import ALGORITHMS, UnknownAlgorithmError, list_algorithms


def render_step(step: SearchStep) -> str:
    """
    Render one step as a row of cells.

    Compared cells are shown as `[v]`, the found cell as `*v*`, every other
    cell as its bare value.
    """
    found_index = step.outcome.index if step.outcome is not None and step.outcome.is_found else None
    cells = []
    for index, value in enumerate(step.snapshot):
        if index == found_index:
            cells.append(f"*{value}*")
        elif index in step.comparing_indices:
            cells.append(f"[{value}]")
        else:
            cells.append(str(value))
    row = " ".join(cells) if cells else "(empty)"
    return f"{row}   comparisons={step.comparison_count}"


def render_summary(session: SearchSession) -> str:
    stats = session.stats
    low, high = session.bounds()
    return dedent(f"""\
        Algorithm: {session.algorithm.descriptor.display_name}
        Time: {stats.elapsed:.2f}s
        Comparisons: {stats.comparisons}
        Min comparisons: {low}
        Max comparisons: {high}
        Result: {stats.result}""")


def print_algorithms(out: TextIO) -> None:
    for descriptor in list_algorithms():
        info = descriptor.explanation
        out.write(f"{descriptor.identifier:<15}{descriptor.display_name}\n")
        out.write(f"    How it works: {info.how}\n")
        out.write(f"    Pros: {info.pros}\n")
        out.write(f"    Cons: {info.cons}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Step-by-step search algorithm visualizer')
    parser.add_argument('--config', default=DEFAULT_CONFIG_FILE, help='Path to the configuration file')
    parser.add_argument('--algorithm', choices=sorted(ALGORITHMS), help='Algorithm to run')
    parser.add_argument('--array', help='Comma separated integers, a random array is used when omitted')
    parser.add_argument('--target', help='Value to search for')
    parser.add_argument('--speed', type=int, help='Delay between steps in milliseconds')
    parser.add_argument('--seed', type=int, help='Seed for the random array')
    parser.add_argument('--runs', type=int, default=1,
                        help='Number of searches to play, the configuration is re-read before each one')
    parser.add_argument('--list', action='store_true', help='List the available algorithms and exit')
    return parser


def run_search(args: argparse.Namespace, config: Config, out: TextIO) -> int:
    """Play one search with the current configuration and print its rows and summary."""
    logger = config.logger
    seed = args.seed if args.seed is not None else config.random_seed
    speed_ms = args.speed if args.speed is not None else config.speed_ms

    if not (0 <= speed_ms <= Config.MAX_SPEED_MS):
        logger.error("Speed must be between 0 and %d ms, got: %d", Config.MAX_SPEED_MS, speed_ms)
        return 2

    try:
        session = SearchSession(
            algorithm=args.algorithm or config.algorithm,
            rng=random.Random(seed),
            logger=logger,
        )
        if args.array:
            session.set_array(parse_array(args.array, config.min_array_length, config.max_array_length))
            suggested = None
        else:
            suggested = session.randomize(
                config.random_min_length,
                config.random_max_length,
                config.random_min_value,
                config.random_max_value,
            )

        if args.target is not None:
            target = parse_target(args.target)
        elif suggested is not None:
            target = suggested
        else:
            raise InputValidationError("Please enter a valid target value.")

        session.start(target)
    except (DriverError, UnknownAlgorithmError) as e:
        logger.error("%s", e)
        return 2

    out.write(f"{session.algorithm.descriptor.display_name}: searching for {target}\n")
    session.play(
        speed_ms / 1000.0,
        on_step=lambda step, stats: out.write(render_step(step) + "\n"),
    )
    out.write(render_summary(session) + "\n")
    return 0


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    """
    The main entry point of the visualizer.
    Parses command-line arguments, plays the requested searches and prints
    a summary after each one.

    Returns:
        int: Process exit status.
    """
    args = build_parser().parse_args(argv)

    if args.list:
        print_algorithms(out)
        return 0

    if args.runs < 1:
        sys.stderr.write(f"--runs must be at least 1, got: {args.runs}\n")
        return 2

    try:
        config = Config(args.config)
    except ConfigError as e:
        sys.stderr.write(f"Configuration error: {e}\n")
        return 2

    for run in range(args.runs):
        if run:
            try:
                config.reload()
            except ConfigError as e:
                config.logger.warning("%s; keeping the previous settings", e)
            out.write("\n")
        status = run_search(args, config, out)
        if status:
            return status
    return 0


if __name__ == "__main__":
    sys.exit(main())
