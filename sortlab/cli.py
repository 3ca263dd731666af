"""
Command-line interface for sortlab
"""

import argparse
import logging
import os
import sys

from sortlab.benchmark import run_benchmark
from sortlab.config import Config, load_config
from sortlab.demo import run_demo
from sortlab.registry import available_sorters, get_sorter
from sortlab.verification import verify_sorters

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(description="sortlab - in-place comparison sorts")

    parser.add_argument("--config", "-c", help="Path to configuration file (YAML)", default=None)

    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    demo = subparsers.add_parser("demo", help="Sort a random list and print it before and after")
    demo.add_argument("--algorithm", "-a", help="Sorter name or module:attr spec", default=None)
    demo.add_argument("--size", "-n", help="Number of values", type=int, default=None)
    demo.add_argument("--seed", help="Random seed", type=int, default=None)

    verify = subparsers.add_parser("verify", help="Check sorters against the sorting properties")
    verify.add_argument(
        "--algorithm",
        "-a",
        action="append",
        help="Sorter to verify (repeatable, default: all configured)",
        default=None,
    )
    verify.add_argument("--trials", help="Number of random trials", type=int, default=None)
    verify.add_argument("--seed", help="Random seed", type=int, default=None)
    verify.add_argument(
        "--keep-going",
        action="store_true",
        help="Report every failing property instead of stopping at the first",
    )

    bench = subparsers.add_parser("benchmark", help="Measure comparison growth and timing")
    bench.add_argument(
        "--algorithm",
        "-a",
        action="append",
        help="Sorter to measure (repeatable, default: all configured)",
        default=None,
    )
    bench.add_argument(
        "--sizes",
        help="Comma-separated input sizes (e.g. 16,32,64)",
        default=None,
    )
    bench.add_argument("--seed", help="Random seed", type=int, default=None)

    subparsers.add_parser("list", help="List registered sorters")

    return parser.parse_args(argv)


def _apply_overrides(config: Config, args: argparse.Namespace) -> None:
    """Apply command-line overrides to the loaded configuration"""
    if args.log_level:
        config.log_level = args.log_level

    if args.command == "demo":
        if args.algorithm:
            config.demo.algorithm = args.algorithm
        if args.size is not None:
            if args.size < 0:
                raise ValueError(f"--size must be non-negative, got {args.size}")
            config.demo.size = args.size
        if args.seed is not None:
            config.demo.random_seed = args.seed

    elif args.command == "verify":
        if args.algorithm:
            config.verify.algorithms = args.algorithm
        if args.trials is not None:
            if args.trials < 0:
                raise ValueError(f"--trials must be non-negative, got {args.trials}")
            config.verify.num_trials = args.trials
        if args.seed is not None:
            config.verify.random_seed = args.seed
        if args.keep_going:
            config.verify.stop_on_failure = False

    elif args.command == "benchmark":
        if args.algorithm:
            config.benchmark.algorithms = args.algorithm
        if args.sizes:
            sizes = [int(s) for s in args.sizes.split(",") if s.strip()]
            if not sizes or any(size < 2 for size in sizes):
                raise ValueError(f"--sizes must list sizes of at least 2, got {args.sizes}")
            config.benchmark.sizes = sizes
        if args.seed is not None:
            config.benchmark.random_seed = args.seed


def _cmd_demo(config: Config) -> int:
    result = run_demo(config.demo)
    print(result.format())
    return 0


def _cmd_verify(config: Config) -> int:
    sorters = [get_sorter(name) for name in config.verify.algorithms]
    report = verify_sorters(sorters, config.verify)

    exit_code = 0
    for name, (passed, results) in report.items():
        failures = [r for r in results if not r.passed]
        status = "PASSED" if passed else "FAILED"
        print(f"{name}: {status} ({len(results)} checks)")
        for failure in failures:
            print(f"  {failure.property_name}: {failure.error_message}")
            print(f"    input: {failure.input_repr}")
        if not passed:
            exit_code = 1
    return exit_code


def _cmd_benchmark(config: Config) -> int:
    sorters = [get_sorter(name) for name in config.benchmark.algorithms]
    for report in run_benchmark(config.benchmark, sorters):
        print(f"{report.algorithm}:")
        print(f"  best-case exponent:  {report.best_case_exponent:.2f}")
        print(f"  worst-case exponent: {report.worst_case_exponent:.2f}")
        print(f"  {'size':>8} {'best cmp':>10} {'worst cmp':>10} {'worst moves':>12} {'ms':>10}")
        for m in report.measurements:
            print(
                f"  {m.size:>8} {m.best_comparisons:>10} {m.worst_comparisons:>10} "
                f"{m.worst_moves:>12} {m.random_time_ms:>10.3f}"
            )
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    args = parse_args(argv)

    if args.config and not os.path.exists(args.config):
        print(f"Error: Configuration file '{args.config}' not found")
        return 1

    try:
        config = load_config(args.config)
        _apply_overrides(config, args)

        logging.basicConfig(level=getattr(logging, config.log_level.upper()), format=LOG_FORMAT)
        # basicConfig is a no-op once the root logger has handlers
        logging.getLogger().setLevel(getattr(logging, config.log_level.upper()))

        if args.command == "list":
            for name in available_sorters():
                print(name)
            return 0
        if args.command == "demo":
            return _cmd_demo(config)
        if args.command == "verify":
            return _cmd_verify(config)
        return _cmd_benchmark(config)

    except Exception as e:
        print(f"Error: {e!s}")
        logger.debug("Command failed", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
