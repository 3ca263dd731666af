#!/usr/bin/env python3
"""
Example: verify and measure the built-in sorters, then write a JSON report

Usage:
    python run_report.py --config config.yaml --output report.json

The same steps are available one at a time through the CLI:
    sortlab --config config.yaml verify
    sortlab --config config.yaml benchmark
"""

import argparse
import json
import logging
import os
import sys

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from sortlab.benchmark import run_benchmark
from sortlab.config import load_config
from sortlab.demo import run_demo
from sortlab.registry import get_sorter
from sortlab.verification import verify_sorters

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Verify and measure sortlab sorters")
    parser.add_argument(
        "--config",
        default=os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yaml"),
        help="Path to config YAML file",
    )
    parser.add_argument("--output", default="sorting_report.json", help="Report output path")
    args = parser.parse_args()

    config = load_config(args.config)

    demo = run_demo(config.demo)
    print(demo.format())

    verification = verify_sorters(
        [get_sorter(name) for name in config.verify.algorithms], config.verify
    )
    growth = run_benchmark(
        config.benchmark, [get_sorter(name) for name in config.benchmark.algorithms]
    )

    report = {
        "demo": {"algorithm": demo.algorithm, "before": demo.before, "after": demo.after},
        "verification": {
            name: {
                "passed": passed,
                "checks": len(results),
                "failures": [r.to_dict() for r in results if not r.passed],
            }
            for name, (passed, results) in verification.items()
        },
        "growth": [r.to_dict() for r in growth],
    }

    with open(args.output, "w") as f:
        json.dump(report, f, indent=2)
    logger.info(f"Report written to: {args.output}")

    return 0 if all(passed for passed, _ in verification.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
