"""Command-line entry point: ``seq-sampler`` or ``python -m seq_sampler``.

Prints one sample, then benchmarks the selected samplers and reports
per-position selection counts and timings.
"""

from __future__ import annotations

import argparse
import logging
import sys

from seq_sampler.benchmark import format_result, run_benchmark
from seq_sampler.config import SamplerConfig
from seq_sampler.exceptions import SeqSamplerError
from seq_sampler.sampling.api import sample_indices
from seq_sampler.variates.factory import build_variate_source

logger = logging.getLogger("seq_sampler")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="seq-sampler",
        description="Sequential random sampling with Vitter's Algorithm D",
    )
    parser.add_argument("--total", type=int, default=100, help="Population size (default: 100)")
    parser.add_argument("-n", type=int, default=5, help="Sample size (default: 5)")
    parser.add_argument(
        "--repeats", type=int, default=1000, help="Samples per algorithm (default: 1000)"
    )
    parser.add_argument(
        "--algorithm",
        choices=["S", "D", "both"],
        default="both",
        help="Sampler(s) to benchmark (default: both)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the variate source")
    parser.add_argument(
        "--alpha-inverse",
        type=int,
        default=None,
        help="Algorithm A switch threshold (default: from config, 13)",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Print the per-position selection counts"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Python logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    overrides: dict[str, int] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.alpha_inverse is not None:
        overrides["alpha_inverse"] = args.alpha_inverse
    try:
        config = SamplerConfig(**overrides)
        source = build_variate_source(config)
    except (ValueError, KeyError, SeqSamplerError) as exc:
        # KeyError str() wraps the message in quotes.
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"error: {message}", file=sys.stderr)
        return 2
    algorithms = ["S", "D"] if args.algorithm == "both" else [args.algorithm]

    try:
        picked = sample_indices(args.n, args.total, source=source, config=config)
        print(" ".join(str(i) for i in picked))
        print()
        print(f"Picking {args.n} from {args.total}, {args.repeats} times.")
        print()
        for result in run_benchmark(
            args.total, args.n, args.repeats, algorithms, source=source, config=config
        ):
            print(format_result(result, verbose=args.verbose))
            print()
    except SeqSamplerError as exc:
        logger.error("Sampling failed: %s", exc)
        return 1
    finally:
        source.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
