"""Command line harness for dumping deterministic xoshiro256 sample streams."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "prng_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xoshiro_rng import ConfigError, SampleConfig, run_sample_report
from xoshiro_rng.prng import VARIANTS
from xoshiro_rng.report import DISTRIBUTIONS

logger = logging.getLogger("xoshiro_rng.cli")


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout stays a clean JSON document."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds."""

    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be an integer (decimal or 0x-prefixed hex), received '{value}'."
        ) from exc


def _positive_int(value: str) -> int:
    try:
        parsed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Expected an integer, received '{value}'.") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Value must be a positive integer.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw a reproducible xoshiro256 sample stream")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=0,
        help="64-bit seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="plus-plus",
        help="Output scrambler: 'plus' (float oriented) or 'plus-plus' (general purpose)",
    )
    parser.add_argument(
        "--distribution",
        choices=DISTRIBUTIONS,
        default="u64",
        help="Which helper to sample",
    )
    parser.add_argument("--count", type=_positive_int, default=10, help="Number of samples to draw")
    parser.add_argument("--lower", type=float, default=0.0, help="Lower bound for int/float/double")
    parser.add_argument("--upper", type=float, default=1.0, help="Upper bound for int/float/double")
    parser.add_argument("--mu", type=float, default=0.0, help="Gaussian mean")
    parser.add_argument("--sigma", type=float, default=1.0, help="Gaussian standard deviation")
    parser.add_argument(
        "--bound",
        type=_positive_int,
        default=6,
        help="Exclusive upper bound for the 'below' distribution",
    )
    parser.add_argument(
        "--no-samples",
        dest="include_samples",
        action="store_false",
        help="Only emit the summary and state vectors",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "prng_logs/latest_run.json under the repository root."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    setup_logging(args.verbose)

    cfg = SampleConfig(
        seed=args.seed,
        variant=args.variant,
        distribution=args.distribution,
        count=args.count,
        lower=args.lower,
        upper=args.upper,
        mu=args.mu,
        sigma=args.sigma,
        bound=args.bound,
        include_samples=args.include_samples,
    )
    try:
        result = run_sample_report(cfg)
    except ConfigError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))
        logger.info("Wrote report to %s", log_path)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
