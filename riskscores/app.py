import argparse
from typing import List

from . import __version__
from .codec import (
    DEFAULT_BITS_PER_SCORE,
    DEFAULT_TOTAL_SCORES,
    ScoreRangeError,
    decode,
    encode,
)
from .env import load_env
from .formatting import render_decoding, render_encoding
from .logger import get_logger
from .reports import risk_scores_report, subgraph_report


def parse_scores(raw: str) -> List[int]:
    """Parse a comma-separated list of integer scores."""
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    if not parts:
        raise SystemExit("No scores specified. Use --scores 3,4,5,4,3,4,2")
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise SystemExit(f"Scores must be integers: {raw}")


def cmd_scores_to_number(args: argparse.Namespace) -> None:
    scores = parse_scores(args.scores)
    try:
        number = encode(scores, args.bits_per_score, strict=args.strict)
        print(render_encoding(scores, args.bits_per_score, verbose=args.verbose))
    except ScoreRangeError as e:
        raise SystemExit(str(e))
    print(f"Decimal Score: {number}")


def cmd_number_to_scores(args: argparse.Namespace) -> None:
    try:
        scores = decode(args.number, args.total_scores, args.bits_per_score, strict=args.strict)
        print(render_decoding(args.number, args.total_scores, args.bits_per_score, verbose=args.verbose))
    except ScoreRangeError as e:
        raise SystemExit(str(e))
    print(f"Scores: {','.join(str(s) for s in scores)}")


def cmd_risk_scores(args: argparse.Namespace) -> None:
    logger = get_logger()
    try:
        for line in risk_scores_report(args.network, args.bits_per_score):
            print(line)
    except ValueError as e:
        raise SystemExit(str(e))
    finally:
        logger.log_metrics_summary()


def cmd_subgraph_scores(args: argparse.Namespace) -> None:
    logger = get_logger()
    try:
        for line in subgraph_report(args.network):
            print(line)
    except ValueError as e:
        raise SystemExit(str(e))
    finally:
        logger.log_metrics_summary()


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return n


def _non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="riskscores", description="Risk score packing and risk framework reports")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Console log level (default: $RISKSCORES_LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command")

    s2n = subparsers.add_parser("scores-to-number", help="Pack comma-separated scores into one integer")
    s2n.add_argument("--scores", required=True, help="Comma-separated scores. Example: 3,4,5,4,3,4,2")
    s2n.add_argument("--bits-per-score", type=_positive_int, default=DEFAULT_BITS_PER_SCORE, help="Bits per score (default 5)")
    s2n.add_argument("--verbose", action="store_true", help="Print the decimal/binary trace")
    s2n.add_argument("--strict", action="store_true", help="Reject scores that do not fit in --bits-per-score bits")
    s2n.set_defaults(func=cmd_scores_to_number)

    n2s = subparsers.add_parser("number-to-scores", help="Unpack an integer into scores")
    n2s.add_argument("--number", required=True, type=_non_negative_int, help="Packed decimal score. Example: 3360820354")
    n2s.add_argument("--total-scores", type=_non_negative_int, default=DEFAULT_TOTAL_SCORES, help="Number of scores to recover (default 7)")
    n2s.add_argument("--bits-per-score", type=_positive_int, default=DEFAULT_BITS_PER_SCORE, help="Bits per score (default 5)")
    n2s.add_argument("--verbose", action="store_true", help="Print the binary/decimal trace")
    n2s.add_argument("--strict", action="store_true", help="Reject numbers wider than total-scores x bits-per-score bits")
    n2s.set_defaults(func=cmd_number_to_scores)

    rsk = subparsers.add_parser("risk-scores", help="Report strategy risk scores from yDaemon")
    rsk.add_argument("--network", required=True, type=_positive_int, help="Chain id. Example: 1 (Ethereum Mainnet)")
    rsk.add_argument("--bits-per-score", type=_positive_int, default=DEFAULT_BITS_PER_SCORE, help="Bits per score (default 5)")
    rsk.set_defaults(func=cmd_risk_scores)

    sub = subparsers.add_parser("subgraph-scores", help="Report risk targets from the risk framework subgraph")
    sub.add_argument("--network", type=_non_negative_int, default=0, help="Chain id filter (default 0 = all networks)")
    sub.set_defaults(func=cmd_subgraph_scores)

    return parser


def main(argv=None):
    # Load .env if present (RISKSCORES_SUBGRAPH_URL, RISKSCORES_YDAEMON_URL, etc.)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if args.log_level:
        get_logger().set_level(args.log_level)

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
