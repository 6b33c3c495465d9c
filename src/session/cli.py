"""Command line entry point for the interactive polynomial session."""

import argparse
import logging
import sys

from src.session.log_config import setup_logging
from src.session.polynomial_session import PolynomialSession

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyterm",
        description="Evaluate two polynomials, their sum and the first derivative at a point.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, stream=sys.stderr)
    logger.debug("Starting session with log level %s", args.log_level)
    return PolynomialSession().run_interactive()
