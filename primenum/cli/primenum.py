"""CLI tool for enumerating prime implicants of an incrementally given CNF."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from primenum import PRIMENUM_DEBUG
from primenum.bool.implicant.enumerator import ImplicantEnumerator
from primenum.bool.implicant.protocol import format_round, iter_clauses
from primenum.global_params.config import ORACLE_BACKENDS, EnumerationConfig
from primenum.utils.exceptions import PrimEnumException


def enumerate_from_lines(lines: Iterable[str], config: EnumerationConfig,
                         out: Optional[TextIO] = None) -> int:
    """Process a clause stream, writing one block of output per solve request.

    Args:
        lines: Input lines in the clause line protocol
        config: Oracle configuration
        out: Where the results go (default: the current sys.stdout)

    Returns:
        The number of solve rounds run
    """
    if out is None:
        out = sys.stdout
    rounds = 0
    oracle_calls = 0
    with ImplicantEnumerator(config) as enumerator:
        for result in enumerator.run(iter_clauses(lines)):
            rounds += 1
            oracle_calls += result.oracle_calls
            for line in format_round(result):
                print(line, file=out)
            if config.report_stats and result.reduced_model is not None:
                print(f"c oracle calls: {result.oracle_calls}", file=out)

        if config.report_stats:
            oracle_time = (enumerator.conjunction.oracle.time_accum()
                           + enumerator.encoder.oracle.time_accum())
            print(f"c rounds: {rounds}", file=out)
            print(f"c reduction calls: {oracle_calls}", file=out)
            print(f"c oracle time: {oracle_time:.4f}", file=out)
    return rounds


def main(argv=None):
    """Main entry point for the implicant enumeration CLI."""
    parser = argparse.ArgumentParser(
        description="Enumerate irreducible implicants of a CNF given one clause per line. "
                    "An empty line requests a model.",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("file", type=str, nargs="?",
                        help="Clause file (default: read standard input)")

    parser.add_argument(
        "--backend",
        type=str,
        choices=list(ORACLE_BACKENDS),
        help="Oracle backend (default: $PRIMENUM_BACKEND or pysat)"
    )

    parser.add_argument(
        "-s", "--solver",
        type=str,
        help="pysat solver name (default: $PRIMENUM_SOLVER or cadical195)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print oracle statistics"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="DEBUG" if PRIMENUM_DEBUG else "WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    args = parser.parse_args(argv)

    if args.file and not Path(args.file).exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        return 1

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = EnumerationConfig.from_env(args.backend, args.solver, args.stats)
        if args.file:
            with open(args.file, encoding='utf-8') as f:
                enumerate_from_lines(f, config)
        else:
            enumerate_from_lines(sys.stdin, config)
        return 0
    except PrimEnumException as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.log_level == "DEBUG":
            import traceback  # pylint: disable=import-outside-toplevel
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
