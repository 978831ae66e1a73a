"""
Command line entry point: ``ielts-score``.

Subcommands:
    objective   Score a Listening/Reading section from JSON files
    overall     Aggregate section bands into the overall band

Results are printed to stdout as JSON. Invalid input is logged and the
process exits with status 2.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .api import build_band_report, score_section
from .bands import BandMapper
from .common.band_tables import DEFAULT_BAND_TABLES
from .core.errors import ScoringError
from .core.models import Section
from .core.utils.serialization import (
    deserialize_band_table,
    deserialize_questions,
    deserialize_submissions,
    load_json,
)
from .scoring import DedupPolicy, MatcherConfig, MatchStrictness, ScoringConfig

logger = logging.getLogger("ielts_scoring.cli")

EXIT_INVALID_INPUT = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ielts-score",
        description="Score IELTS-style answers and aggregate section bands.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    objective = subparsers.add_parser("objective", help="Score a Listening/Reading section")
    objective.add_argument("questions", type=Path, help="JSON array of questions")
    objective.add_argument("submissions", type=Path, help="JSON array of submissions")
    objective.add_argument(
        "--section",
        choices=[s.value for s in Section if s.is_objective],
        default=Section.LISTENING.value,
    )
    objective.add_argument(
        "--dedup",
        choices=[p.value for p in DedupPolicy],
        default=DedupPolicy.FIRST_SEEN.value,
        help="Which answer wins when a question was answered twice",
    )
    objective.add_argument(
        "--strict", action="store_true", help="Disable substring and stop-word-only matching"
    )
    objective.add_argument(
        "--number-words", action="store_true", help='Match digits to words ("7" vs "seven")'
    )
    objective.add_argument("--band-table", type=Path, help="JSON band table for the section")

    overall = subparsers.add_parser("overall", help="Aggregate section bands")
    for section in Section:
        overall.add_argument(f"--{section.value}", type=float, default=None)

    return parser


def _load_array(path: Path) -> list:
    data = load_json(path)
    if not isinstance(data, list):
        raise ScoringError(f"{path} must contain a JSON array")
    return data


def _run_objective(args: argparse.Namespace) -> dict:
    questions = deserialize_questions(_load_array(args.questions))
    submissions = deserialize_submissions(_load_array(args.submissions))
    section = Section(args.section)

    tables = dict(DEFAULT_BAND_TABLES)
    if args.band_table:
        table = deserialize_band_table(load_json(args.band_table))
        if table.section is not section:
            raise ScoringError(
                f"Band table is for {table.section.value}, not {section.value}"
            )
        tables[section] = table

    config = ScoringConfig(
        dedup=DedupPolicy(args.dedup),
        matcher=MatcherConfig(
            strictness=MatchStrictness.STRICT if args.strict else MatchStrictness.LENIENT,
            number_words=args.number_words,
        ),
    )
    result = score_section(submissions, questions, section, config, BandMapper(tables))
    return {"section": section.value, **result.to_dict()}


def _run_overall(args: argparse.Namespace) -> dict:
    record = build_band_report(
        listening=args.listening,
        reading=args.reading,
        writing=args.writing,
        speaking=args.speaking,
    )
    return record.to_dict()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.command == "objective":
            output = _run_objective(args)
        else:
            output = _run_overall(args)
    except (ScoringError, OSError, json.JSONDecodeError) as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_INPUT

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
