"""
Batch interpretation report: command line entry point.

Run as:
    python -m skywatch.batch_report [request.json] [--audience A] [--csv PATH]

Without a request file the built-in sample batch (skywatch.mock_data) is
interpreted against the current time.

Console:
    Decision table (one row per interpreted event)
    Summary: counts, health status, events visible to the chosen audience
"""

from __future__ import annotations

import argparse
import csv
import json
import logging
import sys
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from pydantic import ValidationError

from skywatch.clock import utc_now
from skywatch.config import get_settings
from skywatch.filters import assess_health, filter_for_audience, get_interpretation_stats
from skywatch.interpreter import interpret
from skywatch.mock_data import sample_request
from skywatch.models import Audience, DecisionObject, InterpretationRequest, InterpretationResponse

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


@dataclass
class ReportRow:
    event_type: str
    event_id: str
    suppressed: bool
    civilian: str
    satellite_operator: str
    iss: str
    research: str
    confidence: str
    summary: str
    suppression_reason: str
    decision_id: str


def to_row(decision: DecisionObject) -> ReportRow:
    relevance = decision.relevance
    return ReportRow(
        event_type=decision.event_type.value,
        event_id=decision.event_id,
        suppressed=decision.suppressed,
        civilian=relevance.civilian.value,
        satellite_operator=relevance.satellite_operator.value,
        iss=relevance.iss.value,
        research=relevance.research.value,
        confidence=decision.confidence.level.value,
        summary=decision.summary,
        suppression_reason=decision.suppression_reason or "",
        decision_id=decision.decision_id,
    )


# ---------------------------------------------------------------------------
# Console table
# ---------------------------------------------------------------------------

_TABLE_HEADER = (
    f"{'Type':<11}  {'Event':<22}  {'Sup':>3}  {'Civ':<10}  {'Oper':<10}  "
    f"{'ISS':<10}  {'Research':<10}  {'Conf':<6}  Summary"
)
_TABLE_DIVIDER = "-" * (len(_TABLE_HEADER) + 30)


def print_decisions(rows: list[ReportRow]) -> None:
    print()
    print(f"=== INTERPRETATION RESULTS: {len(rows)} EVENTS ===")
    print(_TABLE_DIVIDER)
    print(_TABLE_HEADER)
    print(_TABLE_DIVIDER)
    for r in rows:
        print(
            f"{r.event_type:<11}  {r.event_id[:22]:<22}  {'yes' if r.suppressed else 'no':>3}  "
            f"{r.civilian:<10}  {r.satellite_operator:<10}  {r.iss:<10}  {r.research:<10}  "
            f"{r.confidence:<6}  {r.summary}"
        )
    print(_TABLE_DIVIDER)
    print()


# ---------------------------------------------------------------------------
# CSV output
# ---------------------------------------------------------------------------


def save_csv(rows: list[ReportRow], output_path: str) -> None:
    """Write one CSV row per decision, columns in ReportRow declaration order."""
    if not rows:
        log.warning("No decisions to write, skipping CSV output.")
        return

    fieldnames = [f.name for f in fields(ReportRow)]
    path = Path(output_path)

    with path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=fieldnames)
        writer.writeheader()
        for r in rows:
            writer.writerow(asdict(r))

    log.info("Saved %d decisions to '%s'.", len(rows), output_path)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def load_request(path: str) -> InterpretationRequest:
    """Raises OSError, json.JSONDecodeError or pydantic ValidationError."""
    with open(path, encoding="utf-8") as fh:
        return InterpretationRequest.model_validate(json.load(fh))


def print_summary(response: InterpretationResponse, audience: Audience) -> None:
    stats = get_interpretation_stats(response.decisions)
    health = assess_health(stats)
    visible = filter_for_audience(response.decisions, audience)

    print("=" * 60)
    print("INTERPRETATION SUMMARY")
    print("=" * 60)
    print(f"  Decisions:                  {stats.total}")
    print(f"  Suppressed:                 {response.suppressed_count}")
    print(f"  Not suppressed:             {response.relevant_count}")
    print(f"  Civilian relevant:          {stats.civilian_relevant}")
    print(f"  Operator relevant:          {stats.operator_relevant}")
    print(f"  ISS relevant:               {stats.iss_relevant}")
    print(
        f"  Health:                     {health.status.value} "
        f"(suppression {health.suppression_rate:.0%}, civilian {health.civilian_rate:.0%})"
    )
    print(f"  {'Visible to ' + audience.value + ':':<28}{len(visible)}")
    print(f"  Processing time:            {response.processing_time_ms:.2f} ms")
    print("=" * 60)
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m skywatch.batch_report",
        description="Interpret a batch of space events and print a decision report.",
    )
    parser.add_argument("request", nargs="?", help="JSON interpretation request (default: built-in sample)")
    parser.add_argument(
        "--audience",
        choices=[a.value for a in Audience],
        default=Audience.ALL.value,
        help="Audience for the visibility count (default: all)",
    )
    parser.add_argument("--csv", metavar="PATH", help="Also write the decision table to CSV")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if args.request:
        try:
            request = load_request(args.request)
        except (OSError, json.JSONDecodeError, ValidationError) as exc:
            log.error("Cannot read request '%s': %s", args.request, exc)
            return 1
    else:
        log.info("No request file given, interpreting the built-in sample batch")
        request = sample_request(utc_now())

    response = interpret(request)
    rows = [to_row(d) for d in response.decisions]

    print_decisions(rows)
    if args.csv:
        save_csv(rows, args.csv)
    print_summary(response, Audience(args.audience))
    return 0


if __name__ == "__main__":
    sys.exit(main())
