#!/usr/bin/env python3
from __future__ import annotations

"""
Command-line runner for the BMI tracker.

Responsibilities:
- Configure logging to both console and `logs/bmi_tracker.log`
- Resolve settings (YAML file, environment, flags)
- Run one action against the records API:
  * `calc`   compute BMI and category locally, nothing is saved
  * `save`   validate, compute and POST a new record
  * `list`   GET all records and print them as a table
  * `delete` DELETE a record by id (asks for confirmation unless --yes)
  * `plot`   GET all records and write the BMI-over-time chart PNG

Exit codes: 0 on success, 1 on validation/API/config errors, 2 on usage errors.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from bmi_tracker.api_client import BmiApiClient
from bmi_tracker.errors import BmiTrackerError
from bmi_tracker.records import records_to_dataframe
from bmi_tracker.settings import Settings, load_settings
from bmi_tracker.ui_logic import MessageLevel, StateManager, TrackerManager
from bmi_tracker.utils_logging import configure_logging

log = logging.getLogger("bmi_cli")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Global options come before the sub-command, e.g.
    `bmi-tracker --api-base-url http://host:3000 list`.
    """
    p = argparse.ArgumentParser(description="BMI Calculator & Tracker")
    p.add_argument("--api-base-url", type=str, default=None, help="Base URL of the records API")
    p.add_argument("--config", type=Path, default=None, help="Path to a settings YAML file")
    p.add_argument("--decimals", type=int, choices=[1, 2], default=None, help="BMI rounding precision")
    p.add_argument("--debug", action="store_true")

    sub = p.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="Compute BMI without saving")
    calc.add_argument("--height", required=True, help="Height in metres (e.g. 1.75)")
    calc.add_argument("--weight", required=True, help="Weight in kilograms (e.g. 70.5)")

    save = sub.add_parser("save", help="Compute BMI and save it")
    save.add_argument("--height", required=True, help="Height in metres (e.g. 1.75)")
    save.add_argument("--weight", required=True, help="Weight in kilograms (e.g. 70.5)")
    save.add_argument("--age", default="", help="Age in years (optional)")

    sub.add_parser("list", help="List saved BMI records")

    delete = sub.add_parser("delete", help="Delete a saved BMI record")
    delete.add_argument("record_id", help="Identifier of the record to delete")
    delete.add_argument("--yes", action="store_true", help="Do not ask for confirmation")

    plot = sub.add_parser("plot", help="Write the BMI history chart as PNG")
    plot.add_argument("--out", type=Path, default=None, help="Output PNG path (default: output/plots/bmi_history.png)")

    return p.parse_args(argv)


def _report(manager: TrackerManager) -> int:
    """Print the manager's message to stdout/stderr and map it to an exit code."""
    state = manager.state_manager.get_state()
    if state.message_level == MessageLevel.ERROR:
        print(state.message, file=sys.stderr)
        log.error("%s", state.message)
        return 1
    if state.message:
        print(state.message)
    return 0


def _print_result(manager: TrackerManager) -> None:
    result = manager.state_manager.get_state().result
    if result.bmi is None or result.classification is None:
        return
    print(f"BMI: {result.bmi}")
    print(f"Category: {result.classification.category}")
    print(f"Advice: {result.classification.advice}")


def _ask_confirmation(record_id: str) -> bool:
    try:
        answer = input(f"Are you sure you want to delete BMI record {record_id}? [y/N] ")
    except (EOFError, KeyboardInterrupt):
        # no interactive stdin: treat as a "no"
        print()
        return False
    return answer.strip().lower() in ("y", "yes")


def run(
    args: argparse.Namespace,
    settings: Settings,
    *,
    client: Optional[BmiApiClient] = None,
    confirm: Callable[[str], bool] = _ask_confirmation,
) -> int:
    """Execute one sub-command. Separated from `main` so tests can inject a client.

    A client created here is closed before returning; an injected one is left
    to its owner.
    """
    owned = client is None
    if owned:
        client = BmiApiClient.from_settings(settings)
    try:
        return _dispatch(args, TrackerManager(StateManager(), client, settings), confirm)
    finally:
        if owned:
            client.close()


def _dispatch(args: argparse.Namespace, manager: TrackerManager, confirm: Callable[[str], bool]) -> int:
    sm = manager.state_manager

    if args.command == "calc":
        sm.update_form(height=args.height, weight=args.weight)
        manager.calculate_only()
        _print_result(manager)
        return _report(manager)

    if args.command == "save":
        sm.update_form(height=args.height, weight=args.weight, age=args.age)
        manager.submit()
        _print_result(manager)
        return _report(manager)

    if args.command == "list":
        if not manager.fetch_history():
            return _report(manager)
        records = sm.get_state().history.records
        if not records:
            print("No BMI records found")
            return 0
        df = records_to_dataframe(records)
        print(df.drop(columns=["advice"]).to_string(index=False))
        print(f"Total Records: {len(records)}")
        return 0

    if args.command == "delete":
        confirmed = args.yes or confirm(args.record_id)
        if not confirmed:
            print("Cancelled")
            return 0
        manager.delete_record(args.record_id, confirmed=True)
        return _report(manager)

    if args.command == "plot":
        if not manager.fetch_history():
            return _report(manager)
        try:
            from viz.plots import save_bmi_history_plot
        except Exception as e:
            log.error("Visualization dependencies missing or import failed: %s", e)
            raise
        try:
            out = save_bmi_history_plot(sm.get_state().history.records, args.out)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 1
        log.info("BMI chart written to %s", out)
        print(f"Saved chart to {out}")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_settings(
            args.config,
            api_base_url=args.api_base_url,
            bmi_decimals=args.decimals,
        )
    except BmiTrackerError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1
    configure_logging(settings.log_dir, debug=args.debug)
    log.debug("Using API at %s", settings.api_base_url)
    return run(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
