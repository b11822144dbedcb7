"""
Command-line front end for Phraser.

Wires Config -> record store -> repositories and exposes item management,
CSV transfer and a terminal review session.
"""

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional

from .config import Config, SettingsRepository
from .exceptions import ValidationError
from .models import ReviewSettings, VocabularyItem
from .services import (
    ItemRepository,
    RecordStore,
    ScoringTracker,
    WeightedSelector,
    create_store,
    read_csv_file,
    validate,
    write_csv_file,
)
from .services.selector import success_rate
from .utils.logger import setup_logger

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


@dataclass
class FlashcardApp:
    """The core services bound to one store."""

    store: RecordStore
    items: ItemRepository
    scoring: ScoringTracker
    selector: WeightedSelector
    settings: SettingsRepository

    @classmethod
    def create(
        cls,
        store: Optional[RecordStore] = None,
        random_source: Optional[Callable[[], float]] = None
    ) -> "FlashcardApp":
        store = store or create_store()
        items = ItemRepository(store)
        return cls(
            store=store,
            items=items,
            scoring=ScoringTracker(items),
            selector=WeightedSelector(random_source),
            settings=SettingsRepository(store),
        )


def format_item(item: VocabularyItem) -> str:
    """One-line listing: id, phrases, hint and score."""
    hint = f" [{item.phonetic_hint}]" if item.phonetic_hint else ""
    return (
        f"{item.id}  {item.source_text}{hint} = {item.target_text}"
        f"  (+{item.correct_count}/-{item.incorrect_count})"
    )


def _feedback(message: str, correct: bool, settings: ReviewSettings) -> str:
    if not settings.color_coded_feedback:
        return message
    return f"{GREEN if correct else RED}{message}{RESET}"


def run_review(
    app: FlashcardApp,
    count: int,
    input_fn: Callable[[str], str] = input,
    out=None
) -> int:
    """
    Run a review session of up to count cards.

    In active-input mode each typed answer is validated and scored; otherwise
    cards are revealed without scoring.

    Returns:
        Number of cards shown
    """
    out = out or sys.stdout
    settings = app.settings.get()
    correct = incorrect = shown = 0

    for _ in range(count):
        item = app.selector.select_next(app.items.list())
        if item is None:
            print("No phrases to review yet. Add some with 'add' or 'import'.", file=out)
            break
        shown += 1

        if settings.reverse_mode:
            prompt, answer = item.target_text, item.source_text
        else:
            prompt, answer = item.source_text, item.target_text

        hint = f"  ({item.phonetic_hint})" if item.phonetic_hint and not settings.reverse_mode else ""
        print(f"\n[{shown}] {prompt}{hint}", file=out)

        try:
            if settings.active_input:
                typed = input_fn("Your answer: ")
                if validate(typed, answer):
                    correct += 1
                    app.scoring.record_correct(item.id)
                    print(_feedback("Correct!", True, settings), file=out)
                else:
                    incorrect += 1
                    app.scoring.record_incorrect(item.id)
                    print(_feedback(f"Incorrect. Answer: {answer}", False, settings), file=out)
            else:
                input_fn("Press Enter to reveal...")
                print(f"    {answer}", file=out)
        except EOFError:
            break

    if settings.active_input and (correct or incorrect):
        print(f"\nSession score: {correct} correct, {incorrect} incorrect", file=out)
    return shown


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phraser",
        description="Adaptive vocabulary flashcards",
    )
    parser.add_argument(
        "--backend",
        choices=["json", "sqlite", "memory"],
        default=None,
        help=f"Storage backend (default: {Config.STORE_BACKEND})",
    )
    parser.add_argument(
        "--store",
        default=None,
        help="Store location: directory for json, file for sqlite",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a phrase pair")
    add.add_argument("source")
    add.add_argument("target")

    edit = sub.add_parser("edit", help="Edit a phrase pair (scores are kept)")
    edit.add_argument("id")
    edit.add_argument("source")
    edit.add_argument("target")

    delete = sub.add_parser("delete", help="Delete a phrase pair")
    delete.add_argument("id")

    sub.add_parser("list", help="List all phrase pairs")

    search = sub.add_parser("search", help="Search phrases and hints")
    search.add_argument("query")

    sub.add_parser("stats", help="Show review statistics")

    imp = sub.add_parser("import", help="Import phrase pairs from a CSV file")
    imp.add_argument("file")

    exp = sub.add_parser("export", help="Export phrase pairs to a CSV file")
    exp.add_argument("file", nargs="?", default=None)

    review = sub.add_parser("review", help="Review flashcards")
    review.add_argument("--count", type=int, default=10, help="Cards per session (default: 10)")

    settings = sub.add_parser("settings", help="Show or change review settings")
    settings.add_argument("name", nargs="?", choices=ReviewSettings.names())
    settings.add_argument("value", nargs="?")

    reset = sub.add_parser("reset", help="Delete ALL phrase pairs")
    reset.add_argument("--yes", action="store_true", help="Confirm deletion")

    return parser


def main(
    argv: Optional[List[str]] = None,
    app: Optional[FlashcardApp] = None,
    input_fn: Callable[[str], str] = input
) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(level="INFO" if args.verbose else Config.LOG_LEVEL)
    app = app or FlashcardApp.create(create_store(args.backend, args.store))

    try:
        if args.command == "add":
            item = app.items.create(args.source, args.target)
            print(f"Added {format_item(item)}")

        elif args.command == "edit":
            if not app.items.update(args.id, args.source, args.target):
                print(f"[error] No phrase with id {args.id}", file=sys.stderr)
                return 1
            print(f"Updated {format_item(app.items.get(args.id))}")

        elif args.command == "delete":
            if not app.items.delete(args.id):
                print(f"[error] No phrase with id {args.id}", file=sys.stderr)
                return 1
            print(f"Deleted {args.id}")

        elif args.command == "list":
            items = app.items.list()
            for item in items:
                print(format_item(item))
            print(f"{len(items)} phrase(s)")

        elif args.command == "search":
            for item in app.items.search(args.query):
                print(format_item(item))

        elif args.command == "stats":
            stats = app.items.get_statistics()
            rate = stats["overall_success_rate"]
            print(f"Phrases:   {stats['total_items']} ({stats['new_items']} new)")
            print(f"Reviews:   {stats['total_correct']} correct, {stats['total_incorrect']} incorrect")
            print(f"Success:   {'-' if rate is None else f'{rate:.0%}'}")
            for item in sorted(app.items.list(), key=success_rate)[:5]:
                if item.total_attempts:
                    print(f"  weakest: {item.source_text} = {item.target_text} ({success_rate(item):.0%})")

        elif args.command == "import":
            try:
                entries = read_csv_file(args.file)
            except (OSError, UnicodeDecodeError) as e:
                print(f"[error] Cannot read {args.file}: {e}", file=sys.stderr)
                return 1
            if not entries:
                print("[error] No valid entries found in CSV file", file=sys.stderr)
                return 1
            created = app.items.create_batch(entries)
            print(f"Imported {len(created)} phrase(s)")

        elif args.command == "export":
            try:
                path = write_csv_file(app.items.list(), args.file)
            except OSError as e:
                print(f"[error] Cannot write export: {e}", file=sys.stderr)
                return 1
            print(f"Exported to {path}")

        elif args.command == "review":
            run_review(app, max(args.count, 0), input_fn=input_fn)

        elif args.command == "settings":
            if args.name is not None:
                if args.value is None:
                    print("[error] A value is required, e.g. 'settings active_input on'", file=sys.stderr)
                    return 1
                app.settings.update(args.name, args.value)
            current = app.settings.get()
            for name in ReviewSettings.names():
                print(f"{name:22} {'on' if getattr(current, name) else 'off'}")

        elif args.command == "reset":
            if not args.yes:
                print("[error] This deletes every phrase. Re-run with --yes to confirm.", file=sys.stderr)
                return 1
            app.items.reset_all()
            print("All phrases deleted")

    except ValidationError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
