"""Command line entry point of the typing test."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from blessed import Terminal
from blessed.keyboard import Keystroke

from .languages import LanguageError, LanguageManager
from .model import Action, Model
from .view import render
from .words import WordGenerator

try:
    from . import __version__ as VERSION
except ImportError:
    VERSION = "dev"

MIN_DURATION = 10
MAX_DURATION = 300
TICK_INTERVAL = 0.1

_SEQUENCE_NAMES = {
    "KEY_ESCAPE": "esc",
    "KEY_ENTER": "enter",
    "KEY_BACKSPACE": "backspace",
}
_CONTROL_NAMES = {
    "\x03": "ctrl+c",
    "\x1b": "esc",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x08": "backspace",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for the command and its subcommands."""
    parser = argparse.ArgumentParser(
        prog="typtea",
        description="A minimal typing speed test in your terminal",
        epilog=(
            "examples:\n"
            "  typtea start --lang python\n"
            "  typtea start --duration 30 --lang javascript\n"
            "  typtea start --list-langs"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show the version and exit"
    )
    commands = parser.add_subparsers(dest="command")

    start = commands.add_parser(
        "start",
        help="Start a typing test",
        description=(
            "Start a new typing test session with customizable duration and language"
        ),
    )
    start.add_argument(
        "-d",
        "--duration",
        type=int,
        default=30,
        help="Test duration in seconds (10-300)",
    )
    start.add_argument(
        "-l", "--lang", default="en", help="Language for typing test"
    )
    start.add_argument(
        "--list-langs",
        action="store_true",
        help="List all available languages",
    )

    commands.add_parser("version", help="Show the version of typtea")
    return parser


def _key_name(key: Keystroke) -> str:
    if key.is_sequence:
        return _SEQUENCE_NAMES.get(key.name, key.name or "")
    text = str(key)
    return _CONTROL_NAMES.get(text, text)


def _draw(term: Terminal, model: Model) -> None:
    print(term.home + term.clear + render(model), end="", flush=True)


def run_app(model: Model, term: Terminal) -> None:
    """Run the interactive typing test until the user quits."""
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            while True:
                if (term.width, term.height) != (model.width, model.height):
                    model.resize(term.width, term.height)
                _draw(term, model)
                key = term.inkey(timeout=TICK_INTERVAL)
                if key and model.handle_key(_key_name(key)) is Action.QUIT:
                    return
                model.tick()
        except KeyboardInterrupt:
            return


def _start(args: argparse.Namespace) -> int:
    manager = LanguageManager()

    if args.list_langs:
        print("Available languages:")
        for lang in manager.available_languages():
            print(f"  {lang}")
        return 0

    if not MIN_DURATION <= args.duration <= MAX_DURATION:
        print(
            "Error: duration must be between 10 and 300 seconds "
            "(e.g., --duration 60)",
            file=sys.stderr,
        )
        return 1

    if not manager.is_language_available(args.lang):
        available = ", ".join(manager.available_languages())
        print(f"Error: Language '{args.lang}' not available.", file=sys.stderr)
        print(f"Available languages: {available}", file=sys.stderr)
        print(f"Error: invalid language: {args.lang}", file=sys.stderr)
        return 1

    try:
        model = Model(args.duration, args.lang, WordGenerator(manager))
    except LanguageError as exc:
        print(f"Error: error creating typing test: {exc}", file=sys.stderr)
        return 1

    run_app(model, Terminal())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version or args.command == "version":
        print("typtea version", VERSION)
        return 0

    if args.command == "start":
        return _start(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())