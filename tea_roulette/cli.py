#!/usr/bin/env python3
"""Interactive terminal front-end for the tea wheel."""

import logging
import re
import sys
import threading

from pydantic import ValidationError

from .client import AppState, PreferencesClient, SpinController, UIController, to_text
from .config import get_settings

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

HELP = """Commands:
  add              register a person
  remove <n>       remove the person in row n
  clear            remove everybody
  spin             spin the wheel
  list             show the list and wheel again
  dismiss [n]      dismiss an error message
  help             show this help
  quit             exit"""


_WHOLE_NUMBER = re.compile(r"-?[0-9]+")


def _parse_int(raw: str) -> int | None:
    """Parse an ASCII whole number, or return None."""
    if not _WHOLE_NUMBER.fullmatch(raw):
        return None
    return int(raw)


def _ask_int(prompt: str) -> int | None:
    raw = input(prompt).strip()
    value = _parse_int(raw)
    if value is None:
        print(f"Not a whole number: {raw!r}")
    return value


def _ask_yes_no(prompt: str) -> bool:
    return input(f"{prompt} [y/N]: ").strip().lower() in ("y", "yes")


def handle_add(ui: UIController) -> None:
    name = input("Name: ").strip()
    if not name:
        print("Name cannot be empty.")
        return
    sugar = _ask_int("Sugars: ")
    if sugar is None or sugar < 0:
        print("Sugars must be zero or more.")
        return
    milk = _ask_yes_no("Milk?")
    ui.add(name, sugar, milk)


def handle_remove(ui: UIController, args: list[str]) -> None:
    index = _parse_int(args[0]) if len(args) == 1 else None
    if index is None:
        print("Usage: remove <n>")
        return
    ui.remove(index)


def handle_spin(ui: UIController, revealed: threading.Event) -> None:
    revealed.clear()
    result = ui.spin()
    if result is None:
        print("Nothing to spin.")
        return
    print("Spinning...")
    revealed.wait()


def handle_dismiss(ui: UIController, args: list[str]) -> None:
    position = _parse_int(args[0]) if args else 0
    if position is None:
        print("Usage: dismiss [n]")
        return
    if ui.dismiss_toast(position) is None:
        print("No such message.")


def run_loop(ui: UIController, revealed: threading.Event) -> None:
    print(to_text(ui.view()))
    while True:
        try:
            line = input("\ntea> ").strip()
        except EOFError:
            break
        if not line:
            continue
        command, *args = line.split()
        command = command.lower()

        if command in ("quit", "exit"):
            break
        elif command == "help":
            print(HELP)
            continue
        elif command == "add":
            handle_add(ui)
        elif command == "remove":
            handle_remove(ui, args)
        elif command == "clear":
            ui.remove_all(confirm=lambda: _ask_yes_no("Are you sure you want to remove all people?"))
        elif command == "spin":
            handle_spin(ui, revealed)
        elif command == "list":
            ui.load()
        elif command == "dismiss":
            handle_dismiss(ui, args)
        else:
            print(f"Unknown command: {command} (try 'help')")
            continue
        print(to_text(ui.view()))


def main() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error("ERROR: Invalid environment variables:")
        logger.error(str(e))
        sys.exit(1)

    revealed = threading.Event()
    state = AppState()
    spinner = SpinController(
        state,
        duration=settings.spin_duration,
        extra_spins=settings.extra_spins,
        on_reveal=lambda result: revealed.set(),
    )
    ui = UIController(PreferencesClient(settings.api_base_url, timeout=settings.request_timeout), spinner=spinner)

    logger.info(f"Connecting to {settings.api_base_url}")
    ui.load()
    try:
        run_loop(ui, revealed)
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
