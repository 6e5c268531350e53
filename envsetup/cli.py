"""Interactive command that fills in a .env file from its .env.example template."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from envsetup.model import NO_CHANGES, EnvSetup, SetupError

InputFunc = Callable[[str], str]

CLEAR_MARKER = "-"
_YES = frozenset({"", "y", "yes"})
_NO = frozenset({"n", "no"})


def _prompt_text(key: str, description: str, current: str) -> str:
    text = key
    if description:
        text += f" ({description})"
    if current:
        text += f" [{current}]"
    return text + ": "


def prompt_values(setup: EnvSetup, input_func: InputFunc = input) -> dict[str, str]:
    """Ask for every template variable, prefilled from the current values.

    An empty answer keeps the prefilled value and a lone "-" clears it.
    EOFError and KeyboardInterrupt from input_func propagate to the caller.
    """
    print("Setup your .env values")
    prefilled = setup.initial_values()
    values: dict[str, str] = {}
    for env_var in setup.env_vars:
        current = prefilled[env_var.key]
        answer = input_func(_prompt_text(env_var.key, env_var.description, current))
        if answer == "":
            values[env_var.key] = current
        elif answer.strip() == CLEAR_MARKER:
            values[env_var.key] = ""
        else:
            values[env_var.key] = answer
    return values


def _confirm(input_func: InputFunc) -> bool:
    """Ask whether to save; saving is the default answer."""
    while True:
        answer = input_func("Save these changes? [Y/n] (Save to .env / Discard changes): ")
        normalized = answer.strip().lower()
        if normalized in _YES:
            return True
        if normalized in _NO:
            return False
        print("Please answer 'y' or 'n'.")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="envsetup",
        description="Create or update a .env file from a .env.example template.",
    )
    parser.add_argument(
        "-C",
        "--directory",
        default=".",
        help="directory holding .env.example and .env (default: current directory)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive setup; return the process exit status."""
    args = _parse_args(argv)
    setup = EnvSetup(args.directory)

    try:
        setup.load()
    except SetupError as exc:
        print(exc)
        return 1

    try:
        values = prompt_values(setup, input)
    except (EOFError, KeyboardInterrupt):
        print("\nOperation cancelled by user (main form aborted).")
        return 0

    try:
        changed = setup.prepare(values)
    except SetupError as exc:
        print(exc)
        return 1

    if not changed:
        print("\n" + NO_CHANGES)
        return 0

    print(f"Proposed changes:\n{setup.diff_summary}\n")
    try:
        apply_changes = _confirm(input)
    except (EOFError, KeyboardInterrupt):
        print("\nSave operation cancelled by user.")
        return 0

    if not apply_changes:
        print("\nChanges discarded by user.")
        return 0

    try:
        setup.save()
    except SetupError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())