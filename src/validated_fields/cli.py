"""Interactive CLI: fill in a configured form field by field and submit it."""

from __future__ import annotations

import argparse
import logging
import sys

from validated_fields.config.loader import load_config
from validated_fields.domain.binding import reset_validation
from validated_fields.domain.states import ValidationMode
from validated_fields.orchestration.form import Form

QUIT_WORDS = ("quit", "exit", "q")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Validated form fields interactive demo")
    p.add_argument("--config", "-c", required=True, help="Path to form YAML config")
    p.add_argument(
        "--immediate",
        action="store_true",
        help="Validate every field in immediate mode, regardless of config",
    )
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return p.parse_args(argv)


def _describe(form: Form, name: str) -> str:
    f = form.field(name)
    shown = "*" * len(f.text) if f.display().is_secure else f.text
    line = f"  {name} = {shown!r} [{f.state.description}, {f.border_color}]"
    if f.is_error_visible:
        line += f" - {f.error_message}"
    return line


def _ask(form: Form, name: str) -> bool:
    """Prompt for one field. False when the user quits or input ends."""
    f = form.field(name)
    label = f.header or f.placeholder
    form.focus(name)
    try:
        line = input(f"{label}: ")
    except EOFError:
        return False
    if line.strip().lower() in QUIT_WORDS:
        return False
    form.set_text(name, line)
    form.blur()
    print(_describe(form, name))
    return True


def run_interactive(form: Form) -> bool:
    """Collect every field, then re-ask failed fields until submit succeeds."""
    pending = form.field_names
    while pending:
        for name in pending:
            if not _ask(form, name):
                print("Goodbye.")
                return False
        if form.submit():
            break
        print(f"Please fix: {', '.join(form.errors())}")
        pending = list(form.errors())
        # Triggered errors are sticky; clear them before the user edits again
        for name in pending:
            reset_validation(form.field(name).binding)
    print(f"Submitted {form.config.name}:")
    for name in form.field_names:
        print(_describe(form, name))
    return True


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.immediate:
        config = config.model_copy(
            update={"fields": [f.model_copy(update={"mode": ValidationMode.IMMEDIATE}) for f in config.fields]}
        )

    return 0 if run_interactive(Form(config)) else 1


if __name__ == "__main__":
    sys.exit(main())
