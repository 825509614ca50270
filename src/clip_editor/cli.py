"""Console entry point for the editor."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from clip_editor.runtime import telemetry

from .session import Session, SessionConfig


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = SessionConfig.from_env()
    parser = argparse.ArgumentParser(
        prog="clip-editor",
        description="Apply quoted editing commands to an in-memory text buffer.",
    )
    parser.add_argument(
        "--prompt",
        default=defaults.prompt,
        help="Prompt printed before each input line (default: 'Input: ')",
    )
    parser.add_argument(
        "--quiet-prompt",
        action="store_true",
        default=not defaults.show_prompt,
        help="Do not print the input prompt",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="Telemetry preset to apply instead of the environment defaults",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Run the Textual front-end instead of the line session",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)

    if args.tui:
        from clip_editor.adapters.textual.app import ClipEditorApp

        ClipEditorApp().run()
        return 0

    config = SessionConfig(prompt=args.prompt, show_prompt=not args.quiet_prompt)
    return Session(config=config).run(sys.stdin, sys.stdout)


if __name__ == "__main__":  # pragma: no cover - manual entry
    sys.exit(main())
