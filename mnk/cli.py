"""
MNK CLI - Command-line interface for the game.

Usage:
    mnk play <settings_file>       Start the game menu
    mnk validate <settings_file>   Check a settings file
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import GameConfig
from .settings import InvalidSettings, load_settings


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="MNK - Generalized Tic-Tac-Toe",
        prog="mnk",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Start the game menu")
    play_parser.add_argument("settings_file", help="Path to settings file")
    play_parser.add_argument(
        "--editor", action="store_true", default=None,
        help="Enable the settings editor and per-game settings in logs",
    )
    play_parser.add_argument(
        "--secret", action="store_true", default=None,
        help="Hide the Save Game Log option",
    )
    play_parser.add_argument("--log-dir", type=Path, help="Directory for saved game logs")
    play_parser.add_argument(
        "--no-color", dest="color", action="store_false", default=None,
        help="Disable ANSI colours",
    )
    play_parser.add_argument("--log-level", help="Diagnostic logging level")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a settings file")
    validate_parser.add_argument("settings_file", help="Path to settings file")

    args = parser.parse_args(argv)

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "validate":
        return cmd_validate(args)
    else:
        parser.print_help()
        return 1


def cmd_play(args):
    """Load settings and run the menu loop."""
    from .interface.prompt import ConsolePrompt
    from .interface.render import WELCOME_MESSAGE
    from .session import GameLoop

    config = GameConfig.from_env().with_overrides(
        editor_mode=args.editor,
        secret_mode=args.secret,
        log_dir=args.log_dir,
        color=args.color,
        log_level=args.log_level.upper() if args.log_level else None,
    )
    logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))

    try:
        settings = load_settings(args.settings_file)
    except InvalidSettings as e:
        print(f"Error: {e}")
        print("The settings file is invalid, exiting")
        return 1

    prompt = ConsolePrompt(color=config.color)
    prompt.show(WELCOME_MESSAGE)
    prompt.enter_to_continue()

    try:
        GameLoop(settings, config, prompt=prompt).run()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye")
    return 0


def cmd_validate(args):
    """Validate a settings file."""
    print(f"Validating: {args.settings_file}")
    try:
        settings = load_settings(args.settings_file)
    except InvalidSettings as e:
        print(f"Invalid: {e}")
        return 1

    print(f"Board: {settings.width}x{settings.height}")
    print(f"Win condition: {settings.matches} in a row")
    return 0


if __name__ == "__main__":
    sys.exit(main())
