"""CLI entry point for actionmodal."""

import argparse
from pathlib import Path

from .config import Settings
from .logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="actionmodal",
        description="Resolve and preview modals declared for action triggers",
    )
    parser.add_argument(
        "--definitions",
        type=Path,
        default=None,
        help="Path to the trigger definitions file (default: actionmodal.yml)",
    )
    parser.add_argument(
        "--locale",
        default=None,
        help="Locale for default button labels (default: en)",
    )
    parser.add_argument(
        "--translations",
        type=Path,
        default=None,
        help="YAML file overriding built-in translations",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--generate",
        action="store_true",
        help="Write an example definitions file and exit",
    )
    commands.add_argument(
        "--list",
        action="store_true",
        help="List defined triggers and exit",
    )
    commands.add_argument(
        "--inspect",
        metavar="TRIGGER",
        default=None,
        help="Print the resolved modal of a trigger and exit",
    )
    commands.add_argument(
        "--preview",
        metavar="TRIGGER",
        default=None,
        help="Open a trigger's modal in the terminal",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.definitions:
        settings_kwargs["definitions_file"] = args.definitions
    if args.locale:
        settings_kwargs["locale"] = args.locale
    if args.translations:
        settings_kwargs["translations_file"] = args.translations
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    if args.generate:
        from .cli.generate import run_generate

        raise SystemExit(run_generate(settings.definitions_file))

    from .services import DefinitionService

    service = DefinitionService(
        settings.definitions_file,
        locale=settings.locale,
        translations_file=settings.translations_file,
    )

    if args.inspect:
        from .cli.inspect import run_inspect

        raise SystemExit(run_inspect(service, args.inspect))

    if args.preview:
        from .cli.inspect import load_translations
        from .cli.output import error, success

        try:
            trigger = service.build_trigger(args.preview)
        except KeyError:
            error(service.load_error or f"Unknown trigger: {args.preview}")
            raise SystemExit(1) from None

        if not load_translations(service):
            raise SystemExit(1)

        # Import here to keep Textual out of the non-interactive commands
        from .app import run

        result = run(trigger)
        if result is not None:
            success(f"Pressed {result}")
        raise SystemExit(0)

    from .cli.inspect import run_list

    raise SystemExit(run_list(service))


if __name__ == "__main__":
    main()
