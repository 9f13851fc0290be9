"""Command line entry point for locked move/delete."""

import argparse
from pathlib import Path

from .config import Settings
from .log_setup import configure_logging
from .operations import FileOperations
from .retry import RetryPolicy


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="locked-io",
        description="Move or delete a file while holding an exclusive lock on it",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL (e.g. DEBUG)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_move = sub.add_parser("move", help="Move a file under lock")
    p_move.add_argument("source", type=Path, help="File to move")
    p_move.add_argument("destination", type=Path, help="Target path")

    p_delete = sub.add_parser("delete", help="Delete a file under lock")
    p_delete.add_argument("source", type=Path, help="File to delete")

    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """CLI entry point. Returns 0 on success, 1 on any failure."""
    args = build_parser().parse_args(argv)
    if settings is None:
        settings = Settings()

    configure_logging(args.log_level or settings.log_level)
    ops = FileOperations(RetryPolicy.from_settings(settings))

    match args.command:
        case "move":
            ok = ops.move(args.source, args.destination)
        case "delete":
            ok = ops.delete(args.source)
        case _:
            ok = False

    return 0 if ok else 1


def cli() -> None:
    """Console script wrapper."""
    raise SystemExit(main())


if __name__ == "__main__":
    cli()
