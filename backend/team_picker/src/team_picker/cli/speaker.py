from __future__ import annotations

import argparse
from typing import Sequence

from team_picker.cli.source import configure_source, dump_json, load_names
from team_picker.generator import generate_speaker


def configure_parser(parser: argparse.ArgumentParser) -> None:
    configure_source(parser)
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        help="Name to leave out of the draw (repeatable).",
    )


def main_from_parsed(args: argparse.Namespace) -> None:
    pick = generate_speaker(load_names(args, "speakers"), exclude=args.exclude, seed=args.seed)
    if args.json:
        dump_json(pick)
    else:
        print(f"Today's speaker: {pick.speaker}")


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Pick today's speaker at random.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
