from __future__ import annotations

import argparse
from typing import Sequence

from team_picker.rosters import DEFAULT_ROSTERS


def configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--sort",
        choices=["slug", "size"],
        default="slug",
        help="Sort output by roster slug (default) or player count.",
    )


def _sorted_rosters(sort: str) -> list[tuple[str, dict]]:
    items = list(DEFAULT_ROSTERS.items())
    if sort == "size":
        return sorted(items, key=lambda item: (-len(item[1]["players"]), item[0]))
    return sorted(items, key=lambda item: item[0])


def main_from_parsed(args: argparse.Namespace) -> None:
    for slug, roster in _sorted_rosters(args.sort):
        print(f"{slug} - {roster['name']} ({len(roster['players'])} players)")


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="List the built-in rosters.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
