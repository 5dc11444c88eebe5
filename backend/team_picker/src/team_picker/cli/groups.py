from __future__ import annotations

import argparse
from typing import Sequence

from team_picker.cli.source import configure_source, dump_json, load_names
from team_picker.generator import generate_groups
from team_picker.partition import GroupPartition


def configure_parser(parser: argparse.ArgumentParser) -> None:
    configure_source(parser)
    parser.add_argument("--size", "-k", type=int, default=2, help="People per group (at least 2).")


def render(result: GroupPartition) -> None:
    for index, group in enumerate(result.groups, start=1):
        print(f"Group {index}: {', '.join(group)}")
    if result.leftover:
        print(f"Lucky people (next round): {', '.join(result.leftover)}")


def main_from_parsed(args: argparse.Namespace) -> None:
    result = generate_groups(load_names(args, "speakers"), args.size, seed=args.seed)
    if args.json:
        dump_json(result)
    else:
        render(result)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Shuffle a roster into fixed-size groups.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
