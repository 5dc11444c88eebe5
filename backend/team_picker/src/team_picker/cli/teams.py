from __future__ import annotations

import argparse
from typing import Sequence

from team_picker.cli.source import configure_source, dump_json, load_entries
from team_picker.composition import FixedTeams, SplitPolicy
from team_picker.generator import generate_fixed_teams

POLICIES = [policy.value for policy in SplitPolicy]


def configure_parser(parser: argparse.ArgumentParser) -> None:
    configure_source(parser)
    parser.add_argument(
        "--pool",
        action="append",
        dest="pools",
        default=None,
        help="Pool label to split between the teams (repeatable; default: every labelled pool).",
    )
    parser.add_argument("--pool-split", choices=POLICIES, default="ceil", help="How to cut odd-sized pools.")
    parser.add_argument("--reserve-split", choices=POLICIES, default="ceil", help="How to cut an odd reserve list.")


def render(result: FixedTeams) -> None:
    print(f"Team 1: {', '.join(result.team_a)}")
    print(f"Team 2: {', '.join(result.team_b)}")
    if result.reserves:
        print(f"Team 1 reserves: {', '.join(result.reserves_a) or '-'}")
        print(f"Team 2 reserves: {', '.join(result.reserves_b) or '-'}")


def main_from_parsed(args: argparse.Namespace) -> None:
    result = generate_fixed_teams(
        load_entries(args, "cricket"),
        pools=args.pools,
        pool_split=args.pool_split,
        reserve_split=args.reserve_split,
        seed=args.seed,
    )
    if args.json:
        dump_json(result)
    else:
        render(result)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Build two balanced teams from labelled pools.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
