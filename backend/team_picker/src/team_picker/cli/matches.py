from __future__ import annotations

import argparse
from typing import Sequence

from team_picker.cli.source import configure_source, dump_json, load_names
from team_picker.generator import generate_matches
from team_picker.partition import MATCH_MODES, MatchPairing


def configure_parser(parser: argparse.ArgumentParser) -> None:
    configure_source(parser)
    parser.add_argument("--mode", choices=list(MATCH_MODES), default="1v1", help="Game mode (default 1v1).")


def render(result: MatchPairing) -> None:
    for index, match in enumerate(result.matches, start=1):
        print(f"Match {index}: {' & '.join(match.team1)} vs {' & '.join(match.team2)}")
    if result.leftover:
        print(f"Sitting out this round: {', '.join(result.leftover)}")
    else:
        print("Perfect matching achieved!")


def main_from_parsed(args: argparse.Namespace) -> None:
    result = generate_matches(load_names(args, "chess"), args.mode, seed=args.seed)
    if args.json:
        dump_json(result)
    else:
        render(result)


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Pair a roster into 1v1 or 2v2 matches.")
    configure_parser(parser)
    opts = parser.parse_args(args)
    main_from_parsed(opts)


if __name__ == "__main__":
    main()
