from __future__ import annotations

import argparse
from typing import Sequence

from team_picker.cli import groups, matches, rosters, speaker, teams
from team_picker.errors import PartitionError


def main(args: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Team picker CLI (groups, matches, teams, speaker)."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    groups_parser = subparsers.add_parser(
        "groups", help="Shuffle a roster into fixed-size groups"
    )
    groups.configure_parser(groups_parser)

    matches_parser = subparsers.add_parser(
        "matches", help="Pair a roster into 1v1 or 2v2 matches"
    )
    matches.configure_parser(matches_parser)

    teams_parser = subparsers.add_parser(
        "teams",
        help="Build two teams from labelled pools, with reserve benches",
    )
    teams.configure_parser(teams_parser)

    speaker_parser = subparsers.add_parser(
        "speaker", help="Pick today's speaker"
    )
    speaker.configure_parser(speaker_parser)

    rosters_parser = subparsers.add_parser(
        "rosters", help="List the built-in rosters"
    )
    rosters.configure_parser(rosters_parser)

    opts = parser.parse_args(args)

    handlers = {
        "groups": groups.main_from_parsed,
        "matches": matches.main_from_parsed,
        "teams": teams.main_from_parsed,
        "speaker": speaker.main_from_parsed,
        "rosters": rosters.main_from_parsed,
    }
    handler = handlers.get(opts.command)
    if handler is None:
        parser.error(f"Unknown command {opts.command}")
    try:
        handler(opts)
    except (PartitionError, FileNotFoundError) as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
