"""
Random team picker.

Shuffles a roster into fixed-size groups, 1v1 / 2v2 matches, two stratified
teams with reserves, or a single speaker. The partitioners are pure
functions; `team_picker.board` holds per-activity results for callers that
need them.
"""

from .errors import PartitionError  # noqa: F401
from .partition import pair_into_matches, partition_into_groups  # noqa: F401
from .shuffle import shuffle_roster  # noqa: F401
