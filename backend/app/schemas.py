from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

SplitName = Literal["ceil", "floor", "strict"]


class Participant(BaseModel):
    name: str
    pool: Optional[str] = None


class Roster(BaseModel):
    id: Optional[int] = None
    slug: str
    name: str
    description: Optional[str] = None
    source_type: Optional[str] = None
    source_ref: Optional[str] = None
    created_at: Optional[datetime] = None


class RosterCreateRequest(BaseModel):
    mode: Literal["manual", "json", "csv"]
    payload: str
    name: Optional[str] = Field(default=None, description="Optional roster name override")
    description: Optional[str] = None


class RosterResponse(BaseModel):
    roster: Roster
    participants: List[Participant]
    pools: List[str] = Field(default_factory=list)


class RostersResponse(BaseModel):
    items: List[Roster]
    count: int
    offset: int
    limit: int


class GroupsRequest(BaseModel):
    group_size: int = Field(..., description="People per group (at least 2)")
    seed: Optional[int] = Field(default=None, description="Seed to replay a draw")


class MatchesRequest(BaseModel):
    mode: Literal["1v1", "2v2"] = "1v1"
    seed: Optional[int] = None


class TeamsRequest(BaseModel):
    pools: Optional[List[str]] = Field(default=None, description="Pool labels to split; default every labelled pool")
    pool_split: Optional[SplitName] = None
    reserve_split: Optional[SplitName] = None
    seed: Optional[int] = None


class SpeakerRequest(BaseModel):
    exclude: List[str] = Field(default_factory=list)
    seed: Optional[int] = None


class InlineGroupsRequest(BaseModel):
    names: List[str]
    group_size: int
    shuffle: bool = False
    seed: Optional[int] = None


class InlineMatchesRequest(BaseModel):
    names: List[str]
    mode: Literal["1v1", "2v2"] = "1v1"
    shuffle: bool = False
    seed: Optional[int] = None


class GroupsResponse(BaseModel):
    groups: List[List[str]]
    leftover: List[str]
    used: List[str]


class Match(BaseModel):
    team1: List[str]
    team2: List[str]


class MatchesResponse(BaseModel):
    mode: str
    matches: List[Match]
    leftover: List[str]
    used: List[str]


class TeamsResponse(BaseModel):
    team1: List[str]
    team2: List[str]
    reserves_team1: List[str]
    reserves_team2: List[str]
    contributions: Dict[str, List[int]]


class SpeakerResponse(BaseModel):
    speaker: str
    eligible: int


class ActivityModeRequest(BaseModel):
    mode: Literal["1v1", "2v2"]


class ActivityGenerateRequest(BaseModel):
    group_size: Optional[int] = None
    exclude: List[str] = Field(default_factory=list)
    seed: Optional[int] = None


class ActivityState(BaseModel):
    name: str
    kind: str
    roster: str
    mode: Optional[str] = None
    generation: int
    updated_at: Optional[datetime] = None
    groups: Optional[GroupsResponse] = None
    matches: Optional[MatchesResponse] = None
    teams: Optional[TeamsResponse] = None
    speaker: Optional[SpeakerResponse] = None


class ActivityGenerateResponse(BaseModel):
    activity: ActivityState
    committed: bool


class ActivitiesResponse(BaseModel):
    items: List[ActivityState]
