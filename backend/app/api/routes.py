import re
from typing import Iterable, List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy import func
from sqlmodel import Session, select

from app import models
from app.db import get_session
from app.core.config import get_settings
from app.schemas import (
    ActivitiesResponse,
    ActivityGenerateRequest,
    ActivityGenerateResponse,
    ActivityModeRequest,
    ActivityState,
    GroupsRequest,
    GroupsResponse,
    InlineGroupsRequest,
    InlineMatchesRequest,
    Match,
    MatchesRequest,
    MatchesResponse,
    Participant,
    Roster,
    RosterCreateRequest,
    RosterResponse,
    RostersResponse,
    SpeakerRequest,
    SpeakerResponse,
    TeamsRequest,
    TeamsResponse,
)
from team_picker import board as board_module
from team_picker.composition import FixedTeams
from team_picker.errors import PartitionError
from team_picker.generator import (
    generate_fixed_teams,
    generate_groups,
    generate_matches,
    generate_roster,
    generate_speaker,
)
from team_picker.partition import (
    GroupPartition,
    MatchPairing,
    block_size_for_mode,
    pair_into_matches,
    partition_into_groups,
)
from team_picker.shuffle import build_rng, shuffle_roster
from team_picker.speaker import SpeakerPick

router = APIRouter()
settings = get_settings()


def _slugify(value: str) -> str:
    """Create a simple, URL-safe slug from a string."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")
    return slug or "roster"


def _unique_slug(session: Session, base: str) -> str:
    """Generate a unique slug by appending a counter when needed."""
    slug = _slugify(base)
    candidate = slug
    counter = 1
    while session.exec(select(models.Roster).where(models.Roster.slug == candidate)).first():
        counter += 1
        candidate = f"{slug}-{counter}"
    return candidate


def _bad_request(exc: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _serialize_roster(model: models.Roster) -> Roster:
    return Roster(
        id=model.id,
        slug=model.slug,
        name=model.name,
        description=model.description,
        source_type=model.source_type,
        source_ref=model.source_ref,
        created_at=model.created_at,
    )


def _serialize_participants(records: Iterable[models.Participant]) -> List[Participant]:
    return [Participant(name=p.name, pool=p.pool) for p in records]


def _pools(records: Iterable[models.Participant]) -> List[str]:
    return sorted({p.pool for p in records if p.pool})


def _load_roster(session: Session, slug: str) -> Tuple[models.Roster, List[models.Participant]]:
    roster = session.exec(select(models.Roster).where(models.Roster.slug == slug)).first()
    if not roster:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Roster not found")
    participants = session.exec(
        select(models.Participant)
        .where(models.Participant.roster_id == roster.id)
        .order_by(models.Participant.position)
    ).all()
    return roster, list(participants)


def _groups_response(result: GroupPartition) -> GroupsResponse:
    return GroupsResponse(
        groups=[list(group) for group in result.groups],
        leftover=list(result.leftover),
        used=sorted(result.used),
    )


def _matches_response(mode: str, result: MatchPairing) -> MatchesResponse:
    return MatchesResponse(
        mode=mode,
        matches=[Match(team1=list(m.team1), team2=list(m.team2)) for m in result.matches],
        leftover=list(result.leftover),
        used=sorted(result.used),
    )


def _teams_response(result: FixedTeams) -> TeamsResponse:
    return TeamsResponse(
        team1=list(result.team_a),
        team2=list(result.team_b),
        reserves_team1=list(result.reserves_a),
        reserves_team2=list(result.reserves_b),
        contributions={label: list(counts) for label, counts in result.contributions.items()},
    )


def _speaker_response(result: SpeakerPick) -> SpeakerResponse:
    return SpeakerResponse(speaker=result.speaker, eligible=result.eligible)


@router.post("/rosters", response_model=RosterResponse, tags=["rosters"])
def create_roster(request: RosterCreateRequest, session: Session = Depends(get_session)) -> RosterResponse:
    """Parse a roster payload and store its participants."""
    if not request.payload.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Payload is required")

    roster_name = request.name or "New Roster"
    try:
        generated = generate_roster(
            mode=request.mode,
            payload=request.payload,
            name=roster_name,
            description=request.description,
        )
    except PartitionError as exc:
        raise _bad_request(exc) from exc

    roster_model = models.Roster(
        slug=_unique_slug(session, roster_name),
        name=generated.name,
        description=generated.description,
        source_type=generated.source_type,
        source_ref=generated.source_ref,
    )
    session.add(roster_model)
    session.commit()
    session.refresh(roster_model)

    participant_models = [
        models.Participant(roster_id=roster_model.id, position=index, name=p.name, pool=p.pool)
        for index, p in enumerate(generated.participants)
    ]
    session.add_all(participant_models)
    session.commit()
    session.refresh(roster_model)

    return RosterResponse(
        roster=_serialize_roster(roster_model),
        participants=_serialize_participants(participant_models),
        pools=generated.pools,
    )


@router.get("/rosters/{slug}", response_model=RosterResponse, tags=["rosters"])
def get_roster(slug: str, session: Session = Depends(get_session)) -> RosterResponse:
    roster, participants = _load_roster(session, slug)
    return RosterResponse(
        roster=_serialize_roster(roster),
        participants=_serialize_participants(participants),
        pools=_pools(participants),
    )


@router.get("/rosters", response_model=RostersResponse, tags=["rosters"])
def list_rosters(
    offset: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    session: Session = Depends(get_session),
) -> RostersResponse:
    total = session.exec(select(func.count()).select_from(models.Roster)).one()
    rosters = session.exec(
        select(models.Roster)
        .order_by(models.Roster.created_at.desc(), models.Roster.id.desc())
        .offset(offset)
        .limit(limit)
    ).all()
    return RostersResponse(
        items=[_serialize_roster(r) for r in rosters],
        count=total,
        offset=offset,
        limit=limit,
    )


@router.post("/rosters/{slug}/groups", response_model=GroupsResponse, tags=["generate"])
def roster_groups(slug: str, request: GroupsRequest, session: Session = Depends(get_session)) -> GroupsResponse:
    """Shuffle the roster into groups of `group_size`; the remainder sits out."""
    _, participants = _load_roster(session, slug)
    try:
        result = generate_groups([p.name for p in participants], request.group_size, seed=request.seed)
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return _groups_response(result)


@router.post("/rosters/{slug}/matches", response_model=MatchesResponse, tags=["generate"])
def roster_matches(slug: str, request: MatchesRequest, session: Session = Depends(get_session)) -> MatchesResponse:
    _, participants = _load_roster(session, slug)
    try:
        result = generate_matches([p.name for p in participants], request.mode, seed=request.seed)
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return _matches_response(request.mode, result)


@router.post("/rosters/{slug}/teams", response_model=TeamsResponse, tags=["generate"])
def roster_teams(slug: str, request: TeamsRequest, session: Session = Depends(get_session)) -> TeamsResponse:
    """Split each pool between two teams; unpooled players become reserves."""
    _, participants = _load_roster(session, slug)
    try:
        result = generate_fixed_teams(
            [(p.name, p.pool) for p in participants],
            pools=request.pools,
            pool_split=request.pool_split or settings.pool_split,
            reserve_split=request.reserve_split or settings.reserve_split,
            seed=request.seed,
        )
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return _teams_response(result)


@router.post("/rosters/{slug}/speaker", response_model=SpeakerResponse, tags=["generate"])
def roster_speaker(slug: str, request: SpeakerRequest, session: Session = Depends(get_session)) -> SpeakerResponse:
    _, participants = _load_roster(session, slug)
    try:
        result = generate_speaker([p.name for p in participants], exclude=request.exclude, seed=request.seed)
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return _speaker_response(result)


@router.post("/partition/groups", response_model=GroupsResponse, tags=["partition"])
def partition_groups(request: InlineGroupsRequest) -> GroupsResponse:
    """Partition an inline name list; order is kept unless `shuffle` is set."""
    names = shuffle_roster(request.names, build_rng(request.seed)) if request.shuffle else request.names
    try:
        result = partition_into_groups(names, request.group_size)
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return _groups_response(result)


@router.post("/partition/matches", response_model=MatchesResponse, tags=["partition"])
def partition_matches(request: InlineMatchesRequest) -> MatchesResponse:
    names = shuffle_roster(request.names, build_rng(request.seed)) if request.shuffle else request.names
    try:
        result = pair_into_matches(names, block_size_for_mode(request.mode))
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return _matches_response(request.mode, result)


def get_board(request: Request) -> board_module.ActivityBoard:
    return request.app.state.board


def _serialize_activity(state: board_module.ActivityState) -> ActivityState:
    activity = state.activity
    payload = ActivityState(
        name=activity.name,
        kind=activity.kind,
        roster=activity.roster,
        mode=state.mode,
        generation=state.generation,
        updated_at=state.updated_at,
    )
    result = state.result
    if isinstance(result, GroupPartition):
        payload.groups = _groups_response(result)
    elif isinstance(result, MatchPairing):
        payload.matches = _matches_response(state.mode or "", result)
    elif isinstance(result, FixedTeams):
        payload.teams = _teams_response(result)
    elif isinstance(result, SpeakerPick):
        payload.speaker = _speaker_response(result)
    return payload


def _activity_state(board: board_module.ActivityBoard, name: str) -> board_module.ActivityState:
    if name not in board:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    return board.state(name)


@router.get("/activities", response_model=ActivitiesResponse, tags=["activities"])
def list_activities(board: board_module.ActivityBoard = Depends(get_board)) -> ActivitiesResponse:
    return ActivitiesResponse(items=[_serialize_activity(s) for s in board.states()])


@router.get("/activities/{name}", response_model=ActivityState, tags=["activities"])
def get_activity(name: str, board: board_module.ActivityBoard = Depends(get_board)) -> ActivityState:
    return _serialize_activity(_activity_state(board, name))


@router.put("/activities/{name}/mode", response_model=ActivityState, tags=["activities"])
def set_activity_mode(
    name: str,
    request: ActivityModeRequest,
    board: board_module.ActivityBoard = Depends(get_board),
) -> ActivityState:
    """Switch 1v1/2v2; changing the mode clears the activity's previous matches."""
    _activity_state(board, name)
    try:
        state = board.set_mode(name, request.mode)
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return _serialize_activity(state)


@router.post("/activities/{name}/generate", response_model=ActivityGenerateResponse, tags=["activities"])
def generate_activity(
    name: str,
    request: ActivityGenerateRequest,
    session: Session = Depends(get_session),
    board: board_module.ActivityBoard = Depends(get_board),
) -> ActivityGenerateResponse:
    """
    Regenerate an activity from its roster and store the result on the board.

    `committed` is false when a newer request (or a mode switch) superseded
    this one while it was running; the board then keeps the newer result.
    """
    activity = _activity_state(board, name).activity
    _, participants = _load_roster(session, activity.roster)
    names = [p.name for p in participants]
    group_size = request.group_size if request.group_size is not None else settings.default_group_size

    def produce(snapshot: board_module.ActivityState):
        if activity.kind == "groups":
            return generate_groups(names, group_size, seed=request.seed)
        if activity.kind == "matches":
            return generate_matches(names, snapshot.mode or "", seed=request.seed)
        if activity.kind == "teams":
            return generate_fixed_teams(
                [(p.name, p.pool) for p in participants],
                pools=activity.pools or None,
                pool_split=settings.pool_split,
                reserve_split=settings.reserve_split,
                seed=request.seed,
            )
        return generate_speaker(names, exclude=request.exclude, seed=request.seed)

    try:
        state, committed = board.run(name, produce, delay=settings.generation_delay_seconds)
    except PartitionError as exc:
        raise _bad_request(exc) from exc
    return ActivityGenerateResponse(activity=_serialize_activity(state), committed=committed)
