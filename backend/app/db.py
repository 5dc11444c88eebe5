from sqlmodel import Session, SQLModel, create_engine, select

from app.core.config import get_settings
from app import models  # noqa: F401 - ensures models are registered with metadata
from team_picker.rosters import DEFAULT_ROSTERS

settings = get_settings()
engine = create_engine(settings.database_url, echo=settings.debug)


def seed_default_rosters(session: Session) -> int:
    """Insert any built-in roster whose slug is not stored yet; returns how many were added."""
    added = 0
    for slug, data in DEFAULT_ROSTERS.items():
        if session.exec(select(models.Roster).where(models.Roster.slug == slug)).first():
            continue
        roster = models.Roster(
            slug=slug,
            name=data["name"],
            description=data["description"],
            source_type="default",
        )
        session.add(roster)
        session.commit()
        session.refresh(roster)
        session.add_all(
            models.Participant(roster_id=roster.id, position=index, name=name, pool=pool)
            for index, (name, pool) in enumerate(data["players"])
        )
        session.commit()
        added += 1
    return added


def init_db() -> None:
    """Create tables and seed the built-in rosters; called during startup."""
    SQLModel.metadata.create_all(engine)
    if settings.seed_default_rosters:
        with Session(engine) as session:
            seed_default_rosters(session)


def get_session():
    """Yield a session for dependency injection."""
    with Session(engine) as session:
        yield session
