from datetime import UTC, datetime
from typing import List, Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel


class Roster(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(index=True, nullable=False)
    name: str
    description: Optional[str] = None
    source_type: Optional[str] = Field(default=None, index=True)
    source_ref: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC), nullable=False)

    participants: List["Participant"] = Relationship(back_populates="roster")

    __table_args__ = (UniqueConstraint("slug"),)


class Participant(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    roster_id: Optional[int] = Field(default=None, foreign_key="roster.id")
    position: int = Field(default=0, description="Order within the source roster")
    name: str
    pool: Optional[str] = Field(default=None, description="Pool label for stratified team building")

    roster: Optional[Roster] = Relationship(back_populates="participants")
