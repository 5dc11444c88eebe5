"""
Per-activity result board.

Holds the latest generated result for each activity (general groups, chess,
carrom, ...). Each generation takes a ticket from `begin`; only the newest
ticket may commit, so a slow request that was overtaken by a newer one can
never overwrite the newer result. Changing an activity's match mode clears
its result and supersedes any generation still in flight.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from team_picker.errors import PartitionError
from team_picker.partition import block_size_for_mode

ACTIVITY_KINDS = ("groups", "matches", "teams", "speaker")


@dataclass(frozen=True)
class Activity:
    name: str
    kind: str
    roster: str
    mode: Optional[str] = None
    pools: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in ACTIVITY_KINDS:
            raise ValueError(f"Unknown activity kind '{self.kind}'")
        if self.kind == "matches":
            block_size_for_mode(self.mode or "")


@dataclass(frozen=True)
class ActivityState:
    activity: Activity
    mode: Optional[str] = None
    result: Any = None
    generation: int = 0
    updated_at: Optional[datetime] = None


@dataclass
class _Slot:
    state: ActivityState
    latest_ticket: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)


class ActivityBoard:
    def __init__(self, activities: Iterable[Activity]):
        self._slots: Dict[str, _Slot] = {}
        for activity in activities:
            self._slots[activity.name] = _Slot(state=ActivityState(activity=activity, mode=activity.mode))

    def _slot(self, name: str) -> _Slot:
        try:
            return self._slots[name]
        except KeyError:
            raise KeyError(f"Unknown activity '{name}'") from None

    def names(self) -> List[str]:
        return list(self._slots)

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def state(self, name: str) -> ActivityState:
        slot = self._slot(name)
        with slot.lock:
            return slot.state

    def states(self) -> List[ActivityState]:
        return [self.state(name) for name in self._slots]

    def set_mode(self, name: str, mode: str) -> ActivityState:
        """Switch a match activity's mode; a real change clears its result."""
        slot = self._slot(name)
        if slot.state.activity.kind != "matches":
            raise PartitionError(f"Activity '{name}' has no game mode")
        block_size_for_mode(mode)
        with slot.lock:
            if slot.state.mode != mode:
                slot.latest_ticket += 1
                slot.state = replace(slot.state, mode=mode, result=None, updated_at=datetime.now(UTC))
            return slot.state

    def reset(self, name: str) -> ActivityState:
        slot = self._slot(name)
        with slot.lock:
            slot.latest_ticket += 1
            slot.state = replace(slot.state, result=None, updated_at=datetime.now(UTC))
            return slot.state

    def begin(self, name: str) -> int:
        """Start a generation; returns the ticket that must be passed to `commit`."""
        slot = self._slot(name)
        with slot.lock:
            slot.latest_ticket += 1
            return slot.latest_ticket

    def commit(self, name: str, ticket: int, result: Any) -> bool:
        """Store `result` if `ticket` is still the newest one; stale tickets are dropped."""
        slot = self._slot(name)
        with slot.lock:
            if ticket != slot.latest_ticket:
                return False
            slot.state = replace(
                slot.state,
                result=result,
                generation=slot.state.generation + 1,
                updated_at=datetime.now(UTC),
            )
            return True

    def abandon(self, name: str, ticket: int) -> None:
        """Give back a ticket whose generation failed, unless a newer one was issued since."""
        slot = self._slot(name)
        with slot.lock:
            if ticket == slot.latest_ticket:
                slot.latest_ticket -= 1

    def run(
        self,
        name: str,
        produce: Callable[[ActivityState], Any],
        delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Tuple[ActivityState, bool]:
        """
        Generate and commit in one step.

        `produce` receives the state snapshot taken when the ticket was
        issued. If it raises, the ticket is given back so older in-flight
        generations can still commit, and the stored result is left as it
        was. The optional delay is purely cosmetic pacing.
        """
        ticket = self.begin(name)
        snapshot = self.state(name)
        try:
            result = produce(snapshot)
        except Exception:
            self.abandon(name, ticket)
            raise
        if delay > 0:
            sleep(delay)
        committed = self.commit(name, ticket, result)
        return self.state(name), committed
