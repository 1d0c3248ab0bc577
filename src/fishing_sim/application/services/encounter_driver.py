from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from fishing_sim.application.dtos import EncounterOutcomeView
from fishing_sim.application.services.encounter_service import EncounterService
from fishing_sim.domain.models.encounter import EncounterPhase, FightAction
from fishing_sim.domain.models.species import SpotType


logger = logging.getLogger(__name__)

ActionPolicy = Callable[[float, float], Optional[FightAction]]


class ManualClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms: int = 0) -> None:
        self.now_ms = int(start_ms)

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, delta_ms: int) -> int:
        self.now_ms += max(0, int(delta_ms))
        return self.now_ms

    def set(self, at_ms: int) -> int:
        self.now_ms = max(self.now_ms, int(at_ms))
        return self.now_ms


def tension_keeper_policy(safe_tension: float = 70.0) -> ActionPolicy:
    """Reel while the line is comfortable, give slack once it gets tight."""

    def policy(fish_stamina: float, line_tension: float) -> Optional[FightAction]:
        if line_tension < safe_tension:
            return FightAction.REEL
        return FightAction.GIVE_SLACK

    return policy


def always_reel(fish_stamina: float, line_tension: float) -> Optional[FightAction]:
    return FightAction.REEL


@dataclass
class SimulationReport:
    encounter_id: str
    outcome: EncounterOutcomeView
    hooked_at_ms: Optional[int] = None
    ended_at_ms: int = 0
    actions: list[FightAction] = field(default_factory=list)


def simulate_encounter(
    service: EncounterService,
    clock: ManualClock,
    angler_id: str,
    location_id: str,
    *,
    spot_type: SpotType | str | None = None,
    seed: int | None = None,
    hook_delay_ms: int = 0,
    policy: ActionPolicy | None = None,
) -> SimulationReport:
    """Play one cast to the end on a virtual clock.

    The angler hooks ``hook_delay_ms`` after the bite and then picks one action per tick
    from ``policy``. Same service seed, same arguments, same report.
    """
    policy = policy or tension_keeper_policy()
    encounter_id = service.start_cast(angler_id, location_id, spot_type=spot_type, seed=seed)
    report = SimulationReport(
        encounter_id=encounter_id,
        outcome=EncounterOutcomeView(encounter_id=encounter_id, phase=EncounterPhase.WAITING, pending=True),
    )

    while True:
        outcome = service.poll_outcome(encounter_id)
        if not outcome.pending:
            report.outcome = outcome
            report.ended_at_ms = clock()
            return report

        if outcome.phase == EncounterPhase.BITING:
            clock.advance(hook_delay_ms)
            outcome = service.poll_outcome(encounter_id)
            if outcome.phase == EncounterPhase.BITING:
                if service.hook_attempt(encounter_id) == EncounterPhase.FIGHTING:
                    report.hooked_at_ms = clock()
            continue

        if outcome.phase == EncounterPhase.FIGHTING:
            status = service.status(encounter_id)
            action = policy(status.fish_stamina, status.line_tension)
            if action is not None:
                service.fight_action(encounter_id, action)
                report.actions.append(action)

        deadline = service.next_deadline_ms(encounter_id)
        if deadline is None:
            continue
        clock.set(deadline)


class RealtimeEncounterDriver:
    """Background task that keeps every live encounter in step with the wall clock."""

    def __init__(self, service: EncounterService, *, interval_ms: int | None = None) -> None:
        self.service = service
        self.interval_ms = interval_ms or service.settings.tick_ms
        self._task: Optional[asyncio.Task] = None
        self._stopping = asyncio.Event()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        if self.running:
            return self._task
        self._stopping.clear()
        self._task = asyncio.create_task(self._run())
        return self._task

    async def stop(self) -> None:
        self._stopping.set()
        if self._task is not None:
            await self._task
            self._task = None

    async def _run(self) -> None:
        interval = self.interval_ms / 1000.0
        while not self._stopping.is_set():
            finished = self.service.advance_all()
            for encounter_id in finished:
                logger.debug("Driver observed resolution", extra={"encounter_id": encounter_id})
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=interval)
            except asyncio.TimeoutError:
                continue

    async def wait_for_outcome(self, encounter_id: str, *, poll_ms: int | None = None) -> EncounterOutcomeView:
        delay = (poll_ms or self.interval_ms) / 1000.0
        while True:
            outcome = self.service.poll_outcome(encounter_id)
            if not outcome.pending:
                return outcome
            await asyncio.sleep(delay)
