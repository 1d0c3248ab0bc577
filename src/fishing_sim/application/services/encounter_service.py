from __future__ import annotations

import logging
import random
import threading
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional

from fishing_sim.application.dtos import EncounterOutcomeView, EncounterStatusView
from fishing_sim.application.services.balance_tables import (
    FINISHED_ENCOUNTERS_MAX,
    EngineSettings,
    bite_window_ms,
)
from fishing_sim.application.services.candidate_selector import CandidateSelector, draw_candidate
from fishing_sim.application.services.context_resolver import ContextResolver
from fishing_sim.application.services.event_bus import EventBus
from fishing_sim.application.services.fight_resolver import FightOutcome, FightResolver
from fishing_sim.application.services.reward_resolver import CatchPersistor, RewardResolver
from fishing_sim.application.services.seed_policy import cast_seed
from fishing_sim.domain.errors import (
    EncounterAlreadyActiveError,
    EncounterNotFoundError,
    InvalidActionError,
    InvalidPhaseError,
)
from fishing_sim.domain.events import CastStarted, EncounterResolved, FishBit, FishHooked
from fishing_sim.domain.models.catch import FishingTrip, TripSummary
from fishing_sim.domain.models.encounter import EncounterPhase, FightAction, FishingEncounter
from fishing_sim.domain.models.species import SpotType
from fishing_sim.domain.repositories import (
    AnglerRepository,
    LegendaryLedgerRepository,
    LocationRepository,
    SpeciesCatalog,
    WorldStateProvider,
)
from fishing_sim.domain.services.phase_machine import PhaseEvent, escape_reason_for, transition
from fishing_sim.domain.services.skill_check import skill_check


logger = logging.getLogger(__name__)

_FIGHT_OUTCOME_EVENTS = {
    FightOutcome.LANDED: PhaseEvent.FISH_EXHAUSTED,
    FightOutcome.BROKE_OFF: PhaseEvent.LINE_SNAPPED,
    FightOutcome.TIMED_OUT: PhaseEvent.FIGHT_EXPIRED,
}


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class EncounterService:
    """Owns every live fishing encounter and drives it from cast to resolution.

    Time only moves when the service looks at its clock: each public call first
    catches the encounter up to ``clock()``, so phase changes land on their scheduled
    timestamps no matter how often the caller polls.
    """

    def __init__(
        self,
        catalog: SpeciesCatalog,
        location_repo: LocationRepository,
        world_state: WorldStateProvider,
        angler_repo: AnglerRepository,
        ledger: LegendaryLedgerRepository,
        catch_persistor: CatchPersistor,
        settings: EngineSettings | None = None,
        clock: Callable[[], int] | None = None,
        rng_factory: Callable[[int], random.Random] | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.settings = settings or EngineSettings()
        self.clock = clock or monotonic_ms
        self.rng_factory = rng_factory or (lambda seed: random.Random(seed))
        self.event_bus = event_bus or EventBus()
        self.context_resolver = ContextResolver(location_repo, world_state, angler_repo)
        self.selector = CandidateSelector(catalog, ledger, self.settings)
        self.fight_resolver = FightResolver(self.settings)
        self.reward_resolver = RewardResolver(catch_persistor, event_publisher=self.event_bus.publish)

        self._lock = threading.RLock()
        self._live: dict[str, FishingEncounter] = {}
        self._live_by_angler: dict[str, str] = {}
        self._finished: OrderedDict[str, EncounterOutcomeView] = OrderedDict()
        self._cast_counts: dict[str, int] = {}
        self._trips: dict[str, FishingTrip] = {}

    # ------------------------------------------------------------------ commands

    def start_cast(
        self,
        angler_id: str,
        location_id: str,
        *,
        spot_type: SpotType | str | None = None,
        seed: int | None = None,
    ) -> str:
        with self._lock:
            existing = self._live_by_angler.get(angler_id)
            if existing is not None:
                raise EncounterAlreadyActiveError(angler_id, existing)

            context = self.context_resolver.resolve(angler_id, location_id, spot_type=spot_type)
            candidates = self.selector.build(context)

            cast_number = self._cast_counts.get(angler_id, 0) + 1
            if seed is None:
                seed = cast_seed(
                    world_seed=self.settings.world_seed,
                    angler_id=angler_id,
                    location_id=location_id,
                    cast_number=cast_number,
                )
            rng = self.rng_factory(int(seed))
            now = int(self.clock())

            encounter = FishingEncounter(
                id=uuid.uuid4().hex,
                angler_id=angler_id,
                context=context,
                rng=rng,
            )
            self._apply(encounter, PhaseEvent.CAST, now)
            drawn = draw_candidate(candidates, rng)
            encounter.species = drawn.species
            self._apply(encounter, PhaseEvent.LINE_SETTLED, now)
            encounter.phase_deadline_ms = now + self._wait_duration_ms(encounter, rng)

            self._cast_counts[angler_id] = cast_number
            self._live[encounter.id] = encounter
            self._live_by_angler[angler_id] = encounter.id
            trip = self._trips.setdefault(angler_id, FishingTrip(angler_id=angler_id, location_id=location_id))
            trip.casts += 1

            logger.info(
                "Cast started",
                extra={"encounter_id": encounter.id, "angler_id": angler_id, "location_id": location_id},
            )
            self.event_bus.publish(
                CastStarted(encounter_id=encounter.id, angler_id=angler_id, location_id=location_id, at_ms=now)
            )
            return encounter.id

    def hook_attempt(self, encounter_id: str) -> EncounterPhase:
        with self._lock:
            encounter = self._require_live(encounter_id, action="hook")
            now = int(self.clock())
            self._catch_up(encounter, now)
            if encounter.phase != EncounterPhase.BITING:
                raise InvalidPhaseError(encounter_id, "hook", encounter.phase.value)

            self._apply(encounter, PhaseEvent.HOOK, now)
            species = encounter.species
            check = skill_check(
                species.hook_difficulty,
                encounter.context.angler_skill,
                encounter.context.rod.hook_bonus,
                encounter.rng,
            )
            if not check.success:
                logger.debug(
                    "Hook slipped",
                    extra={"encounter_id": encounter.id, "effective": check.effective, "difficulty": check.difficulty},
                )
                self._resolve(encounter, PhaseEvent.HOOK_SLIPPED, now)
                return encounter.phase

            self._apply(encounter, PhaseEvent.HOOK_SET, now)
            encounter.fight_started_ms = now
            encounter.phase_deadline_ms = None
            self.fight_resolver.begin(encounter)
            self.event_bus.publish(
                FishHooked(encounter_id=encounter.id, angler_id=encounter.angler_id, species_id=species.id, at_ms=now)
            )
            return encounter.phase

    def fight_action(self, encounter_id: str, action: FightAction | str) -> EncounterStatusView:
        """Queue reel/slack for the next tick boundary; a later call replaces it."""
        try:
            chosen = FightAction(action)
        except ValueError:
            raise InvalidActionError("fight action", str(action)) from None
        with self._lock:
            encounter = self._require_live(encounter_id, action=chosen.value)
            self._catch_up(encounter, int(self.clock()))
            if encounter.phase != EncounterPhase.FIGHTING:
                raise InvalidPhaseError(encounter_id, chosen.value, encounter.phase.value)
            encounter.pending_action = chosen
            return self._status(encounter)

    def cancel(self, encounter_id: str) -> EncounterOutcomeView:
        with self._lock:
            finished = self._finished.get(encounter_id)
            if finished is not None:
                return finished
            encounter = self._live.get(encounter_id)
            if encounter is None:
                raise EncounterNotFoundError(encounter_id)
            now = int(self.clock())
            self._catch_up(encounter, now)
            if not encounter.is_terminal:
                self._resolve(encounter, PhaseEvent.CANCEL, now)
            return self._finished[encounter_id]

    # ------------------------------------------------------------------ queries

    def poll_outcome(self, encounter_id: str) -> EncounterOutcomeView:
        with self._lock:
            finished = self._finished.get(encounter_id)
            if finished is not None:
                return finished
            encounter = self._live.get(encounter_id)
            if encounter is None:
                raise EncounterNotFoundError(encounter_id)
            self._catch_up(encounter, int(self.clock()))
            if encounter.is_terminal:
                return self._finished[encounter_id]
            return EncounterOutcomeView(encounter_id=encounter_id, phase=encounter.phase, pending=True)

    def status(self, encounter_id: str) -> EncounterStatusView:
        with self._lock:
            encounter = self._live.get(encounter_id)
            if encounter is None:
                finished = self._finished.get(encounter_id)
                if finished is None:
                    raise EncounterNotFoundError(encounter_id)
                raise InvalidPhaseError(encounter_id, "status", finished.phase.value)
            self._catch_up(encounter, int(self.clock()))
            return self._status(encounter)

    def active_encounter_for(self, angler_id: str) -> Optional[str]:
        with self._lock:
            return self._live_by_angler.get(angler_id)

    def advance_all(self) -> list[str]:
        """Catch every live encounter up to now; returns ids that just finished."""
        with self._lock:
            now = int(self.clock())
            finished: list[str] = []
            for encounter in list(self._live.values()):
                self._catch_up(encounter, now)
                if encounter.is_terminal:
                    finished.append(encounter.id)
            return finished

    def next_deadline_ms(self, encounter_id: str) -> Optional[int]:
        with self._lock:
            encounter = self._live.get(encounter_id)
            if encounter is None:
                return None
            if encounter.phase == EncounterPhase.FIGHTING and encounter.fight_started_ms is not None:
                return encounter.fight_started_ms + (encounter.fight_ticks + 1) * self.settings.tick_ms
            return encounter.phase_deadline_ms

    def trip(self, angler_id: str) -> Optional[FishingTrip]:
        with self._lock:
            return self._trips.get(angler_id)

    def end_trip(self, angler_id: str) -> TripSummary:
        with self._lock:
            live_id = self._live_by_angler.get(angler_id)
            if live_id is not None:
                self.cancel(live_id)
            trip = self._trips.pop(angler_id, None) or FishingTrip(angler_id=angler_id)
            return TripSummary(
                angler_id=angler_id,
                casts=trip.casts,
                total_catches=len(trip.catches),
                total_value=trip.total_value,
                total_experience=trip.total_experience,
                catches=tuple(trip.catches),
            )

    # ------------------------------------------------------------------ internals

    def _require_live(self, encounter_id: str, *, action: str) -> FishingEncounter:
        encounter = self._live.get(encounter_id)
        if encounter is not None:
            return encounter
        finished = self._finished.get(encounter_id)
        if finished is not None:
            raise InvalidPhaseError(encounter_id, action, finished.phase.value)
        raise EncounterNotFoundError(encounter_id)

    def _wait_duration_ms(self, encounter: FishingEncounter, rng: random.Random) -> int:
        if encounter.species is None:
            low, high = self.settings.no_bite_wait_ms
            return rng.randint(int(min(low, high)), int(max(low, high)))
        spread = self.settings.bite_speed_spread
        return int(round(encounter.species.bite_speed_ms * rng.uniform(1.0 - spread, 1.0 + spread)))

    def _apply(self, encounter: FishingEncounter, event: PhaseEvent, at_ms: int) -> None:
        encounter.phase = transition(encounter.phase, event)
        encounter.phase_started_ms = at_ms
        encounter.history.append((encounter.phase, at_ms))

    def _catch_up(self, encounter: FishingEncounter, now: int) -> None:
        while not encounter.is_terminal:
            deadline = encounter.phase_deadline_ms
            if encounter.phase == EncounterPhase.WAITING and deadline is not None and now >= deadline:
                if encounter.species is None:
                    self._resolve(encounter, PhaseEvent.WAIT_EXPIRED, deadline)
                    return
                self._apply(encounter, PhaseEvent.BITE, deadline)
                window = bite_window_ms(
                    encounter.species.hook_difficulty,
                    base_ms=self.settings.bite_window_ms,
                    floor_ms=self.settings.bite_window_floor_ms,
                )
                encounter.phase_deadline_ms = deadline + window
                self.event_bus.publish(
                    FishBit(encounter_id=encounter.id, angler_id=encounter.angler_id, window_ms=window, at_ms=deadline)
                )
                continue
            if encounter.phase == EncounterPhase.BITING and deadline is not None and now >= deadline:
                self._resolve(encounter, PhaseEvent.BITE_WINDOW_EXPIRED, deadline)
                return
            if encounter.phase == EncounterPhase.FIGHTING:
                self._run_fight_ticks(encounter, now)
            return

    def _run_fight_ticks(self, encounter: FishingEncounter, now: int) -> None:
        tick_ms = max(1, int(self.settings.tick_ms))
        due = (now - int(encounter.fight_started_ms or now)) // tick_ms
        while encounter.phase == EncounterPhase.FIGHTING and encounter.fight_ticks < due:
            result = self.fight_resolver.tick(encounter, encounter.rng)
            if result.outcome == FightOutcome.CONTINUE:
                continue
            at_ms = int(encounter.fight_started_ms) + result.tick * tick_ms
            self._resolve(encounter, _FIGHT_OUTCOME_EVENTS[result.outcome], at_ms)

    def _resolve(self, encounter: FishingEncounter, event: PhaseEvent, at_ms: int) -> None:
        self._apply(encounter, event, at_ms)
        encounter.escape_reason = escape_reason_for(event)
        encounter.pending_action = None
        encounter.phase_deadline_ms = None

        if encounter.phase == EncounterPhase.LANDED:
            try:
                encounter.catch = self.reward_resolver.resolve(encounter, encounter.rng)
            except Exception:
                logger.exception(
                    "Reward commit failed; catch resolved without reward",
                    extra={"encounter_id": encounter.id, "angler_id": encounter.angler_id},
                )

        view = EncounterOutcomeView(
            encounter_id=encounter.id,
            phase=encounter.phase,
            pending=False,
            catch=encounter.catch,
            escape_reason=encounter.escape_reason,
        )
        self._live.pop(encounter.id, None)
        if self._live_by_angler.get(encounter.angler_id) == encounter.id:
            del self._live_by_angler[encounter.angler_id]
        self._finished[encounter.id] = view
        while len(self._finished) > FINISHED_ENCOUNTERS_MAX:
            self._finished.popitem(last=False)

        if encounter.catch is not None:
            trip = self._trips.setdefault(encounter.angler_id, FishingTrip(angler_id=encounter.angler_id))
            trip.catches.append(encounter.catch)

        logger.info(
            "Encounter resolved",
            extra={
                "encounter_id": encounter.id,
                "angler_id": encounter.angler_id,
                "phase": encounter.phase.value,
                "species_id": encounter.species.id if encounter.species else None,
            },
        )
        self.event_bus.publish(
            EncounterResolved(
                encounter_id=encounter.id,
                angler_id=encounter.angler_id,
                location_id=encounter.context.location_id,
                phase=encounter.phase,
                catch=encounter.catch,
                escape_reason=encounter.escape_reason,
            )
        )

    def _status(self, encounter: FishingEncounter) -> EncounterStatusView:
        revealed = encounter.has_bite and encounter.species is not None
        return EncounterStatusView(
            encounter_id=encounter.id,
            angler_id=encounter.angler_id,
            phase=encounter.phase,
            fish_stamina=encounter.fish_stamina,
            line_tension=encounter.line_tension,
            fight_ticks=encounter.fight_ticks,
            species_id=encounter.species.id if revealed else None,
        )
