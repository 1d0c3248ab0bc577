from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

from fishing_sim.domain.models.angler import RodProfile
from fishing_sim.domain.models.catch import CatchResult
from fishing_sim.domain.models.species import (
    BaitType,
    FishSpecies,
    LureType,
    SpotType,
    TimeOfDay,
    WaterType,
    Weather,
)


class EncounterPhase(str, Enum):
    IDLE = "idle"
    CASTING = "casting"
    WAITING = "waiting"
    BITING = "biting"
    HOOKING = "hooking"
    FIGHTING = "fighting"
    LANDED = "landed"
    ESCAPED = "escaped"
    BROKE_OFF = "broke_off"
    TIMED_OUT = "timed_out"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_PHASES


TERMINAL_PHASES = frozenset(
    {
        EncounterPhase.LANDED,
        EncounterPhase.ESCAPED,
        EncounterPhase.BROKE_OFF,
        EncounterPhase.TIMED_OUT,
    }
)


class FightAction(str, Enum):
    REEL = "reel"
    GIVE_SLACK = "give_slack"


class EscapeReason(str, Enum):
    NO_BITE = "no_bite"
    MISSED_BITE = "missed_bite"
    HOOK_SLIPPED = "hook_slipped"
    LINE_BROKE = "line_broke"
    FIGHT_TIMED_OUT = "fight_timed_out"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class EncounterContext:
    location_id: str
    water_types: frozenset[WaterType]
    time_of_day: TimeOfDay
    weather: Weather
    bait: BaitType | None = None
    lure: LureType | None = None
    rod: RodProfile = field(default_factory=RodProfile)
    angler_skill: float = 0.0
    spot_type: SpotType | None = None


@dataclass
class FishingEncounter:
    id: str
    angler_id: str
    context: EncounterContext
    rng: random.Random = field(repr=False)
    phase: EncounterPhase = EncounterPhase.IDLE
    species: FishSpecies | None = None
    phase_started_ms: int = 0
    phase_deadline_ms: int | None = None
    fish_stamina: float = 100.0
    line_tension: float = 0.0
    fight_started_ms: int | None = None
    fight_ticks: int = 0
    pending_action: FightAction | None = None
    catch: CatchResult | None = None
    escape_reason: EscapeReason | None = None
    history: list[tuple[EncounterPhase, int]] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.phase.is_terminal

    @property
    def has_bite(self) -> bool:
        return self.phase in {EncounterPhase.BITING, EncounterPhase.HOOKING, EncounterPhase.FIGHTING}
