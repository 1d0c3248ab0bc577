from dataclasses import dataclass

from fishing_sim.domain.models.catch import CatchResult
from fishing_sim.domain.models.encounter import EncounterPhase, EscapeReason


@dataclass
class CastStarted:
    encounter_id: str
    angler_id: str
    location_id: str
    at_ms: int


@dataclass
class FishBit:
    encounter_id: str
    angler_id: str
    window_ms: int
    at_ms: int


@dataclass
class FishHooked:
    encounter_id: str
    angler_id: str
    species_id: str
    at_ms: int


@dataclass
class EncounterResolved:
    encounter_id: str
    angler_id: str
    location_id: str
    phase: EncounterPhase
    catch: CatchResult | None = None
    escape_reason: EscapeReason | None = None


@dataclass
class LegendaryClaimConflict:
    encounter_id: str
    angler_id: str
    species_id: str
    location_id: str
