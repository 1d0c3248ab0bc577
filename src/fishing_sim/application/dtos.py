from dataclasses import dataclass, field
from typing import List

from fishing_sim.domain.models.catch import CatchResult
from fishing_sim.domain.models.encounter import EncounterPhase, EscapeReason
from fishing_sim.domain.models.species import FishSpecies


@dataclass(frozen=True)
class CandidateEntry:
    species: FishSpecies | None
    weight: float

    @property
    def is_no_bite(self) -> bool:
        return self.species is None

    @property
    def label(self) -> str:
        return "no_bite" if self.species is None else self.species.id


@dataclass(frozen=True)
class CandidateSet:
    location_id: str
    entries: tuple[CandidateEntry, ...]

    @property
    def species_entries(self) -> tuple[CandidateEntry, ...]:
        return tuple(entry for entry in self.entries if not entry.is_no_bite)

    @property
    def no_bite_weight(self) -> float:
        return sum(entry.weight for entry in self.entries if entry.is_no_bite)

    @property
    def total_weight(self) -> float:
        return sum(entry.weight for entry in self.entries)

    def species_ids(self) -> List[str]:
        return [entry.label for entry in self.species_entries]


@dataclass(frozen=True)
class EncounterOutcomeView:
    encounter_id: str
    phase: EncounterPhase
    pending: bool
    catch: CatchResult | None = None
    escape_reason: EscapeReason | None = None


@dataclass(frozen=True)
class EncounterStatusView:
    encounter_id: str
    angler_id: str
    phase: EncounterPhase
    fish_stamina: float
    line_tension: float
    fight_ticks: int
    species_id: str | None = None


@dataclass
class LocationView:
    id: str
    name: str
    water_types: List[str] = field(default_factory=list)
    species_ids: List[str] = field(default_factory=list)
    difficulty: int = 1
