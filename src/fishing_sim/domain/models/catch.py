from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LootRoll:
    item_id: str
    quantity: int


@dataclass(frozen=True)
class CatchResult:
    species_id: str
    location_id: str
    weight: float
    value: int
    experience: int
    loot: tuple[LootRoll, ...] = ()
    is_new_record: bool = False
    legendary_claimed: bool = False


@dataclass
class CatchRecord:
    angler_id: str
    species_id: str
    best_weight: float = 0.0
    best_value: int = 0
    total_caught: int = 0

    def register(self, weight: float, value: int) -> bool:
        """Fold one landed fish into the record; True when it is a new weight best."""
        self.total_caught += 1
        self.best_value = max(self.best_value, int(value))
        if weight > self.best_weight:
            self.best_weight = float(weight)
            return True
        return False


@dataclass
class FishingTrip:
    angler_id: str
    location_id: str | None = None
    catches: list[CatchResult] = field(default_factory=list)
    casts: int = 0

    @property
    def total_value(self) -> int:
        return sum(item.value for item in self.catches)

    @property
    def total_experience(self) -> int:
        return sum(item.experience for item in self.catches)


@dataclass(frozen=True)
class TripSummary:
    angler_id: str
    casts: int
    total_catches: int
    total_value: int
    total_experience: int
    catches: tuple[CatchResult, ...] = ()


@dataclass(frozen=True)
class CatchCommit:
    angler_id: str
    species_id: str
    location_id: str
    weight: float
    value: int
    claim_legendary: bool = False


@dataclass(frozen=True)
class CommitResult:
    is_new_record: bool
    legendary_claimed: bool = False
    legendary_conflict: bool = False
