from __future__ import annotations

from dataclasses import dataclass, field

from fishing_sim.domain.models.species import BaitType, LureType


@dataclass(frozen=True)
class RodProfile:
    rod_id: str = "basic_rod"
    catch_multiplier: float = 1.0
    hook_bonus: float = 0.0
    reel_power: float = 8.0


@dataclass(frozen=True)
class Equipment:
    bait: BaitType | None = None
    lure: LureType | None = None
    rod: RodProfile = field(default_factory=RodProfile)


@dataclass
class AnglerProfile:
    id: str
    name: str = ""
    skill: float = 20.0
    equipment: Equipment = field(default_factory=Equipment)
    location_id: str | None = None
