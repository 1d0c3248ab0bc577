from __future__ import annotations

from dataclasses import dataclass, field

from fishing_sim.domain.models.species import SpotType, TimeOfDay, WaterType, Weather


@dataclass(frozen=True)
class FishingLocation:
    id: str
    name: str
    water_types: tuple[WaterType, ...] = ()
    spot_types: tuple[SpotType, ...] = ()
    difficulty: int = 1
    description: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_water(self) -> bool:
        return bool(self.water_types)


@dataclass(frozen=True)
class WorldConditions:
    weather: Weather
    hour: float | None = None
    time_of_day: TimeOfDay | None = None
