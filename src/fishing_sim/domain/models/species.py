from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class FishRarity(str, Enum):
    COMMON = "common"
    QUALITY = "quality"
    RARE = "rare"
    LEGENDARY = "legendary"


class FishCategory(str, Enum):
    CATFISH = "catfish"
    PANFISH = "panfish"
    BASS = "bass"
    TROUT = "trout"
    PIKE = "pike"
    STURGEON = "sturgeon"
    EXOTIC = "exotic"


class WaterType(str, Enum):
    RIVER = "river"
    LAKE = "lake"
    POND = "pond"
    STREAM = "stream"
    SACRED = "sacred"
    UNDERGROUND = "underground"


class TimeOfDay(str, Enum):
    DAWN = "dawn"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    DUSK = "dusk"
    NIGHT = "night"


class Weather(str, Enum):
    CLEAR = "clear"
    CLOUDY = "cloudy"
    RAIN = "rain"
    STORM = "storm"
    FOG = "fog"


class SpotType(str, Enum):
    SURFACE = "surface"
    SHALLOW = "shallow"
    DEEP = "deep"
    STRUCTURE = "structure"
    BOTTOM = "bottom"


class BaitType(str, Enum):
    WORMS = "worms"
    INSECTS = "insects"
    MINNOWS = "minnows"
    CUT_BAIT = "cut_bait"
    CRAWFISH = "crawfish"
    SPECIAL_BAIT = "special_bait"
    BLOOD_LURE = "blood_lure"
    SPIRIT_WORM = "spirit_worm"
    GOLDEN_GRUB = "golden_grub"


class LureType(str, Enum):
    FLY_LURE = "fly_lure"
    JIG = "jig"
    SPOON_LURE = "spoon_lure"
    PLUG = "plug"


@dataclass(frozen=True)
class LootDrop:
    item_id: str
    chance: float
    quantity: tuple[int, int] = (1, 1)

    @property
    def min_quantity(self) -> int:
        return min(int(self.quantity[0]), int(self.quantity[1]))

    @property
    def max_quantity(self) -> int:
        return max(int(self.quantity[0]), int(self.quantity[1]))


@dataclass(frozen=True)
class WeightRange:
    minimum: float
    maximum: float
    average: float
    record: float

    def clamp(self, value: float) -> float:
        ceiling = min(self.maximum, self.record)
        return max(self.minimum, min(ceiling, value))


@dataclass(frozen=True)
class FightProfile:
    base_fight_time: int
    fight_difficulty: int
    stamina: int
    aggression: int

    @property
    def max_ticks(self) -> int:
        return max(1, int(self.base_fight_time) * 3)


@dataclass(frozen=True)
class FishSpecies:
    """Immutable catalog entry; everything the engine knows about one kind of fish."""

    id: str
    name: str
    rarity: FishRarity
    category: FishCategory
    water_types: frozenset[WaterType]
    locations: frozenset[str]
    active_time_of_day: frozenset[TimeOfDay]
    preferred_weather: frozenset[Weather]
    depth_preference: frozenset[SpotType]
    weight: WeightRange
    base_chance: float
    bite_speed_ms: int
    hook_difficulty: int
    fight: FightProfile
    preferred_bait: frozenset[BaitType] = frozenset()
    preferred_lures: frozenset[LureType] = frozenset()
    base_value: int = 1
    experience: int = 0
    is_legendary: bool = False
    one_per_location: bool = False
    requires_special_bait: bool = False
    drops: tuple[LootDrop, ...] = ()
    scientific_name: str = ""
    description: str = ""
    lore: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_location_exclusive(self) -> bool:
        return self.is_legendary and self.one_per_location

    def is_active_at(self, time_of_day: TimeOfDay) -> bool:
        return time_of_day in self.active_time_of_day

    def tolerates_weather(self, weather: Weather) -> bool:
        if not self.preferred_weather:
            return True
        return weather in self.preferred_weather

    def likes_tackle(self, bait: BaitType | None, lure: LureType | None) -> bool:
        if bait is not None and bait in self.preferred_bait:
            return True
        return lure is not None and lure in self.preferred_lures
