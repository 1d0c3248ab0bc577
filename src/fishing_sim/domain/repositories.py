from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from fishing_sim.domain.models.angler import AnglerProfile
from fishing_sim.domain.models.catch import CatchRecord
from fishing_sim.domain.models.location import FishingLocation, WorldConditions
from fishing_sim.domain.models.species import FishRarity, FishSpecies, WaterType


class SpeciesCatalog(ABC):
    @abstractmethod
    def get(self, species_id: str) -> Optional[FishSpecies]:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[FishSpecies]:
        raise NotImplementedError

    def list_by_location(self, location_id: str) -> List[FishSpecies]:
        return [species for species in self.list_all() if location_id in species.locations]

    def list_for_water(self, location_id: str, water_types: Iterable[WaterType]) -> List[FishSpecies]:
        wanted = set(water_types)
        return [species for species in self.list_by_location(location_id) if species.water_types & wanted]

    def list_by_rarity(self, rarity: FishRarity) -> List[FishSpecies]:
        return [species for species in self.list_all() if species.rarity == rarity]

    def legendary_for_location(self, location_id: str) -> Optional[FishSpecies]:
        for species in self.list_by_location(location_id):
            if species.is_legendary:
                return species
        return None


class LocationRepository(ABC):
    @abstractmethod
    def get(self, location_id: str) -> Optional[FishingLocation]:
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[FishingLocation]:
        raise NotImplementedError


class WorldStateProvider(ABC):
    @abstractmethod
    def current_conditions(self, location_id: str) -> WorldConditions:
        raise NotImplementedError


class AnglerRepository(ABC):
    @abstractmethod
    def get(self, angler_id: str) -> Optional[AnglerProfile]:
        raise NotImplementedError

    @abstractmethod
    def save(self, angler: AnglerProfile) -> None:
        raise NotImplementedError


class LegendaryLedgerRepository(ABC):
    @abstractmethod
    def claimed_at(self, location_id: str) -> set[str]:
        raise NotImplementedError

    @abstractmethod
    def claim(self, *, species_id: str, location_id: str, angler_id: str) -> bool:
        """Record the catch; False when the pair was already claimed."""
        raise NotImplementedError

    def is_claimed(self, species_id: str, location_id: str) -> bool:
        return species_id in self.claimed_at(location_id)


class CatchRecordRepository(ABC):
    @abstractmethod
    def get(self, angler_id: str, species_id: str) -> Optional[CatchRecord]:
        raise NotImplementedError

    @abstractmethod
    def save(self, record: CatchRecord) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_for_angler(self, angler_id: str) -> List[CatchRecord]:
        raise NotImplementedError
