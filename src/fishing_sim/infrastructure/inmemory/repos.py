from __future__ import annotations

import threading
from collections import defaultdict
from typing import Dict, List, Optional

from fishing_sim.domain.models.angler import AnglerProfile
from fishing_sim.domain.models.catch import CatchRecord
from fishing_sim.domain.models.location import FishingLocation, WorldConditions
from fishing_sim.domain.models.species import FishSpecies, TimeOfDay, Weather
from fishing_sim.domain.repositories import (
    AnglerRepository,
    CatchRecordRepository,
    LegendaryLedgerRepository,
    LocationRepository,
    SpeciesCatalog,
    WorldStateProvider,
)
from fishing_sim.infrastructure.inmemory.fish_species_data import FISHING_LOCATIONS, FISH_SPECIES


class InMemorySpeciesCatalog(SpeciesCatalog):
    def __init__(self, species: Optional[Dict[str, FishSpecies]] = None) -> None:
        source = FISH_SPECIES if species is None else species
        self._species = dict(source)

    def get(self, species_id: str) -> Optional[FishSpecies]:
        return self._species.get(species_id)

    def list_all(self) -> List[FishSpecies]:
        return list(self._species.values())


class InMemoryLocationRepository(LocationRepository):
    def __init__(self, locations: Optional[Dict[str, FishingLocation]] = None) -> None:
        source = FISHING_LOCATIONS if locations is None else locations
        self._locations = dict(source)

    def get(self, location_id: str) -> Optional[FishingLocation]:
        return self._locations.get(location_id)

    def list_all(self) -> List[FishingLocation]:
        return list(self._locations.values())


class StaticWorldStateProvider(WorldStateProvider):
    """World clock and sky the host sets directly; per-location overrides win."""

    def __init__(
        self,
        weather: Weather = Weather.CLEAR,
        hour: float | None = 9.0,
        time_of_day: TimeOfDay | None = None,
    ) -> None:
        self._default = WorldConditions(weather=weather, hour=hour, time_of_day=time_of_day)
        self._overrides: dict[str, WorldConditions] = {}

    def set_conditions(
        self,
        *,
        weather: Weather | str | None = None,
        hour: float | None = None,
        time_of_day: TimeOfDay | str | None = None,
        location_id: str | None = None,
    ) -> None:
        base = self._overrides.get(location_id, self._default) if location_id else self._default
        if time_of_day is not None:
            bucket = TimeOfDay(time_of_day)
        elif hour is not None:
            bucket = None
        else:
            bucket = base.time_of_day
        updated = WorldConditions(
            weather=Weather(weather) if weather is not None else base.weather,
            hour=hour if hour is not None else base.hour,
            time_of_day=bucket,
        )
        if location_id:
            self._overrides[location_id] = updated
        else:
            self._default = updated

    def current_conditions(self, location_id: str) -> WorldConditions:
        return self._overrides.get(location_id, self._default)


class InMemoryAnglerRepository(AnglerRepository):
    def __init__(self, anglers: Optional[Dict[str, AnglerProfile]] = None) -> None:
        self._anglers: dict[str, AnglerProfile] = dict(anglers or {})

    def get(self, angler_id: str) -> Optional[AnglerProfile]:
        return self._anglers.get(angler_id)

    def save(self, angler: AnglerProfile) -> None:
        self._anglers[angler.id] = angler


class InMemoryLegendaryLedger(LegendaryLedgerRepository):
    def __init__(self) -> None:
        self._claims: dict[tuple[str, str], str] = {}
        self._claims_lock = threading.Lock()
        self._locks: defaultdict[str, threading.Lock] = defaultdict(threading.Lock)
        self._registry_lock = threading.Lock()

    def lock_for(self, location_id: str) -> threading.Lock:
        """Serializes claim commits for one location; hold it around ``reserve``/``release``."""
        with self._registry_lock:
            return self._locks[location_id]

    def claimed_at(self, location_id: str) -> set[str]:
        with self._claims_lock:
            return {species_id for species_id, claimed_location in self._claims if claimed_location == location_id}

    def reserve(self, species_id: str, location_id: str, angler_id: str) -> bool:
        with self._claims_lock:
            key = (species_id, location_id)
            if key in self._claims:
                return False
            self._claims[key] = angler_id
            return True

    def release(self, species_id: str, location_id: str) -> None:
        with self._claims_lock:
            self._claims.pop((species_id, location_id), None)

    def claim(self, *, species_id: str, location_id: str, angler_id: str) -> bool:
        with self.lock_for(location_id):
            return self.reserve(species_id, location_id, angler_id)

    def claimed_by(self, species_id: str, location_id: str) -> Optional[str]:
        with self._claims_lock:
            return self._claims.get((species_id, location_id))


class InMemoryCatchRecordRepository(CatchRecordRepository):
    def __init__(self) -> None:
        self._records: dict[tuple[str, str], CatchRecord] = {}
        self._records_lock = threading.Lock()
        self._locks: defaultdict[tuple[str, str], threading.Lock] = defaultdict(threading.Lock)
        self._registry_lock = threading.Lock()

    def lock_for(self, angler_id: str, species_id: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks[(angler_id, species_id)]

    def get(self, angler_id: str, species_id: str) -> Optional[CatchRecord]:
        with self._records_lock:
            record = self._records.get((angler_id, species_id))
        if record is None:
            return None
        return CatchRecord(
            angler_id=record.angler_id,
            species_id=record.species_id,
            best_weight=record.best_weight,
            best_value=record.best_value,
            total_caught=record.total_caught,
        )

    def save(self, record: CatchRecord) -> None:
        with self._records_lock:
            self._records[(record.angler_id, record.species_id)] = record

    def restore(self, angler_id: str, species_id: str, record: Optional[CatchRecord]) -> None:
        """Put back a record read earlier with ``get``; ``None`` removes the key."""
        with self._records_lock:
            if record is None:
                self._records.pop((angler_id, species_id), None)
            else:
                self._records[(angler_id, species_id)] = record

    def list_for_angler(self, angler_id: str) -> List[CatchRecord]:
        with self._records_lock:
            items = sorted(self._records.items())
        return [record for (owner, _), record in items if owner == angler_id]
