from __future__ import annotations

from fishing_sim.application.services.balance_tables import (
    AFTERNOON_START_HOUR,
    DAWN_START_HOUR,
    DUSK_START_HOUR,
    MORNING_START_HOUR,
    NIGHT_START_HOUR,
)
from fishing_sim.domain.errors import AnglerNotFoundError, InvalidActionError, InvalidLocationError
from fishing_sim.domain.models.angler import AnglerProfile
from fishing_sim.domain.models.encounter import EncounterContext
from fishing_sim.domain.models.location import WorldConditions
from fishing_sim.domain.models.species import SpotType, TimeOfDay, Weather
from fishing_sim.domain.repositories import AnglerRepository, LocationRepository, WorldStateProvider


def time_of_day_bucket(hour: float) -> TimeOfDay:
    clock_hour = float(hour) % 24
    if DAWN_START_HOUR <= clock_hour < MORNING_START_HOUR:
        return TimeOfDay.DAWN
    if MORNING_START_HOUR <= clock_hour < AFTERNOON_START_HOUR:
        return TimeOfDay.MORNING
    if AFTERNOON_START_HOUR <= clock_hour < DUSK_START_HOUR:
        return TimeOfDay.AFTERNOON
    if DUSK_START_HOUR <= clock_hour < NIGHT_START_HOUR:
        return TimeOfDay.DUSK
    return TimeOfDay.NIGHT


def normalize_time_of_day(conditions: WorldConditions) -> TimeOfDay:
    if conditions.time_of_day is not None:
        return TimeOfDay(conditions.time_of_day)
    if conditions.hour is None:
        raise ValueError("World conditions carry neither an hour nor a time-of-day bucket")
    return time_of_day_bucket(conditions.hour)


def _parse_spot_type(spot_type: SpotType | str | None) -> SpotType | None:
    if spot_type is None:
        return None
    try:
        return SpotType(spot_type)
    except ValueError:
        raise InvalidActionError("spot type", str(spot_type)) from None


class ContextResolver:
    def __init__(
        self,
        location_repo: LocationRepository,
        world_state: WorldStateProvider,
        angler_repo: AnglerRepository,
    ) -> None:
        self.location_repo = location_repo
        self.world_state = world_state
        self.angler_repo = angler_repo

    def _require_angler(self, angler_id: str) -> AnglerProfile:
        angler = self.angler_repo.get(angler_id)
        if angler is None:
            raise AnglerNotFoundError(angler_id)
        return angler

    def resolve(
        self,
        angler_id: str,
        location_id: str,
        spot_type: SpotType | str | None = None,
    ) -> EncounterContext:
        """Freeze everything a cast depends on into one immutable snapshot."""
        location = self.location_repo.get(location_id)
        if location is None:
            raise InvalidLocationError(location_id)
        if not location.has_water:
            raise InvalidLocationError(location_id, reason="no water to cast into")

        angler = self._require_angler(angler_id)
        conditions = self.world_state.current_conditions(location_id)
        equipment = angler.equipment

        return EncounterContext(
            location_id=location.id,
            water_types=frozenset(location.water_types),
            time_of_day=normalize_time_of_day(conditions),
            weather=Weather(conditions.weather),
            bait=equipment.bait,
            lure=equipment.lure,
            rod=equipment.rod,
            angler_skill=float(angler.skill),
            spot_type=_parse_spot_type(spot_type),
        )
