from __future__ import annotations

import logging
import random

from fishing_sim.application.dtos import CandidateEntry, CandidateSet
from fishing_sim.application.services.balance_tables import EngineSettings
from fishing_sim.domain.errors import NoViableWaterError
from fishing_sim.domain.models.encounter import EncounterContext
from fishing_sim.domain.models.species import FishSpecies
from fishing_sim.domain.repositories import LegendaryLedgerRepository, SpeciesCatalog


logger = logging.getLogger(__name__)


def draw_candidate(candidates: CandidateSet, rng: random.Random) -> CandidateEntry:
    """One uniform draw over the cumulative weights; consumes exactly one random()."""
    roll = rng.random()
    total = candidates.total_weight
    no_bite = next((entry for entry in candidates.entries if entry.is_no_bite), None)
    if total <= 0:
        return no_bite or CandidateEntry(species=None, weight=0.0)

    threshold = roll * total
    cumulative = 0.0
    for entry in candidates.entries:
        cumulative += entry.weight
        if threshold < cumulative:
            return entry
    return candidates.entries[-1]


class CandidateSelector:
    def __init__(
        self,
        catalog: SpeciesCatalog,
        ledger: LegendaryLedgerRepository,
        settings: EngineSettings | None = None,
    ) -> None:
        self.catalog = catalog
        self.ledger = ledger
        self.settings = settings or EngineSettings()

    def _matches_conditions(self, species: FishSpecies, context: EncounterContext) -> bool:
        return species.is_active_at(context.time_of_day) and species.tolerates_weather(context.weather)

    def _weight_for(self, species: FishSpecies, context: EncounterContext) -> float:
        bait_multiplier = 1.0
        if species.likes_tackle(context.bait, context.lure):
            bait_multiplier = self.settings.bait_match_multiplier
        spot_multiplier = 1.0
        if context.spot_type is not None and context.spot_type in species.depth_preference:
            spot_multiplier = self.settings.spot_match_multiplier
        rod_multiplier = float(context.rod.catch_multiplier)
        return float(species.base_chance) * bait_multiplier * rod_multiplier * spot_multiplier

    def _no_bite_weight(self, species_weight: float) -> float:
        if self.settings.no_bite_weight is not None:
            return max(0.0, float(self.settings.no_bite_weight))
        return species_weight * self.settings.no_bite_ratio

    def build(self, context: EncounterContext) -> CandidateSet:
        in_water = self.catalog.list_for_water(context.location_id, context.water_types)
        if not in_water:
            raise NoViableWaterError(context.location_id)

        claimed = self.ledger.claimed_at(context.location_id)
        entries: list[CandidateEntry] = []
        for species in in_water:
            if not self._matches_conditions(species, context):
                continue
            if species.one_per_location and species.is_legendary and species.id in claimed:
                continue
            if species.requires_special_bait and not species.likes_tackle(context.bait, context.lure):
                continue
            weight = self._weight_for(species, context)
            if weight > 0:
                entries.append(CandidateEntry(species=species, weight=weight))

        species_weight = sum(entry.weight for entry in entries)
        entries.append(CandidateEntry(species=None, weight=self._no_bite_weight(species_weight)))
        logger.debug(
            "Candidate set built",
            extra={
                "location_id": context.location_id,
                "candidates": [entry.label for entry in entries],
                "total_weight": species_weight,
            },
        )
        return CandidateSet(location_id=context.location_id, entries=tuple(entries))

    def select(self, context: EncounterContext, rng: random.Random) -> CandidateEntry:
        return draw_candidate(self.build(context), rng)
