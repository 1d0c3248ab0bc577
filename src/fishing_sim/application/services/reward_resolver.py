from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from fishing_sim.application.services.balance_tables import catch_value
from fishing_sim.domain.events import LegendaryClaimConflict
from fishing_sim.domain.models.catch import CatchCommit, CatchResult, CommitResult, LootRoll
from fishing_sim.domain.models.encounter import FishingEncounter
from fishing_sim.domain.models.species import FishSpecies


logger = logging.getLogger(__name__)

CatchPersistor = Callable[[CatchCommit], CommitResult]


def sample_weight(species: FishSpecies, rng: random.Random) -> float:
    bounds = species.weight
    low = min(bounds.minimum, bounds.maximum)
    high = max(bounds.minimum, bounds.maximum)
    mode = max(low, min(high, bounds.average))
    raw = rng.triangular(low, high, mode)
    return bounds.clamp(round(bounds.clamp(raw), 2))


def roll_loot(species: FishSpecies, rng: random.Random) -> tuple[LootRoll, ...]:
    rolls: list[LootRoll] = []
    for drop in species.drops:
        if rng.random() < float(drop.chance):
            quantity = rng.randint(drop.min_quantity, drop.max_quantity)
            if quantity > 0:
                rolls.append(LootRoll(item_id=drop.item_id, quantity=quantity))
    return tuple(rolls)


class RewardResolver:
    def __init__(
        self,
        persistor: CatchPersistor,
        event_publisher: Optional[Callable[[object], None]] = None,
    ) -> None:
        self.persistor = persistor
        self.event_publisher = event_publisher

    def resolve(self, encounter: FishingEncounter, rng: random.Random) -> CatchResult:
        """Compute the full reward, then commit ledger and record in one step.

        Nothing is written until every roll has succeeded.
        """
        species = encounter.species
        if species is None:
            raise ValueError(f"Encounter {encounter.id} landed without a fish")

        location_id = encounter.context.location_id
        weight = sample_weight(species, rng)
        value = catch_value(species.base_value, weight, species.weight.average)
        loot = roll_loot(species, rng)

        commit = CatchCommit(
            angler_id=encounter.angler_id,
            species_id=species.id,
            location_id=location_id,
            weight=weight,
            value=value,
            claim_legendary=species.is_location_exclusive,
        )
        committed = self.persistor(commit)

        if committed.legendary_conflict:
            logger.warning(
                "Legendary already claimed at location; catch kept without ledger entry",
                extra={
                    "encounter_id": encounter.id,
                    "angler_id": encounter.angler_id,
                    "species_id": species.id,
                    "location_id": location_id,
                },
            )
            if self.event_publisher is not None:
                self.event_publisher(
                    LegendaryClaimConflict(
                        encounter_id=encounter.id,
                        angler_id=encounter.angler_id,
                        species_id=species.id,
                        location_id=location_id,
                    )
                )

        return CatchResult(
            species_id=species.id,
            location_id=location_id,
            weight=weight,
            value=value,
            experience=int(species.experience),
            loot=loot,
            is_new_record=committed.is_new_record,
            legendary_claimed=committed.legendary_claimed,
        )
