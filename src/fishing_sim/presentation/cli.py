from __future__ import annotations

import argparse
from typing import Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from fishing_sim.application.dtos import LocationView
from fishing_sim.application.services.encounter_driver import (
    ManualClock,
    SimulationReport,
    simulate_encounter,
    tension_keeper_policy,
)
from fishing_sim.bootstrap import FishingRuntime, create_fishing_runtime
from fishing_sim.domain.errors import FishingError
from fishing_sim.domain.models.angler import AnglerProfile, Equipment
from fishing_sim.domain.models.catch import TripSummary
from fishing_sim.domain.models.encounter import EncounterPhase
from fishing_sim.domain.models.species import BaitType, FishRarity, LureType, SpotType, Weather


_BORDER = "cyan"
_PHASE_STYLES = {
    EncounterPhase.LANDED: "bold green",
    EncounterPhase.ESCAPED: "yellow",
    EncounterPhase.BROKE_OFF: "bold red",
    EncounterPhase.TIMED_OUT: "dim",
}


def _title(text: str) -> str:
    return f"[bold yellow]{text}[/bold yellow]"


def location_views(runtime: FishingRuntime) -> list[LocationView]:
    views = []
    for location in runtime.locations.list_all():
        views.append(
            LocationView(
                id=location.id,
                name=location.name,
                water_types=[water.value for water in location.water_types],
                species_ids=[species.id for species in runtime.catalog.list_by_location(location.id)],
                difficulty=location.difficulty,
            )
        )
    return views


def render_locations(console: Console, runtime: FishingRuntime) -> None:
    table = Table(show_header=True, header_style="bold yellow")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Water")
    table.add_column("Difficulty", justify="right")
    table.add_column("Fish", justify="right")
    table.add_column("Legend")
    for view in location_views(runtime):
        legend = runtime.catalog.legendary_for_location(view.id)
        table.add_row(
            view.id,
            view.name,
            ", ".join(view.water_types) or "-",
            str(view.difficulty),
            str(len(view.species_ids)),
            f"[magenta]{legend.name}[/magenta]" if legend else "-",
        )
    console.print(Panel.fit(table, title=_title("Fishing Spots"), border_style=_BORDER))


def render_species(
    console: Console,
    runtime: FishingRuntime,
    *,
    location_id: Optional[str] = None,
    rarity: Optional[str] = None,
) -> None:
    if location_id:
        species_list = runtime.catalog.list_by_location(location_id)
    elif rarity:
        species_list = runtime.catalog.list_by_rarity(FishRarity(rarity))
    else:
        species_list = runtime.catalog.list_all()

    table = Table(show_header=True, header_style="bold yellow")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Rarity")
    table.add_column("Chance", justify="right")
    table.add_column("Weight (lb)", justify="right")
    table.add_column("Value", justify="right")
    for species in species_list:
        name = f"[magenta]{species.name}[/magenta]" if species.is_legendary else species.name
        table.add_row(
            species.id,
            name,
            species.rarity.value,
            f"{species.base_chance:g}",
            f"{species.weight.minimum:g}-{species.weight.maximum:g}",
            str(species.base_value),
        )
    console.print(Panel.fit(table, title=_title("Species"), border_style=_BORDER))


def render_report(console: Console, report: SimulationReport) -> None:
    outcome = report.outcome
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold yellow", justify="right")
    grid.add_column(style="white")
    style = _PHASE_STYLES.get(outcome.phase, "white")
    grid.add_row("Outcome", f"[{style}]{outcome.phase.value}[/{style}]")
    if outcome.escape_reason is not None:
        grid.add_row("Reason", outcome.escape_reason.value.replace("_", " "))
    if outcome.catch is not None:
        catch = outcome.catch
        grid.add_row("Fish", catch.species_id)
        grid.add_row("Weight", f"{catch.weight:.2f} lb")
        grid.add_row("Value", f"${catch.value}")
        grid.add_row("XP", str(catch.experience))
        if catch.loot:
            grid.add_row("Loot", ", ".join(f"{roll.item_id} x{roll.quantity}" for roll in catch.loot))
        if catch.is_new_record:
            grid.add_row("Record", "[bold green]new personal best[/bold green]")
        if catch.legendary_claimed:
            grid.add_row("Legend", "[magenta]claimed for this water[/magenta]")
    if report.hooked_at_ms is not None:
        grid.add_row("Hooked", f"{report.hooked_at_ms} ms")
    grid.add_row("Ended", f"{report.ended_at_ms} ms")
    grid.add_row("Actions", str(len(report.actions)))
    console.print(Panel.fit(grid, title=_title("Cast"), border_style=_BORDER))


def render_trip(console: Console, summary: TripSummary) -> None:
    grid = Table.grid(padding=(0, 1))
    grid.add_column(style="bold yellow", justify="right")
    grid.add_column(style="white")
    grid.add_row("Casts", str(summary.casts))
    grid.add_row("Catches", str(summary.total_catches))
    grid.add_row("Value", f"${summary.total_value}")
    grid.add_row("XP", str(summary.total_experience))
    console.print(Panel.fit(grid, title=_title("Trip Summary"), border_style=_BORDER))


def _prepare_angler(runtime: FishingRuntime, args: argparse.Namespace) -> str:
    angler = AnglerProfile(
        id=args.angler,
        name=args.angler,
        skill=float(args.skill),
        equipment=Equipment(
            bait=BaitType(args.bait) if args.bait else None,
            lure=LureType(args.lure) if args.lure else None,
        ),
        location_id=args.location,
    )
    runtime.anglers.save(angler)
    runtime.world_state.set_conditions(weather=args.weather, hour=args.hour)
    return angler.id


def _run_casts(console: Console, runtime: FishingRuntime, clock: ManualClock, args: argparse.Namespace) -> None:
    angler_id = _prepare_angler(runtime, args)
    policy = tension_keeper_policy(float(args.safe_tension))
    for index in range(max(1, int(args.casts))):
        seed = None if args.seed is None else int(args.seed) + index
        report = simulate_encounter(
            runtime.service,
            clock,
            angler_id,
            args.location,
            spot_type=args.spot,
            seed=seed,
            hook_delay_ms=int(args.hook_delay),
            policy=policy,
        )
        render_report(console, report)
    render_trip(console, runtime.service.end_trip(angler_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fishing_sim", description="Frontier fishing encounter simulator")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("locations", help="List fishing spots")

    species = sub.add_parser("species", help="List fish species")
    species.add_argument("--location", default=None)
    species.add_argument("--rarity", choices=[item.value for item in FishRarity], default=None)

    cast = sub.add_parser("cast", help="Simulate one or more casts on a virtual clock")
    cast.add_argument("--location", default="spirit_springs_lake")
    cast.add_argument("--angler", default="angler")
    cast.add_argument("--seed", type=int, default=None)
    cast.add_argument("--casts", type=int, default=1)
    cast.add_argument("--skill", type=float, default=20.0)
    cast.add_argument("--bait", choices=[item.value for item in BaitType], default=BaitType.WORMS.value)
    cast.add_argument("--lure", choices=[item.value for item in LureType], default=None)
    cast.add_argument("--spot", choices=[item.value for item in SpotType], default=None)
    cast.add_argument("--weather", choices=[item.value for item in Weather], default=Weather.CLEAR.value)
    cast.add_argument("--hour", type=float, default=9.0)
    cast.add_argument("--hook-delay", type=int, default=200)
    cast.add_argument("--safe-tension", type=float, default=70.0)
    return parser


def main(argv: Optional[Sequence[str]] = None, *, console: Optional[Console] = None) -> int:
    console = console or Console()
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 0

    clock = ManualClock()
    runtime = create_fishing_runtime(clock=clock)
    try:
        if args.command == "locations":
            render_locations(console, runtime)
        elif args.command == "species":
            render_species(console, runtime, location_id=args.location, rarity=args.rarity)
        elif args.command == "cast":
            _run_casts(console, runtime, clock, args)
    except FishingError as exc:
        console.print(f"[bold red]{exc}[/bold red]")
        return 1
    return 0
