import logging
import os
import socket
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import urlparse

from fishing_sim.application.services.balance_tables import (
    BITE_WINDOW_MS,
    BREAK_THRESHOLD,
    FIGHT_TICK_MS,
    METER_MAX,
    NO_BITE_RATIO,
    EngineSettings,
)
from fishing_sim.application.services.encounter_service import EncounterService
from fishing_sim.application.services.event_bus import EventBus
from fishing_sim.domain.repositories import (
    AnglerRepository,
    CatchRecordRepository,
    LegendaryLedgerRepository,
    LocationRepository,
    SpeciesCatalog,
)
from fishing_sim.infrastructure.inmemory.atomic_persistence import create_inmemory_catch_persistor
from fishing_sim.infrastructure.inmemory.repos import (
    InMemoryAnglerRepository,
    InMemoryCatchRecordRepository,
    InMemoryLegendaryLedger,
    InMemoryLocationRepository,
    InMemorySpeciesCatalog,
    StaticWorldStateProvider,
)


logger = logging.getLogger(__name__)


@dataclass
class FishingRuntime:
    service: EncounterService
    catalog: SpeciesCatalog
    locations: LocationRepository
    world_state: StaticWorldStateProvider
    anglers: AnglerRepository
    ledger: LegendaryLedgerRepository
    records: CatchRecordRepository
    backend: str = "inmemory"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring invalid integer setting", extra={"setting": name, "value": raw})
        return default


def _env_float(name: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid numeric setting", extra={"setting": name, "value": raw})
        return default


def _break_threshold_from_env() -> float:
    threshold = _env_float("FISHING_BREAK_THRESHOLD", BREAK_THRESHOLD)
    if threshold > METER_MAX:
        # Tension is capped at METER_MAX each tick.
        logger.warning(
            "Break threshold above the tension meter; using the meter maximum",
            extra={"setting": "FISHING_BREAK_THRESHOLD", "value": threshold},
        )
        return METER_MAX
    return threshold


def settings_from_env() -> EngineSettings:
    return EngineSettings(
        tick_ms=max(1, _env_int("FISHING_TICK_MS", FIGHT_TICK_MS)),
        no_bite_ratio=max(0.0, _env_float("FISHING_NO_BITE_RATIO", NO_BITE_RATIO)),
        no_bite_weight=_env_float("FISHING_NO_BITE_WEIGHT", None),
        bite_window_ms=max(1, _env_int("FISHING_BITE_WINDOW_MS", BITE_WINDOW_MS)),
        break_threshold=_break_threshold_from_env(),
        world_seed=_env_int("FISHING_WORLD_SEED", 1),
    )


def _looks_like_local_server_unreachable(database_url: str) -> bool:
    if not database_url:
        return False

    parsed = urlparse(database_url)
    if not parsed.scheme.startswith("mysql"):
        return False

    host = (parsed.hostname or "").strip().lower()
    if host not in {"localhost", "127.0.0.1", "::1"}:
        return False

    port = parsed.port or 3306
    timeout = _env_float("FISHING_DB_CONNECT_PROBE_TIMEOUT_S", 0.35)

    try:
        with socket.create_connection((host, port), timeout=timeout):
            return False
    except OSError:
        return True


def _build_inmemory_runtime(
    settings: EngineSettings,
    clock: Optional[Callable[[], int]],
    event_bus: Optional[EventBus],
) -> FishingRuntime:
    catalog = InMemorySpeciesCatalog()
    locations = InMemoryLocationRepository()
    world_state = StaticWorldStateProvider()
    anglers = InMemoryAnglerRepository()
    ledger = InMemoryLegendaryLedger()
    records = InMemoryCatchRecordRepository()
    service = EncounterService(
        catalog,
        locations,
        world_state,
        anglers,
        ledger,
        create_inmemory_catch_persistor(ledger, records),
        settings=settings,
        clock=clock,
        event_bus=event_bus,
    )
    return FishingRuntime(
        service=service,
        catalog=catalog,
        locations=locations,
        world_state=world_state,
        anglers=anglers,
        ledger=ledger,
        records=records,
    )


def _build_sql_runtime(
    database_url: str,
    settings: EngineSettings,
    clock: Optional[Callable[[], int]],
    event_bus: Optional[EventBus],
) -> FishingRuntime:
    from fishing_sim.infrastructure.db.sql.atomic_persistence import create_sql_catch_persistor
    from fishing_sim.infrastructure.db.sql.connection import create_db_engine, create_session_factory
    from fishing_sim.infrastructure.db.sql.repos import SqlCatchRecordRepository, SqlLegendaryLedger
    from fishing_sim.infrastructure.db.sql.schema import ensure_schema

    engine = create_db_engine(database_url)
    ensure_schema(engine)
    session_factory = create_session_factory(engine=engine)

    catalog = InMemorySpeciesCatalog()
    locations = InMemoryLocationRepository()
    world_state = StaticWorldStateProvider()
    anglers = InMemoryAnglerRepository()
    ledger = SqlLegendaryLedger(session_factory)
    records = SqlCatchRecordRepository(session_factory)
    service = EncounterService(
        catalog,
        locations,
        world_state,
        anglers,
        ledger,
        create_sql_catch_persistor(session_factory),
        settings=settings,
        clock=clock,
        event_bus=event_bus,
    )
    return FishingRuntime(
        service=service,
        catalog=catalog,
        locations=locations,
        world_state=world_state,
        anglers=anglers,
        ledger=ledger,
        records=records,
        backend=engine.dialect.name,
    )


def create_fishing_runtime(
    *,
    clock: Optional[Callable[[], int]] = None,
    event_bus: Optional[EventBus] = None,
    settings: Optional[EngineSettings] = None,
) -> FishingRuntime:
    settings = settings or settings_from_env()
    database_url = os.getenv("FISHING_DATABASE_URL", "").strip()
    if database_url:
        if _looks_like_local_server_unreachable(database_url):
            logger.warning("Database appears unreachable, falling back to in-memory ledger")
            return _build_inmemory_runtime(settings, clock, event_bus)
        try:
            return _build_sql_runtime(database_url, settings, clock, event_bus)
        except Exception as exc:  # pragma: no cover - best-effort fallback
            logger.warning("Database unavailable, falling back to in-memory ledger", extra={"reason": str(exc)})

    return _build_inmemory_runtime(settings, clock, event_bus)


def create_fishing_service(**kwargs) -> EncounterService:
    return create_fishing_runtime(**kwargs).service
