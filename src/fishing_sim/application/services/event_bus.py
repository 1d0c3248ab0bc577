from collections import defaultdict
import logging
from typing import Callable, DefaultDict, List, Type


Handler = Callable[[object], None]


class EventBus:
    """Synchronous fan-out of engine events to external consumers.

    A failing handler is logged and skipped; the engine never sees its exception.
    """

    def __init__(self) -> None:
        self._subscribers: DefaultDict[Type[object], List[tuple[int, int, Handler]]] = defaultdict(list)
        self._catch_all: List[Handler] = []
        self._next_order = 0
        self._last_publish_errors: List[Exception] = []
        self._logger = logging.getLogger(__name__)

    def subscribe(self, event_type: Type[object], handler: Handler, *, priority: int = 100) -> None:
        self._subscribers[event_type].append((int(priority), self._next_order, handler))
        self._next_order += 1
        self._subscribers[event_type].sort(key=lambda row: (row[0], row[1]))

    def subscribe_all(self, handler: Handler) -> None:
        self._catch_all.append(handler)

    def publish(self, event: object) -> None:
        self._last_publish_errors = []
        event_type = type(event)
        handlers = [handler for _, _, handler in self._subscribers[event_type]] + list(self._catch_all)
        for handler in handlers:
            try:
                handler(event)
            except Exception as exc:
                self._last_publish_errors.append(exc)
                self._logger.exception(
                    "Fishing event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": getattr(handler, "__qualname__", repr(handler)),
                    },
                )

    def last_publish_errors(self) -> List[Exception]:
        return list(self._last_publish_errors)
