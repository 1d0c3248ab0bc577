class FishingError(Exception):
    """Base class for every failure the engine reports to its caller."""


class InvalidLocationError(FishingError):
    def __init__(self, location_id: str, reason: str = "unknown location") -> None:
        super().__init__(f"Cannot fish at '{location_id}': {reason}")
        self.location_id = location_id
        self.reason = reason


class NoViableWaterError(FishingError):
    def __init__(self, location_id: str) -> None:
        super().__init__(f"No fish live in the water at '{location_id}'")
        self.location_id = location_id


class AnglerNotFoundError(FishingError):
    def __init__(self, angler_id: str) -> None:
        super().__init__(f"Unknown angler '{angler_id}'")
        self.angler_id = angler_id


class EncounterAlreadyActiveError(FishingError):
    def __init__(self, angler_id: str, encounter_id: str) -> None:
        super().__init__(f"Angler '{angler_id}' already has an active encounter ({encounter_id})")
        self.angler_id = angler_id
        self.encounter_id = encounter_id


class EncounterNotFoundError(FishingError):
    def __init__(self, encounter_id: str) -> None:
        super().__init__(f"Unknown encounter '{encounter_id}'")
        self.encounter_id = encounter_id


class InvalidPhaseError(FishingError):
    def __init__(self, encounter_id: str, action: str, phase: str) -> None:
        super().__init__(f"'{action}' is not allowed while encounter {encounter_id} is {phase}")
        self.encounter_id = encounter_id
        self.action = action
        self.phase = phase


class InvalidTransitionError(FishingError):
    def __init__(self, phase: str, event: str) -> None:
        super().__init__(f"No transition from {phase} on {event}")
        self.phase = phase
        self.event = event


class InvalidActionError(FishingError):
    def __init__(self, kind: str, value: str) -> None:
        super().__init__(f"Unknown {kind} '{value}'")
        self.kind = kind
        self.value = value
