CONTRACT_VERSION = "1.0.0"

COMMAND_INTENTS = (
    "start_cast",
    "hook_attempt",
    "fight_action",
    "cancel",
    "end_trip",
)

QUERY_INTENTS = (
    "poll_outcome",
    "status",
    "active_encounter_for",
    "trip",
)

CONTRACT_DTO_TYPES = (
    "EncounterOutcomeView",
    "EncounterStatusView",
    "CandidateSet",
    "LocationView",
)
