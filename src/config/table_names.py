from enum import Enum


class TableNames(str, Enum):
    EVENTS = "events_new"
    EVENT_PARTICIPANTS = "event_participants"
    EVENT_SPEAKERS = "event_speakers"
    EVENT_SPEAKER_MAP = "event_speaker_map"
