LIST_UPCOMING_EVENTS_URL = "/getAllEvents"
LIST_PREVIOUS_EVENTS_URL = "/getPreviousEvents"
GET_EVENT_DETAILS_URL = "/getEventDetails"
REGISTER_PARTICIPANT_URL = "/postEventParticipantDetails"
GET_EVENT_TITLE_URL = "/getEventTitle"
