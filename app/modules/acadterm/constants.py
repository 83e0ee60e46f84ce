"""Constants for the academic term manager.

Values are the strings the host and its event service already know; the
add event name keeps its historical spelling.
"""

# Defined by the host: site property names carrying term data
PROP_NAME_TERM_EID = "term_eid"
PROP_NAME_TERM_TITLE = "term"

# Posted to the host event service when an academic session has been updated
EVENTSERVICE_EVENT_ACADEMICSESSION_UPDATE = "acadtermmanage.as.upd"

# Posted to the host event service when an academic session has been added
EVENTSERVICE_EVENT_ACADEMICSESSION_ADD = "acadtermnanage.as.add"

# Resource references for academic session events are this prefix followed
# by the session's EID.
EVENTSERVICE_EVENT_RESOURCE_PREFIX = "/academicsession/"
