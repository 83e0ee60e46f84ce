"""Constants for the group manager tool."""

# Separator between member names in a group's member summary
MEMBER_SEPARATOR = ", "

# Route names, relative to the tool mount point
MAIN_ROUTE = "/"
INDEX_ROUTE = "/index"
REMOVE_GROUPS_ROUTE = "/removeGroups"
