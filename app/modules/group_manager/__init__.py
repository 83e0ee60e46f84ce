"""Site group manager tool.

Lists the groups of the current site and deletes groups on request. The
host platform is reached only through the collaborators in
``domain.types``.
"""
