"""Request and response schemas for the group manager routes.

Field names are snake_case in Python and camelCase on the wire, matching the
attribute names the tool's pages have always used (``groupList``,
``deletedGroupList``, ...).

Key distinction from domain/models.py:
  - schemas.py: wire contracts with Pydantic validation
  - models.py: host entity snapshots (dataclasses, no validation)
"""

from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.group_manager.core.view import GroupView
from modules.group_manager.domain.models import Group, RealmLockMode


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MainForm(_CamelModel):
    """Form posted to remove groups.

    ``deleted_group_list`` is None when the form carried no selection. Neither
    None nor an empty list does any work.
    """

    deleted_group_list: Annotated[
        Optional[List[str]],
        Field(
            alias="deletedGroupList",
            description="Ids of the groups to delete, in the order to try them",
        ),
    ] = None


class GroupResponse(_CamelModel):
    """Wire view of a host group."""

    id: str
    title: str
    description: Optional[str] = None
    realm_lock: Annotated[
        RealmLockMode, Field(alias="realmLock")
    ] = RealmLockMode.NONE
    member_count: Annotated[int, Field(alias="memberCount")] = 0

    @classmethod
    def from_group(cls, group: Group) -> "GroupResponse":
        return cls(
            id=group.id,
            title=group.title,
            description=group.description,
            realm_lock=group.realm_lock,
            member_count=len(group.members),
        )


class GroupViewResponse(_CamelModel):
    """Index page model: the lists and maps built by the group view builder."""

    site_id: Annotated[str, Field(alias="siteId")]
    group_list: Annotated[
        List[GroupResponse], Field(default_factory=list, alias="groupList")
    ]
    locked_group_list: Annotated[
        List[GroupResponse], Field(default_factory=list, alias="lockedGroupList")
    ]
    locked_for_deletion_group_list: Annotated[
        List[GroupResponse],
        Field(default_factory=list, alias="lockedForDeletionGroupList"),
    ]
    group_member_map: Annotated[
        Dict[str, str], Field(default_factory=dict, alias="groupMemberMap")
    ]
    group_joinable_set_map: Annotated[
        Dict[str, Optional[str]],
        Field(default_factory=dict, alias="groupJoinableSetMap"),
    ]
    group_joinable_set_size_map: Annotated[
        Dict[str, Optional[str]],
        Field(default_factory=dict, alias="groupJoinableSetSizeMap"),
    ]
    main_form: Annotated[MainForm, Field(default_factory=MainForm, alias="mainForm")]

    @classmethod
    def from_view(cls, view: GroupView) -> "GroupViewResponse":
        return cls(
            site_id=view.site_id,
            group_list=[GroupResponse.from_group(g) for g in view.group_list],
            locked_group_list=[
                GroupResponse.from_group(g) for g in view.locked_group_list
            ],
            locked_for_deletion_group_list=[
                GroupResponse.from_group(g) for g in view.locked_for_deletion_group_list
            ],
            group_member_map=dict(view.group_member_map),
            group_joinable_set_map=dict(view.group_joinable_set_map),
            group_joinable_set_size_map=dict(view.group_joinable_set_size_map),
        )
