"""Jira group resource: creating and deleting groups."""
from __future__ import annotations
from typing import Any, Optional

import pulumi
from pulumi.dynamic import CreateResult, ReadResult, Resource

from jira_provider.config.settings import ProviderSettings
from jira_provider.core.jira import GroupService, JiraAPIError
from jira_provider.core.validators import validate_group_name
from .base import JiraResourceProvider, absent


class GroupProvider(JiraResourceProvider):
    resource_label = "group"
    immutable_fields = ("name",)
    validators = {"name": validate_group_name}

    @property
    def groups(self) -> GroupService:
        return GroupService(self.jira)

    def create(self, props: dict[str, Any]) -> CreateResult:
        name = props["name"]
        try:
            created = self.groups.create_group(name)
        except JiraAPIError as exc:
            self._audit("group_create", name, success=False, status_code=exc.status_code)
            raise

        # Jira may normalise the name; the returned one is the identity
        group_name = created.get("name") or name
        self._audit("group_create", group_name, group_id=created.get("groupId"))

        outs = self._fetch(group_name)
        if outs is None:
            raise RuntimeError(f"Group '{group_name}' was created but cannot be read back")
        return CreateResult(id_=group_name, outs=outs)

    def _fetch(self, name: str) -> Optional[dict[str, Any]]:
        try:
            group = self.groups.find_group(name)
        except JiraAPIError as exc:
            if exc.is_not_found:
                return None
            raise
        if group is None:
            return None
        return {"group_id": group.get("groupId"), "name": group.get("name")}

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        outs = self._fetch(id_)
        if outs is None:
            return absent()
        return ReadResult(id_=id_, outs=outs)

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        try:
            self.groups.delete_group(id_)
        except JiraAPIError as exc:
            if not self._delete_error_is_tolerated(exc, id_):
                self._audit("group_delete", id_, success=False, status_code=exc.status_code)
                raise
            return
        self._audit("group_delete", id_)


class GroupArgs:
    name: pulumi.Input[str]

    def __init__(self, name: pulumi.Input[str]):
        """
        :param name: Name of the group. Changing it replaces the group.
        """
        self.name = name


class Group(Resource, module="jira", name="Group"):
    """A Jira Cloud group identified by its name."""

    name: pulumi.Output[str]
    group_id: pulumi.Output[str]

    def __init__(
        self,
        resource_name: str,
        args: GroupArgs,
        opts: Optional[pulumi.ResourceOptions] = None,
        settings: Optional[ProviderSettings] = None,
    ):
        props = {"name": args.name, "group_id": None}
        super().__init__(GroupProvider(settings), resource_name, props, opts)
