"""Jira group management and membership operations."""
from __future__ import annotations
import logging
from typing import Optional

from .client import JiraClient

logger = logging.getLogger(__name__)


class GroupService:
    """Service for managing Jira groups."""

    def __init__(self, jira: JiraClient):
        """Initialize group service.

        Args:
            jira: Authenticated Jira client
        """
        self.jira = jira

    def create_group(self, name: str) -> dict:
        """Create a group and return its representation (name, groupId)."""
        resp = self.jira.post("/rest/api/3/group", json={"name": name})
        group = resp.json()
        logger.info("Created group '%s' (groupId=%s)", name, group.get("groupId"))
        return group

    def find_group(self, name: str) -> Optional[dict]:
        """Look up a group by exact name through the bulk endpoint.

        Returns:
            Group representation or None when the bulk search is empty
        """
        resp = self.jira.get(
            "/rest/api/3/group/bulk",
            params={"groupName": name, "startAt": 0, "maxResults": 1},
        )
        page = resp.json() or {}
        values = page.get("values") or []
        if not page.get("total") or not values:
            return None
        return values[0]

    def delete_group(self, name: str) -> None:
        self.jira.delete("/rest/api/3/group", params={"groupname": name})
        logger.info("Deleted group '%s'", name)

    def add_user_to_group(self, group_name: str, account_id: str) -> dict:
        """Add an account to a group.

        Returns:
            Group representation returned by Jira (its name is authoritative)
        """
        resp = self.jira.post(
            "/rest/api/3/group/user",
            params={"groupname": group_name},
            json={"accountId": account_id},
        )
        logger.info("Added accountId=%s to group '%s'", account_id, group_name)
        return resp.json()

    def remove_user_from_group(self, group_name: str, account_id: str) -> None:
        self.jira.delete(
            "/rest/api/3/group/user",
            params={"groupname": group_name, "accountId": account_id},
        )
        logger.info("Removed accountId=%s from group '%s'", account_id, group_name)
