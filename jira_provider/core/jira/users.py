"""Jira user lifecycle operations."""
from __future__ import annotations
import logging
from typing import Optional, List

from .client import JiraClient, AdminClient

logger = logging.getLogger(__name__)

DISABLE_MESSAGE = "jira-provider: destroy resource"


class UserService:
    """Service for managing Jira users.

    Users are created through the Jira REST API but can only be deactivated
    through the organization admin API, hence the two clients.
    """

    def __init__(self, jira: JiraClient, admin: Optional[AdminClient] = None):
        """Initialize user service.

        Args:
            jira: Authenticated Jira client
            admin: Authenticated admin client (needed for disable_user only)
        """
        self.jira = jira
        self.admin = admin

    def create_user(self, email: str) -> dict:
        """Invite a new user by email address.

        Args:
            email: Email address of the new user

        Returns:
            User representation, including the server-assigned accountId
        """
        resp = self.jira.post("/rest/api/3/user", json={"emailAddress": email})
        user = resp.json()
        logger.info("Created user %s (accountId=%s)", email, user.get("accountId"))
        return user

    def get_user(self, account_id: str, expand: Optional[List[str]] = None) -> dict:
        """Return the user representation for an account ID.

        Args:
            account_id: Atlassian account ID
            expand: Optional expansions (e.g. ["groups"])

        Raises:
            JiraAPIError: 404 when the account does not exist
        """
        params = {"accountId": account_id}
        if expand:
            params["expand"] = ",".join(expand)
        return self.jira.get("/rest/api/3/user", params=params).json()

    def get_user_group_names(self, account_id: str) -> List[str]:
        """Return the names of all groups the account belongs to."""
        user = self.get_user(account_id, expand=["groups"])
        items = (user.get("groups") or {}).get("items") or []
        return [group.get("name") for group in items]

    def disable_user(self, account_id: str, message: str = DISABLE_MESSAGE) -> None:
        """Deactivate a managed account through the admin API.

        Args:
            account_id: Atlassian account ID
            message: Reason shown in the organization audit log
        """
        if self.admin is None:
            raise RuntimeError("disable_user requires an admin client")
        self.admin.post(
            f"/users/{account_id}/manage/lifecycle/disable",
            json={"message": message},
        )
        logger.info("Disabled user accountId=%s", account_id)
