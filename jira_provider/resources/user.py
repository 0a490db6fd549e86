"""Jira user resource.

With this resource, you can manage user identities: creating a user invites
the email address, destroying it deactivates the account through the admin API.
"""
from __future__ import annotations
from typing import Any, Optional

import pulumi
from pulumi.dynamic import CreateResult, ReadResult, Resource

from jira_provider.config.settings import ProviderSettings
from jira_provider.core.jira import JiraAPIError, UserService
from jira_provider.core.validators import validate_email
from .base import JiraResourceProvider, absent


def flatten_user(user: dict) -> dict[str, Any]:
    """Map a Jira user payload onto resource state."""
    return {
        "account_id": user.get("accountId"),
        "account_type": user.get("accountType"),
        "email": user.get("emailAddress"),
        "display_name": user.get("displayName"),
        "active": bool(user.get("active")),
    }


def keep_configured_email(outs: dict[str, Any], email: Optional[str]) -> None:
    """Keep the configured email when Jira hides it or only differs in case.

    Either case would otherwise show up as a change to ``email`` and replace
    the user.
    """
    if not email:
        return
    remote = outs.get("email")
    if not remote or remote.lower() == email.lower():
        outs["email"] = email


class UserProvider(JiraResourceProvider):
    resource_label = "user"
    immutable_fields = ("email",)
    validators = {"email": validate_email}

    @property
    def users(self) -> UserService:
        return UserService(self.jira, self.admin)

    def create(self, props: dict[str, Any]) -> CreateResult:
        email = props["email"]
        try:
            created = self.users.create_user(email)
        except JiraAPIError as exc:
            self._audit("user_create", email, success=False, status_code=exc.status_code)
            raise

        account_id = created["accountId"]
        self._audit("user_create", account_id, email=email)

        outs = self._fetch(account_id)
        if outs is None:
            raise RuntimeError(f"User {account_id} was created but cannot be read back")
        keep_configured_email(outs, email)
        return CreateResult(id_=account_id, outs=outs)

    def _fetch(self, account_id: str) -> Optional[dict[str, Any]]:
        try:
            user = self.users.get_user(account_id)
        except JiraAPIError as exc:
            if exc.is_not_found:
                return None
            raise
        return flatten_user(user)

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        outs = self._fetch(id_)
        if outs is None:
            return absent()
        keep_configured_email(outs, props.get("email"))
        return ReadResult(id_=id_, outs=outs)

    def delete(self, id_: str, props: dict[str, Any]) -> None:
        try:
            self.users.disable_user(id_)
        except JiraAPIError as exc:
            if not self._delete_error_is_tolerated(exc, id_):
                self._audit("user_disable", id_, success=False, status_code=exc.status_code)
                raise
            return
        self._audit("user_disable", id_)


class UserArgs:
    email: pulumi.Input[str]

    def __init__(self, email: pulumi.Input[str]):
        """
        :param email: Email address of the user. Changing it replaces the user.
        """
        self.email = email


class User(Resource, module="jira", name="User"):
    """A Jira Cloud user identified by its account ID."""

    email: pulumi.Output[str]
    account_id: pulumi.Output[str]
    account_type: pulumi.Output[str]
    display_name: pulumi.Output[str]
    active: pulumi.Output[bool]

    def __init__(
        self,
        resource_name: str,
        args: UserArgs,
        opts: Optional[pulumi.ResourceOptions] = None,
        settings: Optional[ProviderSettings] = None,
    ):
        props = {
            "email": args.email,
            "account_id": None,
            "account_type": None,
            "display_name": None,
            "active": None,
        }
        super().__init__(UserProvider(settings), resource_name, props, opts)
