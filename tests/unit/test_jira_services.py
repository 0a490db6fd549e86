"""Endpoint mapping of UserService and GroupService."""
from unittest.mock import MagicMock

import pytest

from jira_provider.core.jira import DISABLE_MESSAGE, GroupService, UserService


@pytest.fixture
def jira():
    return MagicMock()


@pytest.fixture
def admin():
    return MagicMock()


class TestUserService:
    def test_create_user_posts_email(self, jira):
        jira.post.return_value.json.return_value = {"accountId": "abc", "emailAddress": "a@acme.io"}

        user = UserService(jira).create_user("a@acme.io")

        jira.post.assert_called_once_with("/rest/api/3/user", json={"emailAddress": "a@acme.io"})
        assert user["accountId"] == "abc"

    def test_get_user_with_expand(self, jira):
        jira.get.return_value.json.return_value = {"accountId": "abc"}

        UserService(jira).get_user("abc", expand=["groups", "applicationRoles"])

        jira.get.assert_called_once_with(
            "/rest/api/3/user",
            params={"accountId": "abc", "expand": "groups,applicationRoles"},
        )

    def test_get_user_group_names(self, jira):
        jira.get.return_value.json.return_value = {
            "accountId": "abc",
            "groups": {"size": 2, "items": [{"name": "devs"}, {"name": "ops"}]},
        }

        assert UserService(jira).get_user_group_names("abc") == ["devs", "ops"]

    def test_get_user_group_names_without_groups(self, jira):
        jira.get.return_value.json.return_value = {"accountId": "abc"}

        assert UserService(jira).get_user_group_names("abc") == []

    def test_disable_user_goes_through_admin_api(self, jira, admin):
        UserService(jira, admin).disable_user("abc")

        admin.post.assert_called_once_with(
            "/users/abc/manage/lifecycle/disable",
            json={"message": DISABLE_MESSAGE},
        )
        jira.post.assert_not_called()

    def test_disable_user_requires_admin_client(self, jira):
        with pytest.raises(RuntimeError):
            UserService(jira).disable_user("abc")


class TestGroupService:
    def test_create_group(self, jira):
        jira.post.return_value.json.return_value = {"name": "devs", "groupId": "g-1"}

        group = GroupService(jira).create_group("devs")

        jira.post.assert_called_once_with("/rest/api/3/group", json={"name": "devs"})
        assert group["groupId"] == "g-1"

    def test_find_group_uses_bulk_endpoint(self, jira):
        jira.get.return_value.json.return_value = {
            "total": 1,
            "values": [{"name": "devs", "groupId": "g-1"}],
        }

        group = GroupService(jira).find_group("devs")

        jira.get.assert_called_once_with(
            "/rest/api/3/group/bulk",
            params={"groupName": "devs", "startAt": 0, "maxResults": 1},
        )
        assert group == {"name": "devs", "groupId": "g-1"}

    def test_find_group_returns_none_when_total_is_zero(self, jira):
        jira.get.return_value.json.return_value = {"total": 0, "values": []}

        assert GroupService(jira).find_group("ghost") is None

    def test_delete_group(self, jira):
        GroupService(jira).delete_group("devs")

        jira.delete.assert_called_once_with("/rest/api/3/group", params={"groupname": "devs"})

    def test_add_user_to_group(self, jira):
        jira.post.return_value.json.return_value = {"name": "devs"}

        group = GroupService(jira).add_user_to_group("devs", "abc")

        jira.post.assert_called_once_with(
            "/rest/api/3/group/user",
            params={"groupname": "devs"},
            json={"accountId": "abc"},
        )
        assert group["name"] == "devs"

    def test_remove_user_from_group(self, jira):
        GroupService(jira).remove_user_from_group("devs", "abc")

        jira.delete.assert_called_once_with(
            "/rest/api/3/group/user",
            params={"groupname": "devs", "accountId": "abc"},
        )
