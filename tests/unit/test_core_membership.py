import pytest

from jira_provider.core.membership import Membership, format_membership_id, parse_membership_id


def test_parses_group_and_account():
    membership = parse_membership_id("group1:user1")
    assert membership.group_name == "group1"
    assert membership.account_id == "user1"
    assert membership.is_empty is False


def test_keeps_colons_inside_atlassian_account_ids():
    membership = parse_membership_id("developers:557058:f58131cb-b67d-43c7-b30d-6b58d40bd077")
    assert membership.group_name == "developers"
    assert membership.account_id == "557058:f58131cb-b67d-43c7-b30d-6b58d40bd077"


@pytest.mark.parametrize("raw", ["group1", "", ":user1", "group1:", ":", None])
def test_malformed_ids_yield_empty_membership(raw):
    membership = parse_membership_id(raw)
    assert membership == Membership()
    assert membership.is_empty is True


def test_format_is_inverse_of_parse():
    membership_id = format_membership_id("site-admins", "557058:abc")
    assert membership_id == "site-admins:557058:abc"
    assert parse_membership_id(membership_id).to_id() == membership_id
