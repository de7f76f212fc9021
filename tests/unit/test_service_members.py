from unittest.mock import MagicMock

import pytest

from iam_gateway.core.descope import DescopeAPIError
from iam_gateway.core.errors import MemberNotFoundError
from iam_gateway.core.management import ManagementClient
from iam_gateway.core.members import MemberService, belongs_to_tenant
from iam_gateway.core.models import MemberRequest


def _user(login_id="alice", tenants=("T1",), **extra):
    user = {
        "userId": "U1",
        "loginIds": [login_id],
        "name": "Alice",
        "email": "alice@example.com",
        "phone": None,
        "userTenants": [{"tenantId": t, "roleNames": []} for t in tenants],
    }
    user.update(extra)
    return user


@pytest.fixture()
def mgmt():
    return MagicMock(spec=ManagementClient)


def test_get_member_scoped_to_tenant(mgmt):
    mgmt.load_user.return_value = _user(tenants=("T1", "T2"))
    member = MemberService(mgmt).get_member("T2", "alice")
    assert member.login_id == "alice"
    assert member.tenant_id == "T2"
    assert member.email == "alice@example.com"


def test_get_member_outside_tenant_raises_not_found(mgmt):
    mgmt.load_user.return_value = _user(tenants=("T1",))
    with pytest.raises(MemberNotFoundError) as exc_info:
        MemberService(mgmt).get_member("T9", "alice")
    assert "alice" in exc_info.value.message
    assert "T9" in exc_info.value.message
    assert exc_info.value.status == 404


@pytest.mark.parametrize("associations", [None, []])
def test_user_without_associations_is_not_a_member(mgmt, associations):
    mgmt.load_user.return_value = _user(userTenants=associations)
    with pytest.raises(MemberNotFoundError):
        MemberService(mgmt).get_member("T1", "alice")


def test_update_outside_tenant_never_mutates(mgmt):
    mgmt.load_user.return_value = _user(tenants=("T1",))
    with pytest.raises(MemberNotFoundError):
        MemberService(mgmt).update_member("T2", "alice", MemberRequest(name="Mallory"))
    mgmt.update_user.assert_not_called()


def test_delete_outside_tenant_never_mutates(mgmt):
    mgmt.load_user.return_value = _user(tenants=("T1",))
    with pytest.raises(MemberNotFoundError):
        MemberService(mgmt).delete_member("T2", "alice")
    mgmt.delete_user.assert_not_called()


def test_update_keeps_tenant_association(mgmt):
    mgmt.load_user.return_value = _user(tenants=("T1",))
    member = MemberService(mgmt).update_member("T1", "alice", MemberRequest(name="Alice B", email="ab@example.com"))
    mgmt.update_user.assert_called_once_with(
        "alice", email="ab@example.com", phone=None, name="Alice B", tenant_ids=["T1"]
    )
    assert member.name == "Alice B"
    assert member.tenant_id == "T1"


def test_delete_member_removes_user(mgmt):
    mgmt.load_user.return_value = _user(tenants=("T1",))
    MemberService(mgmt).delete_member("T1", "alice")
    mgmt.delete_user.assert_called_once_with("alice")


def test_create_member_associates_tenant(mgmt):
    request = MemberRequest(login_id="bob", name="Bob", email="bob@example.com")
    member = MemberService(mgmt).create_member("T1", request)
    mgmt.create_user.assert_called_once_with(
        "bob", email="bob@example.com", phone=None, name="Bob", tenant_ids=["T1"]
    )
    assert member.to_dict() == {
        "loginId": "bob",
        "name": "Bob",
        "email": "bob@example.com",
        "phone": None,
        "tenantId": "T1",
    }


def test_remote_error_propagates_from_load(mgmt):
    mgmt.load_user.side_effect = DescopeAPIError(400, "User not found", "/v1/mgmt/user")
    with pytest.raises(DescopeAPIError):
        MemberService(mgmt).delete_member("T1", "ghost")
    mgmt.delete_user.assert_not_called()


def test_list_members_filters_foreign_records(mgmt):
    mgmt.search_users.return_value = [
        _user("alice", tenants=("T1",)),
        _user("eve", tenants=("T2",)),
        _user("bob", tenants=("T1", "T2")),
    ]
    response = MemberService(mgmt).get_all_members("T1", page=0, page_size=20)
    mgmt.search_users.assert_called_once_with(["T1"])
    assert [m.login_id for m in response.items] == ["alice", "bob"]
    assert response.total_items == 2
    assert response.total_pages == 1


def test_list_members_falls_back_to_user_id(mgmt):
    mgmt.search_users.return_value = [_user(loginIds=[], userId="U77")]
    response = MemberService(mgmt).get_all_members("T1", page=0, page_size=20)
    assert response.items[0].login_id == "U77"


def test_get_user_by_id_returns_basic_info(mgmt):
    mgmt.load_user_by_id.return_value = _user()
    info = MemberService(mgmt).get_user_by_id("U1")
    assert info.to_dict() == {"userId": "U1", "name": "Alice", "email": "alice@example.com"}


def test_belongs_to_tenant_handles_missing_field():
    assert belongs_to_tenant({}, "T1") is False
