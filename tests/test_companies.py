from __future__ import annotations

import pytest

from fieldops.domain.companies.service import CompanyService
from fieldops.errors import NotFoundError, ValidationError


def test_get_company(db, tenant) -> None:
    service = CompanyService(db)

    assert service.get_company("c1").name == "Acme Facilities"
    with pytest.raises(NotFoundError):
        service.get_company("nope")


def test_company_users_are_sorted_and_scoped(db, tenant) -> None:
    members = CompanyService(db).get_company_users("c1")

    assert [member.user.id for member in members] == ["u1", "u2", "u3", "owner"]


@pytest.mark.parametrize(
    ("search", "expected"),
    [("baker", ["u2"]), ("U3@X", ["u3"]), ("ow", ["owner"]), ("  ", ["u1", "u2", "u3", "owner"])],
)
def test_company_users_search(db, tenant, search, expected) -> None:
    members = CompanyService(db).get_company_users("c1", search=search)

    assert [member.user.id for member in members] == expected


def test_company_users_limit(db, tenant) -> None:
    service = CompanyService(db)

    assert len(service.get_company_users("c1", limit=2)) == 2
    with pytest.raises(ValidationError):
        service.get_company_users("c1", limit=0)


def test_membership(db, tenant) -> None:
    service = CompanyService(db)

    assert service.user_belongs_to_company("owner", "c1") is True
    assert service.user_belongs_to_company("outsider", "c1") is False
    assert [company.id for company in service.get_user_companies("outsider")] == ["c2"]
