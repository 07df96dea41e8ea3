"""Tests for the moderator endpoints."""

import pytest

from dwell.models import Report, ReportCategory


@pytest.fixture
def admin(make_user):
    return make_user("root", is_admin=True)


@pytest.fixture
def reports(db, sender, owner, listing):
    rows = [
        Report(
            reporter_user_id=sender.id,
            reported_user_id=owner.id,
            category=ReportCategory.HARASSMENT,
            reason="Rude",
        ),
        Report(
            reporter_user_id=sender.id,
            listing_id=listing.id,
            category=ReportCategory.FAKE,
            reason="Photos are stock images",
        ),
    ]
    db.add_all(rows)
    db.commit()
    return rows


def test_admin_required(private_client, auth_headers, sender):
    response = private_client.get("/api/v1/admin/reports", headers=auth_headers(sender))
    assert response.status_code == 403


def test_list_reports(private_client, auth_headers, admin, reports):
    response = private_client.get("/api/v1/admin/reports", headers=auth_headers(admin))

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert data["page"] == 1
    assert data["total_pages"] == 1


def test_list_reports_by_category(private_client, auth_headers, admin, reports):
    response = private_client.get(
        "/api/v1/admin/reports", params={"category": "fake"}, headers=auth_headers(admin)
    )

    data = response.json()
    assert data["total"] == 1
    assert data["reports"][0]["category"] == "fake"


def test_page_size_bounded(private_client, auth_headers, admin):
    response = private_client.get(
        "/api/v1/admin/reports", params={"page_size": 1000}, headers=auth_headers(admin)
    )
    assert response.status_code == 422


def test_suspend_user(private_client, auth_headers, admin, sender):
    response = private_client.post(
        f"/api/v1/admin/users/{sender.id}/suspension",
        json={"suspend": True},
        headers=auth_headers(admin),
    )

    assert response.status_code == 200
    assert response.json()["suspended_at"] is not None

    response = private_client.post(
        f"/api/v1/admin/users/{sender.id}/suspension",
        json={"suspend": False},
        headers=auth_headers(admin),
    )
    assert response.json()["suspended_at"] is None


def test_suspend_unknown_user(private_client, auth_headers, admin):
    response = private_client.post(
        "/api/v1/admin/users/4242/suspension",
        json={"suspend": True},
        headers=auth_headers(admin),
    )

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


def test_moderate_listing(private_client, auth_headers, admin, listing):
    response = private_client.post(
        f"/api/v1/admin/listings/{listing.id}/moderation",
        json={"is_public": False, "soft_delete": True},
        headers=auth_headers(admin),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["is_public"] is False
    assert data["deleted_at"] is not None


def test_moderate_listing_requires_a_change(private_client, auth_headers, admin, listing):
    response = private_client.post(
        f"/api/v1/admin/listings/{listing.id}/moderation",
        json={},
        headers=auth_headers(admin),
    )
    assert response.status_code == 422
