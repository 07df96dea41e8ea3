"""Tests for the public report and listing endpoints."""


def test_report_user(public_client, auth_headers, sender, owner):
    response = public_client.post(
        "/api/v1/reports",
        json={"reported_user_id": owner.id, "category": "harassment", "reason": "Abusive"},
        headers=auth_headers(sender),
    )

    assert response.status_code == 201
    data = response.json()
    assert data["reporter_user_id"] == sender.id
    assert data["category"] == "harassment"


def test_listing_report_rejects_user_only_category(
    public_client, auth_headers, sender, listing
):
    response = public_client.post(
        "/api/v1/reports",
        json={"listing_id": listing.id, "category": "harassment", "reason": "Abusive"},
        headers=auth_headers(sender),
    )

    assert response.status_code == 422
    assert response.json()["details"]["kind"] == "VALIDATION"


def test_report_requires_reason(public_client, auth_headers, sender, owner):
    response = public_client.post(
        "/api/v1/reports",
        json={"reported_user_id": owner.id, "category": "spam", "reason": "  "},
        headers=auth_headers(sender),
    )
    assert response.status_code == 422


def test_get_listing_summary(public_client, auth_headers, sender, owner, listing):
    response = public_client.get(f"/api/v1/listings/{listing.id}", headers=auth_headers(sender))

    assert response.status_code == 200
    assert response.json() == {
        "id": listing.id,
        "title": "Sunny 2BHK near the park",
        "owner_user_id": owner.id,
    }


def test_removed_listing_not_found(public_client, db, auth_headers, sender, listing):
    from datetime import datetime, timezone

    listing.deleted_at = datetime.now(timezone.utc)
    db.commit()

    response = public_client.get(f"/api/v1/listings/{listing.id}", headers=auth_headers(sender))

    assert response.status_code == 404
    assert response.json()["error"] == "NOT_FOUND"


def test_hidden_listing_visible_to_owner_only(
    public_client, db, auth_headers, sender, owner, listing
):
    listing.is_public = False
    db.commit()

    hidden = public_client.get(f"/api/v1/listings/{listing.id}", headers=auth_headers(sender))
    own = public_client.get(f"/api/v1/listings/{listing.id}", headers=auth_headers(owner))

    assert hidden.status_code == 404
    assert own.status_code == 200
