"""Integration tests for GET /api/wishlist."""

from decimal import Decimal

import pytest
from tests.factories import (
    UserFactory,
    WishlistImageFactory,
    WishlistItemFactory,
    days_ago,
)


async def _make_owner(db):
    user = UserFactory.create()
    db.add(user)
    await db.commit()
    return user


async def _make_item(db, user_id, **overrides):
    item = WishlistItemFactory.create(user_id=user_id, **overrides)
    db.add(item)
    await db.commit()
    return item


@pytest.mark.asyncio
@pytest.mark.integration
async def test_item_images_are_listed(admin_client, db_session):
    owner = await _make_owner(db_session)
    item = await _make_item(db_session, owner.id, is_priority=True)
    db_session.add_all(
        [
            WishlistImageFactory.create(
                wishlist_id=item.id, image_url="https://cdn.nisapoti.co.tz/a.jpg"
            ),
            WishlistImageFactory.create(
                wishlist_id=item.id, image_url="https://cdn.nisapoti.co.tz/b.jpg"
            ),
        ]
    )
    await db_session.commit()

    response = await admin_client.get("/api/wishlist")
    assert response.status_code == 200, response.text
    (listed,) = response.json()

    assert listed["id"] == item.id
    assert sorted(listed["images"]) == [
        "https://cdn.nisapoti.co.tz/a.jpg",
        "https://cdn.nisapoti.co.tz/b.jpg",
    ]
    assert listed["is_priority"] is True
    assert listed["price"] == 100000.0


@pytest.mark.asyncio
@pytest.mark.integration
async def test_item_without_images_has_empty_list(admin_client, db_session):
    owner = await _make_owner(db_session)
    await _make_item(db_session, owner.id)

    response = await admin_client.get("/api/wishlist")
    (listed,) = response.json()
    assert listed["images"] == []
    assert listed["is_priority"] is False


@pytest.mark.asyncio
@pytest.mark.integration
async def test_is_funded_boundary(admin_client, db_session):
    owner = await _make_owner(db_session)
    await _make_item(
        db_session,
        owner.id,
        name="Exactly funded",
        price=Decimal("100000"),
        amount_funded=Decimal("100000"),
        created_at=days_ago(3),
    )
    await _make_item(
        db_session,
        owner.id,
        name="One short",
        price=Decimal("100000"),
        amount_funded=Decimal("99999"),
        created_at=days_ago(2),
    )
    await _make_item(
        db_session,
        owner.id,
        name="Over funded",
        price=Decimal("50000"),
        amount_funded=Decimal("65000"),
        created_at=days_ago(1),
    )

    response = await admin_client.get("/api/wishlist")
    assert response.status_code == 200
    funded = {item["name"]: item["is_funded"] for item in response.json()}
    assert funded == {
        "Exactly funded": True,
        "One short": False,
        "Over funded": True,
    }
    # Newest first
    assert [item["name"] for item in response.json()] == [
        "Over funded",
        "One short",
        "Exactly funded",
    ]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_wishlist_rejects_bad_token(client):
    response = await client.get(
        "/api/wishlist", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 403
