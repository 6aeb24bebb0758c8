"""Wishlist items with their image URLs."""

from libs.db.executor import QueryExecutor
from libs.db.functions import concat_values
from services.admin_service.models import WishlistImage, WishlistItem
from services.admin_service.schemas import WishlistItemResponse
from services.admin_service.services.shaping import shape_row
from sqlalchemy import select

ITEM_COLUMNS = (
    WishlistItem.id,
    WishlistItem.user_id,
    WishlistItem.name,
    WishlistItem.description,
    WishlistItem.category,
    WishlistItem.link,
    WishlistItem.hashtags,
    WishlistItem.price,
    WishlistItem.amount_funded,
    WishlistItem.is_priority,
    WishlistItem.created_at,
)


def wishlist_query():
    return (
        select(*ITEM_COLUMNS, concat_values(WishlistImage.image_url).label("images"))
        .outerjoin(WishlistImage, WishlistItem.id == WishlistImage.wishlist_id)
        .group_by(WishlistItem.id)
        .order_by(WishlistItem.created_at.desc())
    )


def is_funded(price, amount_funded) -> bool:
    """Funded means fully covered; over-funding still counts as funded."""
    return amount_funded >= price


async def list_wishlist(executor: QueryExecutor) -> list[WishlistItemResponse]:
    rows = await executor.fetch_all(wishlist_query())
    items = []
    for row in rows:
        record = shape_row(
            row,
            money=("price", "amount_funded"),
            flags=("is_priority",),
            lists=("images",),
        )
        record["is_funded"] = is_funded(record["price"], record["amount_funded"])
        items.append(WishlistItemResponse(**record))
    return items
