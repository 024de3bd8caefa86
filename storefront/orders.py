"""
Order creation and order record operations.

`create_order` runs three dependent steps in sequence: read the user's wishes,
open a Stripe checkout session for them, insert the order. There is no shared
transaction between Stripe and the database; a session whose order failed to
persist is logged as orphaned and left as is.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from storefront.errors import NotFound, handle_db_exception
from storefront.logging_config import get_logger
from storefront.models import Order, OrderStatus, OrderWish, User, Wish
from storefront.payment_gateway import PaymentGateway
from storefront.schemas import OrderUpdate
from storefront.wishes import find_user_wishes

log = get_logger(__name__)


def build_line_items(wishes: List[Wish], currency: str) -> List[Dict[str, Any]]:
    """One Stripe line item per wish, in wish order. Prices are already in minor units."""
    return [
        {
            "price_data": {
                "product_data": {
                    "name": wish.material,
                    "description": f"Print on {wish.material}",
                },
                "currency": currency,
                "unit_amount": wish.size_price + wish.photo_price,
            },
            "quantity": wish.amount,
        }
        for wish in wishes
    ]


def create_order(db: Session, user: User, gateway: PaymentGateway) -> Order:
    log_prefix = f"[User: {user.id}]"
    wishes = find_user_wishes(db, user.id)
    if not wishes:
        log.warning("%s Order refused, no wishes.", log_prefix)
        raise NotFound("No wishes found")

    line_items = build_line_items(wishes, gateway.config.currency)
    log.info("%s Creating order for %d wish(es).", log_prefix, len(wishes))

    session = None
    values: Dict[str, Any] = {}
    try:
        session = gateway.create_checkout_session(line_items)
        log.info("%s Checkout session %s opened, amount_total=%s.",
                 log_prefix, session.id, session.amount_total)

        values = {
            "paid": session.amount_total,
            "status": OrderStatus.PENDING.value,
            "payment_link": session.url,
            "payment_session_id": session.id,
            "user_id": user.id,
        }
        order = Order(**values)
        order.wish_links = [
            OrderWish(wish_id=wish.id, position=index) for index, wish in enumerate(wishes)
        ]
        db.add(order)
        db.commit()
    except Exception as error:
        db.rollback()
        if session is not None:
            log.critical("%s Orphaned payment session %s (%s): order not persisted: %r",
                         log_prefix, session.id, session.url, error)
        handle_db_exception(error, "Order", values)

    # the order is stored from here on; a failed reload is not an orphan
    try:
        db.refresh(order)
    except Exception as error:
        handle_db_exception(error, "Order", values)

    log.info("%s Order %s persisted with status %s.", log_prefix, order.id, order.status)
    return order


def list_orders(db: Session, limit: int = 10, offset: int = 0) -> List[Order]:
    return db.query(Order).order_by(Order.id).offset(offset).limit(limit).all()


def get_order(db: Session, order_id: int) -> Order:
    order = db.get(Order, order_id)
    if order is None:
        raise NotFound(f"Order with id: '{order_id}' not found")
    return order


def update_order(db: Session, order_id: int, patch: OrderUpdate) -> Order:
    order = get_order(db, order_id)
    changes = patch.model_dump(exclude_unset=True, exclude_none=True)

    # no transition rules: any status in the patch is stored as given
    if "status" in changes:
        changes["status"] = changes["status"].value

    for field, value in changes.items():
        setattr(order, field, value)
    db.commit()
    db.refresh(order)
    return order


def remove_order(db: Session, order_id: int) -> str:
    order = get_order(db, order_id)
    db.delete(order)
    db.commit()
    return f"Order with the id: '{order_id}' was removed"
