import math
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.errors import BadRequest, NotFound, handle_db_exception
from storefront.models import Offer, OfferPrice
from storefront.schemas import OfferCreate, OfferUpdate, PriceEntry


def create_offer(db: Session, payload: OfferCreate) -> Offer:
    values = payload.model_dump()
    try:
        offer = Offer(**values)
        db.add(offer)
        db.commit()
        db.refresh(offer)
    except Exception as error:
        db.rollback()
        handle_db_exception(error, "Offer", values)
    return offer


def list_offers(db: Session, limit: int = 10, page: int = 1, is_client: bool = True) -> Dict[str, Any]:
    query = db.query(Offer)
    if is_client:
        query = query.filter(Offer.is_active.is_(True))

    skip = (page - 1) * limit
    offers = query.order_by(Offer.id).offset(skip).limit(limit).all()
    total = query.count()
    return {
        "data": offers,
        "total_pages": math.ceil(total / limit),
    }


def get_offer(db: Session, offer_id: int, is_client: bool = True) -> Offer:
    offer = db.get(Offer, offer_id)
    if offer is None:
        raise NotFound(f"Offer with id: '{offer_id}' not found")
    if is_client and not offer.is_active:
        raise BadRequest(f"Offer with id: '{offer_id}' is not active")
    return offer


def update_offer(db: Session, offer_id: int, patch: OfferUpdate) -> Offer:
    offer = get_offer(db, offer_id, is_client=False)
    changes = patch.model_dump(exclude_unset=True, exclude_none=True)
    try:
        for field, value in changes.items():
            setattr(offer, field, value)
        db.commit()
        db.refresh(offer)
    except Exception as error:
        db.rollback()
        handle_db_exception(error, "Offer", changes)
    return offer


def remove_offer(db: Session, offer_id: int) -> str:
    # the image stays in blob storage; deleting it belongs to the upload service
    offer = get_offer(db, offer_id, is_client=False)
    db.delete(offer)
    db.commit()
    return f"Offer with the id: '{offer_id}' was removed"


def add_price(db: Session, offer_id: int, price: PriceEntry) -> Offer:
    offer = get_offer(db, offer_id, is_client=False)
    offer.prices.append(
        OfferPrice(
            amount=price.amount,
            currency=price.currency.lower(),
            effective_date=price.effective_date,
        )
    )
    db.commit()
    db.refresh(offer)
    return offer
