from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from storefront import offers, orders
from storefront.auth import get_current_user, verify_token
from storefront.database import get_db
from storefront.models import User
from storefront.payment_gateway import PaymentGateway, get_payment_gateway
from storefront.schemas import (
    Message,
    OfferCreate,
    OfferOut,
    OfferPage,
    OfferUpdate,
    OrderOut,
    OrderUpdate,
    PriceEntry,
)

router = APIRouter()


# --- orders ---

@router.post("/orders", response_model=OrderOut, status_code=201)
def create_order_api(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    gateway: PaymentGateway = Depends(get_payment_gateway),
):
    return orders.create_order(db, user, gateway)


@router.get("/orders", response_model=List[OrderOut])
def list_orders_api(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
    auth=Depends(verify_token),
):
    return orders.list_orders(db, limit=limit, offset=offset)


@router.get("/orders/{order_id}", response_model=OrderOut)
def get_order_api(order_id: int, db: Session = Depends(get_db), auth=Depends(verify_token)):
    return orders.get_order(db, order_id)


@router.patch("/orders/{order_id}", response_model=OrderOut)
def update_order_api(
    order_id: int,
    patch: OrderUpdate,
    db: Session = Depends(get_db),
    auth=Depends(verify_token),
):
    return orders.update_order(db, order_id, patch)


@router.delete("/orders/{order_id}", response_model=Message)
def remove_order_api(order_id: int, db: Session = Depends(get_db), auth=Depends(verify_token)):
    return {"message": orders.remove_order(db, order_id)}


# --- offers ---

@router.post("/offers", response_model=OfferOut, status_code=201)
def create_offer_api(payload: OfferCreate, db: Session = Depends(get_db), auth=Depends(verify_token)):
    return offers.create_offer(db, payload)


@router.get("/offers", response_model=OfferPage)
def list_offers_api(
    limit: int = Query(10, ge=1, le=100),
    page: int = Query(1, ge=1),
    db: Session = Depends(get_db),
):
    return offers.list_offers(db, limit=limit, page=page)


@router.get("/offers/all", response_model=OfferPage)
def list_all_offers_api(
    limit: int = Query(10, ge=1, le=100),
    page: int = Query(1, ge=1),
    db: Session = Depends(get_db),
    auth=Depends(verify_token),
):
    return offers.list_offers(db, limit=limit, page=page, is_client=False)


@router.get("/offers/{offer_id}", response_model=OfferOut)
def get_offer_api(offer_id: int, db: Session = Depends(get_db)):
    return offers.get_offer(db, offer_id)


@router.patch("/offers/{offer_id}", response_model=OfferOut)
def update_offer_api(
    offer_id: int,
    patch: OfferUpdate,
    db: Session = Depends(get_db),
    auth=Depends(verify_token),
):
    return offers.update_offer(db, offer_id, patch)


@router.delete("/offers/{offer_id}", response_model=Message)
def remove_offer_api(offer_id: int, db: Session = Depends(get_db), auth=Depends(verify_token)):
    return {"message": offers.remove_offer(db, offer_id)}


@router.post("/offers/{offer_id}/prices", response_model=OfferOut)
def add_price_api(
    offer_id: int,
    price: PriceEntry,
    db: Session = Depends(get_db),
    auth=Depends(verify_token),
):
    return offers.add_price(db, offer_id, price)
