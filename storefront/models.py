import enum
from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import relationship

from storefront.database import Base


class OrderStatus(str, enum.Enum):
    PENDING = "Pending"
    PAID = "Paid"
    FULFILLED = "Fulfilled"
    CANCELLED = "Cancelled"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String, unique=True, index=True)

    wishes = relationship("Wish", back_populates="user", order_by="Wish.id")


class Wish(Base):
    __tablename__ = "wishes"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    material = Column(String, nullable=False)
    size_price = Column(Integer, nullable=False, default=0)     # minor units
    photo_price = Column(Integer, nullable=False, default=0)    # minor units
    amount = Column(Integer, nullable=False, default=1)

    user = relationship("User", back_populates="wishes")


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    paid = Column(Integer)                                      # session amount_total
    status = Column(String, default=OrderStatus.PENDING.value, nullable=False)
    payment_link = Column(String)
    payment_session_id = Column(String, unique=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    wish_links = relationship(
        "OrderWish",
        order_by="OrderWish.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )

    @property
    def wishes(self):
        return [link.wish_id for link in self.wish_links]


class OrderWish(Base):
    __tablename__ = "order_wishes"

    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True)
    wish_id = Column(Integer, ForeignKey("wishes.id"), primary_key=True)
    position = Column(Integer, nullable=False)


class Offer(Base):
    __tablename__ = "offers"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False, index=True)
    description = Column(String, default="")
    base_price = Column(Integer, nullable=False, default=0)
    image = Column(String, default="No_image", nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    prices = relationship(
        "OfferPrice",
        order_by="OfferPrice.id",
        cascade="all, delete-orphan",
    )


class OfferPrice(Base):
    __tablename__ = "offer_prices"

    id = Column(Integer, primary_key=True)
    offer_id = Column(Integer, ForeignKey("offers.id", ondelete="CASCADE"), nullable=False)
    amount = Column(Integer, nullable=False)
    currency = Column(String(3), nullable=False)
    effective_date = Column(Date, default=date.today, nullable=False)
