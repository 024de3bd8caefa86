import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from storefront.auth import get_current_user, verify_token
from storefront.config import GatewayConfig
from storefront.database import Base
from storefront.main import app as fastapi_app
from storefront.models import User, Wish
from storefront.payment_gateway import PaymentGateway, get_payment_gateway

# Setup test database
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_storefront.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={
                       "check_same_thread": False})
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=engine)

GATEWAY_CONFIG = GatewayConfig(
    secret_key="sk_test_123",
    success_url="https://shop.test/success",
    cancel_url="https://shop.test/cancel",
)


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db():
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def user(db):
    u = User(email="buyer@example.com")
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def add_wish(db):
    def _add(user, material="Canvas", size_price=1000, photo_price=500, amount=2):
        wish = Wish(user_id=user.id, material=material, size_price=size_price,
                    photo_price=photo_price, amount=amount)
        db.add(wish)
        db.commit()
        db.refresh(wish)
        return wish
    return _add


@pytest.fixture
def gateway():
    return PaymentGateway(GATEWAY_CONFIG)


@pytest.fixture
def checkout_session(mocker):
    # Stand-in for the stripe.checkout.Session object
    def _session(id="cs_test_abc", amount_total=3000, url="https://pay/session/abc"):
        session = mocker.Mock()
        session.id = id
        session.amount_total = amount_total
        session.url = url
        return session
    return _session


@pytest.fixture
def client(monkeypatch, user):
    monkeypatch.setattr("storefront.database.SessionLocal", TestingSessionLocal)
    # Bypass auth verification, the caller is always `user`
    current = User(id=user.id, email="buyer@example.com")
    fastapi_app.dependency_overrides[verify_token] = lambda: True
    fastapi_app.dependency_overrides[get_current_user] = lambda: current
    fastapi_app.dependency_overrides[get_payment_gateway] = lambda: PaymentGateway(GATEWAY_CONFIG)
    with TestClient(fastapi_app) as c:
        yield c
    fastapi_app.dependency_overrides.clear()
