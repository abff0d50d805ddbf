"""
Pytest configuration and fixtures for the Feirinha POS API.

Every test gets a fresh in-memory SQLite database; the application's
``get_db`` dependency is overridden to use it.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from feirinha.database import Base, get_db
from feirinha.main import app
from feirinha.payments.models import PaymentMethod
from feirinha.products.models import Product


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """
    Session for arranging and inspecting data directly.
    """
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def card(db):
    """
    Card payment method with a 4.79% fee.
    """
    payment_method = PaymentMethod(name="Cartão", tax_rate=4.79)
    db.add(payment_method)
    db.commit()
    db.refresh(payment_method)
    return payment_method


@pytest.fixture
def cash(db):
    payment_method = PaymentMethod(name="Dinheiro", tax_rate=0)
    db.add(payment_method)
    db.commit()
    db.refresh(payment_method)
    return payment_method


@pytest.fixture
def tomato(db):
    product = Product(name="Tomate", price=10, category="Hortifruti")
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def lettuce(db):
    product = Product(name="Alface", price=2, category="Hortifruti")
    db.add(product)
    db.commit()
    db.refresh(product)
    return product
