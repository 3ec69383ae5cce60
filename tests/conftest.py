"""
Pytest configuration and shared fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from datetime import datetime, timedelta
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from hotel_management.database import Base, get_db
from hotel_management.models.entities import Chamber, Guest, Rental, Category
from hotel_management.main import app


@pytest.fixture(scope="function")
def db_engine():
    """In-memory database engine"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Test client bound to the in-memory session"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Entity fixtures ==============

@pytest.fixture
def make_chamber(db_session):
    """Factory for chambers; defaults to an empty low-tier single room"""
    counter = [100]

    def _make(**kwargs):
        counter[0] += 1
        defaults = {
            "chamber_number": str(counter[0]),
            "chamber_type": "single",
            "is_vip": False,
            "price_day": 500_000,
            "chamber_area": 20,
            "note": None,
            "is_empty": True,
        }
        defaults.update(kwargs)
        chamber = Chamber(**defaults)
        db_session.add(chamber)
        db_session.commit()
        db_session.refresh(chamber)
        return chamber
    return _make


@pytest.fixture
def sample_chamber(make_chamber):
    return make_chamber(chamber_number="101", is_vip=True)


@pytest.fixture
def sample_guest(db_session):
    guest = Guest(
        guest_name="Nguyễn Văn A",
        birth="1990-01-01",
        id_card="012345678901",
        passport="B1234567",
        address="Hà Nội",
        nationality="Việt Nam",
        phone_number="0901234567",
        email="a@example.com",
        is_familiar=False,
        is_vip=False,
    )
    db_session.add(guest)
    db_session.commit()
    db_session.refresh(guest)
    return guest


@pytest.fixture
def open_rental(db_session, make_chamber, sample_guest):
    """Guest staying in room 201 since two days ago"""
    chamber = make_chamber(chamber_number="201", price_day=800_000, is_empty=False)
    rental = Rental(
        guest=sample_guest,
        chambers=[chamber],
        check_in_date=datetime.now() - timedelta(days=2, hours=1),
        discount=0,
        paid=False,
    )
    db_session.add(rental)
    db_session.commit()
    db_session.refresh(rental)
    return rental


@pytest.fixture
def sample_category(db_session):
    category = Category(category_name="Món chính")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category
