"""
Test configuration and shared fixtures.
Provides an in-memory SQLite database and sample rows.
"""

from datetime import timedelta
from typing import List

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from querydao.core.database import Base, create_session_factory, init_db
from tests.models import BASE_TIME, Order, OrderItem, User


# ===== DATABASE SETUP =====


@pytest.fixture(scope="session")
def engine():
    """Create in-memory SQLite engine shared by the whole run"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """Create a session and reset every table afterwards"""
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)


# ===== SAMPLE DATA FIXTURES =====


@pytest.fixture
def sample_users(db_session) -> List[User]:
    """25 users; user-NN was updated NN minutes after BASE_TIME"""
    users = [
        User(
            id=i + 1,
            name=f"user-{i:02d}",
            email=f"user{i:02d}@example.com",
            updated_at=BASE_TIME + timedelta(minutes=i),
        )
        for i in range(25)
    ]
    db_session.add_all(users)
    db_session.commit()
    return users


@pytest.fixture
def users_with_orders(db_session) -> List[User]:
    """Two users, each with orders that carry items"""
    alice = User(id=1, name="alice", email="alice@example.com", updated_at=BASE_TIME)
    bob = User(id=2, name="bob", email="bob@example.com", updated_at=BASE_TIME + timedelta(hours=1))

    alice.orders = [
        Order(id=10, total=20.0, items=[OrderItem(sku="A-1"), OrderItem(sku="A-2")]),
        Order(id=11, total=5.5, items=[OrderItem(sku="A-3")]),
    ]
    bob.orders = [Order(id=20, total=99.0, items=[OrderItem(sku="B-1")])]

    db_session.add_all([alice, bob])
    db_session.commit()
    return [alice, bob]
