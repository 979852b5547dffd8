"""Unit tests for the SQLAlchemy CustomerRepository.

Runs against an in-memory SQLite database (aiosqlite) built from the real
models. Each operation uses its own session so reads never come from the
identity map of the session that wrote.

Tests cover:
- find (with lock modes), find_by_email (exact, case-insensitive match)
- save insert and update
- delete, find_all, count
"""

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from customer_service.domain.entities.customer import CustomerUpdate
from customer_service.infrastructure.persistence.base import BaseModel
from customer_service.infrastructure.persistence.models import (
    CustomerStatusModel,
    CustomerTypeModel,
)
from customer_service.infrastructure.persistence.repositories import CustomerRepository
from customer_service.infrastructure.persistence.repositories.customer_repository import (
    LOCK_PESSIMISTIC_READ,
    LOCK_PESSIMISTIC_WRITE,
)
from tests.conftest import ACTIVE, CUSTOMER_EMAIL, CUSTOMER_ID, INDIVIDUAL, make_customer

OTHER_ID = "01BX5ZZKBKACTAV9WEVGEMMVRZ"
THIRD_ID = "01BX5ZZKBKACTAV9WEVGEMMVS0"


@pytest.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        session.add(CustomerTypeModel(ulid=INDIVIDUAL.ulid, value=INDIVIDUAL.value))
        session.add(CustomerStatusModel(ulid=ACTIVE.ulid, value=ACTIVE.value))
        await session.commit()
    return factory


async def _save(session_factory, customer):
    async with session_factory() as session:
        await CustomerRepository(session).save(customer)


async def _find(session_factory, customer_id, **kwargs):
    async with session_factory() as session:
        return await CustomerRepository(session).find(customer_id, **kwargs)


async def _find_by_email(session_factory, email):
    async with session_factory() as session:
        return await CustomerRepository(session).find_by_email(email)


@pytest.mark.unit
class TestFind:
    async def test_find_returns_domain_customer(self, session_factory):
        await _save(session_factory, make_customer())

        found = await _find(session_factory, CUSTOMER_ID)

        assert found is not None
        assert found.ulid == CUSTOMER_ID
        assert found.email == CUSTOMER_EMAIL
        assert found.type == INDIVIDUAL
        assert found.status == ACTIVE

    async def test_find_unknown_returns_none(self, session_factory):
        assert await _find(session_factory, OTHER_ID) is None

    @pytest.mark.parametrize("lock_mode", [LOCK_PESSIMISTIC_READ, LOCK_PESSIMISTIC_WRITE])
    async def test_find_with_lock_mode(self, session_factory, lock_mode):
        await _save(session_factory, make_customer())

        found = await _find(session_factory, CUSTOMER_ID, lock_mode=lock_mode)

        assert found is not None
        assert found.ulid == CUSTOMER_ID


@pytest.mark.unit
class TestFindByEmail:
    async def test_case_and_whitespace_insensitive(self, session_factory):
        await _save(session_factory, make_customer())

        found = await _find_by_email(session_factory, "  Jane.Doe@Example.COM ")

        assert found is not None
        assert found.ulid == CUSTOMER_ID

    @pytest.mark.parametrize(
        "lookup", ["joe_smith@example.com", "joe%smith@example.com", "%@example.com"]
    )
    async def test_like_wildcards_match_literally(self, session_factory, lookup):
        await _save(
            session_factory, make_customer(ulid=OTHER_ID, email="joexsmith@example.com")
        )

        assert await _find_by_email(session_factory, lookup) is None

    async def test_underscore_email_found_exactly(self, session_factory):
        await _save(
            session_factory, make_customer(ulid=OTHER_ID, email="joexsmith@example.com")
        )
        await _save(session_factory, make_customer(email="joe_smith@example.com"))

        found = await _find_by_email(session_factory, "joe_smith@example.com")

        assert found is not None
        assert found.ulid == CUSTOMER_ID


@pytest.mark.unit
class TestSave:
    async def test_save_updates_existing_row(self, session_factory):
        customer = make_customer()
        await _save(session_factory, customer)

        customer.update(
            CustomerUpdate(
                initials="JS",
                email="jane.smith@example.com",
                phone="+3706000000",
                lead_source="Referral",
                type=INDIVIDUAL,
                status=ACTIVE,
                confirmed=True,
            )
        )
        await _save(session_factory, customer)

        found = await _find(session_factory, CUSTOMER_ID)
        assert found.initials == "JS"
        assert found.email == "jane.smith@example.com"
        assert found.lead_source == "Referral"
        assert found.confirmed is True
        assert await _find_by_email(session_factory, CUSTOMER_EMAIL) is None


@pytest.mark.unit
class TestDeleteListCount:
    async def test_delete_removes_row(self, session_factory):
        customer = make_customer()
        await _save(session_factory, customer)

        async with session_factory() as session:
            await CustomerRepository(session).delete(customer)

        assert await _find(session_factory, CUSTOMER_ID) is None

    async def test_delete_missing_is_noop(self, session_factory):
        async with session_factory() as session:
            await CustomerRepository(session).delete(make_customer())

    async def test_find_all_ordered_and_paginated(self, session_factory):
        await _save(session_factory, make_customer(ulid=THIRD_ID, email="c@example.com"))
        await _save(session_factory, make_customer())
        await _save(session_factory, make_customer(ulid=OTHER_ID, email="b@example.com"))

        async with session_factory() as session:
            repo = CustomerRepository(session)
            first_page = await repo.find_all(limit=2)
            second_page = await repo.find_all(limit=2, offset=2)
            total = await repo.count()

        assert [c.ulid for c in first_page] == [CUSTOMER_ID, OTHER_ID]
        assert [c.ulid for c in second_page] == [THIRD_ID]
        assert total == 3
