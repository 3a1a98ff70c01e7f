from typing import Optional

import pytest
from sqlalchemy import ForeignKey
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import Mapped, mapped_column, relationship

from funext.provider import BaseModel, BaseProvider, create_tables
from funext.results import ErrorType, Outcome


class Job(BaseModel):
    __tablename__ = "jobs"

    title: Mapped[str]
    people: Mapped[list["Person"]] = relationship(back_populates="job")


class Person(BaseModel):
    __tablename__ = "people"

    name: Mapped[str] = mapped_column(unique=True)
    job_id: Mapped[Optional[int]] = mapped_column(ForeignKey("jobs.id"))
    job: Mapped[Optional[Job]] = relationship(back_populates="people")


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def engine(tmp_path, anyio_backend):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'database.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def people(engine) -> BaseProvider[Person]:
    return BaseProvider(engine, Person)


async def test_insert_and_fetch(people, anyio_backend):
    assert await people.insert(Person(name="Ada"))
    assert await people.insert(Person(name="Grace"))

    result = await people.fetch_all()

    assert result.is_success
    assert sorted(person.name for person in result.unwrap()) == ["Ada", "Grace"]


async def test_fetch_all_empty_table(people, anyio_backend):
    result = await people.fetch_all()

    assert result.is_success
    assert result.unwrap() == []


async def test_inserted_entity_gets_an_id(people, anyio_backend):
    person = Person(name="Ada")
    await people.insert(person)

    fetched = (await people.fetch(person.id_)).unwrap()

    assert fetched.name == "Ada"


async def test_fetch_missing_row(people, anyio_backend):
    result = await people.fetch(42)

    assert result.outcome is Outcome.FAILURE
    assert result.error_type is ErrorType.NO_DATA
    assert not result.has_data


async def test_fetch_including_relationship(people, anyio_backend):
    person = Person(name="Ada", job=Job(title="Engineer"))
    await people.insert(person)

    fetched = (await people.fetch_including(person.id_, Person.job)).unwrap()
    assert fetched.job.title == "Engineer"

    everyone = (await people.fetch_all_including(Person.job)).unwrap()
    assert [p.job.title for p in everyone] == ["Engineer"]


async def test_fetch_including_missing_row(people, anyio_backend):
    result = await people.fetch_including(42, Person.job)

    assert result.error_type is ErrorType.NO_DATA


async def test_duplicate_insert_is_an_exception(people, anyio_backend):
    await people.insert(Person(name="Ada"))

    result = await people.insert(Person(name="Ada"))

    assert result.outcome is Outcome.EXCEPTION
    assert result.error_type is ErrorType.EXCEPTION_THROWN
    assert "UNIQUE constraint failed" in result.message


async def test_update(people, anyio_backend):
    person = Person(name="Ada")
    await people.insert(person)
    person.name = "Ada Lovelace"

    assert await people.update(person)

    assert (await people.fetch(person.id_)).unwrap().name == "Ada Lovelace"


async def test_update_missing_row(people, anyio_backend):
    result = await people.update(Person(id_=42, name="Nobody"))

    assert result.error_type is ErrorType.NO_DATA
    assert (await people.fetch_all()).unwrap() == []


async def test_delete(people, anyio_backend):
    person = Person(name="Ada")
    await people.insert(person)

    assert await people.delete(person.id_)

    assert (await people.fetch(person.id_)).error_type is ErrorType.NO_DATA


async def test_delete_missing_row(people, anyio_backend):
    result = await people.delete(42)

    assert result.outcome is Outcome.FAILURE
    assert result.error_type is ErrorType.NO_DATA


async def test_missing_table_is_an_exception(tmp_path, anyio_backend):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    try:
        result = await BaseProvider(engine, Person).fetch_all()
    finally:
        await engine.dispose()

    assert result.is_exception
    assert "no such table" in result.message
