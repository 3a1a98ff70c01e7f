import sqlalchemy.ext.asyncio
import sqlalchemy.orm
from sqlalchemy.orm import Mapped, mapped_column


class Base(sqlalchemy.orm.DeclarativeBase):
    pass


class BaseModel(Base):
    """Base class of the entities that can be handled by a provider.

    Subclasses must define ``__tablename__``.
    The primary key is an auto-incremented integer stored in the ``id`` column.
    """

    __abstract__ = True

    id_: Mapped[int] = mapped_column(name="id", primary_key=True, autoincrement=True)


async def create_tables(engine: sqlalchemy.ext.asyncio.AsyncEngine) -> None:
    """Creates all tables in the database.

    This function only creates non-existing tables. It does not modify existing tables.
    """

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
