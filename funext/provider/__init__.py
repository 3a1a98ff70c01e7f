"""Generic asynchronous CRUD access to SQL tables through sqlalchemy.

Example:
    .. code-block:: python

        from sqlalchemy.ext.asyncio import create_async_engine

        from funext.provider import BaseModel, BaseProvider, create_tables

        class Person(BaseModel):
            __tablename__ = "people"

            name: Mapped[str]

        engine = create_async_engine("sqlite+aiosqlite:///people.db")
        await create_tables(engine)

        people = BaseProvider(engine, Person)
        await people.insert(Person(name="Ada"))
        result = await people.fetch(1)
"""

from ._provider import BaseProvider
from ._table_base import Base, BaseModel, create_tables

__all__ = ["Base", "BaseModel", "BaseProvider", "create_tables"]
