from datetime import datetime

import sqlalchemy as sa
from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base read model for rows identified by a storage-assigned integer id."""

    model_config = ConfigDict(from_attributes=True)

    id: int = PydanticField(description="Identifier assigned by the database")
    created_at: datetime = PydanticField(description="Set once when the row is inserted")
    updated_at: datetime = PydanticField(description="Refreshed on every update")


class EntityTable(SQLModel, table=False):
    """Base table with an auto-incrementing key and storage-managed timestamps.

    Both timestamps come from the database clock (``CURRENT_TIMESTAMP``), never
    from the application.
    """

    id: int | None = Field(default=None, primary_key=True)

    created_at: datetime | None = Field(
        default=None,
        nullable=False,
        sa_column_kwargs={"server_default": sa.func.now()},
    )
    updated_at: datetime | None = Field(
        default=None,
        nullable=False,
        sa_column_kwargs={
            "server_default": sa.func.now(),
            "onupdate": sa.func.now(),
        },
    )
