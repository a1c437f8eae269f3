from typing import Optional

from sqlalchemy import Boolean, Column, Text, false
from sqlmodel import Field, SQLModel


class Todo(SQLModel, table=True):
    __tablename__ = "todos"

    id: Optional[int] = Field(default=None, primary_key=True)
    task: str = Field(sa_column=Column(Text, nullable=False))
    # None → absent de l'INSERT, la base pose le défaut (false)
    completed: Optional[bool] = Field(
        default=None,
        sa_column=Column(Boolean, nullable=False, server_default=false()),
    )
