"""User ORM — the single persisted entity.

Invariants:
    - id is an integer primary key assigned by the store, immutable after insert
    - name, address, sex are non-nullable
    - sex membership ("male" | "female") is enforced by schemas, not by the table

Design Decisions:
    - BigInteger id with an INTEGER variant on SQLite: SQLite only autoincrements
      a column declared exactly INTEGER PRIMARY KEY
    - No relationships: single-table resource
"""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from perqara_api.db.base import Base


class User(Base):
    """User row — id plus three mutable fields."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    sex: Mapped[str] = mapped_column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, sex={self.sex!r})"
