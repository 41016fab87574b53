import uuid
from typing import List

from sqlalchemy import JSON, BigInteger, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, registry

table_registry = registry()


@table_registry.mapped_as_dataclass
class Movie:
    __tablename__ = "movies"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String, index=True)
    year_of_release: Mapped[int] = mapped_column(BigInteger, default=0)
    genres: Mapped[List[str]] = mapped_column(JSON, default_factory=list)
