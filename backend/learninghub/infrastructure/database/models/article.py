"""SQLAlchemy ORM model for the Article entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from learninghub.infrastructure.database.base import Base, UTCDateTime


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table.

    One row per article; libraries, requirements and use cases are embedded
    JSON arrays with no table of their own.
    """

    __tablename__ = "articles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    language: Mapped[str] = mapped_column(String(100), nullable=False)
    requirements: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    use_cases: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    libraries: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    icon: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    color: Mapped[str] = mapped_column(String(50), nullable=False, default="blue")
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    # Set explicitly by the write pipeline, so no onupdate hook here.
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, slug='{self.slug}')>"
