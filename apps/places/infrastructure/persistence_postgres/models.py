"""Places ORM Models.

places.categories
    slug UNIQUE (uq_places_categories_slug)
places.locations
    category_id FK → places.categories.id ON DELETE RESTRICT
    좌표/평점은 고정 소수점 NUMERIC으로 저장하고 float로 읽습니다.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from apps.places.domain.constants import (
    CATEGORY_NAME_MAX_LENGTH,
    CATEGORY_SLUG_MAX_LENGTH,
    LOCATION_NAME_MAX_LENGTH,
    PHONE_MAX_LENGTH,
)

SCHEMA = "places"


class Base(DeclarativeBase):
    """places 스키마 Declarative Base."""


class CategoryModel(Base):
    """카테고리 ORM 모델."""

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("slug", name="uq_places_categories_slug"),
        {"schema": SCHEMA},
    )
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(CATEGORY_NAME_MAX_LENGTH), nullable=False)
    slug: Mapped[str] = mapped_column(String(CATEGORY_SLUG_MAX_LENGTH), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )


class LocationModel(Base):
    """장소 ORM 모델."""

    __tablename__ = "locations"
    __table_args__ = (
        Index("ix_places_locations_category_id", "category_id"),
        {"schema": SCHEMA},
    )
    __mapper_args__ = {"eager_defaults": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(LOCATION_NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Numeric(10, 8, asdecimal=False), nullable=False)
    longitude: Mapped[float] = mapped_column(Numeric(11, 8, asdecimal=False), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey(
            f"{SCHEMA}.categories.id",
            ondelete="RESTRICT",
            name="fk_places_locations_category_id",
        ),
        nullable=False,
    )
    phone: Mapped[str | None] = mapped_column(String(PHONE_MAX_LENGTH))
    website: Mapped[str | None] = mapped_column(Text)
    rating: Mapped[float | None] = mapped_column(Numeric(2, 1, asdecimal=False))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Category 쪽에는 역방향 컬렉션을 두지 않음 (삭제 시 FK를 NULL로 바꾸지 않도록)
    category: Mapped[CategoryModel] = relationship(CategoryModel, lazy="joined")
