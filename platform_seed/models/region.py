"""지역(행정구역) 참조 데이터 SQLAlchemy ORM 모델 정의.

Geographic reference tables. Each level links to its parent:
country → province → city → district → village.

Tables:
    - geo_countries
    - geo_provinces
    - geo_cities
    - geo_districts
    - geo_villages
"""

import uuid

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from platform_seed.database import Base
from platform_seed.models.mixins import BlameableMixin


class Country(BlameableMixin, Base):
    __tablename__ = "geo_countries"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    code: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # ISO 3166 코드 및 국제 전화 코드 — ISO code and dialing prefix
    iso_code: Mapped[str | None] = mapped_column(String(10), nullable=True)
    phone_code: Mapped[str | None] = mapped_column(String(10), nullable=True)


class Province(BlameableMixin, Base):
    __tablename__ = "geo_provinces"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    country_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("geo_countries.id", ondelete="CASCADE"), nullable=False)
    code: Mapped[str] = mapped_column(String(10), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("country_id", "code", name="uq_province_country_code"),
    )


class City(BlameableMixin, Base):
    __tablename__ = "geo_cities"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    province_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("geo_provinces.id", ondelete="CASCADE"), nullable=False)
    code: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("province_id", "code", name="uq_city_province_code"),
    )


class District(BlameableMixin, Base):
    __tablename__ = "geo_districts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    city_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("geo_cities.id", ondelete="CASCADE"), nullable=False)
    code: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("city_id", "code", name="uq_district_city_code"),
    )


class Village(BlameableMixin, Base):
    __tablename__ = "geo_villages"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    district_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("geo_districts.id", ondelete="CASCADE"), nullable=False)
    code: Mapped[str] = mapped_column(String(20), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        UniqueConstraint("district_id", "code", name="uq_village_district_code"),
    )
