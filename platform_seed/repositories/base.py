"""기본 레포지토리 — 모든 시더 레포지토리의 부모 클래스.

Base Repository — Parent class for seeder repositories.
Provides lookup, first-or-create / update-or-create upserts and chunked
bulk inserts, the building blocks every idempotent seeder uses.

Usage:
    class ScopeRepository(BaseRepository[OAuthScope]):
        def __init__(self) -> None:
            super().__init__(OAuthScope)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.database import Base
from platform_seed.utils.csv_reader import chunked

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 시더 레포지토리.

    Generic repository providing the upsert primitives used by seeders.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    def _filtered(self, filters: dict[str, Any]) -> Select:
        """컬럼=값 조건을 적용한 SELECT (None 값은 IS NULL로 비교).

        Build a SELECT with column equality filters; None compares with IS NULL.
        """
        query: Select = select(self.model)
        for column_name, value in filters.items():
            column = getattr(self.model, column_name)
            query = query.where(column.is_(None) if value is None else column == value)
        return query

    async def get_by_id(self, db: AsyncSession, record_id: UUID) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다 (Retrieve a single record by UUID)."""
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_one_by(self, db: AsyncSession, **filters: Any) -> ModelType | None:
        """조건에 맞는 첫 레코드를 조회합니다.

        Retrieve the first record matching the equality filters.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            **filters: 컬럼명=값 조건 (column_name=value filters)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        result = await db.execute(self._filtered(filters).limit(1))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다 (Retrieve all matching records)."""
        query: Select = self._filtered(filters or {})
        if order_by is not None:
            query = query.order_by(order_by)
        result = await db.execute(query)
        return result.scalars().all()

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수 (Total row count)."""
        result = await db.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    async def first_or_create(
        self,
        db: AsyncSession,
        lookup: dict[str, Any],
        values: dict[str, Any] | None = None,
    ) -> tuple[ModelType, bool]:
        """lookup으로 조회하고, 없으면 lookup+values로 생성합니다.

        Find a record by ``lookup``; create it from ``lookup`` merged with
        ``values`` when missing. Existing records are left untouched.

        Returns:
            tuple[ModelType, bool]: (레코드, 새로 생성 여부) (record, created)
        """
        existing: ModelType | None = await self.get_one_by(db, **lookup)
        if existing is not None:
            return existing, False

        db_obj: ModelType = self.model(**{**lookup, **(values or {})})
        db.add(db_obj)
        await db.flush()  # flush로 id 생성 (Flush to generate id)
        return db_obj, True

    async def update_or_create(
        self,
        db: AsyncSession,
        lookup: dict[str, Any],
        values: dict[str, Any],
    ) -> tuple[ModelType, bool]:
        """lookup으로 조회해 values로 갱신하거나, 없으면 생성합니다.

        Update the record matching ``lookup`` with ``values``, or create it.

        Returns:
            tuple[ModelType, bool]: (레코드, 새로 생성 여부) (record, created)
        """
        existing: ModelType | None = await self.get_one_by(db, **lookup)
        if existing is None:
            return await self.first_or_create(db, lookup, values)

        for field, value in values.items():
            setattr(existing, field, value)
        await db.flush()
        return existing, False

    async def pluck(self, db: AsyncSession, value_column: str, key_column: str) -> dict[Any, Any]:
        """key_column → value_column 매핑 (e.g. code → id).

        Map ``key_column`` to ``value_column`` across all rows.
        """
        result = await db.execute(
            select(getattr(self.model, key_column), getattr(self.model, value_column))
        )
        return {key: value for key, value in result.all()}

    async def bulk_insert(
        self,
        db: AsyncSession,
        rows: list[dict[str, Any]],
        chunk_size: int,
    ) -> int:
        """행 목록을 chunk_size 단위로 일괄 삽입합니다.

        Insert rows in chunks of ``chunk_size`` using executemany.

        Returns:
            int: 삽입된 행 수 (Number of rows inserted)
        """
        inserted: int = 0
        for batch in chunked(rows, chunk_size):
            await db.execute(insert(self.model), batch)
            inserted += len(batch)
        return inserted

    async def delete_all(self, db: AsyncSession) -> None:
        """테이블의 모든 행을 삭제합니다 (Delete every row of the table)."""
        await db.execute(delete(self.model))
