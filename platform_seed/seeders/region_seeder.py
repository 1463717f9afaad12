"""지역 시더 — CSV 기반 국가/주/시/구/동 참조 데이터 적재.

Region seeder. Replaces the geographic reference tables with the contents
of the CSV files in the configured directory.

CSV files (header row, comma-delimited, optional UTF-8 BOM):

    | File          | Columns                                 | Parent lookup                  |
    |---------------|-----------------------------------------|--------------------------------|
    | country.csv   | kode, nama, iso_code?, phone_code?      | -                              |
    | province.csv  | kode, nama, country_code                | country by code                |
    | city.csv      | kode, nama, country_code, province_code | province by (country, code)    |
    | district.csv  | kode, nama                              | city whose code = kode[:5]     |
    | villages.csv  | code, name (positional)                 | district whose code = code[:8] |

Rows whose parent cannot be found are skipped. A missing file is logged and
that level is skipped. A file that is not UTF-8 raises CsvEncodingError, so
the runner rolls the whole import back and the previous data stays. Inserts go out in chunks of ``settings.SEED_CHUNK_SIZE``;
villages are streamed since the file is large.
"""

import logging
from pathlib import Path
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.config import settings
from platform_seed.repositories.region_repository import (
    city_repository,
    country_repository,
    district_repository,
    province_repository,
    village_repository,
)
from platform_seed.seeders.base import SeedContext, Seeder, SeedResult
from platform_seed.utils.csv_reader import iter_csv_rows, read_csv_file

logger = logging.getLogger(__name__)

# 코드 접두어 길이 — Fixed-width code prefixes identifying the parent region
CITY_CODE_LENGTH: int = 5  # "11.01"
DISTRICT_CODE_LENGTH: int = 8  # "11.01.01"


def has_fields(row: dict[str, str], *fields: str) -> bool:
    """행에 필수 열이 모두 있는지 확인 (Whether the row carries every required column)."""
    return all(field in row for field in fields)


class RegionSeeder(Seeder):
    """지역 참조 데이터 시더 (Geographic reference data importer).

    Args:
        csv_dir: CSV 디렉토리, 기본값 settings.SEED_CSV_DIR (CSV directory override)
    """

    name = "regions"

    def __init__(self, csv_dir: Path | None = None) -> None:
        self.csv_dir: Path | None = csv_dir

    async def run(self, db: AsyncSession, context: SeedContext) -> SeedResult:
        result: SeedResult = self.new_result()
        logger.info("Starting region data import...")
        actor_id: UUID | None = await self.resolve_actor(db, context)
        csv_dir: Path = Path(self.csv_dir or settings.SEED_CSV_DIR)
        chunk_size: int = settings.SEED_CHUNK_SIZE

        await self.clear_existing_data(db)

        result.created["countries"] = await self.import_countries(db, csv_dir / "country.csv", actor_id, chunk_size)
        result.created["provinces"] = await self.import_provinces(db, csv_dir / "province.csv", actor_id, chunk_size)
        result.created["cities"] = await self.import_cities(db, csv_dir / "city.csv", actor_id, chunk_size)
        result.created["districts"] = await self.import_districts(db, csv_dir / "district.csv", actor_id, chunk_size)
        result.created["villages"] = await self.import_villages(db, csv_dir / "villages.csv", actor_id, chunk_size)

        logger.info("Region data import completed successfully!")
        return result

    async def clear_existing_data(self, db: AsyncSession) -> None:
        """하위 → 상위 순서로 지역 테이블을 비웁니다 (Empty the tables, children first)."""
        logger.info("Clearing existing region data...")
        for repository in (
            village_repository,
            district_repository,
            city_repository,
            province_repository,
            country_repository,
        ):
            await repository.delete_all(db)

    def _stamp(self, actor_id: UUID | None, **values: Any) -> dict[str, Any]:
        return {**values, "created_by": actor_id, "updated_by": actor_id}

    async def import_countries(self, db: AsyncSession, path: Path, actor_id: UUID | None, chunk_size: int) -> int:
        logger.info("Importing countries...")
        if not path.exists():
            logger.error("Country CSV file not found: %s", path)
            return 0

        countries = [
            self._stamp(
                actor_id,
                code=row["kode"],
                name=row["nama"],
                iso_code=row.get("iso_code") or None,
                phone_code=row.get("phone_code") or None,
            )
            for row in read_csv_file(path)
            if has_fields(row, "kode", "nama")
        ]
        inserted: int = await country_repository.bulk_insert(db, countries, chunk_size)
        logger.info("Imported %d countries", inserted)
        return inserted

    async def import_provinces(self, db: AsyncSession, path: Path, actor_id: UUID | None, chunk_size: int) -> int:
        logger.info("Importing provinces...")
        if not path.exists():
            logger.error("Province CSV file not found: %s", path)
            return 0

        country_ids: dict[str, UUID] = await country_repository.pluck(db, "id", "code")
        provinces: list[dict[str, Any]] = []
        for row in read_csv_file(path):
            if not has_fields(row, "kode", "nama", "country_code"):
                continue
            country_id: UUID | None = country_ids.get(row["country_code"])
            if country_id is None:
                continue
            provinces.append(self._stamp(actor_id, country_id=country_id, code=row["kode"], name=row["nama"]))

        inserted: int = await province_repository.bulk_insert(db, provinces, chunk_size)
        logger.info("Imported %d provinces", inserted)
        return inserted

    async def import_cities(self, db: AsyncSession, path: Path, actor_id: UUID | None, chunk_size: int) -> int:
        logger.info("Importing cities...")
        if not path.exists():
            logger.error("City CSV file not found: %s", path)
            return 0

        # 주 코드는 국가 안에서만 유일 — Province codes are unique only within a country
        province_ids: dict[str, dict[str, UUID]] = await province_repository.get_ids_by_country(db)
        cities: list[dict[str, Any]] = []
        for row in read_csv_file(path):
            if not has_fields(row, "kode", "nama", "country_code", "province_code"):
                continue
            province_id: UUID | None = province_ids.get(row["country_code"], {}).get(row["province_code"])
            if province_id is None:
                logger.warning(
                    "Skipping city %s (code: %s) - Province not found for code: %s",
                    row["nama"], row["kode"], row["province_code"],
                )
                continue
            cities.append(self._stamp(actor_id, province_id=province_id, code=row["kode"], name=row["nama"]))

        inserted: int = await city_repository.bulk_insert(db, cities, chunk_size)
        logger.info("Imported %d cities", inserted)
        return inserted

    async def import_districts(self, db: AsyncSession, path: Path, actor_id: UUID | None, chunk_size: int) -> int:
        logger.info("Importing districts...")
        if not path.exists():
            logger.error("District CSV file not found: %s", path)
            return 0

        city_ids: dict[str, UUID] = await city_repository.pluck(db, "id", "code")
        districts: list[dict[str, Any]] = []
        for row in read_csv_file(path):
            if not has_fields(row, "kode", "nama"):
                continue
            city_id: UUID | None = city_ids.get(row["kode"][:CITY_CODE_LENGTH])
            if city_id is None:
                continue
            districts.append(self._stamp(actor_id, city_id=city_id, code=row["kode"], name=row["nama"]))

        inserted: int = await district_repository.bulk_insert(db, districts, chunk_size)
        logger.info("Imported %d districts", inserted)
        return inserted

    async def import_villages(self, db: AsyncSession, path: Path, actor_id: UUID | None, chunk_size: int) -> int:
        """동 CSV를 스트리밍하며 chunk_size마다 삽입합니다.

        Stream the village file and insert every ``chunk_size`` rows, so the
        whole file is never held in memory.
        """
        logger.info("Importing villages...")
        if not path.exists():
            logger.error("Villages CSV file not found: %s", path)
            return 0

        district_ids: dict[str, UUID] = await district_repository.pluck(db, "id", "code")
        buffer: list[dict[str, Any]] = []
        inserted: int = 0
        for row in iter_csv_rows(path):
            if len(row) < 2:
                continue
            district_id: UUID | None = district_ids.get(row[0][:DISTRICT_CODE_LENGTH])
            if district_id is None:
                continue
            buffer.append(self._stamp(actor_id, district_id=district_id, code=row[0], name=row[1]))
            if len(buffer) >= chunk_size:
                inserted += await village_repository.bulk_insert(db, buffer, chunk_size)
                buffer = []
        if buffer:
            inserted += await village_repository.bulk_insert(db, buffer, chunk_size)

        logger.info("Imported %d villages", inserted)
        return inserted
