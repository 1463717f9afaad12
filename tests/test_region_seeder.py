"""지역 시더 테스트.

Region seeder tests — bundled CSV import, BOM headers, code-prefix parent
lookups, skipped rows, missing files, non-UTF-8 files, chunked inserts and
reloads.
"""

import pytest
from sqlalchemy import func, select

from platform_seed.config import settings
from platform_seed.models.region import City, Country, District, Province, Village
from platform_seed.runner import run_seeders
from platform_seed.seeders import PermissionSeeder, RegionSeeder
from platform_seed.utils.exceptions import CsvEncodingError, PrerequisiteMissingError


async def _count(db, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar()


@pytest.fixture
def region_csvs(write_csv, tmp_path):
    """작은 지역 CSV 세트 (BOM 포함, 마을 파일은 BOM 없음)."""
    write_csv("country.csv", ["kode,nama,iso_code,phone_code", "ID,Indonesia,IDN,+62", "XX,Nowhere,,"])
    write_csv("province.csv", ["kode,nama,country_code", "11,Aceh,ID", "31,DKI Jakarta,ID", "99,Lost,ZZ"])
    write_csv("city.csv", [
        "kode,nama,country_code,province_code",
        "11.01,Kabupaten Aceh Selatan,ID,11",
        "31.71,Jakarta Pusat,ID,31",
        "32.73,Kota Bandung,ID,32",
    ])
    write_csv("district.csv", ["kode,nama", "11.01.01,Bakongan", "31.71.01,Gambir", "31.72.01,Orphan"])
    write_csv("villages.csv", [
        "code,name",
        "11.01.01.2001,Keude Bakongan",
        "31.71.01.1001,Gambir",
        "31.71.01.1002,Cideng",
        "31.72.01.1001,Orphan Village",
        "31.71.01.1003",
    ], bom=False)
    return tmp_path


class TestRegionImport:
    """지역 CSV 가져오기 테스트."""

    async def test_imports_bundled_csvs(self, db, context, acting_user):
        """패키지에 포함된 CSV 가져오기."""
        result = await RegionSeeder().run(db, context)

        assert result.created["countries"] == 2
        assert result.created["provinces"] == 4
        assert result.created["cities"] == 6
        assert result.created["districts"] == 6
        assert result.created["villages"] == 8
        assert await _count(db, Village) == 8

    async def test_bom_header_and_empty_optional_columns(self, db, context, acting_user, region_csvs):
        """BOM 헤더 처리, 빈 iso_code/phone_code는 NULL."""
        await RegionSeeder(csv_dir=region_csvs).run(db, context)

        indonesia = (await db.execute(select(Country).where(Country.code == "ID"))).scalar_one()
        assert indonesia.iso_code == "IDN"
        assert indonesia.phone_code == "+62"
        nowhere = (await db.execute(select(Country).where(Country.code == "XX"))).scalar_one()
        assert nowhere.iso_code is None
        assert nowhere.phone_code is None

    async def test_rows_without_parent_are_skipped(self, db, context, acting_user, region_csvs):
        """상위 지역이 없는 행은 건너뜀."""
        result = await RegionSeeder(csv_dir=region_csvs).run(db, context)

        assert result.created["provinces"] == 2
        assert result.created["cities"] == 2
        assert result.created["districts"] == 2
        assert result.created["villages"] == 3

    async def test_code_prefix_parents(self, db, context, acting_user, region_csvs):
        """구는 코드 앞 5자리로 시, 동은 앞 8자리로 구를 찾음."""
        await RegionSeeder(csv_dir=region_csvs).run(db, context)

        city = (await db.execute(select(City).where(City.code == "31.71"))).scalar_one()
        district = (await db.execute(select(District).where(District.code == "31.71.01"))).scalar_one()
        assert district.city_id == city.id
        villages = (await db.execute(select(Village).where(Village.district_id == district.id))).scalars().all()
        assert {village.code for village in villages} == {"31.71.01.1001", "31.71.01.1002"}

    async def test_city_resolves_province_within_country(self, db, context, acting_user, region_csvs):
        """시는 국가 안의 주 코드로 상위 주를 찾음."""
        await RegionSeeder(csv_dir=region_csvs).run(db, context)

        aceh = (await db.execute(select(Province).where(Province.code == "11"))).scalar_one()
        city = (await db.execute(select(City).where(City.code == "11.01"))).scalar_one()
        assert city.province_id == aceh.id

    async def test_rows_stamped_with_actor(self, db, context, acting_user, region_csvs):
        """행의 created_by는 행위자 사용자."""
        await RegionSeeder(csv_dir=region_csvs).run(db, context)
        village = (await db.execute(select(Village).limit(1))).scalar_one()
        assert village.created_by == acting_user.id
        assert village.updated_by == acting_user.id

    async def test_small_chunk_size(self, db, context, acting_user, region_csvs, monkeypatch):
        """청크 크기가 작아도 모든 행 삽입."""
        monkeypatch.setattr(settings, "SEED_CHUNK_SIZE", 2)
        result = await RegionSeeder(csv_dir=region_csvs).run(db, context)

        assert result.created["villages"] == 3
        assert await _count(db, Village) == 3

    async def test_rerun_replaces_data(self, db, context, acting_user, region_csvs):
        """재실행 시 기존 데이터를 지우고 다시 가져옴."""
        await RegionSeeder(csv_dir=region_csvs).run(db, context)
        await RegionSeeder(csv_dir=region_csvs).run(db, context)

        assert await _count(db, Country) == 2
        assert await _count(db, Village) == 3


class TestRegionImportErrors:
    """지역 가져오기 오류 처리 테스트."""

    async def test_requires_users(self, db, context, region_csvs):
        """사용자가 없으면 PrerequisiteMissingError."""
        with pytest.raises(PrerequisiteMissingError, match="No users found. Please run user seeders first."):
            await RegionSeeder(csv_dir=region_csvs).run(db, context)

    async def test_missing_file_skips_level(self, db, context, acting_user, region_csvs, caplog):
        """파일이 없으면 오류 로그 후 해당 단계 건너뜀."""
        (region_csvs / "city.csv").unlink()

        result = await RegionSeeder(csv_dir=region_csvs).run(db, context)

        assert result.created["countries"] == 2
        assert result.created["cities"] == 0
        assert result.created["districts"] == 0
        assert result.created["villages"] == 0
        assert "City CSV file not found" in caplog.text

    async def test_empty_directory(self, db, context, acting_user, tmp_path):
        """CSV가 하나도 없으면 아무것도 가져오지 않음."""
        result = await RegionSeeder(csv_dir=tmp_path).run(db, context)
        assert sum(result.created.values()) == 0
        assert await _count(db, Country) == 0

    async def test_non_utf8_file_raises(self, db, context, acting_user, region_csvs):
        """UTF-8이 아닌 CSV는 CsvEncodingError."""
        (region_csvs / "country.csv").write_bytes("kode,nama\nCI,C\xf4te d'Ivoire\n".encode("latin-1"))

        with pytest.raises(CsvEncodingError, match="country.csv"):
            await RegionSeeder(csv_dir=region_csvs).run(db, context)

    async def test_non_utf8_file_keeps_previous_data(self, session_factory, region_csvs):
        """실행기에서는 오류 결과로 기록되고 기존 지역 데이터는 롤백으로 유지."""
        await run_seeders(session_factory, [PermissionSeeder(), RegionSeeder(csv_dir=region_csvs)])
        (region_csvs / "villages.csv").write_bytes("code,name\n31.71.01.1009,C\xf4te\n".encode("latin-1"))

        results = await run_seeders(session_factory, [RegionSeeder(csv_dir=region_csvs)])

        assert results[0].error.startswith("CSV file is not valid UTF-8")
        async with session_factory() as db:
            assert await _count(db, Country) == 2
            assert await _count(db, Village) == 3
