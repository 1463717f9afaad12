"""지역 레포지토리 — 국가/주/시/구/동 참조 테이블.

Region Repository — geographic reference tables.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from platform_seed.models.region import City, Country, District, Province, Village
from platform_seed.repositories.base import BaseRepository


class ProvinceRepository(BaseRepository[Province]):
    """geo_provinces 테이블 쿼리."""

    def __init__(self) -> None:
        super().__init__(Province)

    async def get_ids_by_country(self, db: AsyncSession) -> dict[str, dict[str, UUID]]:
        """{국가 코드: {주 코드: 주 id}} (Province ids grouped by country code).

        주 코드는 국가마다 겹칠 수 있으므로 국가별로 묶음.
        Province codes may repeat across countries, so they are grouped per country.
        """
        result = await db.execute(
            select(Country.code, Province.code, Province.id)
            .join(Country, Country.id == Province.country_id)
        )
        grouped: dict[str, dict[str, UUID]] = {}
        for country_code, province_code, province_id in result.all():
            grouped.setdefault(country_code, {})[province_code] = province_id
        return grouped


country_repository: BaseRepository[Country] = BaseRepository(Country)
province_repository: ProvinceRepository = ProvinceRepository()
city_repository: BaseRepository[City] = BaseRepository(City)
district_repository: BaseRepository[District] = BaseRepository(District)
village_repository: BaseRepository[Village] = BaseRepository(Village)
