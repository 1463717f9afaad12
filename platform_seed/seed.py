"""초기 데이터 시드 스크립트 — 모든 시더를 순서대로 실행.

Seed script. Runs every seeder (or the ones named with ``--only``) against
the configured database.

Usage:
    python -m platform_seed.seed
    python -m platform_seed.seed --only permissions users
    python -m platform_seed.seed --only regions --csv-dir ./csv
    python -m platform_seed.seed --create-tables --database-url sqlite+aiosqlite:///seed.db

Exit code is 1 when any seeder stopped on a SeederError, else 0.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from platform_seed.config import settings
from platform_seed.database import Base, build_engine, build_session_factory
from platform_seed.runner import default_seeders, run_seeders
from platform_seed.seeders import SeedResult
from platform_seed.utils.exceptions import UnknownSeederError

# 모든 모델을 메타데이터에 등록 — Register every model for create_all
import platform_seed.models  # noqa: F401

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """CLI 인자 파싱 (Parse CLI arguments)."""
    seeder_names = [seeder.name for seeder in default_seeders()]
    parser = argparse.ArgumentParser(description="Seed the platform database (idempotent)")
    parser.add_argument(
        "--database-url",
        default=settings.DATABASE_URL,
        help="SQLAlchemy async database URL",
    )
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="SEEDER",
        help=f"Run only these seeders: {', '.join(seeder_names)}",
    )
    parser.add_argument(
        "--csv-dir",
        type=Path,
        default=None,
        help="Directory holding the region CSV files",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables from the ORM metadata before seeding",
    )
    return parser.parse_args(argv)


async def seed(
    database_url: str,
    only: list[str] | None = None,
    csv_dir: Path | None = None,
    create_tables: bool = False,
) -> list[SeedResult]:
    """데이터베이스를 시드합니다 (Seed the database).

    Idempotent: 이미 있는 데이터는 건너뜁니다 (Existing rows are skipped),
    except region tables, which are reloaded from the CSV files.
    """
    engine = build_engine(database_url)
    try:
        if create_tables:
            # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        return await run_seeders(build_session_factory(engine), default_seeders(csv_dir), only=only)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        results = asyncio.run(seed(args.database_url, args.only, args.csv_dir, args.create_tables))
    except UnknownSeederError as exc:
        logger.error(exc.detail)
        return 2
    failed = [result.seeder for result in results if result.error]
    if failed:
        logger.error("Seeding finished with failures: %s", ", ".join(failed))
        return 1
    logger.info("Seeding complete: %d seeders run", len(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
