"""시드 데이터 패키지 — 시더가 삽입하는 정적 데이터 테이블.

Static seed data tables (permission catalogs, role maps, sample organizations,
OAuth clients) consumed by the seeders package.
"""
