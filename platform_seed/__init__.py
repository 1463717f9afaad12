"""플랫폼 시드 데이터 패키지.

Seed data for the platform database: RBAC permissions and roles, users,
the sample organization structure, OAuth clients and geographic reference
data. Entry point: ``python -m platform_seed.seed``.
"""
