"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Uses bcrypt directly; seeded accounts never store plain-text passwords.
"""

import secrets
import string

import bcrypt

from platform_seed.config import settings

# 임의 문자열 생성용 문자 집합 — Alphabet for random strings (letters + digits)
_ALPHABET: str = string.ascii_letters + string.digits


def hash_password(password: str, rounds: int | None = None) -> str:
    """평문 비밀번호를 bcrypt 해시로 변환합니다.

    Hash a plain text password using bcrypt.

    Args:
        password: 평문 비밀번호 (Plain text password to hash)
        rounds: bcrypt 작업 계수, 기본값 settings.BCRYPT_ROUNDS
                (Work factor, defaults to settings.BCRYPT_ROUNDS)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string, ~60 chars)
    """
    salt: bytes = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a bcrypt hash.

    Returns:
        bool: 일치하면 True, 불일치하면 False (True if password matches hash)
    """
    return bcrypt.checkpw(
        plain_password.encode("utf-8"), hashed_password.encode("utf-8")
    )


def random_string(length: int = 32) -> str:
    """영문 대소문자와 숫자로 된 임의 문자열 (Random alphanumeric string).

    OAuth 클라이언트 시크릿에 사용.
    Used for OAuth client secrets.
    """
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))
