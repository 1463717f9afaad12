"""비밀번호 유틸리티 테스트.

Password helper tests — bcrypt hashing and the random strings used for
OAuth client secrets.
"""

from platform_seed.utils.password import hash_password, random_string, verify_password


class TestPasswordHashing:
    """bcrypt 해시 테스트."""

    def test_hash_and_verify(self):
        """해시 후 검증 성공, 다른 비밀번호는 실패."""
        hashed = hash_password("password")
        assert hashed != "password"
        assert verify_password("password", hashed)
        assert not verify_password("wrong", hashed)

    def test_same_password_different_hashes(self):
        """같은 비밀번호도 솔트가 달라 해시가 다름."""
        assert hash_password("password") != hash_password("password")


class TestRandomString:
    """랜덤 문자열 테스트."""

    def test_length_and_alphabet(self):
        """지정 길이의 영숫자 문자열."""
        value = random_string(32)
        assert len(value) == 32
        assert value.isalnum()

    def test_is_random(self):
        """연속 호출 결과가 다름."""
        assert random_string() != random_string()
