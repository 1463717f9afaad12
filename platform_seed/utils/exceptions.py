"""시더 예외 클래스 모듈.

Seeder exception classes module.
Seeders raise these for conditions that stop a seeder outright; the runner
catches them per seeder, logs the message and moves on (see runner.py).
Anything else propagates and aborts the run.

Usage:
    from platform_seed.utils.exceptions import PrerequisiteMissingError
    raise PrerequisiteMissingError("No users found. Please run user seeders first.")
"""


class SeederError(Exception):
    """시더 실패의 기본 예외.

    Base exception for seeder failures.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Seeder failed") -> None:
        super().__init__(detail)
        self.detail: str = detail


class PrerequisiteMissingError(SeederError):
    """선행 데이터 누락 예외 — 다른 시더가 먼저 실행되어야 할 때.

    Raised when data another seeder is expected to create is missing
    (e.g. no users before importing regions).
    """

    def __init__(self, detail: str = "Prerequisite data missing") -> None:
        super().__init__(detail)


class UnknownSeederError(SeederError):
    """알 수 없는 시더 이름 예외 (Unknown seeder name passed to the runner)."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown seeder: {name}")
        self.name: str = name


class CsvEncodingError(SeederError):
    """CSV 인코딩 오류 — 파일이 UTF-8이 아닐 때.

    Raised when a CSV file cannot be decoded as UTF-8.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"CSV file is not valid UTF-8: {path}")
        self.path: str = path
