"""CSV 읽기 유틸리티 — 지역 참조 데이터 로더용.

CSV helpers for the region importer.

- read_csv_file: 헤더 기반 dict 목록 (Header-keyed rows; header cells are
  stripped of a UTF-8 BOM and whitespace, rows whose column count differs
  from the header are dropped)
- iter_csv_rows: 대용량 파일 스트리밍 (Streams raw rows of large files)
- chunked: 고정 크기 배치 (Fixed-size batches for bulk inserts)

Files must be UTF-8; a file that does not decode raises CsvEncodingError.
"""

import csv
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TypeVar

from platform_seed.utils.exceptions import CsvEncodingError

T = TypeVar("T")

# 헤더에서 제거할 문자 — BOM and whitespace stripped from header cells
_HEADER_STRIP: str = "\ufeff \t\n\r\0\x0b"


def read_csv_file(path: Path) -> list[dict[str, str]]:
    """CSV 파일 전체를 헤더 키 dict 목록으로 읽습니다.

    Read a whole CSV file into header-keyed dicts.

    Args:
        path: CSV 파일 경로 (CSV file path)

    Returns:
        list[dict[str, str]]: 열 개수가 헤더와 같은 행만 포함
                              (Only rows whose column count equals the header's)

    Raises:
        CsvEncodingError: UTF-8로 읽을 수 없는 파일 (File is not valid UTF-8)
    """
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle)
            header_row: list[str] | None = next(reader, None)
            if header_row is None:
                return []

            headers: list[str] = [cell.strip(_HEADER_STRIP) for cell in header_row]
            return [
                dict(zip(headers, row))
                for row in reader
                if len(row) == len(headers)
            ]
    except UnicodeDecodeError as exc:
        raise CsvEncodingError(str(path)) from exc


def iter_csv_rows(path: Path, skip_header: bool = True) -> Iterator[list[str]]:
    """CSV 행을 하나씩 스트리밍합니다 (Stream raw CSV rows one at a time).

    Raises:
        CsvEncodingError: 디코딩 실패 시점에 발생 (Raised when the bad bytes are reached)
    """
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle)
            if skip_header:
                next(reader, None)
            yield from reader
    except UnicodeDecodeError as exc:
        raise CsvEncodingError(str(path)) from exc


def chunked(items: Iterable[T], size: int) -> Iterator[list[T]]:
    """items를 size 크기 배치로 나눕니다 (마지막 배치는 더 작을 수 있음).

    Split items into lists of at most ``size`` elements.
    """
    if size < 1:
        raise ValueError("chunk size must be at least 1")
    batch: list[T] = []
    for item in items:
        batch.append(item)
        if len(batch) >= size:
            yield batch
            batch = []
    if batch:
        yield batch
