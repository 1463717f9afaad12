"""CSV 유틸리티 테스트.

CSV reader tests — BOM stripping, column-count filtering, streaming,
encoding errors and chunking.
"""

import pytest

from platform_seed.utils.csv_reader import chunked, iter_csv_rows, read_csv_file
from platform_seed.utils.exceptions import CsvEncodingError, SeederError


class TestReadCsvFile:
    """헤더 기반 CSV 읽기 테스트."""

    def test_strips_bom_from_header(self, write_csv):
        """첫 헤더의 UTF-8 BOM 제거."""
        path = write_csv("country.csv", ["kode,nama", "ID,Indonesia"])
        rows = read_csv_file(path)
        assert rows == [{"kode": "ID", "nama": "Indonesia"}]

    def test_strips_whitespace_from_header(self, write_csv):
        """헤더 셀 앞뒤 공백 제거."""
        path = write_csv("province.csv", [" kode , nama ,country_code", "11,Aceh,ID"], bom=False)
        rows = read_csv_file(path)
        assert set(rows[0]) == {"kode", "nama", "country_code"}

    def test_drops_rows_with_wrong_column_count(self, write_csv):
        """열 개수가 헤더와 다른 행은 제외."""
        path = write_csv("city.csv", [
            "kode,nama",
            "11.01,Aceh Selatan",
            "11.02",
            "11.03,Aceh Tenggara,extra",
            "11.71,Banda Aceh",
        ])
        rows = read_csv_file(path)
        assert [row["kode"] for row in rows] == ["11.01", "11.71"]

    def test_empty_file_returns_empty_list(self, tmp_path):
        """빈 파일은 빈 목록."""
        path = tmp_path / "empty.csv"
        path.write_text("", encoding="utf-8")
        assert read_csv_file(path) == []

    def test_quoted_values_with_commas(self, write_csv):
        """따옴표로 감싼 값의 쉼표 유지."""
        path = write_csv("district.csv", ["kode,nama", '31.71.01,"Gambir, Jakarta"'])
        assert read_csv_file(path)[0]["nama"] == "Gambir, Jakarta"


class TestIterCsvRows:
    """CSV 스트리밍 테스트."""

    def test_skips_header_by_default(self, write_csv):
        """기본적으로 헤더 행 건너뜀."""
        path = write_csv("villages.csv", ["code,name", "11.01.01.2001,Keude Bakongan"], bom=False)
        assert list(iter_csv_rows(path)) == [["11.01.01.2001", "Keude Bakongan"]]

    def test_keep_header(self, write_csv):
        """skip_header=False면 헤더 포함."""
        path = write_csv("villages.csv", ["code,name", "11.01.01.2001,Keude Bakongan"], bom=False)
        rows = list(iter_csv_rows(path, skip_header=False))
        assert rows[0] == ["code", "name"]
        assert len(rows) == 2


class TestCsvEncoding:
    """UTF-8이 아닌 파일 처리 테스트."""

    def test_read_non_utf8_raises(self, tmp_path):
        """Latin-1 파일은 CsvEncodingError (SeederError 하위)."""
        path = tmp_path / "country.csv"
        path.write_bytes("kode,nama\nCI,C\xf4te d'Ivoire\n".encode("latin-1"))

        with pytest.raises(CsvEncodingError) as exc_info:
            read_csv_file(path)
        assert isinstance(exc_info.value, SeederError)
        assert exc_info.value.detail == f"CSV file is not valid UTF-8: {path}"

    def test_stream_non_utf8_raises(self, tmp_path):
        """스트리밍 중 잘못된 바이트에서 CsvEncodingError."""
        path = tmp_path / "villages.csv"
        path.write_bytes("code,name\n11.01.01.2001,C\xf4te\n".encode("latin-1"))

        with pytest.raises(CsvEncodingError):
            list(iter_csv_rows(path))


class TestChunked:
    """배치 분할 테스트."""

    def test_splits_into_batches(self):
        """고정 크기로 분할, 마지막 배치는 더 작음."""
        assert list(chunked(range(5), 2)) == [[0, 1], [2, 3], [4]]

    def test_exact_multiple(self):
        """나누어떨어지면 빈 배치 없음."""
        assert list(chunked([1, 2, 3, 4], 2)) == [[1, 2], [3, 4]]

    def test_empty_input(self):
        """빈 입력은 배치 없음."""
        assert list(chunked([], 3)) == []

    def test_invalid_size_raises(self):
        """크기 0 이하는 ValueError."""
        with pytest.raises(ValueError):
            list(chunked([1, 2], 0))
