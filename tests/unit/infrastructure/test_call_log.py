# ============================================================================
# Tests for DailyCallLog and CallerContext
# ============================================================================
"""Unit tests for the daily call log."""

import json
from datetime import datetime

import pytest

from sedo_client.exceptions import UnableToOpenFileError
from sedo_client.infrastructure.call_log import CallerContext, DailyCallLog

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 45)


def fixed_clock() -> datetime:
    return FIXED_NOW


class TestCallerContext:
    """Tests for caller IP resolution."""

    def test_forwarded_for_takes_first_entry(self) -> None:
        """Should use the first X-Forwarded-For address, trimmed."""
        caller = CallerContext(forwarded_for=" 198.51.100.4 , 10.0.0.1", remote_addr="10.0.0.9")
        assert caller.ip == "198.51.100.4"

    def test_falls_back_to_remote_addr(self) -> None:
        """Should use the remote address without forwarding headers."""
        assert CallerContext(remote_addr="10.0.0.9").ip == "10.0.0.9"

    def test_no_information(self) -> None:
        """Should return None when nothing is known."""
        assert CallerContext().ip is None

    def test_from_headers_is_case_insensitive(self) -> None:
        """Should find the forwarding header regardless of case."""
        caller = CallerContext.from_headers({"X-FORWARDED-FOR": "192.0.2.1"}, remote_addr="10.0.0.1")
        assert caller.forwarded_for == "192.0.2.1"
        assert caller.ip == "192.0.2.1"

    def test_from_headers_without_forwarding(self) -> None:
        """Should keep the remote address when the header is missing."""
        caller = CallerContext.from_headers({"Host": "example.test"}, remote_addr="10.0.0.1")
        assert caller.ip == "10.0.0.1"


class TestFilePath:
    """Tests for daily file naming."""

    def test_named_after_the_day(self, tmp_path) -> None:
        """Should name the file YYYY-MM-DD.log inside the directory."""
        log = DailyCallLog(tmp_path, now=fixed_clock)
        assert log.file_path() == tmp_path / "2024-05-01.log"

    def test_empty_directory_means_cwd(self) -> None:
        """Should resolve an empty directory to the current one."""
        log = DailyCallLog("", now=fixed_clock)
        assert str(log.file_path()) == "2024-05-01.log"


class TestBuildEntry:
    """Tests for log payloads."""

    def test_small_response_kept_whole(self, tmp_path) -> None:
        """Should log every element when there are at most 10."""
        log = DailyCallLog(tmp_path, now=fixed_clock)
        entry = log.build_entry("wsdl-url", "DomainList", {"page": 1}, list(range(10)))
        assert entry == {
            "wsdl": "wsdl-url",
            "time": "2024-05-01 12:30:45",
            "method": "DomainList",
            "request": {"page": 1},
            "count": 10,
            "response": list(range(10)),
        }

    def test_large_mapping_response_truncated(self, tmp_path) -> None:
        """Should keep the first 10 keys of a mapping response."""
        log = DailyCallLog(tmp_path, now=fixed_clock)
        response = {f"k{i}": i for i in range(12)}
        entry = log.build_entry("w", "DomainDetails", {}, response)
        assert entry["count"] == 12
        assert list(entry["response"]) == [f"k{i}" for i in range(10)]

    def test_scalar_and_empty_counts(self, tmp_path) -> None:
        """Should count None as 0 and scalars as 1."""
        log = DailyCallLog(tmp_path, now=fixed_clock)
        assert log.build_entry("w", "m", {}, None)["count"] == 0
        assert log.build_entry("w", "m", {}, "ok")["count"] == 1

    def test_ip_included_when_known(self, tmp_path) -> None:
        """Should add ip only when the caller has one."""
        log = DailyCallLog(tmp_path, now=fixed_clock)
        assert "ip" not in log.build_entry("w", "m", {}, [], CallerContext())
        entry = log.build_entry("w", "m", {}, [], CallerContext(remote_addr="10.1.1.1"))
        assert entry["ip"] == "10.1.1.1"


class TestWrite:
    """Tests for appending entries."""

    def test_line_format(self, tmp_path) -> None:
        """Should write timestamp, tag and compact JSON on one line."""
        log = DailyCallLog(tmp_path, now=fixed_clock)
        path = log.write("w", "DomainList", {"page": 1}, ["a.com"])

        text = path.read_text(encoding="utf-8")
        assert text.startswith("2024-05-01 12:30:45sedo log:{")
        assert text.endswith("\n")
        payload = json.loads(text[len("2024-05-01 12:30:45sedo log:") :])
        assert payload["response"] == ["a.com"]

    def test_appends_to_same_day_file(self, tmp_path) -> None:
        """Should append further calls of the same day."""
        log = DailyCallLog(tmp_path, now=fixed_clock)
        log.write("w", "A", {}, [])
        path = log.write("w", "B", {}, [])
        assert len(path.read_text(encoding="utf-8").splitlines()) == 2

    def test_creates_missing_directories(self, tmp_path) -> None:
        """Should create the directory tree on first write."""
        log = DailyCallLog(tmp_path / "a" / "b", now=fixed_clock)
        path = log.write("w", "A", {}, [])
        assert path.parent.is_dir()

    def test_open_failure(self, tmp_path) -> None:
        """Should raise UnableToOpenFileError when the file cannot be opened."""
        (tmp_path / "2024-05-01.log").mkdir()
        log = DailyCallLog(tmp_path, now=fixed_clock)

        with pytest.raises(UnableToOpenFileError) as exc_info:
            log.write("w", "A", {}, [])

        assert exc_info.value.path.endswith("2024-05-01.log")
