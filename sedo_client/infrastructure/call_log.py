# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (Sedo)
# Description: Daily request/response log file.
# ============================================================================
"""Daily Call Log.

Appends one line per SOAP call to `<directory>/<YYYY-MM-DD>.log`:

    2024-05-01 12:00:00sedo log:{"wsdl":...,"time":...,"method":...}
"""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from ..exceptions import UnableToOpenFileError
from ..serialization import element_count, head, to_native

logger = logging.getLogger(__name__)

LOG_TAG = "sedo log"
LOG_EXTENSION = "log"
MAX_LOGGED_ELEMENTS = 10
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class CallerContext:
    """Network details of whoever triggered the call.

    Attributes:
        forwarded_for: Raw X-Forwarded-For header value.
        remote_addr: Peer address of the incoming connection.
    """

    forwarded_for: str | None = None
    remote_addr: str | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str], remote_addr: str | None = None) -> "CallerContext":
        """Build context from incoming request headers (case-insensitive)."""
        forwarded_for = None
        for key, value in headers.items():
            if key.lower() == "x-forwarded-for":
                forwarded_for = value
                break
        return cls(forwarded_for=forwarded_for, remote_addr=remote_addr)

    @property
    def ip(self) -> str | None:
        """First forwarded address, else the remote address."""
        if self.forwarded_for is not None:
            return self.forwarded_for.split(",")[0].strip()
        return self.remote_addr


class DailyCallLog:
    """Writes call entries to one log file per calendar day."""

    def __init__(self, directory: str | Path, now: Callable[[], datetime] = datetime.now):
        """Initialize call log.

        Args:
            directory: Directory holding the daily files. Empty means cwd.
            now: Clock returning local time.
        """
        self.directory = Path(directory)
        self._now = now

    def file_path(self, moment: datetime | None = None) -> Path:
        """Path of the log file for the given (or current) day."""
        moment = moment or self._now()
        return self.directory / f"{moment:%Y-%m-%d}.{LOG_EXTENSION}"

    def build_entry(
        self,
        wsdl: str,
        method: str | None,
        request: Mapping[str, Any],
        response: Any,
        caller: CallerContext | None = None,
        moment: datetime | None = None,
    ) -> dict[str, Any]:
        """Build the JSON payload for one call.

        The response is capped at MAX_LOGGED_ELEMENTS entries; count always
        reflects the full response.
        """
        moment = moment or self._now()
        normalized = to_native(response)
        count = element_count(normalized)

        entry: dict[str, Any] = {
            "wsdl": wsdl,
            "time": moment.strftime(TIMESTAMP_FORMAT),
            "method": method,
            "request": to_native(dict(request)),
            "count": count,
            "response": normalized,
        }
        if count > MAX_LOGGED_ELEMENTS:
            entry["response"] = head(normalized, MAX_LOGGED_ELEMENTS)

        ip = caller.ip if caller else None
        if ip:
            entry["ip"] = ip

        return entry

    def format_line(self, entry: Mapping[str, Any], moment: datetime | None = None) -> str:
        """Render an entry as a log line."""
        moment = moment or self._now()
        payload = json.dumps(entry, separators=(",", ":"))
        return f"{moment.strftime(TIMESTAMP_FORMAT)}{LOG_TAG}:{payload}\n"

    def write(
        self,
        wsdl: str,
        method: str | None,
        request: Mapping[str, Any],
        response: Any,
        caller: CallerContext | None = None,
    ) -> Path:
        """Append one call entry to today's file.

        Returns:
            Path of the file written.

        Raises:
            UnableToOpenFileError: If the directory or file cannot be opened.
        """
        moment = self._now()
        path = self.file_path(moment)
        line = self.format_line(
            self.build_entry(wsdl, method, request, response, caller, moment),
            moment,
        )

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as fh:
                fh.write(line)
        except OSError as e:
            logger.error(f"Unable to open call log {path}: {e}")
            raise UnableToOpenFileError(str(path)) from e

        return path
