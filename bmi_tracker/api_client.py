from __future__ import annotations

"""
HTTP client for the external BMI records API.

Three endpoints are consumed:
 - GET    /api/user/bmi          list records
 - POST   /api/create/bmi        create a record
 - DELETE /api/user/bmi/{id}     delete a record

Every failure (transport error, non-2xx status, malformed body) is raised
as `ApiError` carrying a message suitable for showing to the user.
"""

from typing import Any, Callable, List, Optional
from urllib.parse import quote
import logging

import requests

from .bmi_engine import DEFAULT_DECIMALS
from .errors import ApiError
from .records import BmiRecord, records_from_json
from .settings import Settings

logger = logging.getLogger(__name__)

LIST_PATH = "/api/user/bmi"
CREATE_PATH = "/api/create/bmi"
DELETE_PATH = "/api/user/bmi/{record_id}"

LIST_FAILED = "Failed to fetch BMI history."
SAVE_FAILED = "Failed to save BMI data."
DELETE_FAILED = "Failed to delete BMI record."

_JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


def _server_message(response: requests.Response) -> Optional[str]:
    """Return the `message` field of an error body, if the body is JSON and has one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        msg = body.get("message")
        if isinstance(msg, str) and msg.strip():
            return msg.strip()
    return None


class BmiApiClient:
    """Thin wrapper over a `requests.Session` bound to one API base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        decimals: int = DEFAULT_DECIMALS,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.decimals = decimals
        self.session = session or requests.Session()
        self.session.headers.update(_JSON_HEADERS)

    @classmethod
    def from_settings(cls, settings: Settings, session: Optional[requests.Session] = None) -> "BmiApiClient":
        return cls(
            settings.api_base_url,
            timeout=settings.request_timeout,
            decimals=settings.bmi_decimals,
            session=session,
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        *,
        error_message_from_body: Optional[Callable[[requests.Response], Optional[str]]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        url = self._url(path)
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError(failure_message) from e

        if not response.ok:
            message = failure_message
            if error_message_from_body is not None:
                message = error_message_from_body(response) or failure_message
            logger.warning("%s %s returned HTTP %s", method, url, response.status_code)
            raise ApiError(message, status_code=response.status_code)
        return response

    def list_records(self) -> List[BmiRecord]:
        """Fetch all records for the current user."""
        response = self._request("GET", LIST_PATH, LIST_FAILED)
        try:
            data = response.json()
        except ValueError as e:
            logger.error("BMI history response is not JSON")
            raise ApiError(LIST_FAILED, status_code=response.status_code) from e
        if not isinstance(data, list):
            logger.error("BMI history response is %s, expected a list", type(data).__name__)
            raise ApiError(LIST_FAILED, status_code=response.status_code)
        records = records_from_json(data, decimals=self.decimals)
        logger.info("Loaded %d BMI records", len(records))
        return records

    def create_record(self, record: BmiRecord) -> BmiRecord:
        """Persist `record`. Returns the server's copy when it echoes one back."""
        response = self._request(
            "POST",
            CREATE_PATH,
            SAVE_FAILED,
            error_message_from_body=_server_message,
            json=record.to_payload(),
        )
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            try:
                saved = BmiRecord.from_dict(body, decimals=self.decimals)
                logger.info("Saved BMI record %s (bmi=%.2f)", saved.id, saved.bmi)
                return saved
            except ValueError:
                logger.debug("Create response did not contain a record; keeping local copy")
        logger.info("Saved BMI record (bmi=%.2f)", record.bmi)
        return record

    def delete_record(self, record_id: str) -> None:
        """Delete the record identified by `record_id`."""
        if record_id is None or str(record_id) == "":
            raise ApiError(DELETE_FAILED)
        path = DELETE_PATH.format(record_id=quote(str(record_id), safe=""))
        self._request("DELETE", path, DELETE_FAILED)
        logger.info("Deleted BMI record %s", record_id)

    def close(self) -> None:
        self.session.close()


__all__ = [
    "BmiApiClient",
    "CREATE_PATH",
    "DELETE_FAILED",
    "DELETE_PATH",
    "LIST_FAILED",
    "LIST_PATH",
    "SAVE_FAILED",
]
