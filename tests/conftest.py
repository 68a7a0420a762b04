"""
Pytest configuration for ensuring the project root is on sys.path.

This allows test modules to import the in-repo package layout like:
    from bmi_tracker.bmi_engine import compute_bmi

Without relying on external environment variables. Shared fakes for the
records API live here as fixtures.
"""

import json
import os
import sys
from datetime import datetime, timezone

import pytest
import requests

# Insert the repository root (one directory up from tests/) at the
# beginning of sys.path to prioritize local modules over site-packages.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from bmi_tracker.errors import ApiError  # noqa: E402
from bmi_tracker.records import BmiRecord  # noqa: E402


def make_response(status_code=200, json_body=None, text=None):
    """Build a real `requests.Response` with the given status and body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.encoding = "utf-8"
    if json_body is not None:
        resp._content = json.dumps(json_body).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    elif text is not None:
        resp._content = text.encode("utf-8")
    else:
        resp._content = b""
    return resp


class FakeClient:
    """In-memory stand-in for `BmiApiClient`.

    Records get sequential string ids. Set `fail_list`, `fail_create` or
    `fail_delete` to make the matching call raise `ApiError`.
    """

    def __init__(self, records=None):
        self.records = list(records or [])
        self.calls = []
        self.fail_list = False
        self.fail_create = False
        self.fail_delete = False
        self._next_id = 1
        self.closed = False

    def list_records(self):
        self.calls.append(("list",))
        if self.fail_list:
            raise ApiError("Failed to fetch BMI history.", status_code=500)
        return list(self.records)

    def create_record(self, record):
        self.calls.append(("create", record))
        if self.fail_create:
            raise ApiError("Failed to save BMI data.", status_code=500)
        saved = BmiRecord(
            height=record.height,
            weight=record.weight,
            age=record.age,
            bmi=record.bmi,
            created_at=record.created_at,
            id=str(self._next_id),
        )
        self._next_id += 1
        self.records.append(saved)
        return saved

    def delete_record(self, record_id):
        self.calls.append(("delete", record_id))
        if self.fail_delete:
            raise ApiError("Failed to delete BMI record.", status_code=404)
        self.records = [r for r in self.records if r.id != record_id]

    def close(self):
        self.closed = True

    def network_calls(self):
        return len(self.calls)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def fixed_now():
    return datetime(2025, 1, 5, 10, 30, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def response_factory():
    return make_response
