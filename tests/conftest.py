"""
Shared fixtures for the Histograph Import test suite.

Builds dataset trees under ``tmp_path``, canned ``requests.Response``
objects and a propagating logger that ``caplog`` can observe.
"""

import json
import logging
from pathlib import Path

import pytest
import requests


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast, isolated tests")
    config.addinivalue_line("markers", "integration: tests spanning several components")


def make_response(status, body=None, reason=None):
    """Build a ``requests.Response`` with a JSON (dict/list) or raw text body."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason or ""
    if body is None:
        response._content = b""
    elif isinstance(body, (dict, list)):
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = str(body).encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_dataset(tmp_path):
    """
    Factory creating ``<root>/<id>/`` with any of the three dataset files.

    Usage:
        make_dataset("a", pits=True)  # a.dataset.json + a.pits.ndjson
    """

    def _make(
        dataset_id,
        root=None,
        descriptor=True,
        pits=False,
        relations=False,
    ):
        root = Path(root) if root is not None else tmp_path / "data"
        directory = root / dataset_id
        directory.mkdir(parents=True, exist_ok=True)
        if descriptor:
            (directory / f"{dataset_id}.dataset.json").write_text(
                json.dumps({"id": dataset_id, "title": dataset_id.upper()}), encoding="utf-8"
            )
        if pits:
            (directory / f"{dataset_id}.pits.ndjson").write_text(
                '{"id": "p1", "type": "hg:Place"}\n', encoding="utf-8"
            )
        if relations:
            (directory / f"{dataset_id}.relations.ndjson").write_text(
                '{"from": "p1", "to": "p2", "type": "hg:sameHgConcept"}\n', encoding="utf-8"
            )
        return directory

    return _make


@pytest.fixture
def test_logger(caplog):
    """A propagating logger whose records land in ``caplog``."""
    log = logging.getLogger("histograph-test")
    log.propagate = True
    caplog.set_level(logging.DEBUG, logger="histograph-test")
    return log


@pytest.fixture
def response_factory():
    """Expose :func:`make_response` to tests as a fixture."""
    return make_response
