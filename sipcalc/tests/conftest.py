from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from sipcalc.app import create_app


@pytest.fixture()
def app(tmp_path) -> Flask:
    return create_app(
        {
            "TESTING": True,
            "HISTORY_PATH": str(tmp_path / "history.json"),
            "HISTORY_LIMIT": 10,
        }
    )


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
