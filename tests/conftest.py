"""Shared fixtures: clean config and registry state between tests."""

from __future__ import annotations

import os

import pytest

from structprops.config import reset_config
from structprops.core.urn import Urn
from structprops.projectors import registry


@pytest.fixture(autouse=True)
def _isolated_state(monkeypatch, tmp_path):
    """No STRUCTPROPS_* env or user config leakage, fresh singleton and registry."""
    monkeypatch.setattr("structprops.config._DEFAULT_PATH", tmp_path / "absent.yaml")
    for key in list(os.environ):
        if key.startswith("STRUCTPROPS_"):
            monkeypatch.delenv(key)
    reset_config()
    registry.reset()
    yield
    reset_config()
    registry.reset()


@pytest.fixture()
def dataset_urn() -> Urn:
    return Urn.from_string("urn:li:dataset:(urn:li:dataPlatform:hive,db.orders,PROD)")
