"""Shared test configuration and fixtures."""

import copy
import json
import os

import pytest

from fishfinder.core.mappers import map_catalog_document

SCENARIO_DOCUMENT = {
    "fish": [
        {
            "id": 1,
            "name": "Golden Carp",
            "lure": ["Red"],
            "spots": "any",
            "circle": "slow",
            "eventOnly": False,
        },
        {
            "id": 2,
            "name": "Silver Carp",
            "lure": ["Blue"],
            "spots": [3, 4],
            "circle": "fast",
            "eventOnly": True,
        },
    ]
}

MIXED_DOCUMENT = {
    "fish": [
        {"id": 10, "name": "Anchovy", "lure": ["Red"], "spots": "any", "circle": "small", "eventOnly": False},
        {"id": 11, "name": "Herring", "lure": ["Red", "Blue"], "spots": [2, 4], "circle": "small", "eventOnly": False},
        {"id": 12, "name": "Blue Marlin", "lure": ["Yellow", "Dark Blue"], "spots": [10], "circle": "large", "eventOnly": True},
        {"id": 13, "name": "Cod", "lure": ["Blue"], "spots": "any", "circle": "medium", "eventOnly": False},
        {"id": 14, "name": "Salmon", "lure": ["Purple"], "spots": [4, 8], "circle": "large", "eventOnly": False},
    ]
}


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep the developer's FISHFINDER_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("FISHFINDER_"):
            monkeypatch.delenv(key)


@pytest.fixture
def scenario_catalog():
    return map_catalog_document(SCENARIO_DOCUMENT)


@pytest.fixture
def mixed_catalog():
    return map_catalog_document(MIXED_DOCUMENT)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "fish.json"
    path.write_text(json.dumps(SCENARIO_DOCUMENT), encoding="utf-8")
    return path


@pytest.fixture
def scenario_document():
    return copy.deepcopy(SCENARIO_DOCUMENT)
