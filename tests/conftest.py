"""Shared fixtures: small in-memory tables and engines built from them."""

import pytest

from declension import DeclensionEngine, default_gender_path, default_rules_path

RULES = {
    "lastname": {
        "exceptions": [],
        "suffixes": [
            {"gender": "female", "test": ["ова"], "mods": ["-ой", "-ой", "-у", "-ой", "-ой"]},
            {"gender": "male", "test": ["ов"], "mods": ["а", "у", "а", "ым", "е"]},
        ],
    },
    "firstname": {
        "exceptions": [
            {"gender": "male", "test": ["лев"], "mods": ["--ьва", "--ьву", "--ьва", "--ьвом", "--ьве"]},
        ],
        "suffixes": [
            {"gender": "male", "test": ["в", "н"], "mods": ["а", "у", "а", "ом", "е"]},
            {"gender": "female", "test": ["а"], "mods": ["-ы", "-е", "-у", "-ой", "-е"]},
        ],
    },
    "middlename": {
        "suffixes": [
            {"gender": "male", "test": ["ич"], "mods": ["а", "у", "а", "ем", "е"]},
            {"gender": "female", "test": ["на"], "mods": ["-ы", "-е", "-у", "-ой", "-е"]},
        ],
    },
}

GENDERS = {
    "gender": {
        "lastname": {"female": ["ова"], "male": ["ов"]},
        "firstname": {"male": ["в", "н"], "female": ["а"]},
        "middlename": {"male": ["ич"], "female": ["на"]},
    }
}


@pytest.fixture
def rules_source() -> dict:
    return RULES


@pytest.fixture
def genders_source() -> dict:
    return GENDERS


@pytest.fixture
def engine() -> DeclensionEngine:
    """Engine over the small in-memory tables above."""
    return DeclensionEngine.initialize(RULES, GENDERS).unwrap()


@pytest.fixture(scope="session")
def bundled_engine() -> DeclensionEngine:
    """Engine over the tables shipped with the package."""
    return DeclensionEngine.initialize(default_rules_path(), default_gender_path()).unwrap()
