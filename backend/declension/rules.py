"""Rule and gender tables.

Both tables are read once, validated with pydantic and frozen. Every list
keeps the order it had in the source file: rule selection and gender
inference are first-match-wins, so order is part of the data.

Rule source::

    {"lastname": {"exceptions": [{"gender": "male", "test": ["ов"],
                                  "mods": ["-а", "-у", "-а", "ым", "-е"],
                                  "tags": []}],
                  "suffixes": [...]},
     ...}

Gender source::

    {"gender": {"lastname": {"male": ["ов", "ин"], "female": ["ова"]}, ...}}
"""
import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator

from core.errors import AppError, Err, Ok, Result, config_load_failed
from core.logging import config_logger

from .types import INFLECTED_CASES, Case

log = config_logger()

DATA_DIR = Path(__file__).with_name("data")

RuleSource = Mapping[str, Any] | str | Path


def default_rules_path() -> Path:
    return DATA_DIR / "rules.json"


def default_gender_path() -> Path:
    return DATA_DIR / "gender.json"


class Rule(BaseModel):
    """One suffix rule: gender gate, test endings and per-case templates."""
    model_config = ConfigDict(frozen=True)

    gender: str
    test: tuple[str, ...]
    mods: tuple[str, ...]
    tags: tuple[str, ...] = ()

    @field_validator("mods")
    @classmethod
    def _one_template_per_case(cls, mods: tuple[str, ...]) -> tuple[str, ...]:
        if len(mods) != len(INFLECTED_CASES):
            raise ValueError(
                f"expected {len(INFLECTED_CASES)} templates "
                f"({', '.join(c.label for c in INFLECTED_CASES)}), got {len(mods)}"
            )
        return mods

    def template_for(self, case: Case) -> str:
        """Template for a non-nominative case."""
        index = case.mod_index
        if index is None:
            raise ValueError(f"{case.label} has no modification template")
        return self.mods[index]


class RuleGroup(BaseModel):
    """Exception and general suffix rules for one part type."""
    model_config = ConfigDict(frozen=True)

    exceptions: tuple[Rule, ...] = ()
    suffixes: tuple[Rule, ...] = ()


class _GenderSource(BaseModel):
    gender: dict[str, dict[str, tuple[str, ...]]]


_RULE_SOURCE = TypeAdapter(dict[str, RuleGroup])


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Rule groups keyed by part type."""
    groups: Mapping[str, RuleGroup]

    def get(self, part_type: str) -> RuleGroup | None:
        return self.groups.get(part_type)

    @property
    def part_types(self) -> list[str]:
        return list(self.groups)


@dataclass(frozen=True, slots=True)
class GenderTable:
    """Ordered (gender, endings) groups keyed by part type."""
    groups: Mapping[str, tuple[tuple[str, tuple[str, ...]], ...]]

    def get(self, part_type: str) -> tuple[tuple[str, tuple[str, ...]], ...]:
        return self.groups.get(part_type, ())

    @property
    def part_types(self) -> list[str]:
        return list(self.groups)


def _read_source(source: RuleSource, what: str) -> Result[Mapping[str, Any], AppError]:
    """Read a JSON or YAML file, or pass an already parsed mapping through."""
    if isinstance(source, Mapping):
        return Ok(source)

    path = Path(source)
    if not path.is_file():
        return config_load_failed(what, "file not found", origin="rules", path=str(path))

    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (OSError, UnicodeDecodeError) as e:
        return config_load_failed(what, f"cannot read file: {e}", origin="rules", cause=e, path=str(path))
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        return config_load_failed(what, f"cannot parse file: {e}", origin="rules", cause=e, path=str(path))

    if not isinstance(data, Mapping):
        return config_load_failed(
            what, "top level must be an object", origin="rules", path=str(path)
        )
    return Ok(data)


def _validation_failed(what: str, exc: ValidationError) -> Err[AppError]:
    errors = [
        {"loc": ".".join(str(p) for p in e["loc"]), "msg": e["msg"]}
        for e in exc.errors()
    ]
    return config_load_failed(
        what, f"{exc.error_count()} invalid entries", origin="rules", cause=exc, errors=errors
    )


def load_rule_set(source: RuleSource) -> Result[RuleSet, AppError]:
    """Load and validate the rule table."""
    read = _read_source(source, "rule table")
    if read.is_err():
        return read
    raw = read.unwrap()

    try:
        groups = _RULE_SOURCE.validate_python(raw)
    except ValidationError as e:
        return _validation_failed("rule table", e)

    rule_set = RuleSet(groups=MappingProxyType(groups))
    log.info(
        "rules_loaded",
        part_types=rule_set.part_types,
        exceptions=sum(len(g.exceptions) for g in groups.values()),
        suffixes=sum(len(g.suffixes) for g in groups.values()),
    )
    return Ok(rule_set)


def load_gender_table(source: RuleSource) -> Result[GenderTable, AppError]:
    """Load and validate the gender table."""
    read = _read_source(source, "gender table")
    if read.is_err():
        return read
    raw = read.unwrap()

    try:
        parsed = _GenderSource.model_validate(raw)
    except ValidationError as e:
        return _validation_failed("gender table", e)

    groups = {
        part_type: tuple((label, endings) for label, endings in by_gender.items())
        for part_type, by_gender in parsed.gender.items()
    }
    table = GenderTable(groups=MappingProxyType(groups))
    log.info("genders_loaded", part_types=table.part_types)
    return Ok(table)
