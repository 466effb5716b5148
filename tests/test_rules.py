"""Tests for loading rule and gender tables."""

import json
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from core.errors import ErrorCode
from declension import Case, load_gender_table, load_rule_set


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestLoadRuleSet:
    """Tests for load_rule_set."""

    def test_from_mapping(self, rules_source) -> None:
        rule_set = load_rule_set(rules_source).unwrap()
        assert rule_set.part_types == ["lastname", "firstname", "middlename"]
        assert rule_set.get("noun") is None

    def test_from_json_file(self, tmp_path, rules_source) -> None:
        path = _write_json(tmp_path / "rules.json", rules_source)
        rule_set = load_rule_set(path).unwrap()
        assert rule_set.get("lastname").suffixes[1].test == ("ов",)

    def test_from_yaml_file(self, tmp_path, rules_source) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(yaml.safe_dump(rules_source, allow_unicode=True), encoding="utf-8")
        rule_set = load_rule_set(str(path)).unwrap()
        assert rule_set.get("firstname").exceptions[0].test == ("лев",)

    def test_preserves_order(self, rules_source) -> None:
        rule_set = load_rule_set(rules_source).unwrap()
        assert [r.gender for r in rule_set.get("lastname").suffixes] == ["female", "male"]

    def test_missing_sections_default_to_empty(self) -> None:
        rule_set = load_rule_set({"noun": {}}).unwrap()
        assert rule_set.get("noun").exceptions == ()
        assert rule_set.get("noun").suffixes == ()

    def test_extra_keys_ignored(self) -> None:
        source = {"noun": {"suffixes": [
            {"gender": "m", "test": ["к"], "mods": ["а"] * 5, "comment": "stol"},
        ]}}
        assert load_rule_set(source).is_ok()

    def test_template_for(self, rules_source) -> None:
        rule = load_rule_set(rules_source).unwrap().get("lastname").suffixes[1]
        assert rule.template_for(Case.INSTRUMENTAL) == "ым"
        with pytest.raises(ValueError):
            rule.template_for(Case.NOMINATIVE)

    def test_missing_file(self, tmp_path) -> None:
        error = load_rule_set(tmp_path / "absent.json").unwrap_err()
        assert error.code == ErrorCode.E6020_CONFIG_LOAD_FAILED
        assert "file not found" in error.message

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text("{not json", encoding="utf-8")
        error = load_rule_set(path).unwrap_err()
        assert error.code == ErrorCode.E6020_CONFIG_LOAD_FAILED
        assert error.cause is not None

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "rules.yml"
        path.write_text("lastname: [unclosed", encoding="utf-8")
        assert load_rule_set(path).unwrap_err().code == ErrorCode.E6020_CONFIG_LOAD_FAILED

    def test_top_level_not_an_object(self, tmp_path) -> None:
        path = _write_json(tmp_path / "rules.json", [1, 2, 3])
        error = load_rule_set(path).unwrap_err()
        assert error.code == ErrorCode.E6020_CONFIG_LOAD_FAILED
        assert "object" in error.message

    def test_wrong_template_count(self) -> None:
        source = {"lastname": {"suffixes": [{"gender": "male", "test": ["ов"], "mods": ["а", "у"]}]}}
        error = load_rule_set(source).unwrap_err()
        assert error.code == ErrorCode.E6020_CONFIG_LOAD_FAILED
        assert error.metadata["errors"][0]["loc"].startswith("lastname.suffixes.0.mods")

    def test_non_string_pattern(self) -> None:
        source = {"lastname": {"suffixes": [{"gender": "male", "test": [1], "mods": ["а"] * 5}]}}
        assert load_rule_set(source).is_err()

    def test_immutable(self, rules_source) -> None:
        rule_set = load_rule_set(rules_source).unwrap()
        with pytest.raises(TypeError):
            rule_set.groups["noun"] = rule_set.get("lastname")
        with pytest.raises(ValidationError):
            rule_set.get("lastname").suffixes[0].gender = "male"


class TestLoadGenderTable:
    """Tests for load_gender_table."""

    def test_from_mapping(self, genders_source) -> None:
        table = load_gender_table(genders_source).unwrap()
        assert table.part_types == ["lastname", "firstname", "middlename"]
        assert table.get("lastname") == (("female", ("ова",)), ("male", ("ов",)))

    def test_from_file(self, tmp_path, genders_source) -> None:
        path = _write_json(tmp_path / "gender.json", genders_source)
        assert load_gender_table(path).unwrap().get("middlename")[0] == ("male", ("ич",))

    def test_missing_gender_key(self) -> None:
        error = load_gender_table({"lastname": {"male": ["ов"]}}).unwrap_err()
        assert error.code == ErrorCode.E6020_CONFIG_LOAD_FAILED
        assert error.metadata["source"] == "gender table"

    def test_missing_file(self, tmp_path) -> None:
        assert load_gender_table(tmp_path / "gender.json").unwrap_err().code == ErrorCode.E6020_CONFIG_LOAD_FAILED

    def test_immutable(self, genders_source) -> None:
        table = load_gender_table(genders_source).unwrap()
        with pytest.raises(TypeError):
            table.groups["noun"] = ()
