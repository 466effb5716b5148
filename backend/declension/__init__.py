"""Rule-based declension of Russian names and words.

Usage:
    from declension import DeclensionEngine, default_gender_path, default_rules_path

    engine = DeclensionEngine.initialize(default_rules_path(), default_gender_path()).unwrap()
    engine.decline_full_name("Иванов Иван Иванович", "ДП")  # Ok('Иванову Ивану Ивановичу')
"""
from .engine import DeclensionEngine, parse_case
from .inflection import apply_template, inflect, match_rule
from .rules import (
    GenderTable,
    Rule,
    RuleGroup,
    RuleSet,
    default_gender_path,
    default_rules_path,
    load_gender_table,
    load_rule_set,
)
from .types import CASE_LABELS, Case, PartType

__all__ = [
    "DeclensionEngine",
    "parse_case",
    "apply_template",
    "inflect",
    "match_rule",
    "GenderTable",
    "Rule",
    "RuleGroup",
    "RuleSet",
    "default_gender_path",
    "default_rules_path",
    "load_gender_table",
    "load_rule_set",
    "CASE_LABELS",
    "Case",
    "PartType",
]
