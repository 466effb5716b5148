"""Declension engine: full names, single words and phrases.

The engine owns one immutable RuleSet and GenderTable. Build it once with
``DeclensionEngine.initialize`` before serving concurrent callers; after that
every method is a pure function of its arguments and the tables.
"""
from __future__ import annotations

from core.errors import (
    AppError,
    Ok,
    Result,
    gender_undetermined,
    inflection_failed,
    invalid_case,
    malformed_name,
    sequence_results,
)
from core.logging import engine_logger

from .gender import resolve_gender
from .inflection import inflect
from .rules import GenderTable, RuleSet, RuleSource, load_gender_table, load_rule_set
from .types import CASE_LABELS, FULL_NAME_PARTS, INFLECTION_ORDER, UNKNOWN_GENDER, Case

log = engine_logger()


def parse_case(case: Case | str) -> Result[Case, AppError]:
    """Accept a Case or its two-letter label."""
    if isinstance(case, Case):
        return Ok(case)
    parsed = Case.from_label(case)
    if parsed is None:
        return invalid_case(case, CASE_LABELS, origin="declension")
    return Ok(parsed)


def _in_written_order(forms: dict[str, str]) -> str:
    return " ".join(forms[part_type] for part_type in FULL_NAME_PARTS)


class DeclensionEngine:
    """Declines Russian names and words using suffix rule tables."""

    __slots__ = ("_rules", "_genders")

    def __init__(self, rules: RuleSet, genders: GenderTable):
        self._rules = rules
        self._genders = genders

    @classmethod
    def initialize(
        cls, rule_source: RuleSource, gender_source: RuleSource
    ) -> Result[DeclensionEngine, AppError]:
        """Load both tables; fails as a whole if either cannot be loaded."""
        return load_rule_set(rule_source).and_then(
            lambda rules: load_gender_table(gender_source).map(
                lambda genders: cls(rules, genders)
            )
        )

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def genders(self) -> GenderTable:
        return self._genders

    def resolve_gender(self, word: str, part_type: str) -> str:
        """Gender label for ``word`` as a ``part_type``, or ``""`` if unknown."""
        return resolve_gender(self._genders, word, part_type)

    def decline_full_name(
        self, full_name: str, case: Case | str, gender: str = ""
    ) -> Result[str, AppError]:
        """Decline "Surname Given Patronymic".

        ``gender`` only satisfies the check that some gender is known for the
        name; each part is still matched against rules of its own inferred
        gender. Parts are inflected given name first, then surname, then
        patronymic, so a failing given name is the error reported.
        """
        parsed = parse_case(case)
        if parsed.is_err():
            return parsed
        target = parsed.unwrap()

        parts = full_name.split()
        if len(parts) != len(FULL_NAME_PARTS):
            return malformed_name(full_name, len(parts), origin="declension")

        if not gender:
            for part, part_type in zip(parts, FULL_NAME_PARTS):
                gender = self.resolve_gender(part, part_type)
                if gender != UNKNOWN_GENDER:
                    break
        if gender == UNKNOWN_GENDER:
            log.warning("gender_undetermined", name=full_name)
            return gender_undetermined(full_name, origin="declension")

        log.debug("full_name_gender", name=full_name, gender=gender, case=target.label)
        by_part = dict(zip(FULL_NAME_PARTS, parts))
        return sequence_results(
            inflect(self._rules, self._genders, by_part[part_type], part_type, target)
            for part_type in INFLECTION_ORDER
        ).map(lambda forms: _in_written_order(dict(zip(INFLECTION_ORDER, forms))))

    def decline_word(
        self, word: str, case: Case | str, part_type: str, gender: str = ""
    ) -> Result[str, AppError]:
        """Decline a single word of the given part type."""
        parsed = parse_case(case)
        if parsed.is_err():
            return parsed

        gender = gender or self.resolve_gender(word, part_type)
        log.debug("word_gender", word=word, part_type=str(part_type), gender=gender)
        return inflect(self._rules, self._genders, word, part_type, parsed.unwrap())

    def decline_phrase(
        self, phrase: str, case: Case | str, part_type: str, gender: str = ""
    ) -> Result[str, AppError]:
        """Decline every whitespace-separated word of ``phrase``.

        The phrase gender is taken from the override or from the first word
        whose gender is known, and kept for the rest of the phrase. Like the
        full-name override it is informational: each word is inflected on
        its own inferred gender. A phrase with no words cannot be declined.
        """
        parsed = parse_case(case)
        if parsed.is_err():
            return parsed
        target = parsed.unwrap()

        words = phrase.split()
        if not words:
            log.warning("inflection_failed", word=phrase, part_type=str(part_type), case=target.label)
            return inflection_failed(phrase, part_type, target.label, origin="declension")

        forms: list[str] = []
        for word in words:
            if not gender:
                gender = self.resolve_gender(word, part_type)
                if gender:
                    log.debug("phrase_gender", phrase=phrase, word=word, gender=gender)

            result = inflect(self._rules, self._genders, word, part_type, target)
            if result.is_err():
                return result
            forms.append(result.unwrap())

        return Ok(" ".join(forms))

    def paradigm(self, word: str, part_type: str) -> Result[dict[str, str], AppError]:
        """Decline ``word`` into every case, keyed by case label."""
        return sequence_results(
            inflect(self._rules, self._genders, word, part_type, case)
            for case in Case
        ).map(lambda forms: dict(zip(CASE_LABELS, forms)))
