"""Single-word inflection.

Rule selection and suffix rewriting. A word is inflected by the first rule,
exceptions before general suffixes, whose gender matches the word's own
inferred gender and whose test endings contain one the word ends with.
"""
from core.errors import AppError, Ok, Result, inflection_failed
from core.logging import engine_logger

from .gender import ends_with, resolve_gender
from .rules import GenderTable, RuleSet
from .types import IDENTITY_MARK, STRIP_MARK, Case

log = engine_logger()

# Rule lists in the order they are searched
SECTIONS = ("exceptions", "suffixes")


def match_rule(
    rules: RuleSet,
    genders: GenderTable,
    word: str,
    part_type: str,
    case: Case,
    section: str,
) -> str | None:
    """Find the template of the first matching rule in one rule list.

    Gender is resolved again for every rule rather than once per word.
    """
    group = rules.get(part_type)
    if group is None:
        return None

    for rule in getattr(group, section):
        if resolve_gender(genders, word, part_type) != rule.gender:
            continue
        for ending in rule.test:
            if ends_with(word, ending):
                return rule.template_for(case)
    return None


def apply_template(word: str, template: str) -> str:
    """Rewrite the end of ``word`` according to a modification template.

    Each leading ``-`` removes one trailing character, the remainder is
    appended. Removing more characters than the word has leaves only the
    appended part. The identity template ``.`` returns the word as is.

        >>> apply_template("Иванов", "у")
        'Иванову'
        >>> apply_template("Анна", "-ой")
        'Анной'
    """
    if template == IDENTITY_MARK:
        return word

    literal = template.lstrip(STRIP_MARK)
    strip = len(template) - len(literal)
    return word[:max(len(word) - strip, 0)] + literal


def inflect(
    rules: RuleSet,
    genders: GenderTable,
    word: str,
    part_type: str,
    case: Case,
) -> Result[str, AppError]:
    """Decline one word, or fail with an inflection error if no rule applies.

    A matched exception that rewrites the word to nothing does not count:
    the search moves on to the general suffixes, and an empty form from
    those fails like no match at all.
    """
    if case is Case.NOMINATIVE:
        return Ok(word)

    for section in SECTIONS:
        template = match_rule(rules, genders, word, part_type, case, section)
        if template is None:
            continue
        form = apply_template(word, template)
        log.debug(
            "word_inflected",
            word=word,
            part_type=str(part_type),
            case=case.label,
            section=section,
            template=template,
            form=form,
        )
        if form:
            return Ok(form)

    log.warning("inflection_failed", word=word, part_type=str(part_type), case=case.label)
    return inflection_failed(word, part_type, case.label, origin="inflector")
