"""Gender inference from word endings."""
from .rules import GenderTable
from .types import UNKNOWN_GENDER


def ends_with(word: str, suffix: str) -> bool:
    """Literal, case-insensitive suffix test."""
    return word.lower().endswith(suffix.lower())


def resolve_gender(table: GenderTable, word: str, part_type: str) -> str:
    """Return the first configured gender with an ending that matches ``word``.

    Gender groups and their endings are tried in configured order. Returns
    ``UNKNOWN_GENDER`` when nothing matches or the part type has no table.
    """
    for gender, endings in table.get(part_type):
        for ending in endings:
            if ends_with(word, ending):
                return gender
    return UNKNOWN_GENDER
