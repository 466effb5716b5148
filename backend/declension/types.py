"""Shared type definitions for the declension engine."""
from enum import Enum, StrEnum

# Modification template markers
IDENTITY_MARK = "."
STRIP_MARK = "-"

UNKNOWN_GENDER = ""


class Case(Enum):
    """Grammatical cases, valued by their two-letter Russian label."""
    NOMINATIVE = "ИП"
    GENITIVE = "РП"
    DATIVE = "ДП"
    ACCUSATIVE = "ВП"
    INSTRUMENTAL = "ТП"
    PREPOSITIONAL = "ПП"

    @property
    def label(self) -> str:
        return self.value

    @property
    def mod_index(self) -> int | None:
        """Position of this case in a rule's template list.

        Nominative has no template and therefore no index.
        """
        return _MOD_INDEX.get(self)

    @classmethod
    def from_label(cls, label: str) -> "Case | None":
        try:
            return cls(label.strip().upper())
        except ValueError:
            return None


# Template list order for every non-nominative case
INFLECTED_CASES = (
    Case.GENITIVE,
    Case.DATIVE,
    Case.ACCUSATIVE,
    Case.INSTRUMENTAL,
    Case.PREPOSITIONAL,
)
_MOD_INDEX = {case: i for i, case in enumerate(INFLECTED_CASES)}

CASE_LABELS = [case.label for case in Case]


class PartType(StrEnum):
    """Name slots with dedicated rule tables.

    Any other string is accepted wherever a part type is expected and selects
    a generic word table of the same name.
    """
    LASTNAME = "lastname"
    FIRSTNAME = "firstname"
    MIDDLENAME = "middlename"


# Order in which a full name is written and declined
FULL_NAME_PARTS = (PartType.LASTNAME, PartType.FIRSTNAME, PartType.MIDDLENAME)

# Order in which the parts are inflected; the first failure is the one reported
INFLECTION_ORDER = (PartType.FIRSTNAME, PartType.LASTNAME, PartType.MIDDLENAME)
