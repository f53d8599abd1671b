"""Closed ordinal scales shared by both scorers: education level and language proficiency."""

from enum import Enum


class EducationLevel(str, Enum):
    """Education level with a single ordinal table.

    Ordinal positions (0-indexed):
        No education=0, Secondary=1, Vocational=2, Technical=3,
        Bachelor=4, Master=5, Doctoral=6
    """
    NO_EDUCATION = "No education"
    SECONDARY = "Secondary"
    VOCATIONAL = "Vocational"
    TECHNICAL = "Technical"
    BACHELOR = "Bachelor"
    MASTER = "Master"
    DOCTORAL = "Doctoral"

    @property
    def ordinal(self) -> int:
        return _EDUCATION_ORDER.index(self)

    @classmethod
    def parse(cls, value: object) -> "EducationLevel":
        """Map a stored string to a level. Unknown or empty values mean no education."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.NO_EDUCATION
        key = value.strip().lower().replace(" ", "")
        return _EDUCATION_LOOKUP.get(key, cls.NO_EDUCATION)


_EDUCATION_ORDER = list(EducationLevel)
_EDUCATION_LOOKUP = {lvl.value.lower().replace(" ", ""): lvl for lvl in EducationLevel}


class Proficiency(str, Enum):
    """CEFR proficiency plus Mother Tongue, which ranks above C2."""
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C1 = "C1"
    C2 = "C2"
    MOTHER_TONGUE = "Mother Tongue"

    @property
    def rank(self) -> int:
        return _PROFICIENCY_RANK[self]

    @classmethod
    def parse(cls, value: object) -> "Proficiency | None":
        """Return the matching level, or None when the value is not on the scale."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace(" ", "")
        return _PROFICIENCY_LOOKUP.get(key)


_PROFICIENCY_RANK = {
    Proficiency.A1: 1,
    Proficiency.A2: 2,
    Proficiency.B1: 3,
    Proficiency.B2: 4,
    Proficiency.C1: 5,
    Proficiency.C2: 6,
    Proficiency.MOTHER_TONGUE: 7,
}
_PROFICIENCY_LOOKUP = {p.value.lower().replace(" ", ""): p for p in Proficiency}
