"""Grammatical categories and the core rule for building principal parts."""

from enum import Enum

MISSING_PART = "---"
_ABSENT_STEM = "zzz"


class Gender(Enum):
    """Grammatical gender of a noun."""

    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"
    COMMON = "common"
    UNKNOWN = "unknown"


class Comparison(Enum):
    """Degree of comparison of an adjective."""

    POSITIVE = "positive"
    COMPARATIVE = "comparative"
    SUPERLATIVE = "superlative"
    UNKNOWN = "unknown"


class VerbKind(Enum):
    """Kind of verb, as far as principal parts are concerned."""

    DEPONENT = "deponent"
    SEMI_DEPONENT = "semi_deponent"
    PERFECT_DEFINITE = "perfect_definite"
    IMPERSONAL = "impersonal"
    UNKNOWN = "unknown"


class NumeralKind(Enum):
    """Kind of numeral."""

    CARDINAL = "cardinal"
    ORDINAL = "ordinal"
    DISTRIBUTIVE = "distributive"
    ADVERBIAL = "adverbial"
    UNKNOWN = "unknown"


def set_principle_parts(parts, endings, special_case=None):
    """Build principal parts from stems and ``(ending, part_number)`` pairs.

    ``part_number`` is the 1-based stem the ending is appended to; 0 means
    the ending stands alone, and an empty ending with 0 marks a missing
    part. When every pair is empty, the result is the first stem labelled
    with ``special_case``, which must then be given.
    """
    endings = list(endings)
    if all(ending == "" and number == 0 for ending, number in endings):
        if special_case is None:
            raise ValueError("No endings or special case provided")
        return [f"{parts[0]} | {special_case}"]

    principle_parts = []
    for ending, number in endings:
        if number == 0:
            principle_parts.append(ending if ending else MISSING_PART)
            continue

        part = MISSING_PART if number > len(parts) else parts[number - 1]
        if part == _ABSENT_STEM:
            principle_parts.append(MISSING_PART)
            continue

        principle_parts.append(part + ending)
    return principle_parts