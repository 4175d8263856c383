"""Principal parts for nouns, adjectives, pronouns and numerals."""

from .principal_parts import Comparison, Gender, NumeralKind, set_principle_parts

_ABBREVIATION = "abbreviation"
_UNDECLINED = "undeclined"

_NOUN_ENDINGS = {
    (1, 1): (("a", 1), ("ae", 2)),
    (1, 6): (("e", 1), ("es", 2)),
    (1, 7): (("es", 1), ("ae", 2)),
    (1, 8): (("as", 1), ("ae", 2)),
    (2, 1): (("us", 1), ("i", 2)),
    (2, 2): (("um", 1), ("i", 2)),
    (2, 3): (("", 1), ("i", 2)),
    (2, 5): (("us", 1), ("", 2)),
    (2, 6): (("os", 1), ("i", 2)),
    (2, 7): (("os", 1), ("i", 2)),
    (2, 8): (("on", 1), ("i", 2)),
    (2, 9): (("us", 1), ("i", 2)),
    (3, 1): (("", 1), ("is", 2)),
    (3, 2): (("", 1), ("is", 2)),
    (3, 3): (("", 1), ("is", 2)),
    (3, 4): (("", 1), ("is", 2)),
    (3, 7): (("", 1), ("os/is", 2)),
    (3, 9): (("", 1), ("os/is", 2)),
    (4, 1): (("us", 1), ("us", 2)),
    (4, 2): (("u", 1), ("us", 2)),
    (4, 3): (("us", 1), ("u", 2)),
    (5, 1): (("es", 1), ("ei", 2)),
}

_NOUN_SECOND_FOURTH = {
    Gender.MASCULINE: (("us", 1), ("(i)", 2)),
    Gender.NEUTER: (("um", 1), ("(i)", 2)),
}

_SPECIAL = {(9, 8): _ABBREVIATION, (9, 9): _UNDECLINED}

_ADJECTIVE_POSITIVE = {
    (1, 1): (("us", 1), ("a", 2), ("um", 2)),
    (1, 2): (("", 1), ("a", 2), ("um", 2)),
    (1, 4): (("", 1), ("a", 2), ("um", 2)),
    (1, 3): (("us", 1), ("a", 2), ("um (gen -ius)", 2)),
    (1, 5): (("us", 1), ("a", 2), ("ud", 2)),
    (2, 1): (("", 0), ("e", 1), ("", 0)),
    (2, 2): (("", 0), ("a", 0), ("", 0)),
    (2, 3): (("es", 1), ("es", 1), ("es", 1)),
    (2, 6): (("os", 1), ("os", 1), ("", 0)),
    (2, 7): (("os", 1), ("", 0), ("", 0)),
    (2, 8): (("", 0), ("", 0), ("on", 2)),
    (3, 1): (("", 1), ("(gen.)", 0), ("is", 2)),
    (3, 2): (("is", 1), ("is", 2), ("e", 2)),
    (3, 3): (("", 1), ("is", 2), ("e", 2)),
    (3, 6): (("", 1), ("(gen.)", 0), ("os", 2)),
}

_ADJECTIVE_UNKNOWN = {
    (1, 1): (("us", 1), ("a -um", 2), ("or -or -us", 3), ("mus -a -um", 4)),
    (1, 2): (("", 1), ("a -um", 2), ("or -or -us", 3), ("mus -a -um", 4)),
    (3, 1): (("", 1), ("is (gen .)", 2), ("or -or -us", 3), ("mus -a -um", 4)),
    (3, 2): (("is", 1), ("e", 2), ("or -or -us", 3), ("mus -a -um", 4)),
    (3, 3): (("", 1), ("is -e", 2), ("or -or -us", 3), ("mus -a -um", 4)),
}

_ADJECTIVE_FIXED = {
    Comparison.COMPARATIVE: (("or", 1), ("or", 1), ("us", 1)),
    Comparison.SUPERLATIVE: (("mus", 1), ("ma", 1), ("mum", 1)),
}

_PRONOUN_ENDINGS = {
    (3, 1): (("ic", 1), ("aec", 1), ("oc", 1)),
    (3, 2): (("ic", 1), ("aec", 1), ("uc", 1)),
    (4, 1): (("s", 1), ("a", 2), ("d", 1)),
    (4, 2): (("dem", 1), ("adem", 2), ("dem", 1)),
    (6, 1): (("e", 1), ("a", 1), ("ud", 1)),
    (6, 2): (("e", 1), ("a", 1), ("um", 1)),
}

_NUMERAL_GENERAL = {
    (1, 1): (("us -a -um", 1), ("us -a -um", 2), ("i -ae -a", 3), ("", 4)),
    (1, 2): (("o -ae o", 1), ("us -a -um", 2), ("i -ae -a", 3), ("", 4)),
    (1, 3): (("es -es -ia", 1), ("us -a -um", 2), ("i -ae -a", 3), ("", 4)),
    (1, 4): (("i -ae -a", 1), ("us -a -um", 2), ("i -ae -a", 3), ("ie (n)s", 4)),
}
_NUMERAL_GENERAL_SECOND = (("", 1), ("us -a -um", 2), ("i -ae -a", 3), ("ie (n)s", 4))

_NUMERAL_CARDINAL = {
    (1, 1): (("us", 1), ("a", 1), ("um", 1)),
    (1, 2): (("o", 1), ("ae", 1), ("o", 1)),
    (1, 3): (("es", 1), ("es", 1), ("ia", 1)),
    (1, 4): (("i", 1), ("ae", 1), ("a", 1)),
}

_NUMERAL_FIXED = {
    NumeralKind.ORDINAL: (("us", 1), ("a", 1), ("um", 1)),
    NumeralKind.DISTRIBUTIVE: (("i", 1), ("ae", 1), ("a", 1)),
}


def _special(parts, key, width):
    return set_principle_parts(parts, [("", 0)] * width, _SPECIAL[key])


def _apply(parts, endings):
    if endings is None:
        return list(parts)
    return set_principle_parts(parts, endings)


def generate_for_nouns(num_type_1, num_type_2, gender, parts):
    """Return the nominative and genitive forms of a noun."""
    key = (num_type_1, num_type_2)
    if key in _SPECIAL:
        return _special(parts, key, 2)
    if key == (2, 4):
        return _apply(parts, _NOUN_SECOND_FOURTH.get(gender))
    return _apply(parts, _NOUN_ENDINGS.get(key))


def generate_for_adjectives(num_type_1, num_type_2, parts, comparison):
    """Return the dictionary forms of an adjective."""
    if comparison in _ADJECTIVE_FIXED:
        return set_principle_parts(parts, _ADJECTIVE_FIXED[comparison])

    key = (num_type_1, num_type_2)
    if key in _SPECIAL:
        return _special(parts, key, 3)
    table = _ADJECTIVE_POSITIVE if comparison is Comparison.POSITIVE else _ADJECTIVE_UNKNOWN
    return _apply(parts, table.get(key))


def generate_for_pronouns(num_type_1, num_type_2, parts):
    """Return the masculine, feminine and neuter forms of a pronoun."""
    key = (num_type_1, num_type_2)
    if key in _SPECIAL:
        return _special(parts, key, 3)
    return _apply(parts, _PRONOUN_ENDINGS.get(key))


def generate_for_numerals(num_type_1, num_type_2, parts, numeral_type):
    """Return the dictionary forms of a numeral."""
    key = (num_type_1, num_type_2)
    if numeral_type in (NumeralKind.UNKNOWN, NumeralKind.ADVERBIAL):
        endings = _NUMERAL_GENERAL.get(key)
        if endings is None and num_type_1 == 2:
            endings = _NUMERAL_GENERAL_SECOND
        return _apply(parts, endings)
    if numeral_type is NumeralKind.CARDINAL:
        return _apply(parts, _NUMERAL_CARDINAL.get(key))
    return set_principle_parts(parts, _NUMERAL_FIXED[numeral_type])