import pytest

from vocabvault.nominal_parts import (
    generate_for_adjectives,
    generate_for_nouns,
    generate_for_numerals,
    generate_for_pronouns,
)
from vocabvault.principal_parts import MISSING_PART, Comparison, Gender, NumeralKind


def test_first_declension_noun():
    result = generate_for_nouns(1, 1, Gender.FEMININE, ["ros", "ros"])
    assert result == ["rosa", "rosae"]


def test_third_declension_noun_keeps_nominative():
    parts = ["rex", "reg"]
    result = generate_for_nouns(3, 1, Gender.MASCULINE, parts)
    assert result == [parts[0], parts[1] + "is"]


@pytest.mark.parametrize(
    "gender, ending",
    [(Gender.MASCULINE, "us"), (Gender.NEUTER, "um")],
)
def test_second_declension_fourth_variety_depends_on_gender(gender, ending):
    parts = ["fili", "fili"]
    result = generate_for_nouns(2, 4, gender, parts)
    assert result == [parts[0] + ending, parts[1] + "(i)"]


def test_second_declension_fourth_variety_other_gender_unchanged():
    parts = ["fili", "fili"]
    assert generate_for_nouns(2, 4, Gender.FEMININE, parts) == parts


def test_noun_undeclined_and_abbreviation():
    parts = ["fas", "fas"]
    assert generate_for_nouns(9, 9, Gender.NEUTER, parts) == [parts[0] + " | undeclined"]
    assert generate_for_nouns(9, 8, Gender.NEUTER, parts) == [parts[0] + " | abbreviation"]


def test_unknown_noun_type_returns_parts_unchanged():
    parts = ["abc", "def"]
    assert generate_for_nouns(7, 7, Gender.MASCULINE, parts) == parts


def test_positive_first_declension_adjective():
    parts = ["bon", "bon"]
    result = generate_for_adjectives(1, 1, parts, Comparison.POSITIVE)
    assert result == [parts[0] + "us", parts[1] + "a", parts[1] + "um"]


def test_positive_third_declension_has_genitive_marker():
    parts = ["felix", "felic"]
    result = generate_for_adjectives(3, 1, parts, Comparison.POSITIVE)
    assert result == [parts[0], "(gen.)", parts[1] + "is"]


def test_comparative_ignores_declension():
    parts = ["melior", "melior"]
    expected = [parts[0] + "or", parts[0] + "or", parts[0] + "us"]
    assert generate_for_adjectives(1, 1, parts, Comparison.COMPARATIVE) == expected
    assert generate_for_adjectives(3, 3, parts, Comparison.COMPARATIVE) == expected


def test_superlative_adjective():
    parts = ["optimu", "optimu"]
    result = generate_for_adjectives(1, 1, parts, Comparison.SUPERLATIVE)
    assert result == [parts[0] + "mus", parts[0] + "ma", parts[0] + "mum"]


def test_unknown_comparison_with_four_parts():
    parts = ["alt", "alt", "altior", "altissi"]
    result = generate_for_adjectives(1, 1, parts, Comparison.UNKNOWN)
    assert result == [
        parts[0] + "us",
        parts[1] + "a -um",
        parts[2] + "or -or -us",
        parts[3] + "mus -a -um",
    ]


def test_unknown_comparison_with_missing_parts_uses_placeholder():
    result = generate_for_adjectives(1, 1, ["alt", "alt"], Comparison.UNKNOWN)
    assert result[2].startswith(MISSING_PART)
    assert result[3].startswith(MISSING_PART)


def test_adjective_undeclined():
    parts = ["nequam", "nequam"]
    result = generate_for_adjectives(9, 9, parts, Comparison.POSITIVE)
    assert result == [parts[0] + " | undeclined"]


def test_unlisted_adjective_type_unchanged():
    parts = ["x", "y"]
    assert generate_for_adjectives(4, 4, parts, Comparison.POSITIVE) == parts


def test_pronoun_hic_haec_hoc():
    assert generate_for_pronouns(3, 1, ["h", "h"]) == ["hic", "haec", "hoc"]


def test_pronoun_ille():
    parts = ["ill", "ill"]
    result = generate_for_pronouns(6, 1, parts)
    assert result == [parts[0] + "e", parts[0] + "a", parts[0] + "ud"]


def test_pronoun_unknown_type_unchanged():
    parts = ["qu", "cu"]
    assert generate_for_pronouns(1, 0, parts) == parts


def test_cardinal_numeral():
    parts = ["un", "un"]
    result = generate_for_numerals(1, 1, parts, NumeralKind.CARDINAL)
    assert result == [parts[0] + "us", parts[0] + "a", parts[0] + "um"]


def test_cardinal_unknown_type_unchanged():
    parts = ["decem", "decim"]
    assert generate_for_numerals(2, 0, parts, NumeralKind.CARDINAL) == parts


def test_ordinal_and_distributive():
    parts = ["secund", "bin"]
    assert generate_for_numerals(2, 0, parts, NumeralKind.ORDINAL) == [
        parts[0] + "us",
        parts[0] + "a",
        parts[0] + "um",
    ]
    assert generate_for_numerals(2, 0, parts, NumeralKind.DISTRIBUTIVE) == [
        parts[0] + "i",
        parts[0] + "ae",
        parts[0] + "a",
    ]


def test_general_numeral_second_type_fallback():
    parts = ["decem", "decim", "den", "decie"]
    result = generate_for_numerals(2, 0, parts, NumeralKind.ADVERBIAL)
    assert result == [
        parts[0],
        parts[1] + "us -a -um",
        parts[2] + "i -ae -a",
        parts[3] + "ie (n)s",
    ]


def test_general_numeral_other_type_unchanged():
    parts = ["a", "b", "c", "d"]
    assert generate_for_numerals(3, 0, parts, NumeralKind.UNKNOWN) == parts


def test_general_numeral_first_type_empty_fourth_part():
    parts = ["un", "prim", "singul", "semel"]
    result = generate_for_numerals(1, 1, parts, NumeralKind.UNKNOWN)
    assert result[3] == parts[3]
    assert result[0] == parts[0] + "us -a -um"