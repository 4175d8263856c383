# vocabvault

Building blocks for working with Latin words. The package has no runtime
dependencies.

## Modules

- `vocabvault.text_utils` handles user input and roman numerals.
  `sanitize_word` cleans up input. `is_roman_number` and
  `evaluate_roman_numeral` recognise and evaluate numerals.
  `convert_number_to_roman_numeral` turns a digit string into a numeral.
  `number_with_ending` writes ordinals such as `1st` or `12th`. Bad input
  raises `InvalidRomanNumeralError` or `InvalidNumberError`, and both are
  subclasses of `ValueError`.
- `vocabvault.trick_lists` holds the spelling-variant tables:
  - `match_tricks_list` and `match_slur_trick_list` give the tables for a
    word's initial letter.
  - `get_any_tricks` gives the tricks that may apply anywhere in a word.
  - `get_medieval_tricks` gives the medieval spellings.

  Each entry is a frozen `Trick(operation, str_1, str_2)`, where
  `operation` is an `Operation` (`FLIP`, `FLIP_FLOP` or `INTERNAL`).
  Asking for a letter that has no table raises `ValueError`.
- `vocabvault.principal_parts` defines the enums `Gender`, `Comparison`,
  `VerbKind` and `NumeralKind`. It also has `set_principle_parts`, which
  appends endings to numbered stems.
- `vocabvault.nominal_parts` builds dictionary-style principal parts from
  stems and declension numbers. It has `generate_for_nouns`,
  `generate_for_adjectives`, `generate_for_pronouns` and
  `generate_for_numerals`.
- `vocabvault.selection` filters entries. `word_fits_filters` checks part of
  speech and length in UTF-8 bytes. `select_entries` returns every match,
  the first *n* matches, or *n* matches drawn at random with repetition.
- `vocabvault.ranking` works on English-to-Latin results, that is, objects
  with a `.word` that has `wid` and `true_frequency`. `remove_duplicates`
  keeps the first result for each English word id. `weigh_words` sorts the
  results by frequency, highest first.

## Examples

```python
from vocabvault.text_utils import (
    convert_number_to_roman_numeral,
    evaluate_roman_numeral,
    number_with_ending,
    sanitize_word,
)

convert_number_to_roman_numeral("1994")   # "MCMXCIV"
evaluate_roman_numeral("xiv")             # 14
number_with_ending(3)                     # "3rd"
sanitize_word("  Amo! ")                  # "amo"
```

```python
from vocabvault.nominal_parts import generate_for_nouns
from vocabvault.principal_parts import Gender

generate_for_nouns(1, 1, Gender.FEMININE, ["puell", "puell"])
# ["puella", "puellae"]
```

```python
from vocabvault.trick_lists import Operation, match_tricks_list

[t for t in match_tricks_list("p") if t.operation is Operation.FLIP]
# [Trick(operation=<Operation.FLIP: 'flip'>, str_1='ph', str_2='f')]
```

```python
from vocabvault.selection import select_entries

words = [("amo", "V"), ("rosa", "N"), ("bellum", "N")]
select_entries(words, pos_list=["N"], min_len=4, key=lambda w: (w[0], w[1]))
# [("rosa", "N"), ("bellum", "N")]
```

## What the package does not do

- It has no dictionary data. It does not translate or look up words.
- It has no command-line program.
- It does not apply the spelling tricks to words. It only provides the
  tables.
- It does not generate principal parts for verbs. `VerbKind` is defined, but
  nothing uses it.

## Running the tests

```
pip install .[test]
pytest
```