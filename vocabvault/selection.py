"""Filtering and sampling of dictionary entries."""

import random as _random


def _text_length(text):
    return len(text.encode("utf-8"))


def word_fits_filters(word_orth, word_pos, pos_list=None, max_len=None, min_len=None, exact=None):
    """Tell whether a word passes the part-of-speech and length filters.

    Lengths are measured in UTF-8 bytes. A filter that is ``None`` is not applied.
    """
    if pos_list is not None and word_pos not in pos_list:
        return False
    length = _text_length(word_orth)
    if max_len is not None and length > max_len:
        return False
    if min_len is not None and length < min_len:
        return False
    if exact is not None and length != exact:
        return False
    return True


def _orth_and_pos(entry):
    return entry.orth, entry.pos


def select_entries(
    entries,
    pos_list=None,
    max_len=None,
    min_len=None,
    exact=None,
    amount=None,
    random=False,
    key=None,
):
    """Return the entries that pass the filters.

    ``key`` maps an entry to its ``(text, part_of_speech)``; by default the
    entry's ``orth`` and ``pos`` attributes are used. With ``amount`` set,
    the first ``amount`` matches are returned, or, when ``random`` is true,
    ``amount`` matches drawn at random with repetition. A non-positive
    ``amount`` without ``random`` returns every match.
    """
    key = key or _orth_and_pos
    entries = list(entries)

    def fits(entry):
        text, pos = key(entry)
        return word_fits_filters(text, pos, pos_list, max_len, min_len, exact)

    if amount is None:
        return [entry for entry in entries if fits(entry)]

    if random:
        if amount < 0:
            raise ValueError(f"Cannot draw a negative number of entries: {amount}")
        if amount == 0:
            return []
        if not entries:
            raise ValueError("Cannot draw entries from an empty list")
        candidates = [entry for entry in entries if fits(entry)]
        if not candidates:
            raise ValueError("No entries match the given filters")
        return [_random.choice(candidates) for _ in range(amount)]

    selected = []
    for entry in entries:
        if not fits(entry):
            continue
        selected.append(entry)
        if len(selected) == amount:
            break
    return selected