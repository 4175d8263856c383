"""Ordering and de-duplication of English-to-Latin results."""


def weigh_words(word_list):
    """Sort results by the English word's true frequency, highest first.

    The sort is stable, so entries of equal frequency keep their order.
    """
    return sorted(word_list, key=lambda info: info.word.true_frequency, reverse=True)


def remove_duplicates(word_list):
    """Keep only the first result for each English word id."""
    seen_wids = set()
    deduped = []
    for info in word_list:
        wid = info.word.wid
        if wid not in seen_wids:
            seen_wids.add(wid)
            deduped.append(info)
    return deduped