"""Direct search for anagram derangements: pairs of anagrams that share no letter at any of their first five
positions. Works on plain strings, without going through the term library.
"""

from itertools import combinations

WINDOW = 5


def sort_letters(word):
    """Bucket key of word: its letters in codepoint order."""
    return "".join(sorted(word))


def anagram_buckets(words):
    """Dict of bucket key: words with that key, in input order. Buckets are ordered by first appearance."""
    buckets = {}
    for word in words:
        buckets.setdefault(sort_letters(word), []).append(word)
    return buckets


def pairs(items):
    """Yields (items[i], items[j]) for every i < j, ordered by i then j."""
    return combinations(items, 2)


def is_derangement(x, y, width=WINDOW):
    """Whether x and y differ at every one of their first width positions. Both must be at least width long."""
    return all(x[idx] != y[idx] for idx in range(width))


def find_derangements(words, width=WINDOW):
    """Yields every derangement pair in words, bucket by bucket."""
    for anagrams in anagram_buckets(words).values():
        for x, y in pairs(anagrams):
            if is_derangement(x, y, width):
                yield x, y
