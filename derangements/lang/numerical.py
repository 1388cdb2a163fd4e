"""Natural numbers encoded as zero/successor chains. Note that operations are not implemented here (see
lang/library.py): this module only converts between Python ints and encoded naturals.

Source: https://en.wikipedia.org/wiki/Peano_axioms
"""

from derangements.lang.error import InvalidInput
from derangements.pure.terms import Succ, ZERO


class NumeralCache:
    """Memo of encoded naturals, keyed by the int they encode. Lazily extended, never evicted: a cache belongs to a
    single Codec and lives as long as it does.
    """

    def __init__(self, zero=ZERO, succ=Succ):
        self.succ = succ
        self._numerals = [zero]  # index n holds the encoding of n

    def get(self, num):
        """Returns the encoding of num, building (and caching) every numeral up to num that is missing."""
        while len(self._numerals) <= num:
            self._numerals.append(self.succ(self._numerals[-1]))
        return self._numerals[num]

    def __contains__(self, num):
        return 0 <= num < len(self._numerals)

    def __len__(self):
        return len(self._numerals)


def check_nat(num):
    """Raises InvalidInput unless num is a non-negative int."""
    if isinstance(num, bool) or not isinstance(num, int):
        raise InvalidInput("can only encode non-negative integers, got '{}'", repr(num))
    if num < 0:
        raise InvalidInput("can only encode non-negative integers, got '{}'", str(num))


def encode_nat(num, cache):
    """Returns the encoded natural for num, using cache."""
    check_nat(num)
    return cache.get(num)


def decode_nat(cnum):
    """Returns the int encoded by cnum. Unwraps one successor per step."""
    num = 0
    while True:
        pred = cnum.match(None, lambda pred: pred)
        if pred is None:
            return num
        cnum = pred
        num += 1
