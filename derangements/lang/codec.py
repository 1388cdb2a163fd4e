"""Conversion between Python values and encoded terms.

Encoders build terms only through the constructors exposed by a term environment (by default the library's TERMS),
so a Codec works with any environment that names `true`, `false`, `lt`, `eq`, `gt`, `zero`, `succ`, `nil`, `cons`,
`pair` and `triple`. Decoders only query terms (`select`, `match`, `apply`), never inspect them.

Each encode/decode pair is a round trip: decode(encode(value)) == value for every value the encoder accepts. Values
the encoder does not accept raise InvalidInput. Decoding anything other than a term built by the matching encoder (or
an equivalent one returned by the library) is undefined.
"""

from derangements.lang.error import InvalidInput
from derangements.lang.library import TERMS
from derangements.lang.numerical import NumeralCache, decode_nat, encode_nat


class Codec:
    """Encodes and decodes values against a term environment. Owns the numeral cache used by encode_nat."""
    ORDINAL = ord("A")

    def __init__(self, terms=None, numerals=None):
        self.terms = TERMS if terms is None else terms
        if numerals is None:
            numerals = NumeralCache(self.terms["zero"], self.terms["succ"])
        self.numerals = numerals

    # booleans

    def encode_bool(self, b):
        return self.terms["true"] if b else self.terms["false"]

    @staticmethod
    def decode_bool(b):
        return b.select(True, False)

    # naturals

    def encode_nat(self, num):
        return encode_nat(num, self.numerals)

    @staticmethod
    def decode_nat(cnum):
        return decode_nat(cnum)

    # characters and strings

    def encode_char(self, char):
        """Encodes a single uppercase ASCII letter as its offset from 'A'."""
        if not isinstance(char, str) or len(char) != 1 or not "A" <= char <= "Z":
            raise InvalidInput("can only encode single uppercase letters, got '{}'", repr(char))
        return self.encode_nat(ord(char) - Codec.ORDINAL)

    @staticmethod
    def decode_char(cnum):
        return chr(decode_nat(cnum) + Codec.ORDINAL)

    def encode_string(self, string):
        return self.encode_list([self.encode_char(char) for char in string])

    @staticmethod
    def decode_string(term):
        return "".join(Codec.decode_char(char) for char in Codec.decode_list(term))

    # lists

    def encode_list(self, items):
        """Right fold of cons over items. Elements are stored as given: encode them first if they need it."""
        nil, cons = self.terms["nil"], self.terms["cons"]

        xs = nil
        for item in reversed(list(items)):
            xs = cons(item, xs)
        return xs

    @staticmethod
    def decode_list(xs):
        """Python list of the elements of xs, head first. Elements are returned as stored."""
        items = []
        while True:
            cell = xs.match(None, lambda head, tail: (head, tail))
            if cell is None:
                return items
            head, xs = cell
            items.append(head)

    # pairs and triples

    def encode_pair(self, values):
        x, y = values
        return self.terms["pair"](x, y)

    @staticmethod
    def decode_pair(p):
        return p.apply(lambda x, y: (x, y))

    def encode_triple(self, values):
        x, y, z = values
        return self.terms["triple"](x, y, z)

    @staticmethod
    def decode_triple(t):
        return t.apply(lambda x, y, z: (x, y, z))

    # orderings

    def encode_ord(self, ordering):
        if isinstance(ordering, bool) or ordering not in (-1, 0, 1):
            raise InvalidInput("can only encode -1, 0, or 1 as an ordering, got '{}'", repr(ordering))
        return self.terms[{-1: "lt", 0: "eq", 1: "gt"}[ordering]]

    @staticmethod
    def decode_ord(ordering):
        return ordering.select(-1, 0, 1)
