"""Encoded terms: the values that the term library operates on.

The `pure` directory knows nothing about words or anagrams. It only defines the shapes an encoded value can take,
each a small immutable node in a tree:

```
<term> ::= Boolean                ; selector over two branches: true picks the first, false the second
         | Ordering               ; selector over three branches: lt, eq, gt
         | Zero | Succ <term>     ; natural numbers, n successors wrapped around zero
         | Nil  | Cons <x> <term> ; lists, rightmost element innermost
         | Pair <x> <x>
         | Triple <x> <x> <x>
```

Terms are queried rather than inspected: a natural is asked what to do when it is zero and what to do with its
predecessor, a list what to do when empty and what to do with its head and tail. Decoding and every library operation
is written against those queries (`select`, `match`, `apply`).
"""

from abc import abstractmethod, ABC


class EncodedTerm(ABC):
    """Superclass that represents any encoded value. Subclasses define `nodes`, the children of the term."""
    __slots__ = ()

    @property
    @abstractmethod
    def nodes(self):
        """Children of this term, in order."""

    @property
    def tokenizable(self):
        """Whether or not this term has children."""
        return bool(self.nodes)

    @property
    def expr(self):
        """Short textual form of this term."""
        return self._cls

    @property
    def _cls(self):
        return type(self).__name__

    def display(self, indents=0):
        """Recursively displays the term tree with readable format.

        Format:
        <EncodedTerm>(expr='<expr>', nodes=[
            <EncodedTerm>(expr='<expr>', nodes=[
                ...
                <EncodedTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{self._cls}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                if isinstance(node, EncodedTerm):
                    result += "\n" + node.display(indents + 1) + ","
                else:
                    result += f"\n{'    ' * (indents + 1)}{node!r},"
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        if not self.nodes:
            return f"{self._cls}()"
        return f"{self._cls}({', '.join(repr(node) for node in self.nodes)})"

    def __str__(self):
        return self.display()

    def __eq__(self, other):
        return type(other) is type(self) and self.nodes == other.nodes

    def __hash__(self):
        return hash((self._cls, self.nodes))


class Boolean(EncodedTerm):
    """Two-branch selector. Use the `TRUE` and `FALSE` singletons rather than instantiating."""
    __slots__ = ("value",)

    def __init__(self, value):
        self.value = bool(value)

    @property
    def nodes(self):
        return ()

    @property
    def expr(self):
        return "true" if self.value else "false"

    def select(self, if_true, if_false):
        """Returns if_true for true and if_false for false."""
        return if_true if self.value else if_false

    def __repr__(self):
        return "TRUE" if self.value else "FALSE"

    def __eq__(self, other):
        return isinstance(other, Boolean) and other.value == self.value

    def __hash__(self):
        return hash((self._cls, self.value))


class Ordering(EncodedTerm):
    """Three-branch selector summarising a comparison. Use the `LT`, `EQ` and `GT` singletons."""
    __slots__ = ("value",)
    NAMES = {-1: "lt", 0: "eq", 1: "gt"}

    def __init__(self, value):
        assert value in Ordering.NAMES, f"{value} is not a three-way ordering"
        self.value = value

    @property
    def nodes(self):
        return ()

    @property
    def expr(self):
        return Ordering.NAMES[self.value]

    def select(self, lt, eq, gt):
        """Returns the branch matching this ordering."""
        if self.value < 0:
            return lt
        if self.value > 0:
            return gt
        return eq

    def __repr__(self):
        return self.expr.upper()

    def __eq__(self, other):
        return isinstance(other, Ordering) and other.value == self.value

    def __hash__(self):
        return hash((self._cls, self.value))


class Nat(EncodedTerm):
    """Superclass for natural numbers."""
    __slots__ = ()

    @abstractmethod
    def match(self, zero, succ):
        """Returns zero if this is Zero, else succ(predecessor)."""


class Zero(Nat):
    __slots__ = ()

    @property
    def nodes(self):
        return ()

    def match(self, zero, succ):
        return zero


class Succ(Nat):
    __slots__ = ("pred",)

    def __init__(self, pred):
        self.pred = pred

    @property
    def nodes(self):
        return (self.pred,)

    @property
    def expr(self):
        return "succ"

    def match(self, zero, succ):
        return succ(self.pred)

    def __eq__(self, other):
        # compared iteratively, numerals can be deeper than the recursion limit
        this = self
        while isinstance(this, Succ) and isinstance(other, Succ):
            this, other = this.pred, other.pred
        return type(this) is type(other) and this == other

    def __hash__(self):
        depth, this = 0, self
        while isinstance(this, Succ):
            depth, this = depth + 1, this.pred
        return hash((self._cls, depth, this))


class List(EncodedTerm):
    """Superclass for lists."""
    __slots__ = ()

    @abstractmethod
    def match(self, nil, cons):
        """Returns nil if this is Nil, else cons(head, tail)."""

    def __iter__(self):
        return iterate(self)


class Nil(List):
    __slots__ = ()

    @property
    def nodes(self):
        return ()

    def match(self, nil, cons):
        return nil


class Cons(List):
    __slots__ = ("head", "tail")

    def __init__(self, head, tail):
        self.head = head
        self.tail = tail

    @property
    def nodes(self):
        return (self.head, self.tail)

    @property
    def expr(self):
        return "cons"

    def match(self, nil, cons):
        return cons(self.head, self.tail)

    def __eq__(self, other):
        this = self
        while isinstance(this, Cons) and isinstance(other, Cons):
            if this.head != other.head:
                return False
            this, other = this.tail, other.tail
        return type(this) is type(other) and not isinstance(this, Cons)

    def __hash__(self):
        return hash((self._cls, tuple(iterate(self))))


class Pair(EncodedTerm):
    __slots__ = ("fst", "snd")

    def __init__(self, fst, snd):
        self.fst = fst
        self.snd = snd

    @property
    def nodes(self):
        return (self.fst, self.snd)

    def apply(self, accessor):
        """Returns accessor(fst, snd)."""
        return accessor(self.fst, self.snd)


class Triple(EncodedTerm):
    __slots__ = ("fst", "snd", "thd")

    def __init__(self, fst, snd, thd):
        self.fst = fst
        self.snd = snd
        self.thd = thd

    @property
    def nodes(self):
        return (self.fst, self.snd, self.thd)

    def apply(self, accessor):
        """Returns accessor(fst, snd, thd)."""
        return accessor(self.fst, self.snd, self.thd)


TRUE = Boolean(True)
FALSE = Boolean(False)

LT = Ordering(-1)
EQ = Ordering(0)
GT = Ordering(1)

ZERO = Zero()
NIL = Nil()


def iterate(xs):
    """Yields the elements of the list term xs from head to last."""
    while isinstance(xs, Cons):
        yield xs.head
        xs = xs.tail


def from_iterable(items, tail=NIL):
    """Right fold of Cons over items onto tail: the inverse of iterate."""
    for item in reversed(list(items)):
        tail = Cons(item, tail)
    return tail
