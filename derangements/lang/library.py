"""The term library: named operations over encoded booleans, orderings, naturals, pairs, triples and lists.

Every operation is registered in TERMS under the name it is looked up by (e.g. "nat-cmp", "foldr", "group-by"), so a
caller only ever needs the mapping, never this module's function names. Operations never mutate their arguments and
never decode them: they work through the queries the terms answer (`select`, `match`, `apply`). Arguments are passed
un-curried, `foldr(f, z, xs)` rather than `foldr(f)(z)(xs)`.

Callbacks handed to the library follow the encoding wherever the result is branched on: predicates (`filter`, `any`,
`all`) and equalities (`group-by`) return a Boolean term, comparators (`sort-by`) return an Ordering term. Callbacks
whose results are only stored (`foldr`, `map`, `zipWith`) may return anything.

Malformed input (a natural where a list is expected, the wrong number of arguments) is outside the contract and is
not checked.
"""

from functools import cmp_to_key
from itertools import combinations, islice

from derangements.pure.terms import Cons, EQ, FALSE, GT, LT, NIL, Pair, Succ, TRUE, Triple, ZERO
from derangements.pure.terms import from_iterable, iterate


TERMS = {
    "true": TRUE,
    "false": FALSE,
    "lt": LT,
    "eq": EQ,
    "gt": GT,
    "zero": ZERO,
    "nil": NIL,
}

WINDOW = 5  # letters compared by `main`


def term(name):
    """Registers the decorated function in TERMS under name."""
    def register(func):
        TERMS[name] = func
        return func
    return register


def _identity(x):
    return x


def _is_true(b):
    return b.select(True, False)


# booleans

@term("not")
def not_(b):
    return b.select(FALSE, TRUE)


@term("and")
def and_(a, b):
    return a.select(b, FALSE)


@term("or")
def or_(a, b):
    return a.select(TRUE, b)


# naturals

@term("succ")
def succ(n):
    return Succ(n)


@term("nat-cmp")
def nat_cmp(n, m):
    """Three-way comparison of two naturals. Strips one successor from both until one of them runs out."""
    while True:
        n_pred = n.match(None, _identity)
        m_pred = m.match(None, _identity)
        if n_pred is None or m_pred is None:
            break
        n, m = n_pred, m_pred

    return n.match(m.match(EQ, lambda __: LT), lambda __: GT)


@term("nat-eq")
def nat_eq(n, m):
    return nat_cmp(n, m).select(FALSE, TRUE, FALSE)


@term("nat-ne")
def nat_ne(n, m):
    return nat_cmp(n, m).select(TRUE, FALSE, TRUE)


@term("nat-lt")
def nat_lt(n, m):
    return nat_cmp(n, m).select(TRUE, FALSE, FALSE)


@term("nat-le")
def nat_le(n, m):
    return nat_cmp(n, m).select(TRUE, TRUE, FALSE)


@term("nat-gt")
def nat_gt(n, m):
    return nat_cmp(n, m).select(FALSE, FALSE, TRUE)


@term("nat-ge")
def nat_ge(n, m):
    return nat_cmp(n, m).select(FALSE, TRUE, TRUE)


# pairs and triples

@term("pair")
def pair(x, y):
    return Pair(x, y)


@term("pair-fst")
def pair_fst(p):
    return p.apply(lambda x, __: x)


@term("pair-snd")
def pair_snd(p):
    return p.apply(lambda __, y: y)


@term("triple")
def triple(x, y, z):
    return Triple(x, y, z)


@term("triple-fst")
def triple_fst(t):
    return t.apply(lambda x, __, ___: x)


@term("triple-snd")
def triple_snd(t):
    return t.apply(lambda __, y, ___: y)


@term("triple-thd")
def triple_thd(t):
    return t.apply(lambda __, ___, z: z)


@term("triple-map-fst")
def triple_map_fst(f, t):
    return t.apply(lambda x, y, z: Triple(f(x), y, z))


@term("triple-map-snd")
def triple_map_snd(f, t):
    return t.apply(lambda x, y, z: Triple(x, f(y), z))


@term("triple-map-thd")
def triple_map_thd(f, t):
    return t.apply(lambda x, y, z: Triple(x, y, f(z)))


# lists

@term("cons")
def cons(x, xs):
    return Cons(x, xs)


@term("null")
def null(xs):
    return xs.match(TRUE, lambda __, ___: FALSE)


@term("foldr")
def foldr(f, z, xs):
    """Right fold: f(x0, f(x1, ... f(xn, z)))."""
    acc = z
    for x in reversed(list(iterate(xs))):
        acc = f(x, acc)
    return acc


@term("concat")
def concat(xs, ys):
    return from_iterable(iterate(xs), ys)


@term("zipWith")
def zip_with(f, xs, ys):
    """Combines xs and ys element-wise. The longer list's extra elements are dropped."""
    return from_iterable(f(x, y) for x, y in zip(iterate(xs), iterate(ys)))


@term("map")
def map_(f, xs):
    return from_iterable(f(x) for x in iterate(xs))


@term("filter")
def filter_(pred, xs):
    return from_iterable(x for x in iterate(xs) if _is_true(pred(x)))


@term("any")
def any_(pred, xs):
    for x in iterate(xs):
        if _is_true(pred(x)):
            return TRUE
    return FALSE


@term("all")
def all_(pred, xs):
    for x in iterate(xs):
        if not _is_true(pred(x)):
            return FALSE
    return TRUE


@term("take")
def take(n, xs):
    """First n elements of xs; n is a Python int."""
    return from_iterable(islice(iterate(xs), n))


@term("pairs")
def pairs(xs):
    """Pairs of every two elements of xs, ordered by the index of the first and then the second."""
    return from_iterable(Pair(x, y) for x, y in combinations(iterate(xs), 2))


@term("group-by")
def group_by(eq, xs):
    """Splits xs into maximal runs of adjacent elements that eq considers equal to the first element of their run.
    This is run-length grouping: equal elements that are not adjacent end up in different groups.
    """
    groups = []
    for x in iterate(xs):
        if groups and _is_true(eq(groups[-1][0], x)):
            groups[-1].append(x)
        else:
            groups.append([x])
    return from_iterable(from_iterable(group) for group in groups)


@term("list-nat-cmp")
def list_nat_cmp(xs, ys):
    """Lexicographic comparison of two lists of naturals, position by position up to the length of the shorter one.
    Lists that agree on every compared position are equal, even if their lengths differ.
    """
    for x, y in zip(iterate(xs), iterate(ys)):
        ordering = nat_cmp(x, y)
        if ordering != EQ:
            return ordering
    return EQ


@term("list-nat-eq")
def list_nat_eq(xs, ys):
    return list_nat_cmp(xs, ys).select(FALSE, TRUE, FALSE)


@term("sort-by")
def sort_by(cmp, xs):
    """Stable sort of xs by cmp, a comparator returning an Ordering term."""
    key = cmp_to_key(lambda x, y: cmp(x, y).select(-1, 0, 1))
    return from_iterable(sorted(iterate(xs), key=key))


# program

@term("main")
def main(words):
    """Derangement search over an encoded list of encoded words.

    Words are keyed by their sorted letters, stably sorted by key and grouped by equal key, so each group is one set
    of anagrams in original order. Every pair in a group is kept if the two words differ at each of their first
    WINDOW letters. Returns one list of pairs per group that kept any, in ascending key order.
    """
    def keyed(word):
        return pair(sort_by(nat_cmp, word), word)

    def by_key(p, q):
        return list_nat_cmp(pair_fst(p), pair_fst(q))

    def same_key(p, q):
        return list_nat_eq(pair_fst(p), pair_fst(q))

    def deranged(p):
        return p.apply(lambda x, y: all_(_identity, zip_with(nat_ne, take(WINDOW, x), take(WINDOW, y))))

    groups = group_by(same_key, sort_by(by_key, map_(keyed, words)))
    found = map_(lambda group: filter_(deranged, pairs(map_(pair_snd, group))), groups)
    return filter_(lambda group: not_(null(group)), found)
