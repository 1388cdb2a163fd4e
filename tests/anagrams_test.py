import unittest

from hypothesis import given, strategies as st

from derangements.anagrams import anagram_buckets, find_derangements, is_derangement, pairs, sort_letters


class BucketTestCase(unittest.TestCase):

    def test_sort_letters(self):
        cases = {"STOP": "OPST", "SPOT": "OPST", "ANGER": "AEGNR", "": ""}
        for case, result in cases.items():
            self.assertEqual(result, sort_letters(case), case)

    def test_anagram_buckets(self):
        words = ["NIGHT", "ANGER", "THING", "ABOUT", "RANGE"]
        expected = {"GHINT": ["NIGHT", "THING"], "AEGNR": ["ANGER", "RANGE"], "ABOTU": ["ABOUT"]}

        buckets = anagram_buckets(words)
        self.assertEqual(expected, buckets)
        self.assertEqual(["GHINT", "AEGNR", "ABOTU"], list(buckets))  # order of first appearance

    @given(st.lists(st.text(alphabet="ABCDE", min_size=3, max_size=3)))
    def test_every_word_in_one_bucket(self, words):
        buckets = anagram_buckets(words)
        self.assertEqual(sorted(words), sorted(word for bucket in buckets.values() for word in bucket))
        for key, bucket in buckets.items():
            self.assertTrue(all(sort_letters(word) == key for word in bucket))


class PairsTestCase(unittest.TestCase):

    def test_pairs(self):
        cases = {
            (): [],
            ("a",): [],
            ("a", "b", "c"): [("a", "b"), ("a", "c"), ("b", "c")],
        }
        for case, result in cases.items():
            self.assertEqual(result, list(pairs(case)), case)

    @given(st.lists(st.integers(), max_size=10))
    def test_nested_loop_order(self, xs):
        expected = [(xs[i], xs[j]) for i in range(len(xs)) for j in range(i + 1, len(xs))]
        self.assertEqual(expected, list(pairs(xs)))


class DerangementTestCase(unittest.TestCase):

    def test_is_derangement(self):
        should_fail = [("LEMON", "MELON"), ("ANGER", "ANGER"), ("STALE", "STEAL")]
        for case in should_fail:
            self.assertFalse(is_derangement(*case), case)

        should_pass = [("NIGHT", "THING"), ("ANGER", "RANGE"), ("EARTH", "HEART")]
        for case in should_pass:
            self.assertTrue(is_derangement(*case), case)

    def test_window(self):
        # only the first five letters are compared
        self.assertTrue(is_derangement("ABCDEX", "BCDEAX"))
        self.assertRaises(IndexError, is_derangement, "STOP", "POTS")

    def test_four_letter_scenario(self):
        words = ["STOP", "SPOT", "POTS", "TOPS"]

        expected = []
        for x, y in pairs(words):
            if all(x[idx] != y[idx] for idx in range(4)):
                expected.append((x, y))

        self.assertEqual([("STOP", "POTS"), ("STOP", "TOPS"), ("SPOT", "POTS"), ("SPOT", "TOPS")], expected)
        self.assertEqual(expected, list(find_derangements(words, width=4)))

    def test_find_derangements(self):
        words = ["NIGHT", "ANGER", "LEMON", "THING", "RANGE", "MELON", "ABOUT"]
        self.assertEqual([("NIGHT", "THING"), ("ANGER", "RANGE")], list(find_derangements(words)))

    @given(st.lists(st.text(alphabet="ABCDEF", min_size=5, max_size=5), max_size=30))
    def test_matches_brute_force(self, words):
        expected = set()
        for i, x in enumerate(words):
            for y in words[i + 1:]:
                if sorted(x) == sorted(y) and all(a != b for a, b in zip(x, y)):
                    expected.add((x, y))

        self.assertEqual(expected, set(find_derangements(words)))

    def test_enumeration_order(self):
        words = ["CARET", "CATER", "CRATE", "TRACE", "REACT", "EARTH", "HEART", "HATER"]
        expected = [("CARET", "TRACE"), ("CATER", "TRACE"), ("CATER", "REACT"), ("EARTH", "HEART")]
        self.assertEqual(expected, list(find_derangements(words)))
        self.assertEqual(expected, list(find_derangements(words)))


if __name__ == '__main__':
    unittest.main()
