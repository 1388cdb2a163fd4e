"""Session control for derangements. Loads a word list and runs either the direct search or the encoded program on it.
"""

import json
import os

from derangements.anagrams import anagram_buckets, find_derangements
from derangements.lang.codec import Codec
from derangements.lang.error import GenericException
from derangements.logging import get_logger

logger = get_logger(__name__)


class Session:
    """Governs a single run over one word list."""
    DATA = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "data")
    WORDS = os.path.join(DATA, "words.json")              # default list for the direct search
    SMALL_WORDS = os.path.join(DATA, "words-small.json")  # default list for the encoded program

    def __init__(self, error_handler, path=None, encoded=False, codec=None):
        if path is None:
            path = Session.SMALL_WORDS if encoded else Session.WORDS

        self.error_handler = error_handler
        self.path = path        # used for error messages
        self.encoded = encoded  # whether or not to run through the term library
        self.codec = codec if codec is not None else Codec()

        self.results = []
        self.words = self.load(path)

    def load(self, path):
        """Returns the words in the JSON array at path. Raises a GenericException if path can't be read or doesn't
        hold an array of strings.
        """
        self.error_handler.register_file(path)  # in case error is raised

        try:
            with open(path, "r", encoding="utf-8") as file:
                words = json.load(file)
        except OSError:
            raise GenericException("'{}' could not be opened", path, diagnosis=False)
        except json.JSONDecodeError as error:
            raise GenericException("'{}' is not valid JSON: {}", (path, error.msg), diagnosis=False)

        if not isinstance(words, list) or not all(isinstance(word, str) for word in words):
            raise GenericException("'{}' is not a JSON array of words", path, diagnosis=False)

        self.error_handler.remove_file(path)  # error was not raised
        logger.info("loaded %d words from %s", len(words), path)
        return words

    def run(self):
        """Runs the search on self.words, replacing self.results."""
        if self.encoded:
            self.results = self._run_encoded()
        else:
            self.results = self._run_direct()

        logger.info("found %d results", len(self.results))
        return self.results

    def _run_direct(self):
        logger.debug("%d anagram buckets", len(anagram_buckets(self.words)))
        return list(find_derangements(self.words))

    def _run_encoded(self):
        """Encodes self.words, applies the `main` term and decodes the result into lists of [word, word]."""
        codec = self.codec
        program = codec.terms["main"]

        encoded = codec.encode_list([codec.encode_string(word) for word in self.words])
        groups = program(encoded)

        return [
            [[codec.decode_string(word) for word in codec.decode_pair(pair)] for pair in codec.decode_list(group)]
            for group in codec.decode_list(groups)
        ]
