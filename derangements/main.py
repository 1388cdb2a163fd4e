"""Searches a word list for anagram derangements, either directly or through the encoded term library. Also uses the
error handling context manager. Called from the derangements console script.
"""

import argparse
import json

from derangements.lang.error import ErrorHandler
from derangements.lang.session import Session
from derangements.logging import get_logger

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="derangements", description=__doc__.split(".")[0] + ".")
    parser.add_argument("file", help="JSON array of words to search (defaults to a bundled list)", nargs="?")
    parser.add_argument("--encoded", action="store_true",
                        help="run the search through the term library and print the groups as JSON")
    return parser.parse_args(argv)


def main(argv=None):
    """Runs derangements. Called from the derangements console script."""
    with ErrorHandler() as error_handler:
        args = parse_args(argv)

        sess = Session(error_handler, args.file, encoded=args.encoded)
        logger.info("searching %s (%s)", sess.path, "encoded" if args.encoded else "direct")
        sess.run()

        if args.encoded:
            print(json.dumps(sess.results, indent=2))
        else:
            for x, y in sess.results:
                print(x, y)


if __name__ == "__main__":
    main()
