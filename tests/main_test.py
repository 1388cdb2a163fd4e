import contextlib
import io
import json
import os
import tempfile
import unittest

from derangements.main import main, parse_args


class MainTestCase(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "words.json")
        with open(self.path, "w", encoding="utf-8") as file:
            json.dump(["NIGHT", "ANGER", "THING", "RANGE", "EARTH", "HEART"], file)

    def tearDown(self):
        self.tmpdir.cleanup()

    def run_main(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            main(argv)
        return stdout.getvalue()

    def test_parse_args(self):
        args = parse_args([])
        self.assertIsNone(args.file)
        self.assertFalse(args.encoded)

        args = parse_args(["words.json", "--encoded"])
        self.assertEqual("words.json", args.file)
        self.assertTrue(args.encoded)

    def test_direct(self):
        self.assertEqual("NIGHT THING\nANGER RANGE\nEARTH HEART\n", self.run_main([self.path]))

    def test_encoded(self):
        expected = [[["ANGER", "RANGE"]], [["EARTH", "HEART"]], [["NIGHT", "THING"]]]
        output = self.run_main([self.path, "--encoded"])
        self.assertEqual(expected, json.loads(output))
        self.assertEqual(json.dumps(expected, indent=2) + "\n", output)

    def test_bundled(self):
        self.assertTrue(self.run_main([]))
        self.assertTrue(json.loads(self.run_main(["--encoded"])))

    def test_missing_file(self):
        with self.assertRaises(SystemExit) as context:
            self.run_main([os.path.join(self.tmpdir.name, "missing.json")])
        self.assertEqual(1, context.exception.code)


if __name__ == '__main__':
    unittest.main()
