import unittest
import sys
import os
import io
from contextlib import redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.main import build_parser, main


class TestCLI(unittest.TestCase):
    def test_parser_defaults(self):
        args = build_parser().parse_args(["generate"])
        self.assertEqual(args.algo, "dfs")
        self.assertEqual(args.seed, 0)
        self.assertIsNone(args.start)

    def test_parser_rejects_unknown_algo(self):
        with self.assertRaises(SystemExit):
            with redirect_stdout(io.StringIO()):
                build_parser().parse_args(["generate", "--algo", "wilson"])

    def test_generate(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["generate", "--algo", "prim", "--width", "6", "--height", "4",
                         "--start", "2", "1", "--seed", "9"])
        self.assertEqual(code, 0)
        self.assertIn("Done.", out.getvalue())

    def test_generate_invalid(self):
        with self.assertLogs("perfect_maze", level="ERROR"):
            code = main(["generate", "--algo", "dfs", "--width", "3", "--height", "3", "--start", "5", "5"])
        self.assertEqual(code, 1)

    def test_benchmark(self):
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["benchmark", "--size", "8"])
        self.assertEqual(code, 0)
        for name in ("binary_tree", "sidewinder", "dfs", "prim", "kruskal", "division"):
            self.assertIn(name, out.getvalue())


if __name__ == '__main__':
    unittest.main()
