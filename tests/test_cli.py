"""
Tests for the command-line entry point.
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from doccorpus.cli import EXIT_FATAL, EXIT_ISSUES, EXIT_OK, main


class TestCli(unittest.TestCase):
    """Test cases for `doccorpus validate`."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def write(self, relative, text):
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    def run_cli(self, *argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = main(list(argv))
        return code, stdout.getvalue(), stderr.getvalue()

    def test_clean_corpus_exits_zero(self):
        self.write("a.md", "---\ntitle: A\ndescription: D\n---\n[b](/b)\n")
        self.write("b.md", "---\ntitle: B\ndescription: D\n---\n")
        code, out, _ = self.run_cli("validate", str(self.root))
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "")

    def test_issues_printed_one_per_line(self):
        self.write("a.md", "---\ntitle: A\ndescription: D\n---\n[x](/x) [y](/y)\n")
        code, out, _ = self.run_cli("validate", str(self.root))
        self.assertEqual(code, EXIT_ISSUES)
        lines = out.splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("/a:5:1: BrokenLink:"))
        self.assertTrue(lines[1].startswith("/a:5:9: BrokenLink:"))

    def test_json_format(self):
        self.write("a.md", "---\ntitle: A\n---\n")
        code, out, _ = self.run_cli("validate", str(self.root), "--format", "json")
        self.assertEqual(code, EXIT_ISSUES)
        record = json.loads(out.splitlines()[0])
        self.assertEqual(record["kind"], "MalformedFrontMatter")
        self.assertEqual(record["source_path"], "/a")

    def test_config_file(self):
        self.write("a.md", "---\ntitle: A\ndescription: D\n---\n[b](/docs/b)\n")
        self.write("b.md", "---\ntitle: B\ndescription: D\n---\n")
        config_path = self.root / "doccorpus.yaml"
        config_path.write_text("route_prefix: /docs\n", encoding="utf-8")
        code, _, _ = self.run_cli("validate", str(self.root), "-c", str(config_path))
        self.assertEqual(code, EXIT_OK)

    def test_invalid_config_is_fatal(self):
        config_path = self.root / "bad.yaml"
        config_path.write_text("route_prefix: docs\n", encoding="utf-8")
        code, _, err = self.run_cli("validate", str(self.root), "-c", str(config_path))
        self.assertEqual(code, EXIT_FATAL)
        self.assertIn("invalid config", err)

    def test_missing_root_is_fatal(self):
        code, out, err = self.run_cli("validate", str(self.root / "missing"))
        self.assertEqual(code, EXIT_FATAL)
        self.assertEqual(out, "")
        self.assertIn("does not exist", err)


if __name__ == "__main__":
    unittest.main()
