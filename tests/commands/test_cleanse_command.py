"""Tests for the cleanse command.

Tests cover:
- Writing the canonical form to stdout and to a file
- Scoreability check
- Read and write failures
"""

import io
import sys
import tempfile
import unittest
from pathlib import Path

from simcheck.commands.cleanse import cmd_cleanse
from simcheck.domain.profile_type import ProfileType
from simcheck.domain.settings import CheckerSettings

SOURCE = b"static const int a = 1; /* c */\nint b = 2;\n"


def _capture(func, *args, **kwargs):
    """Run func and return (exit_code, stdout_bytes, stderr)."""
    raw = io.BytesIO()
    out = io.TextIOWrapper(raw, encoding="utf-8")
    err = io.StringIO()
    old_stdout, old_stderr = sys.stdout, sys.stderr
    sys.stdout, sys.stderr = out, err
    try:
        code = func(*args, **kwargs)
    finally:
        sys.stdout, sys.stderr = old_stdout, old_stderr
    out.flush()
    return code, raw.getvalue(), err.getvalue()


class TestCmdCleanse(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp.name)
        self.source = self.tmp_path / "main.c"
        self.source.write_bytes(SOURCE)

    def tearDown(self):
        self.tmp.cleanup()

    def test_writes_to_stdout(self):
        code, out, err = _capture(cmd_cleanse, str(self.source), CheckerSettings())
        self.assertEqual(code, 0)
        self.assertEqual(out, b"inta=1\nintb=2\n")
        self.assertIn("profile 'c'", err)

    def test_writes_to_file(self):
        output = self.tmp_path / "main.clean"
        code, out, err = _capture(
            cmd_cleanse, str(self.source), CheckerSettings(), output=str(output)
        )
        self.assertEqual(code, 0)
        self.assertEqual(out, b"")
        self.assertEqual(output.read_bytes(), b"inta=1\nintb=2")
        self.assertIn("13 bytes", err)

    def test_stdout_matches_file_output_for_non_utf8_bytes(self):
        self.source.write_bytes(b"x = '\xe9';\n")
        output = self.tmp_path / "main.clean"
        code, out, _ = _capture(cmd_cleanse, str(self.source), CheckerSettings())
        self.assertEqual(code, 0)
        self.assertEqual(out, b"x='\xe9'\n")
        _capture(cmd_cleanse, str(self.source), CheckerSettings(), output=str(output))
        self.assertEqual(output.read_bytes() + b"\n", out)

    def test_explicit_profile(self):
        code, out, _ = _capture(
            cmd_cleanse, str(self.source), CheckerSettings(), profile_type=ProfileType.UNKNOWN
        )
        self.assertEqual(code, 0)
        self.assertIn(b"/*c*/", out)

    def test_empty_result_prints_nothing(self):
        self.source.write_bytes(b"// nothing\n")
        code, out, _ = _capture(cmd_cleanse, str(self.source), CheckerSettings())
        self.assertEqual(code, 0)
        self.assertEqual(out, b"")

    def test_check_rejects_empty_result(self):
        self.source.write_bytes(b"// nothing\n")
        code, _, err = _capture(cmd_cleanse, str(self.source), CheckerSettings(), check=True)
        self.assertEqual(code, 1)
        self.assertIn("No content", err)

    def test_check_rejects_long_lines(self):
        code, _, err = _capture(
            cmd_cleanse, str(self.source), CheckerSettings(max_line_length=4), check=True
        )
        self.assertEqual(code, 1)
        self.assertIn("exceeds", err)

    def test_check_accepts_valid_file(self):
        code, out, _ = _capture(cmd_cleanse, str(self.source), CheckerSettings(), check=True)
        self.assertEqual(code, 0)
        self.assertEqual(out, b"inta=1\nintb=2\n")

    def test_missing_input_fails(self):
        code, _, err = _capture(cmd_cleanse, str(self.tmp_path / "missing.c"), CheckerSettings())
        self.assertEqual(code, 1)
        self.assertIn("Error:", err)

    def test_unwritable_output_fails(self):
        output = self.tmp_path / "missing" / "out.clean"
        code, _, err = _capture(
            cmd_cleanse, str(self.source), CheckerSettings(), output=str(output)
        )
        self.assertEqual(code, 1)
        self.assertIn("Failed to write", err)


if __name__ == "__main__":
    unittest.main()
