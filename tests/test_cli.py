"""
Tests for the command line interface
"""

import contextlib
import io
import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from vision_target import cli


class CliTestCase(unittest.TestCase):
    """Shared temp directory helpers."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.dir = Path(self.tmp.name)

    def write(self, name: str, text: str) -> str:
        path = self.dir / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    def read_targets(self, path: str) -> list[dict]:
        with open(path, encoding="utf-8") as f:
            return [json.loads(line) for line in f if line.strip()]


class TestRun(CliTestCase):
    """Test resolving a frames file end to end."""

    def setUp(self):
        super().setUp()
        self.config = self.write(
            "config.yaml", "camera:\n  frame_width: 320\n  focal_length: 160\n"
        )

    def test_writes_one_target_per_frame(self):
        """Test every frame line produces one JSON target."""
        frames = self.write(
            "frames.jsonl",
            "[[150, 0, 5, 40], [165, 0, 5, 40]]\n"
            '[{"x": 0, "y": 0, "width": 40, "height": 10}]\n'
            "[]\n",
        )
        output = str(self.dir / "out.jsonl")

        code = cli.run(frames, self.config, output)

        self.assertEqual(code, 0)
        targets = self.read_targets(output)
        self.assertEqual(len(targets), 3)
        self.assertEqual(targets[0]["goal_type"], "GEAR")
        self.assertEqual(targets[0]["box"], [150, 0, 20, 40])
        self.assertEqual(targets[0]["bearing_degrees"], 0.0)
        self.assertEqual(targets[1]["goal_type"], "HIGH_GOAL")
        self.assertFalse(targets[2]["has_target"])
        self.assertIsNone(targets[2]["bearing_degrees"])

    def test_malformed_frame_skipped(self):
        """Test bad frames are dropped from the output."""
        frames = self.write("frames.jsonl", "[[0, 0, -5, 40]]\n[[0, 0, 5, 40]]\n")
        output = str(self.dir / "out.jsonl")

        code = cli.run(frames, self.config, output)

        self.assertEqual(code, 0)
        self.assertEqual(len(self.read_targets(output)), 1)

    def test_writes_to_stdout(self):
        """Test output defaults to stdout."""
        frames = self.write("frames.jsonl", "[[0, 0, 10, 40], [20, 0, 10, 40]]\n")
        stdout = io.StringIO()

        with contextlib.redirect_stdout(stdout):
            code = cli.run(frames, self.config, None)

        self.assertEqual(code, 0)
        target = json.loads(stdout.getvalue())
        self.assertEqual(target["box"], [0, 0, 30, 40])

    def test_output_path_from_config(self):
        """Test the configured output path is used when -o is not given."""
        output = str(self.dir / "configured.jsonl")
        config = self.write(
            "with_output.yaml",
            f"camera:\n  focal_length: 160\noutput:\n  path: {output}\n",
        )
        frames = self.write("frames.jsonl", "[[0, 0, 10, 40]]\n")

        code = cli.run(frames, config, None)

        self.assertEqual(code, 0)
        self.assertEqual(len(self.read_targets(output)), 1)

    def test_invalid_config_fails(self):
        """Test an invalid camera config exits non-zero."""
        config = self.write("bad.yaml", "camera:\n  focal_length: 0\n")
        frames = self.write("frames.jsonl", "[]\n")

        self.assertEqual(cli.run(frames, config, None), 1)

    def test_missing_frames_file_fails(self):
        """Test a missing input file exits non-zero."""
        missing = str(self.dir / "missing.jsonl")
        self.assertEqual(cli.run(missing, self.config, None), 1)

    def test_unwritable_output_fails(self):
        """Test an output path that cannot be opened exits non-zero."""
        frames = self.write("frames.jsonl", "[[0, 0, 10, 40]]\n")
        output = str(self.dir / "no-such-dir" / "out.jsonl")

        self.assertEqual(cli.run(frames, self.config, output), 1)


class TestFindConfigFile(CliTestCase):
    """Test config file discovery."""

    def test_specified_path(self):
        """Test an existing specified path is used."""
        path = self.write("custom.yaml", "{}\n")
        self.assertEqual(cli.find_config_file(path), Path(path))

    def test_specified_missing_exits(self):
        """Test a missing specified path exits."""
        with self.assertRaises(SystemExit):
            cli.find_config_file(str(self.dir / "nope.yaml"))

    def test_no_config_found(self):
        """Test None is returned when no standard location has a config."""
        cwd = os.getcwd()
        os.chdir(self.dir)
        self.addCleanup(os.chdir, cwd)

        with mock.patch.object(Path, "home", return_value=self.dir):
            self.assertIsNone(cli.find_config_file(None))

    def test_current_directory(self):
        """Test ./config.yaml is found."""
        self.write("config.yaml", "{}\n")
        cwd = os.getcwd()
        os.chdir(self.dir)
        self.addCleanup(os.chdir, cwd)

        found = cli.find_config_file(None)

        self.assertEqual(found.resolve(), (self.dir / "config.yaml").resolve())


class TestMain(CliTestCase):
    """Test argument handling in main()."""

    def test_validate_valid_config(self):
        """Test --validate exits 0 for a valid config."""
        config = self.write("config.yaml", "camera:\n  focal_length: 160\n")
        stdout = io.StringIO()

        with mock.patch.object(cli, "setup_logging"), contextlib.redirect_stdout(stdout):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--validate", "-c", config])

        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("Configuration valid", stdout.getvalue())

    def test_validate_invalid_config(self):
        """Test --validate exits 1 for an invalid config."""
        config = self.write("config.yaml", "camera:\n  frame_width: 0\n")
        stdout = io.StringIO()

        with mock.patch.object(cli, "setup_logging"), contextlib.redirect_stdout(stdout):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--validate", "-c", config])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("camera.frame_width", stdout.getvalue())

    def test_run_exit_code(self):
        """Test main exits with the run result."""
        config = self.write("config.yaml", "camera:\n  focal_length: 160\n")
        frames = self.write("frames.jsonl", "[[0, 0, 10, 40]]\n")
        output = str(self.dir / "out.jsonl")

        with mock.patch.object(cli, "setup_logging"):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([frames, "-c", config, "-o", output])

        self.assertEqual(ctx.exception.code, 0)
        self.assertEqual(len(self.read_targets(output)), 1)


if __name__ == "__main__":
    unittest.main()
