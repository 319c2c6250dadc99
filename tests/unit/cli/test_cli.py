"""CLI argument and default-path behavior tests.

Verifies how ``oxls.cli.main`` chooses the target path and depth.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from oxls import cli, config
from oxls.file_tree_model import DIRECTORY_GLYPH, KIND_TAG_GLYPHS


class CliTests(unittest.TestCase):
    def _run(self, argv: list[str], default_depth: int = 0) -> str:
        stdout = io.StringIO()
        with (
            mock.patch("oxls.cli.load_default_depth", return_value=default_depth),
            mock.patch("sys.stdout", stdout),
        ):
            cli.main(argv)
        return stdout.getvalue()

    def test_main_defaults_to_current_working_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "Cargo.toml").write_bytes(b"x" * 10)
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                output = self._run([])
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(output, f"{KIND_TAG_GLYPHS['toml']}\t10B\tCargo.toml\n")

    def test_depth_option_expands_directories(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "src").mkdir()
            (root / "src" / "main.rs").write_bytes(b"x" * 4)

            output = self._run([str(root), "--depth", "1"])

            lines = output.split("\n")
            self.assertTrue(lines[0].startswith(f"{DIRECTORY_GLYPH}\t"))
            self.assertTrue(lines[0].endswith("\tsrc"))
            self.assertEqual(lines[1], f"\t{KIND_TAG_GLYPHS['rs']}\t4B\tmain.rs")

    def test_unparsable_depth_means_no_recursion(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "src").mkdir()
            (root / "src" / "main.rs").write_text("", encoding="utf-8")

            output = self._run([str(root), "-d", "lots"], default_depth=3)

            self.assertEqual(len(output.splitlines()), 1)

    def test_configured_default_depth_applies_without_flag(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "src").mkdir()
            (root / "src" / "lib.go").write_text("", encoding="utf-8")

            output = self._run([str(root)], default_depth=1)

            self.assertIn("\tlib.go", output)

    def test_missing_path_prints_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            self.assertEqual(self._run([str(Path(tmp) / "nope")]), "")

    def test_explicit_empty_path_lists_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "Cargo.toml").write_text("", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                output = self._run([""])
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(output, "")

    def test_save_depth_persists_effective_depth_for_later_runs(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "tree"
            (root / "src").mkdir(parents=True)
            (root / "src" / "lib.rs").write_text("", encoding="utf-8")
            config_path = Path(tmp) / "config" / "oxls.json"

            with (
                mock.patch("oxls.config.CONFIG_PATH", config_path),
                mock.patch("sys.stdout", io.StringIO()) as first_stdout,
            ):
                cli.main([str(root), "--depth", "1", "--save-depth"])
            with (
                mock.patch("oxls.config.CONFIG_PATH", config_path),
                mock.patch("sys.stdout", io.StringIO()) as second_stdout,
            ):
                cli.main([str(root)])

            with mock.patch("oxls.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_default_depth(), 1)
            self.assertIn("\tlib.rs", first_stdout.getvalue())
            self.assertEqual(second_stdout.getvalue(), first_stdout.getvalue())

    def test_save_depth_stores_unparsable_depth_as_zero(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "oxls.json"
            with (
                mock.patch("oxls.config.CONFIG_PATH", config_path),
                mock.patch("sys.stdout", io.StringIO()),
            ):
                config.save_default_depth(4)
                cli.main([tmp, "-d", "many", "--save-depth"])
                self.assertEqual(config.load_default_depth(), 0)

    def test_verbose_configures_debug_logging(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("oxls.cli.logging.basicConfig") as basic_config:
                self._run([tmp, "-v"])

            basic_config.assert_called_once()
            self.assertEqual(basic_config.call_args.kwargs["level"], cli.logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
