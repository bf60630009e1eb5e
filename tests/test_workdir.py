from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch
import os
import sys
import tempfile
import unittest

from cfbuild.errors import PathResolutionError
from cfbuild.workdir import locate_wrapper, normalize_working_directory, project_root


class WorkdirTests(unittest.TestCase):
    def setUp(self) -> None:
        self._cwd = os.getcwd()
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name).resolve()
        (self.root / ".cf").mkdir()
        self.wrapper = self.root / ".cf" / "build.py"
        self.wrapper.write_text("")

    def tearDown(self) -> None:
        os.chdir(self._cwd)
        self.temp_dir.cleanup()

    def test_locate_wrapper_resolves_given_file(self) -> None:
        os.chdir(self.root / ".cf")
        self.assertEqual(locate_wrapper("build.py"), self.wrapper)

    def test_locate_wrapper_uses_main_module(self) -> None:
        fake_main = SimpleNamespace(__file__=str(self.wrapper))
        with patch.dict(sys.modules, {"__main__": fake_main}):
            self.assertEqual(locate_wrapper(), self.wrapper)

    def test_locate_wrapper_without_main_file_fails(self) -> None:
        with patch.dict(sys.modules, {"__main__": SimpleNamespace()}):
            with self.assertRaises(PathResolutionError):
                locate_wrapper()

    def test_locate_wrapper_missing_file_fails(self) -> None:
        with self.assertRaisesRegex(PathResolutionError, "Cannot resolve wrapper location"):
            locate_wrapper(self.root / ".cf" / "absent.py")

    @unittest.skipUnless(hasattr(os, "symlink"), "requires symlinks")
    def test_symlinked_wrapper_keeps_link_location(self) -> None:
        shared = self.root / "shared" / "bin"
        shared.mkdir(parents=True)
        target = shared / "build.py"
        target.write_text("")
        project = self.root / "project"
        (project / ".cf").mkdir(parents=True)
        link = project / ".cf" / "build.py"
        os.symlink(target, link)

        wrapper = locate_wrapper(link)
        self.assertEqual(wrapper, link)
        self.assertEqual(project_root(wrapper), project)

    def test_locate_wrapper_rejects_dangling_symlink(self) -> None:
        if not hasattr(os, "symlink"):
            self.skipTest("requires symlinks")
        link = self.root / ".cf" / "dangling.py"
        os.symlink(self.root / "nowhere.py", link)
        with self.assertRaises(PathResolutionError):
            locate_wrapper(link)

    def test_project_root_is_grandparent(self) -> None:
        self.assertEqual(project_root(self.wrapper), self.root)

    def test_normalize_enters_root_from_anywhere(self) -> None:
        with tempfile.TemporaryDirectory() as elsewhere:
            os.chdir(elsewhere)
            root = normalize_working_directory(self.wrapper)
            self.assertEqual(root, self.root)
            self.assertEqual(Path.cwd().resolve(), self.root)

    def test_normalize_fails_when_root_missing(self) -> None:
        ghost = self.root / "gone" / "tools" / "build.py"
        before = os.getcwd()
        with self.assertRaises(PathResolutionError) as ctx:
            normalize_working_directory(ghost)
        self.assertEqual(ctx.exception.exit_code, 72)
        self.assertEqual(os.getcwd(), before)

    def test_normalize_wraps_chdir_errors(self) -> None:
        with patch("cfbuild.workdir.os.chdir", side_effect=PermissionError(13, "Permission denied")):
            with self.assertRaisesRegex(PathResolutionError, "Cannot enter project root"):
                normalize_working_directory(self.wrapper)


if __name__ == "__main__":
    unittest.main()
