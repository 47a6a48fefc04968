"""
Tests for the helper process that shows the Tk / win32 dialogs.
"""

import io
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import MagicMock, patch

from utils import folder_selector


class TestMain(unittest.TestCase):
    """Test cases for the command line protocol."""

    def run_main(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            code = folder_selector.main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_selected(self):
        backend = MagicMock(return_value="/home/someone/data")
        with patch.dict(folder_selector.BACKENDS, {"tk": backend}):
            code, out, _ = self.run_main(["--prompt", "Pick", "/home/someone"])

        self.assertEqual(code, folder_selector.EXIT_SELECTED)
        self.assertEqual(out.strip(), "/home/someone/data")
        backend.assert_called_once_with("Pick", "/home/someone")

    def test_cancelled(self):
        with patch.dict(folder_selector.BACKENDS, {"tk": MagicMock(return_value="")}):
            code, out, err = self.run_main([])

        self.assertEqual(code, folder_selector.EXIT_CANCELLED)
        self.assertEqual(out, "")
        self.assertIn("No folder selected", err)

    def test_backend_error(self):
        failing = MagicMock(side_effect=RuntimeError("no display"))
        with patch.dict(folder_selector.BACKENDS, {"win32": failing}):
            code, out, err = self.run_main(["--backend", "win32"])

        self.assertEqual(code, folder_selector.EXIT_ERROR)
        self.assertEqual(out, "")
        self.assertIn("no display", err)


class TestTkSelectFolder(unittest.TestCase):
    """Test cases for the Tk dialog with a fake tkinter module."""

    def setUp(self):
        self.filedialog = MagicMock()
        self.root = MagicMock()
        self.tkinter = MagicMock()
        self.tkinter.Tk.return_value = self.root
        self.tkinter.filedialog = self.filedialog
        self.modules = patch.dict(sys.modules, {
            "tkinter": self.tkinter,
            "tkinter.filedialog": self.filedialog,
        })
        self.modules.start()

    def tearDown(self):
        self.modules.stop()

    def test_topmost_and_released(self):
        self.filedialog.askdirectory.return_value = "/data/raw"

        self.assertEqual(folder_selector.tk_select_folder("Pick"), "/data/raw")
        self.root.withdraw.assert_called_once_with()
        self.root.attributes.assert_called_once_with("-topmost", True)
        self.root.destroy.assert_called_once_with()
        kwargs = self.filedialog.askdirectory.call_args.kwargs
        self.assertEqual(kwargs["title"], "Pick")
        self.assertNotIn("initialdir", kwargs)

    def test_released_on_error(self):
        self.filedialog.askdirectory.side_effect = RuntimeError("toolkit failure")

        with self.assertRaises(RuntimeError):
            folder_selector.tk_select_folder("Pick")
        self.root.destroy.assert_called_once_with()

    def test_released_on_cancel(self):
        self.filedialog.askdirectory.return_value = ""

        self.assertEqual(folder_selector.tk_select_folder("Pick"), "")
        self.root.destroy.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
