"""
Tests for the select_folder entry point.
"""

import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from utils.environment import Environment
from utils.folder_selection import new_browser, select_folder
from utils.native_pickers import UNSUPPORTED_WARNING
from utils.selection import NO_SELECTION, SelectionRequest, SelectionResult


@patch("utils.folder_selection.log")
@patch("utils.browse_state.log")
class TestSelectFolder(unittest.TestCase):
    """Test cases for routing every environment to its mechanism."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.root = os.path.realpath(self.temp_dir)
        os.makedirs(os.path.join(self.root, "raw"))
        os.makedirs(os.path.join(self.root, "processed"))

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    @patch("utils.folder_selection.pick_native")
    def test_host_environments_use_native_dialog(self, mock_pick, *_logs):
        mock_pick.return_value = SelectionResult(path="/picked")
        request = SelectionRequest(prompt="Pick images", initial_dir="/start")

        for environment in (Environment.MACOS, Environment.LINUX, Environment.WINDOWS):
            with self.subTest(environment=environment):
                result = select_folder(request, environment=environment, timeout=9)
                self.assertEqual(result.path, "/picked")
                mock_pick.assert_called_with(environment, "Pick images", "/start", timeout=9)

    @patch("utils.folder_selection.pick_native")
    def test_container_uses_browser(self, mock_pick, *_logs):
        request = SelectionRequest(root=self.root)
        browser = new_browser(request)

        self.assertEqual(select_folder(request, Environment.CONTAINER, browser), NO_SELECTION)

        browser.navigate("raw")
        browser.confirm()
        result = select_folder(request, Environment.CONTAINER, browser)
        self.assertEqual(result.path, os.path.join(self.root, "raw"))
        mock_pick.assert_not_called()

    def test_container_without_browser_is_no_selection(self, *_logs):
        request = SelectionRequest(root=self.root)
        with patch("utils.browse_state.os.scandir") as mock_scandir:
            self.assertEqual(select_folder(request, Environment.CONTAINER), NO_SELECTION)
        mock_scandir.assert_not_called()

    @patch("utils.folder_selection.pick_native")
    def test_unsupported_warns_every_call(self, mock_pick, *_logs):
        for _ in range(3):
            result = select_folder(environment=Environment.UNSUPPORTED)
            self.assertFalse(result.selected)
            self.assertEqual(result.warning, UNSUPPORTED_WARNING)
        mock_pick.assert_not_called()

    @patch("utils.folder_selection.pick_native", side_effect=RuntimeError("dialog exploded"))
    def test_never_raises(self, _pick, *_logs):
        self.assertEqual(select_folder(environment=Environment.LINUX), NO_SELECTION)

    @patch("utils.native_pickers.log")
    @patch("utils.native_pickers.subprocess.run", side_effect=OSError("osascript failed"))
    def test_simulated_macos_failure(self, _run, *_logs):
        self.assertEqual(select_folder(environment=Environment.MACOS), NO_SELECTION)

    @patch("utils.folder_selection.pick_native")
    @patch("utils.folder_selection.current_environment", return_value=Environment.LINUX)
    def test_detects_environment_when_omitted(self, mock_env, mock_pick, *_logs):
        mock_pick.return_value = NO_SELECTION
        select_folder()
        mock_env.assert_called_once_with()
        self.assertEqual(mock_pick.call_args.args[0], Environment.LINUX)


class TestBrowseScenario(unittest.TestCase):
    """Root with raw and processed: open raw, confirm raw."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.data = os.path.realpath(os.path.join(self.temp_dir, "data"))
        os.makedirs(os.path.join(self.data, "raw"))
        os.makedirs(os.path.join(self.data, "processed"))

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    @patch("utils.browse_state.log")
    def test_scenario(self, _log):
        browser = new_browser(SelectionRequest(root=self.data))
        self.assertEqual(browser.subdirs, ["processed", "raw"])

        browser.navigate("raw")
        self.assertEqual(browser.current, os.path.join(self.data, "raw"))
        self.assertEqual(browser.subdirs, [])

        result = select_folder(environment=Environment.CONTAINER, browser=browser)
        self.assertFalse(result.selected)
        browser.confirm()
        result = select_folder(environment=Environment.CONTAINER, browser=browser)
        self.assertEqual(result.path, os.path.join(self.data, "raw"))


if __name__ == '__main__':
    unittest.main()
