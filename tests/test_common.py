"""
Tests for settings and per-user variable storage.
"""

import json
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from utils.config import DEFAULT_BROWSE_ROOT
from utils.common import (
    DEFAULT_APP_SETTINGS,
    folder_selection_settings,
    load_app_settings,
    load_vars,
    logged_callback,
    save_app_settings,
    update_vars,
)


@patch("utils.common.log")
class TestAppSettings(unittest.TestCase):
    """Test cases for config/settings.json handling."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.settings_file = os.path.join(self.temp_dir, "config", "settings.json")

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_missing_file_is_created_with_defaults(self, _log):
        settings = load_app_settings(self.settings_file)
        self.assertEqual(settings, DEFAULT_APP_SETTINGS)
        with open(self.settings_file, encoding="utf-8") as f:
            self.assertEqual(json.load(f), DEFAULT_APP_SETTINGS)

    def test_invalid_file_is_restored(self, _log):
        os.makedirs(os.path.dirname(self.settings_file))
        with open(self.settings_file, "w", encoding="utf-8") as f:
            f.write("[1, 2")
        self.assertEqual(load_app_settings(self.settings_file), DEFAULT_APP_SETTINGS)

    def test_browse_root_is_not_read_from_file(self, _log):
        save_app_settings({"folder_selection": {"browse_root": "/"}}, self.settings_file)
        settings = folder_selection_settings(load_app_settings(self.settings_file))

        self.assertEqual(settings["browse_root"], DEFAULT_BROWSE_ROOT)
        self.assertFalse(settings["show_hidden"])
        self.assertIsNone(settings["dialog_timeout_seconds"])

    def test_invalid_values_fall_back_to_defaults(self, _log):
        for stored in ({"dialog_timeout_seconds": "soon", "show_hidden": "yes"},
                       {"dialog_timeout_seconds": -5},
                       {"dialog_timeout_seconds": [30]},
                       "not a section"):
            with self.subTest(stored=stored):
                settings = folder_selection_settings({"folder_selection": stored})
                self.assertIsNone(settings["dialog_timeout_seconds"])
                self.assertFalse(settings["show_hidden"])

    def test_valid_values_are_kept(self, _log):
        settings = folder_selection_settings(
            {"folder_selection": {"dialog_timeout_seconds": "45", "show_hidden": True}})
        self.assertEqual(settings["dialog_timeout_seconds"], 45.0)
        self.assertTrue(settings["show_hidden"])

    def test_defaults_are_not_shared(self, _log):
        settings = load_app_settings(self.settings_file)
        settings["folder_selection"]["show_hidden"] = True
        self.assertFalse(DEFAULT_APP_SETTINGS["folder_selection"]["show_hidden"])


@patch("utils.common.log")
class TestUserVars(unittest.TestCase):
    """Test cases for per-user variables in the user config dir."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_dir = patch("utils.common.user_config_dir", return_value=self.temp_dir)
        self.config_dir.start()

    def tearDown(self):
        self.config_dir.stop()
        shutil.rmtree(self.temp_dir)

    def test_missing_section_is_empty(self, _log):
        self.assertEqual(load_vars("general_settings"), {})

    def test_update_merges(self, _log):
        update_vars("general_settings", {"previously_browsed_folder": "/a"})
        update_vars("general_settings", {"other": 1})
        self.assertEqual(load_vars("general_settings"),
                         {"previously_browsed_folder": "/a", "other": 1})

    def test_corrupt_file_is_empty(self, _log):
        with open(os.path.join(self.temp_dir, "general_settings.json"), "w") as f:
            f.write("{not json")
        self.assertEqual(load_vars("general_settings"), {})


@patch("utils.common.log")
class TestLoggedCallback(unittest.TestCase):

    def test_logs_and_reraises(self, mock_log):
        @logged_callback
        def on_click():
            raise ValueError("bad click")

        with self.assertRaises(ValueError):
            on_click()
        self.assertIn("on_click", mock_log.call_args_list[0].args[0])


if __name__ == '__main__':
    unittest.main()
