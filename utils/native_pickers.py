"""
Native folder dialogs, one picker per host OS.

Every picker exposes the same `pick(prompt, initial_dir=None) -> SelectionResult`
operation. Failures never propagate: a cancelled dialog, a missing interpreter or
binding, a timeout and any OS error all end up as NO_SELECTION. The reason is only
written to the log.
"""

import importlib.util
import os
import subprocess
import sys

from utils.config import FOLDER_SELECTOR_SCRIPT, log
from utils.environment import Environment
from utils.selection import NO_SELECTION, SelectionResult, no_selection

UNSUPPORTED_WARNING = ("Folder selection is not available on this operating system. "
                       "Please type the folder path instead.")


def _existing_dir(path):
    return path if path and os.path.isdir(path) else None


class NativePicker:
    """Base class for the native dialog variants."""

    name = "native"

    def __init__(self, timeout=None):
        self.timeout = timeout

    def pick(self, prompt, initial_dir=None):
        raise NotImplementedError

    def _run(self, cmd):
        """
        Run a dialog command and return its trimmed stdout, or None if the dialog
        produced no folder.
        """
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except FileNotFoundError as e:
            log(f"{self.name} folder dialog unavailable: {e}")
            return None
        except subprocess.TimeoutExpired:
            log(f"{self.name} folder dialog timed out after {self.timeout} seconds")
            return None
        except OSError as e:
            log(f"{self.name} folder dialog failed: {type(e).__name__}: {e}")
            return None

        folder_path = result.stdout.strip()
        if result.returncode != 0 or folder_path == "":
            reason = result.stderr.strip() or f"exit code {result.returncode}"
            log(f"{self.name} folder dialog returned no folder ({reason})")
            return None
        return folder_path

    def _result(self, folder_path):
        if folder_path is None:
            return NO_SELECTION
        log(f"{self.name} folder dialog selected: {folder_path}")
        return SelectionResult(path=os.path.abspath(folder_path))


class MacOSPicker(NativePicker):
    """Shows the Finder folder chooser through AppleScript."""

    name = "macOS"

    @staticmethod
    def build_script(prompt, initial_dir=None):
        safe_prompt = prompt.replace("\\", "\\\\").replace('"', '\\"')
        script = f'POSIX path of (choose folder with prompt "{safe_prompt}"'
        if initial_dir:
            safe_dir = initial_dir.replace("\\", "\\\\").replace('"', '\\"')
            script += f' default location (POSIX file "{safe_dir}")'
        return script + ")"

    def pick(self, prompt, initial_dir=None):
        script = self.build_script(prompt, _existing_dir(initial_dir))
        folder_path = self._run(["osascript", "-e", script])
        if folder_path and len(folder_path) > 1:
            # AppleScript POSIX paths of folders end with a slash
            folder_path = folder_path.rstrip("/")
        return self._result(folder_path)


class TkPicker(NativePicker):
    """Shows the Tk folder dialog in the helper process."""

    name = "Tk"
    backend = "tk"

    def command(self, prompt, initial_dir=None):
        cmd = [sys.executable, FOLDER_SELECTOR_SCRIPT, "--backend", self.backend, "--prompt", prompt]
        initial_dir = _existing_dir(initial_dir)
        if initial_dir:
            cmd.append(initial_dir)
        return cmd

    def pick(self, prompt, initial_dir=None):
        return self._result(self._run(self.command(prompt, initial_dir)))


class WindowsPicker(TkPicker):
    """
    Shows the Windows shell folder browser (file system folders only) through
    pywin32. Falls back to the Tk dialog when pywin32 is not installed.
    """

    name = "Windows"
    backend = "win32"

    @staticmethod
    def binding_available():
        try:
            return importlib.util.find_spec("win32com") is not None
        except (ImportError, ValueError):
            return False

    def pick(self, prompt, initial_dir=None):
        if not self.binding_available():
            log("pywin32 not available, falling back to the Tk folder dialog")
            return TkPicker(timeout=self.timeout).pick(prompt, initial_dir)
        return super().pick(prompt, initial_dir)


class UnsupportedPicker(NativePicker):
    """Stand-in for operating systems without a known folder dialog."""

    name = "unsupported"

    def pick(self, prompt, initial_dir=None):
        log("Folder selection requested on an unsupported environment")
        return no_selection(UNSUPPORTED_WARNING)


PICKERS = {
    Environment.MACOS: MacOSPicker,
    Environment.LINUX: TkPicker,
    Environment.WINDOWS: WindowsPicker,
    Environment.UNSUPPORTED: UnsupportedPicker,
}


def get_picker(env, timeout=None):
    """Picker instance for a non-container environment."""
    return PICKERS.get(env, UnsupportedPicker)(timeout=timeout)


def pick_native(env, prompt, initial_dir=None, timeout=None):
    """
    Show the native folder dialog for `env`.

    Args:
        env (Environment): Detected environment, must not be CONTAINER
        prompt (str): Text shown in the dialog
        initial_dir (str, optional): Folder the dialog starts in, if it exists
        timeout (float, optional): Seconds before the dialog process is abandoned

    Returns:
        SelectionResult: The chosen folder, or no selection
    """
    picker = get_picker(env, timeout=timeout)
    try:
        return picker.pick(prompt, initial_dir)
    except Exception as e:
        log(f"{picker.name} folder dialog raised {type(e).__name__}: {e}")
        return NO_SELECTION
