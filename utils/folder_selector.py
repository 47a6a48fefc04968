"""
Folder Selector Helper Process

Standalone folder dialog that is called from the Streamlit server as a subprocess, so
GUI toolkit state never lives in the long-lived server process.

Usage:
    python folder_selector.py [--backend tk|win32] [--prompt TEXT] [initial_dir]

Prints the selected folder to stdout. Exit code: 0 = folder selected,
1 = cancelled, 2 = the dialog could not be shown.
"""

import argparse
import os
import sys

EXIT_SELECTED = 0
EXIT_CANCELLED = 1
EXIT_ERROR = 2


def tk_select_folder(prompt, initial_dir=None):
    """
    Open folder selection dialog using tkinter.

    Args:
        prompt (str): Dialog title
        initial_dir (str, optional): Initial directory to open in dialog

    Returns:
        str: Selected folder path or empty string if cancelled
    """
    import tkinter as tk
    from tkinter import filedialog

    root = tk.Tk()
    try:
        root.withdraw()  # Hide the main tkinter window
        # Keep the dialog in front of the browser window that triggered it
        root.attributes("-topmost", True)

        options = {"master": root, "title": prompt, "mustexist": True}
        if initial_dir and os.path.isdir(initial_dir):
            options["initialdir"] = initial_dir
        return filedialog.askdirectory(**options)
    finally:
        root.destroy()


def win32_select_folder(prompt, initial_dir=None):
    """
    Open the Windows shell folder browser, limited to file system directories.

    The shell dialog has no initial directory argument, so initial_dir is ignored.

    Returns:
        str: Selected folder path or empty string if cancelled
    """
    from win32com.shell import shell, shellcon

    pidl, _display_name, _image_list = shell.SHBrowseForFolder(
        0, None, prompt, shellcon.BIF_RETURNONLYFSDIRS)
    if pidl is None:
        return ""
    path = shell.SHGetPathFromIDList(pidl)
    if isinstance(path, bytes):
        path = path.decode(sys.getfilesystemencoding())
    return path


BACKENDS = {
    "tk": tk_select_folder,
    "win32": win32_select_folder,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Show a native folder dialog.")
    parser.add_argument("--backend", choices=sorted(BACKENDS), default="tk")
    parser.add_argument("--prompt", default="Select a folder")
    parser.add_argument("initial_dir", nargs="?", default=None)
    args = parser.parse_args(argv)

    try:
        folder_path = BACKENDS[args.backend](args.prompt, args.initial_dir)
    except Exception as e:
        print(f"ERROR: {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_ERROR

    if not folder_path:
        print("No folder selected", file=sys.stderr)
        return EXIT_CANCELLED

    print(folder_path)  # Return the folder path to stdout
    return EXIT_SELECTED


if __name__ == "__main__":
    sys.exit(main())
