"""
State of the in-browser directory browser used when no native dialog can be shown.

The browser is confined to a permitted root: the current directory is always the
root or one of its descendants. Moving up past the root clamps at the root, and
subdirectories that resolve outside it (symlinks) are neither listed nor entered.
"""

import os

from utils.config import log
from utils.selection import NO_SELECTION, SelectionResult, no_selection

PARENT = ".."


def is_within(path, root):
    """True if `path` equals `root` or lies below it. Both must be absolute."""
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives on Windows
        return False


class BrowseState:
    """
    Current directory and its immediate subdirectories, scoped to one UI session.

    Two events change it: navigate(name) and confirm(). The object is mutated in
    place, so holding a reference to it across reruns is enough to keep the
    user's position.
    """

    def __init__(self, root, show_hidden=False):
        self.root = os.path.realpath(os.path.abspath(root))
        self.show_hidden = show_hidden
        self.current = self.root
        self.subdirs = []
        self.notice = None
        self.result = NO_SELECTION
        self.refresh()

    @property
    def root_available(self):
        return os.path.isdir(self.root)

    @property
    def at_root(self):
        return self.current == self.root

    def options(self):
        """Names the directory chooser offers, parent entry first when not at the root."""
        if self.at_root:
            return list(self.subdirs)
        return [PARENT] + list(self.subdirs)

    def refresh(self):
        """Recompute the subdirectory listing of the current directory."""
        self.notice = None
        if not self.root_available:
            self.subdirs = []
            self.notice = f"The folder {self.root} does not exist or is not a directory."
            log(f"Browse root unavailable: {self.root}")
            return self.subdirs

        try:
            with os.scandir(self.current) as entries:
                names = []
                for entry in entries:
                    if not self.show_hidden and entry.name.startswith("."):
                        continue
                    try:
                        if not entry.is_dir():
                            continue
                    except OSError:
                        continue
                    if not is_within(os.path.realpath(entry.path), self.root):
                        continue
                    names.append(entry.name)
        except OSError as e:
            self.subdirs = []
            self.notice = f"Could not read {self.current}: {e.strerror or e}"
            log(f"Could not list {self.current}: {type(e).__name__}: {e}")
            return self.subdirs

        self.subdirs = sorted(names, key=str.lower)
        return self.subdirs

    def navigate(self, name):
        """
        Move to the parent (name == "..", clamped at the root) or into one of the
        currently listed subdirectories. Unknown names are ignored.

        Returns:
            str: The current directory after the move
        """
        if name == PARENT:
            parent = os.path.dirname(self.current)
            if self.at_root or not is_within(parent, self.root):
                log(f"Navigation above browse root {self.root} clamped")
                self.current = self.root
            else:
                self.current = parent
        elif name in self.subdirs:
            target = os.path.realpath(os.path.join(self.current, name))
            if is_within(target, self.root):
                self.current = os.path.join(self.current, name)
            else:
                log(f"Refused to leave browse root {self.root} via {name}")
        else:
            log(f"Ignored navigation to unlisted folder '{name}' in {self.current}")
            return self.current

        self.refresh()
        return self.current

    def confirm(self):
        """
        Emit the current directory as the selection.

        Returns:
            SelectionResult: The current directory unmodified, or no selection
            with a warning if the permitted root does not exist.
        """
        if not self.root_available:
            self.result = no_selection(self.notice)
        else:
            self.result = SelectionResult(path=self.current)
            log(f"Browser folder selection confirmed: {self.current}")
        return self.result
