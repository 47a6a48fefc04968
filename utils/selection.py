"""
Value types exchanged between the folder selector and the hosting app.
"""

from dataclasses import dataclass
from typing import Optional

from utils.config import DEFAULT_PROMPT


@dataclass(frozen=True)
class SelectionRequest:
    prompt: str = DEFAULT_PROMPT
    # Permitted root of the in-browser fallback picker
    root: Optional[str] = None
    # Directory a native dialog opens in, if it still exists
    initial_dir: Optional[str] = None


@dataclass(frozen=True)
class SelectionResult:
    """
    Outcome of a folder selection.

    `path` is the confirmed absolute path, or None for "no selection". A cancelled
    dialog and an unavailable mechanism look the same from the outside. `warning`
    carries a message the UI should show, e.g. for an unsupported environment.
    """
    path: Optional[str] = None
    warning: Optional[str] = None

    @property
    def selected(self):
        return self.path is not None


NO_SELECTION = SelectionResult()


def no_selection(warning=None):
    """NO_SELECTION, optionally carrying a warning for the user."""
    if warning is None:
        return NO_SELECTION
    return SelectionResult(path=None, warning=warning)
