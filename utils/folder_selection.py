"""
Folder selection entry point.

`select_folder` is the only function the rest of the app calls. It routes host
environments to the native dialogs and containers to the in-browser directory
browser, and it never raises: every failure comes back as "no folder selected".
"""

from utils.browse_state import BrowseState
from utils.config import DEFAULT_BROWSE_ROOT, log
from utils.environment import Environment, current_environment
from utils.native_pickers import UNSUPPORTED_WARNING, pick_native
from utils.selection import NO_SELECTION, SelectionRequest, no_selection


def new_browser(request=None, show_hidden=False):
    """BrowseState for a request, rooted at request.root or the default browse root."""
    request = request or SelectionRequest()
    return BrowseState(request.root or DEFAULT_BROWSE_ROOT, show_hidden=show_hidden)


def select_folder(request=None, environment=None, browser=None, timeout=None):
    """
    Select a folder in the way the environment allows.

    Args:
        request (SelectionRequest, optional): Prompt, permitted root and initial folder
        environment (Environment, optional): Detected once per process if omitted
        browser (BrowseState, optional): The session's browser state, used in
            containers.
        timeout (float, optional): Seconds before a native dialog is abandoned

    Returns:
        SelectionResult: For host environments the outcome of the native dialog. For
        containers the browser's confirmed folder, which stays "no selection" until
        the user confirms (or when no browser is passed). For unsupported environments
        "no selection" with a warning.
    """
    request = request or SelectionRequest()
    try:
        if environment is None:
            environment = current_environment()

        if environment == Environment.UNSUPPORTED:
            log("Folder selection disabled: unsupported environment")
            return no_selection(UNSUPPORTED_WARNING)

        if environment == Environment.CONTAINER:
            if browser is None:
                return NO_SELECTION
            return browser.result

        return pick_native(environment, request.prompt, request.initial_dir, timeout=timeout)

    except Exception as e:
        log(f"Folder selection failed: {type(e).__name__}: {e}")
        return NO_SELECTION
