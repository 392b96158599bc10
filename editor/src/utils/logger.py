"""Global error surfacing for the transform widget application"""
import sys
import logging
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

_logger = logging.getLogger('TransformWidgetApp')
_main_window = None


def set_main_window(window):
    """Set the main window reference used as the popup parent"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report an exception, then re-raise it

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE the exception is re-raised untouched. Otherwise the full
    traceback is logged and a critical popup is shown (parented to the main
    window when one is registered) before re-raising.
    """
    if DEBUG_MODE:
        raise e

    _logger.error("%s: %s", title, e, exc_info=e)

    message = user_message if user_message else str(e)
    if _main_window is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error("No main window for popup: %s - %s", title, message)

    raise e
