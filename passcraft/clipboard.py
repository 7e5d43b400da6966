"""Best-effort clipboard copy."""

import pyperclip

from .log import get_logger

logger = get_logger(__name__)

COPY_OK = "Password copied!"
COPY_FAILED = "Copy failed"


def copy_to_clipboard(text: str) -> bool:
    """Put *text* on the system clipboard.

    Returns ``False`` when no clipboard mechanism is available; the failure
    is logged and not retried.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        logger.warning("clipboard_copy_failed", error=str(exc))
        return False
    logger.info("clipboard_copy_succeeded", length=len(text))
    return True
