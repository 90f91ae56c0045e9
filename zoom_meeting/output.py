"""Handing the join link to the desktop: clipboard and default browser."""

import logging
import webbrowser
from abc import ABC, abstractmethod

import pyperclip

from .exceptions import BrowserOpenError, ClipboardError

logger = logging.getLogger(__name__)


class Clipboard(ABC):
    """Writes text to the system clipboard."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Replace the clipboard content with ``text``."""


class SystemClipboard(Clipboard):
    """Clipboard of the running desktop, through pyperclip.

    pyperclip selects the mechanism for the platform (pbcopy, Windows API,
    wl-clipboard, xclip or xsel) on first use.
    """

    def copy(self, text: str) -> None:
        logger.debug("Copying to clipboard")
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Error copying to clipboard: {e}", cause=e)


def get_clipboard() -> Clipboard:
    """Return the clipboard of the running desktop."""
    return SystemClipboard()


class LinkOpener(ABC):
    """Opens a URL with the default handler for its scheme."""

    @abstractmethod
    def open(self, url: str) -> None:
        """Hand ``url`` to its handler."""


class BrowserOpener(LinkOpener):
    """Opens URLs through the standard ``webbrowser`` controller."""

    def open(self, url: str) -> None:
        logger.info("Opening meeting link in browser...")
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as e:
            raise BrowserOpenError(url, cause=e)
        if not opened:
            raise BrowserOpenError(url)


def distribute_link(
    url: str,
    clipboard: Clipboard | None = None,
    opener: LinkOpener | None = None,
) -> None:
    """Copy the link to the clipboard, then open it.

    Either step is skipped when its capability is None. The first failure
    stops the sequence.

    Raises:
        ClipboardError: If copying fails.
        BrowserOpenError: If the link cannot be opened.
    """
    if clipboard is not None:
        clipboard.copy(url)
        logger.info("Meeting link copied to clipboard")
    if opener is not None:
        opener.open(url)
