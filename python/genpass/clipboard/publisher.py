"""
Clipboard publishing.

On X11 and Wayland a selection only lives as long as the process that owns
it, so on Linux the password is handed to a detached holder process which
serves the selection until another client takes it over. Elsewhere the
clipboard keeps its content on its own and a single synchronous call is
enough.
"""

import logging
import os
import shutil
import subprocess
import sys
from typing import Optional, Sequence, Tuple

import pyperclip

from ..exceptions import ClipboardError

logger = logging.getLogger(__name__)

# (required environment variable, command running in the foreground until
# the selection is taken over)
HOLDER_COMMANDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("WAYLAND_DISPLAY", ("wl-copy", "--foreground", "--type", "text/plain")),
    ("DISPLAY", ("xclip", "-selection", "clipboard", "-quiet")),
    ("DISPLAY", ("xsel", "--clipboard", "--input", "--nodetach")),
)


class ClipboardPublisher:
    """Places text on the system clipboard."""

    def publish(self, text: str) -> None:
        raise NotImplementedError


class SyncClipboardPublisher(ClipboardPublisher):
    """Stores text with a single pyperclip call."""

    def publish(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"Unable to store the password to the clipboard: {e}") from e
        logger.debug("Password stored to the clipboard")


class HoldingClipboardPublisher(ClipboardPublisher):
    """Stores text from a detached process that keeps the selection alive."""

    def __init__(self, command: Sequence[str]):
        """
        Initialize holding publisher.

        Args:
            command: Selection tool invocation that reads text from stdin and
                stays in the foreground until it loses the selection
        """
        self.command = tuple(command)

    def publish(self, text: str) -> None:
        """
        Fork a holder process and return without waiting for it.

        Raises:
            ClipboardError: If the text can't be encoded or the process
                could not be forked
        """
        try:
            data = text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ClipboardError(f"Unable to encode the password for the clipboard: {e}") from e

        try:
            pid = os.fork()
        except OSError as e:
            raise ClipboardError(f"Unable to fork the process: {e}") from e

        if pid == 0:
            os._exit(self._detach_and_hold(data))

        # The intermediate child exits right after forking the holder
        os.waitpid(pid, 0)
        logger.debug(f"Clipboard holder detached via intermediate process {pid}")

    def _detach_and_hold(self, data: bytes) -> int:
        """Run in the intermediate child. Returns its exit status."""
        try:
            os.setsid()
            if os.fork() != 0:
                return 0
            self._redirect_stdio()
            return self._hold(data)
        except Exception:
            return 1

    def _redirect_stdio(self) -> None:
        devnull = os.open(os.devnull, os.O_RDWR)
        try:
            for fd in (0, 1, 2):
                os.dup2(devnull, fd)
        finally:
            if devnull > 2:
                os.close(devnull)

    def _hold(self, data: bytes) -> int:
        """Publish data and block until another client owns the selection."""
        try:
            completed = subprocess.run(
                self.command,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError:
            return 1
        finally:
            del data
        return completed.returncode


def find_holder_command() -> Optional[Tuple[str, ...]]:
    """
    Find a selection tool able to hold the clipboard in the foreground.

    Returns:
        Command tuple, or None if no usable tool is installed
    """
    for env_var, command in HOLDER_COMMANDS:
        if not os.environ.get(env_var):
            continue
        if shutil.which(command[0]):
            return command
    return None


def get_clipboard_publisher() -> ClipboardPublisher:
    """
    Get the clipboard publisher suited to the current platform.

    Returns:
        HoldingClipboardPublisher on Linux with a selection tool available,
        SyncClipboardPublisher otherwise
    """
    if sys.platform.startswith("linux"):
        command = find_holder_command()
        if command is not None:
            logger.debug(f"Using clipboard holder: {command[0]}")
            return HoldingClipboardPublisher(command)
    return SyncClipboardPublisher()
