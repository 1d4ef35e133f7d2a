"""
Password output: standard output or the clipboard.
"""

from typing import Optional

import click

from ..clipboard import ClipboardPublisher, get_clipboard_publisher


def emit_password(password: str, copy_requested: bool,
                  publisher: Optional[ClipboardPublisher] = None) -> None:
    """
    Print the password, or hand it to the clipboard without printing it.

    Args:
        password: Generated password
        copy_requested: Store to the clipboard instead of stdout
        publisher: Clipboard publisher (default: platform specific one)
    """
    if not copy_requested:
        click.echo(password)
        return

    if publisher is None:
        publisher = get_clipboard_publisher()
    publisher.publish(password)
