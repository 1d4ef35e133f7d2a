"""
Clipboard publishing for genpass.

Keeps the platform specific handling of clipboard ownership behind a single
publisher interface.
"""

from .publisher import (
    ClipboardPublisher,
    HoldingClipboardPublisher,
    SyncClipboardPublisher,
    find_holder_command,
    get_clipboard_publisher,
)

__all__ = [
    'ClipboardPublisher',
    'HoldingClipboardPublisher',
    'SyncClipboardPublisher',
    'find_holder_command',
    'get_clipboard_publisher',
]
