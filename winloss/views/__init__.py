"""Terminal views for winloss.

Views receive the EntryStore explicitly; none of them touch storage.
"""

from winloss.views.capture import CaptureView, EmptyEntryError
from winloss.views.log import LogView

__all__ = ["CaptureView", "EmptyEntryError", "LogView"]
