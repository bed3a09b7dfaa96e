"""
Output capture used by widgets during a render pass.

Text written while a capture is active lands in the innermost capture frame
instead of the root output. Frames are a stack, so widgets that begin and end
inside each other capture independently of one another.
"""
from abc import ABC, abstractmethod
import io
import logging

from blocks.exceptions import CaptureError

logger = logging.getLogger(__name__)


class Capturer(ABC):
    """Interface of the output capture primitive a widget relies on."""

    @abstractmethod
    def start_capture(self) -> None:
        """Start capturing everything written from now on."""
        pass

    @abstractmethod
    def stop_capture_and_retrieve(self) -> str:
        """Stop the innermost capture and return what it collected.

        Raises:
            CaptureError: If no capture is active.
        """
        pass

    @abstractmethod
    def discard_capture(self) -> None:
        """Stop the innermost capture and throw away what it collected.

        Raises:
            CaptureError: If no capture is active.
        """
        pass


class OutputBuffer(Capturer):
    """Stack of in-memory capture frames on top of a root output."""

    def __init__(self):
        self._root = io.StringIO()
        self._frames = []

    @property
    def level(self) -> int:
        """Number of captures currently active."""
        return len(self._frames)

    def write(self, text: str) -> None:
        target = self._frames[-1] if self._frames else self._root
        target.write(text)

    def getvalue(self) -> str:
        """Return everything written outside of any capture."""
        return self._root.getvalue()

    def start_capture(self) -> None:
        self._frames.append(io.StringIO())

    def stop_capture_and_retrieve(self) -> str:
        return self._pop_frame().getvalue()

    def discard_capture(self) -> None:
        discarded = self._pop_frame().getvalue()
        if discarded:
            logger.debug(f"Discarded {len(discarded)} captured characters at level {self.level + 1}")

    def _pop_frame(self):
        if not self._frames:
            raise CaptureError("No active output capture to stop.")
        return self._frames.pop()
