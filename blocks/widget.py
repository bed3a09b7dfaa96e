"""Base class for widgets that wrap a region of rendered output."""
import copy

from blocks.exceptions import WidgetStateError


class Widget:
    """
    Widget with a begin/end lifecycle.

    Subclasses implement run(), which is called when end() closes the region
    opened by begin(). Configuration methods on subclasses return modified
    copies made with _clone() so a configured widget is never changed in place.
    """

    def __init__(self):
        self._running = False

    @property
    def is_running(self):
        return self._running

    def begin(self):
        """Open the widget's region. Returns None; content follows."""
        if self._running:
            raise WidgetStateError(f"{type(self).__name__}.begin() called twice without end().")
        self._running = True
        return None

    def end(self):
        """Close the widget's region and return its rendered result."""
        if not self._running:
            raise WidgetStateError(
                f"Unexpected {type(self).__name__}.end() call. A matching begin() is not found."
            )
        self._running = False

        if not self.before_run():
            return ''
        return self.after_run(self.run())

    def before_run(self):
        """Hook called before run(). Returning False skips run()."""
        return True

    def after_run(self, result):
        """Hook called with the result of run(); returns the final result."""
        return result

    def run(self):
        raise NotImplementedError(f"{type(self).__name__} must implement run().")

    def _clone(self, **attrs):
        new = copy.copy(self)
        for name, value in attrs.items():
            setattr(new, name, value)
        return new
