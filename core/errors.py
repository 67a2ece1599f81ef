"""
Error handling utilities for the Knit bundler.
"""
import os


class KnitError(Exception):
    """Custom exception for bundling errors with the offending path and hints."""
    def __init__(self, message, path=None, suggestion=None):
        self.message = message
        self.path = path  # The module being processed
        self.suggestion = suggestion  # How to fix it
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with path and suggestion."""
        lines = ["\n❌ Bundling Error"]
        if self.path:
            lines.append(f" in {display_path(self.path)}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.suggestion:
            lines.append(f"   💡 {self.suggestion}\n")

        return "".join(lines)


class CircularImportError(KnitError):
    """Raised when the import graph contains a cycle."""
    def __init__(self, cycle):
        self.cycle = list(cycle)
        chain = " -> ".join(display_path(p) for p in self.cycle)
        super().__init__(
            f"Circular import detected: {chain}",
            path=self.cycle[0] if self.cycle else None,
            suggestion="Move the shared code into a module that neither side imports",
        )


def display_path(path):
    """Show a path relative to the working directory when it lives below it."""
    try:
        rel = os.path.relpath(path)
    except ValueError:
        # Different drive on Windows
        return path
    if rel.startswith(".."):
        return path
    return rel
