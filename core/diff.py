"""
Line diff between two bundle texts.

Lines are compared by index only. There is no alignment, so one inserted
line shows up as a change on every line after it.
"""
from .console import GREEN, RED, RESET
from .models import LineChange


def split_lines(text):
    if not text:
        return []
    return text.split("\n")


def diff_lines(old, new):
    """
    Compare two texts line by line.

    Returns:
        List of LineChange for each differing index. An index past the end of
        one side has None on that side. An empty list means no differences.
    """
    old_lines = split_lines(old)
    new_lines = split_lines(new)
    changes = []
    for index in range(max(len(old_lines), len(new_lines))):
        removed = old_lines[index] if index < len(old_lines) else None
        added = new_lines[index] if index < len(new_lines) else None
        if removed != added:
            changes.append(LineChange(index=index, removed=removed, added=added))
    return changes


def format_diff(changes, color=True):
    """Render changes as '- old' / '+ new' lines prefixed with the line number."""
    red, green, reset = (RED, GREEN, RESET) if color else ("", "", "")
    lines = []
    for change in changes:
        number = change.index + 1
        if change.removed is not None:
            lines.append(f"{red}{number:>4} - {change.removed}{reset}")
        if change.added is not None:
            lines.append(f"{green}{number:>4} + {change.added}{reset}")
    return lines
