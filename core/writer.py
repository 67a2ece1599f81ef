"""
Bundle output.
"""
import os


def read_previous(path):
    """Return the current content of the output file, or '' if there is none."""
    if not os.path.exists(path):
        return ""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_bundle(path, text):
    """
    Write bundle text to `path`, creating parent directories as needed.

    The file is overwritten in place; an interrupted write can leave it
    truncated.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)
