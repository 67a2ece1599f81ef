"""
Dependency resolution for Knit bundles.

Walks the import graph depth-first and inlines every reachable module
exactly once, dependencies before the modules that import them.
"""
import os

from .errors import CircularImportError
from .imports import extract_dependencies, find_import_statements, strip_imports
from .models import DEFAULT_EXTENSION, Bundle, Module


def load_module(path, extension=DEFAULT_EXTENSION, importer=None):
    """
    Read a module from disk and analyse its imports.

    Args:
        path: Absolute path of the module
        extension: Default extension for specifiers that have none
        importer: Path of the module that imported this one, if any

    Returns:
        Module with resolved dependencies and stripped content

    Raises:
        FileNotFoundError: If the module doesn't exist
    """
    if not os.path.exists(path):
        if importer:
            raise FileNotFoundError(f"Import not found: {path} (imported from {importer})")
        raise FileNotFoundError(f"Entry module not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        content = f.read()

    statements = find_import_statements(content)
    return Module(
        path=path,
        content=content,
        imports=statements,
        dependencies=extract_dependencies(
            content, os.path.dirname(path), extension, statements=statements
        ),
        stripped=strip_imports(content, statements=statements),
    )


def combine(content, resolved):
    """Join inlined dependencies (in order) and a module's own content."""
    parts = list(resolved.values()) + [content.strip()]
    return "\n".join(part for part in parts if part)


class DependencyResolver:
    """
    Resolves dependency paths into inlined content for one bundle run.

    A path is 'in progress' while its own dependencies are being resolved and
    'resolved' once its content has been recorded. Reaching an in-progress
    path again means the graph has a cycle.
    """

    def __init__(self, extension=DEFAULT_EXTENSION):
        self.extension = extension
        self.visited = set()
        self.order = []  # resolved paths, in emission order
        self._stack = []  # in-progress paths, outermost first

    def resolve_entry(self, entry):
        """Resolve a whole graph and return the bundle text."""
        module = load_module(entry, self.extension)
        self._stack.append(entry)
        try:
            resolved = self.resolve(module.dependencies, importer=entry)
        finally:
            self._stack.pop()
        return combine(module.stripped, resolved)

    def resolve(self, paths, importer=None):
        """
        Resolve one level of dependencies.

        Args:
            paths: Dependency paths in discovery order (may repeat)
            importer: The module declaring them, for error messages

        Returns:
            Dict of path -> fully inlined content, in discovery order.
            Paths inlined earlier in this run are skipped.

        Raises:
            CircularImportError: If a path is already being resolved
        """
        resolved = {}
        for path in paths:
            if path in self._stack:
                cycle = self._stack[self._stack.index(path):] + [path]
                raise CircularImportError(cycle)
            if path in self.visited:
                continue

            module = load_module(path, self.extension, importer=importer)
            self._stack.append(path)
            try:
                nested = self.resolve(module.dependencies, importer=path)
            finally:
                self._stack.pop()

            resolved[path] = combine(module.stripped, nested)
            self.visited.add(path)
            self.order.append(path)
        return resolved


def bundle(entry, extension=DEFAULT_EXTENSION):
    """
    Bundle an entry module and everything it imports.

    Args:
        entry: Path to the entry module
        extension: Default extension for specifiers that have none

    Returns:
        Bundle with the text and the list of inlined modules
    """
    entry = os.path.abspath(entry)
    resolver = DependencyResolver(extension)
    text = resolver.resolve_entry(entry)
    return Bundle(entry=entry, text=text, modules=resolver.order + [entry])
