# Knit - Core Bundler Components
"""
Core modules for the Knit bundler:
- errors: Error types (cycles, formatted messages)
- grammar: Lark token grammar for the import tokenizer
- imports: Import extraction and stripping
- resolver: Recursive dependency resolution into bundle text
- writer: Output file handling
- diff: Line diff between consecutive bundles
- watcher: Rebuild-on-change file watcher
"""

from .errors import KnitError, CircularImportError
from .imports import find_import_statements, extract_dependencies, strip_imports
from .models import BundleConfig, Bundle, Module, ImportStatement, LineChange
from .resolver import bundle, DependencyResolver
from .diff import diff_lines
from .writer import write_bundle
from .watcher import FileWatcher

__all__ = [
    'KnitError',
    'CircularImportError',
    'find_import_statements',
    'extract_dependencies',
    'strip_imports',
    'BundleConfig',
    'Bundle',
    'Module',
    'ImportStatement',
    'LineChange',
    'bundle',
    'DependencyResolver',
    'diff_lines',
    'write_bundle',
    'FileWatcher',
]
