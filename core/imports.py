"""
Import extraction and stripping.

Recognizes declarations of the form

    import <bindings> from "<specifier>";

on top of a lark tokenizer, so each statement comes with its exact source
span. Stripping removes exactly those spans, which keeps "what is followed"
and "what is removed" the same set of statements.
"""
import os

from lark import Lark

from .grammar import token_grammar
from .models import DEFAULT_EXTENSION, ImportStatement

# Punctuation allowed between 'import' and 'from'
BINDING_PUNCT = frozenset({"{", "}", ",", "*"})

_lexer = None


def get_lexer():
    """Build the tokenizer once and reuse it."""
    global _lexer
    if _lexer is None:
        _lexer = Lark(token_grammar, parser='lalr', lexer='basic')
    return _lexer


def tokenize(content):
    """Return the significant tokens of `content` (comments and whitespace dropped)."""
    return list(get_lexer().lex(content))


def find_import_statements(content):
    """
    Find every recognized import declaration in source order.

    Args:
        content: Module source text

    Returns:
        List of ImportStatement, one per declaration
    """
    tokens = tokenize(content)
    statements = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        # 'x.import' is a property, not a declaration
        if _is_keyword(token, 'import') and not (i > 0 and tokens[i - 1].value == '.'):
            statement, next_i = _match_import(tokens, i)
            if statement is not None:
                statements.append(statement)
                i = next_i
                continue
        i += 1
    return statements


def _is_keyword(token, word):
    return token.type == 'NAME' and token.value == word


def _match_import(tokens, i):
    """Try to read one declaration starting at tokens[i] ('import')."""
    start = tokens[i]
    j = i + 1
    bindings = 0
    while j < len(tokens):
        token = tokens[j]
        if bindings and _is_keyword(token, 'from') and j + 1 < len(tokens) \
                and tokens[j + 1].type == 'STRING':
            source = tokens[j + 1]
            last = j + 1
            if last + 1 < len(tokens) and tokens[last + 1].type == 'PUNCT' \
                    and tokens[last + 1].value == ';':
                last += 1
            statement = ImportStatement(
                specifier=source.value[1:-1],
                start=start.start_pos,
                end=tokens[last].end_pos,
                line=start.line,
            )
            return statement, last + 1
        if token.type == 'NAME' or (token.type == 'PUNCT' and token.value in BINDING_PUNCT):
            bindings += 1
            j += 1
            continue
        # import("x"), import "x", import.meta, ...
        return None, i + 1
    return None, i + 1


def resolve_specifier(specifier, base_dir, extension=DEFAULT_EXTENSION):
    """
    Turn an import specifier into an absolute file path.

    Specifiers without an extension get `extension` appended. Bare
    specifiers ("lodash") are resolved against base_dir like any other.
    """
    if not os.path.splitext(specifier)[1]:
        specifier += extension
    return os.path.abspath(os.path.join(base_dir, specifier))


def extract_dependencies(content, base_dir, extension=DEFAULT_EXTENSION, statements=None):
    """
    Resolve the dependencies declared in `content`.

    Duplicates are kept; deduplication happens in the resolver.
    """
    if statements is None:
        statements = find_import_statements(content)
    return [resolve_specifier(s.specifier, base_dir, extension) for s in statements]


def strip_imports(content, statements=None):
    """Remove every recognized import declaration and trim the result."""
    if statements is None:
        statements = find_import_statements(content)
    parts = []
    last = 0
    for statement in statements:
        parts.append(content[last:statement.start])
        last = statement.end
    parts.append(content[last:])
    return "".join(parts).strip()
