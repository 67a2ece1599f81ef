"""
Knit Tokenizer Grammar.

This module contains the Lark grammar used to split module source into
tokens. Only the lexer is used: comments, strings and template literals
become single tokens, so an 'import' inside them is never seen as a keyword.
"""

token_grammar = r"""
    start: _token*

    _token: NAME | NUMBER | STRING | TEMPLATE | PUNCT

    // --- Terminals ---
    NAME: /(?:[^\W\d]|\$)[\w$]*/
    NUMBER: /\d[\w.]*/
    STRING: /"(?:[^"\\\n]|\\.)*"/ | /'(?:[^'\\\n]|\\.)*'/
    TEMPLATE: /`(?:[^`\\]|\\[\s\S])*`/
    PUNCT: /[^\s\w$]/

    LINE_COMMENT: /\/\/[^\n]*/
    BLOCK_COMMENT: /\/\*[\s\S]*?\*\//
    WS: /\s+/

    %ignore WS
    %ignore LINE_COMMENT
    %ignore BLOCK_COMMENT
"""
