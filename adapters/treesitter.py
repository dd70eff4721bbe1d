"""
Tree-sitter parser construction for Go sources.

This module hides the tree-sitter binding details from the extractor: it
loads the Go grammar shipped by the `tree-sitter-go` wheel and builds a
parser for it.
"""

from functools import lru_cache

import tree_sitter_go as ts_go
from tree_sitter import Language, Parser


@lru_cache(maxsize=1)
def get_go_language() -> Language:
    """
    Load the Go grammar.

    The grammar is compiled into the `tree-sitter-go` wheel, so loading it is
    cheap, but it is still cached for the lifetime of the process.

    Returns:
        Language: The tree-sitter Go language.
    """
    return Language(ts_go.language())


def get_go_parser() -> Parser:
    """
    Create a parser for Go source code.

    Returns:
        Parser: A fresh tree-sitter parser bound to the Go grammar.
    """
    return Parser(get_go_language())
