"""Grammar package for Cymbol.

Provide the Lark grammar and parser factory for Cymbol source files.
"""

from cymbol.grammar.parser import GRAMMAR_PATH, ParserFactory

__all__ = ["GRAMMAR_PATH", "ParserFactory"]
