"""
Layout DSL
Compiles layout source text to block instances and serializes them back
"""

from .lexer import Token, TokenType, tokenize
from .parser import DSLParser, compile_dsl
from .serializer import serialize_dsl

__all__ = ["Token", "TokenType", "tokenize", "DSLParser", "compile_dsl", "serialize_dsl"]
