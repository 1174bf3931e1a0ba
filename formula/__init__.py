"""
formula — lekser, drzewo wyrażenia i parser logiki zdań.

Publiczne API:
  parse(source)              → Expression
  Parser                     parser zstępujący
  TokenStream.parse(source)  → TokenStream
  Span, ParseError, LexError, ErrorCode
  TruthValue, Atomic, Paren, Unary, Binary, Expression   węzły drzewa
  variables(expr)            → list[str]

Moduły:
  span          — Span
  errors        — ErrorCode, ParseError, LexError
  tokens        — Token, rodzaje tokenów, tablice operatorów
  token_stream  — lekser, TokenStream
  ast           — węzły wyrażenia
  parser        — Parser, parse
"""

from .span import Span
from .errors import ErrorCode, LexError, ParseError
from .tokens import (
    BinaryOperator,
    BinaryOperatorKind,
    Delimiter,
    Identifier,
    Token,
    TokenKind,
    TruthLiteral,
    UnaryOperator,
    UnaryOperatorKind,
)
from .token_stream import TokenStream
from .ast import (
    Atomic,
    Binary,
    Expression,
    Paren,
    TruthValue,
    Unary,
    variables,
)
from .parser import Parser, parse

__all__ = [
    # span / errors
    "Span",
    "ErrorCode",
    "LexError",
    "ParseError",
    # tokens
    "BinaryOperator",
    "BinaryOperatorKind",
    "Delimiter",
    "Identifier",
    "Token",
    "TokenKind",
    "TruthLiteral",
    "UnaryOperator",
    "UnaryOperatorKind",
    "TokenStream",
    # ast
    "Atomic",
    "Binary",
    "Expression",
    "Paren",
    "TruthValue",
    "Unary",
    "variables",
    # parser
    "Parser",
    "parse",
]
