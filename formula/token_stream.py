"""
formula/token_stream.py — lekser i strumień tokenów dla parsera.

Publiczne API:
  TokenStream.parse(source)   → TokenStream  (podnosi LexError)

Rozpoznawane symbole (przy nakładaniu się — najpierw dłuższy zapis):
  (  )
  negacja                ¬  ~  !
  koniunkcja             &&  ∧  &  .
  alternatywa            ||  ∨  |
  alternatywa wykluczająca  ⊕  ⊻  ↮  ≢  +  ^
  implikacja             ->  →  ⇒  ⊃
  równoważność           ==  <->  ↔  ⇔  ≡
  stałe logiczne         1  0

Identyfikator zaczyna się literą lub '_' i składa się z liter, cyfr i '_'.
"""

from __future__ import annotations

from .errors import ErrorCode, LexError, ParseError
from .span import Span
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

_NEG  = UnaryOperatorKind.NEGATION
_AND  = BinaryOperatorKind.CONJUNCTION
_OR   = BinaryOperatorKind.DISJUNCTION
_XOR  = BinaryOperatorKind.EXCLUSIVE_DISJUNCTION
_IMP  = BinaryOperatorKind.IMPLICATION
_EQV  = BinaryOperatorKind.EQUIVALENCE

# Kolejność ma znaczenie: zapisy dwuznakowe przed swoimi prefiksami.
SYMBOLS: tuple[tuple[str, TokenKind], ...] = (
    ("(",   Delimiter.OPEN),
    (")",   Delimiter.CLOSE),
    ("¬",   UnaryOperator(_NEG, "¬")),
    ("~",   UnaryOperator(_NEG, "~")),
    ("!",   UnaryOperator(_NEG, "!")),
    ("&&",  BinaryOperator(_AND, "&&")),
    ("∧",   BinaryOperator(_AND, "∧")),
    ("&",   BinaryOperator(_AND, "&")),
    (".",   BinaryOperator(_AND, ".")),
    ("||",  BinaryOperator(_OR, "||")),
    ("∨",   BinaryOperator(_OR, "∨")),
    ("|",   BinaryOperator(_OR, "|")),
    ("⊕",   BinaryOperator(_XOR, "⊕")),
    ("⊻",   BinaryOperator(_XOR, "⊻")),
    ("↮",   BinaryOperator(_XOR, "↮")),
    ("≢",   BinaryOperator(_XOR, "≢")),
    ("+",   BinaryOperator(_XOR, "+")),
    ("^",   BinaryOperator(_XOR, "^")),
    ("->",  BinaryOperator(_IMP, "->")),
    ("→",   BinaryOperator(_IMP, "→")),
    ("⇒",   BinaryOperator(_IMP, "⇒")),
    ("⊃",   BinaryOperator(_IMP, "⊃")),
    ("==",  BinaryOperator(_EQV, "==")),
    ("<->", BinaryOperator(_EQV, "<->")),
    ("↔",   BinaryOperator(_EQV, "↔")),
    ("⇔",   BinaryOperator(_EQV, "⇔")),
    ("≡",   BinaryOperator(_EQV, "≡")),
    ("1",   TruthLiteral(True)),
    ("0",   TruthLiteral(False)),
)


# ---------------------------------------------------------------------------
# Lekser
# ---------------------------------------------------------------------------

class _Lexer:
    def __init__(self, source: str) -> None:
        self._source = source
        self._index  = 0

    def span(self) -> Span:
        return Span(self._index, 0)

    def peek(self, offset: int = 0) -> str | None:
        i = self._index + offset
        return self._source[i] if i < len(self._source) else None

    def is_empty(self) -> bool:
        self._skip_whitespace()
        return self._index >= len(self._source)

    def _skip_whitespace(self) -> None:
        while (ch := self.peek()) is not None and ch.isspace():
            self._index += 1

    def _parse_identifier(self) -> Identifier:
        start = self._index
        while (ch := self.peek()) is not None and (ch.isalnum() or ch == "_"):
            self._index += 1
        return Identifier(self._source[start:self._index])

    def _parse_symbol(self) -> TokenKind:
        # '<-' bez domykającego '>'
        if self._source.startswith("<-", self._index) and self.peek(2) != ">":
            self._index += 2
            if self.peek() is None:
                raise LexError(ErrorCode.UNEXPECTED_EOF, "expected symbol '>'", self.span())
            raise LexError(
                ErrorCode.EXPECTED_SYMBOL,
                "expected symbol '>'",
                Span(self._index, 1),
            )

        for spelling, kind in SYMBOLS:
            if self._source.startswith(spelling, self._index):
                self._index += len(spelling)
                return kind

        ch = self._source[self._index]
        raise LexError(
            ErrorCode.UNEXPECTED_SYMBOL,
            f"unexpected symbol '{ch}'",
            Span(self._index, 1),
        )

    def parse_token(self) -> Token:
        self._skip_whitespace()
        start = self._index

        ch = self.peek()
        if ch is None:
            raise LexError(ErrorCode.UNEXPECTED_EOF, "unexpected end of file", self.span())

        if ch.isalpha() or ch == "_":
            kind: TokenKind = self._parse_identifier()
        else:
            kind = self._parse_symbol()

        return Token(kind, Span(start, self._index - start))


# ---------------------------------------------------------------------------
# TokenStream
# ---------------------------------------------------------------------------

class TokenStream:
    """
    Strumień tokenów używany przez parser.

    Użycie::

        tokens = TokenStream.parse("A & B")
        tokens.peek().kind     # Identifier(name='A')
        tokens.next()          # konsumuje 'A'
        tokens.span()          # span następnego tokenu albo span końca pliku
    """

    def __init__(self, tokens: list[Token], eof_span: Span) -> None:
        self._tokens   = tokens
        self._index    = 0
        self._eof_span = eof_span

    @classmethod
    def parse(cls, source: str) -> TokenStream:
        """Tokenizuje `source`. Podnosi LexError przy pierwszym nieznanym symbolu."""
        lexer = _Lexer(source)
        tokens: list[Token] = []
        while not lexer.is_empty():
            tokens.append(lexer.parse_token())
        return cls(tokens, Span(len(source), 0))

    def __len__(self) -> int:
        return len(self._tokens)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens)

    def is_empty(self) -> bool:
        """True gdy wszystkie tokeny zostały skonsumowane."""
        return self._index >= len(self._tokens)

    def span(self) -> Span:
        """Span następnego tokenu; za ostatnim tokenem — span końca pliku."""
        if not self._tokens:
            return Span(0, 0)
        token = self.try_peek()
        return token.span if token is not None else self._eof_span

    @property
    def last_span(self) -> Span:
        """Span ostatnio skonsumowanego tokenu (albo span() gdy nic nie skonsumowano)."""
        if self._index == 0:
            return self.span()
        return self._tokens[min(self._index, len(self._tokens)) - 1].span

    def try_peek(self) -> Token | None:
        if self.is_empty():
            return None
        return self._tokens[self._index]

    def peek(self) -> Token:
        token = self.try_peek()
        if token is None:
            raise ParseError(ErrorCode.UNEXPECTED_EOF, "unexpected end of file", self._eof_span)
        return token

    def try_next(self) -> Token | None:
        token = self.try_peek()
        if token is not None:
            self._index += 1
        return token

    def next(self) -> Token:
        token = self.try_next()
        if token is None:
            raise ParseError(ErrorCode.UNEXPECTED_EOF, "unexpected end of file", self._eof_span)
        return token

    def expect(self, kind: TokenKind) -> Token:
        """Konsumuje następny token; podnosi ParseError gdy jego rodzaj jest inny niż `kind`."""
        token = self.next()
        if token.kind != kind:
            raise ParseError(
                ErrorCode.EXPECTED_SYMBOL,
                f"expected symbol '{kind}'",
                token.span,
            )
        return token
