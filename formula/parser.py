"""
formula/parser.py — parser zstępujący wyrażeń logiki zdań.

Publiczne API:
  parse(source)                → Expression   (podnosi ParseError / LexError)
  Parser().parse(tokens)       → Expression   (poziom operatorów binarnych)
  Parser().parse_source(source)

Poziomy (od najsłabszego wiązania):
  parse        operatory binarne, precedence climbing
  parse_unary  ¬ ~ !  (rekurencyjnie: ¬¬¬A to trzy węzły Unary)
  parse_term   atom | ( wyrażenie ) | 1 | 0

Łańcuchy operatorów o równym priorytecie wiązane są w lewo
(A & B & C → (A & B) & C). Jeśli któryś z operatorów łańcucha nie jest
łączny (→, ↔), wyrażenie jest niejednoznaczne i zgłaszany jest błąd —
A -> B -> C wymaga nawiasów.
"""

from __future__ import annotations

from .ast import Atomic, Binary, Expression, Paren, TruthValue, Unary
from .errors import ErrorCode, ParseError
from .token_stream import TokenStream
from .tokens import (
    MAX_PRECEDENCE,
    BinaryOperator,
    Delimiter,
    Identifier,
    TruthLiteral,
    UnaryOperator,
)


def _is_ambiguous(previous: BinaryOperator, operator: BinaryOperator) -> bool:
    """Równy priorytet i co najmniej jeden operator niełączny."""
    if previous.precedence != operator.precedence:
        return False
    return not (previous.is_associative and operator.is_associative)


class Parser:
    """
    Parser wyrażeń; bezstanowy, jedna instancja może parsować wiele strumieni.

    Użycie::

        expr = Parser().parse(TokenStream.parse("(A -> B) & A"))
        str(expr)   # "(A -> B) & A"
    """

    # ------------------------------------------------------------------
    # Termy
    # ------------------------------------------------------------------

    def parse_paren(self, tokens: TokenStream) -> Paren:
        start = tokens.expect(Delimiter.OPEN).span
        inner = self.parse(tokens)

        close = tokens.try_peek()
        if close is None or close.kind != Delimiter.CLOSE:
            raise ParseError(
                ErrorCode.EXPECTED_DELIMITER,
                "expected symbol ')'",
                start + tokens.span(),
            )
        tokens.next()
        return Paren(inner, start + close.span)

    def parse_term(self, tokens: TokenStream) -> Expression:
        token = tokens.peek()
        match token.kind:
            case Delimiter.OPEN:
                return self.parse_paren(tokens)
            case Identifier(name=name):
                tokens.next()
                return Atomic(name, token.span)
            case TruthLiteral(value=value):
                tokens.next()
                return TruthValue(value, token.span)
            case _:
                raise ParseError(
                    ErrorCode.EXPECTED_EXPRESSION,
                    "expected expression",
                    token.span,
                )

    def parse_unary(self, tokens: TokenStream) -> Expression:
        token = tokens.try_peek()
        if token is None or not isinstance(token.kind, UnaryOperator):
            return self.parse_term(tokens)

        tokens.next()
        operand = self.parse_unary(tokens)
        return Unary(token.kind, operand, token.span, token.span + operand.span)

    # ------------------------------------------------------------------
    # Operatory binarne
    # ------------------------------------------------------------------

    @staticmethod
    def _peek_binary(tokens: TokenStream, limit: int) -> BinaryOperator | None:
        token = tokens.try_peek()
        if token is None or not isinstance(token.kind, BinaryOperator):
            return None
        if token.kind.precedence > limit:
            return None
        return token.kind

    def _parse_binary(self, tokens: TokenStream, limit: int) -> Expression:
        """
        Parsuje wyrażenie złożone wyłącznie z operatorów o priorytecie <= limit.

        Prawy operand każdego operatora obejmuje tylko operatory silniej
        wiążące, więc kolejne operatory tego samego poziomu doklejane są
        z lewej strony.
        """
        lhs = self.parse_unary(tokens)
        previous: BinaryOperator | None = None

        while (operator := self._peek_binary(tokens, limit)) is not None:
            operator_span = tokens.next().span
            rhs  = self._parse_binary(tokens, operator.precedence - 1)
            span = lhs.span + rhs.span

            if previous is not None and _is_ambiguous(previous, operator):
                raise ParseError(
                    ErrorCode.NON_ASSOCIATIVE,
                    "non-associative operators must be parenthesized",
                    span,
                )

            lhs      = Binary(lhs, operator, rhs, operator_span, span)
            previous = operator

        return lhs

    def parse(self, tokens: TokenStream) -> Expression:
        """Parsuje pełne wyrażenie; pozostawia w strumieniu tokeny, których nie obejmuje."""
        return self._parse_binary(tokens, MAX_PRECEDENCE)

    def parse_source(self, source: str) -> Expression:
        """Tokenizuje i parsuje `source`; całe wejście musi tworzyć jedno wyrażenie."""
        tokens = TokenStream.parse(source)
        expr   = self.parse(tokens)

        token = tokens.try_peek()
        if token is not None:
            raise ParseError(
                ErrorCode.TRAILING_INPUT,
                f"unexpected symbol '{token.kind}'",
                token.span,
            )
        return expr


def parse(source: str) -> Expression:
    """Parsuje tekst wyrażenia. Podnosi ParseError (lub LexError) przy pierwszym błędzie."""
    return Parser().parse_source(source)
