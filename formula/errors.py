"""
formula/errors.py — kody błędów i jednolity błąd ze spanami.

ParseError — błąd leksykalny lub składniowy; gromadzi jedną lub więcej par
    (komunikat, span), np. gdy błąd jest zgłaszany ponownie w szerszym
    kontekście.
LexError   — podklasa ParseError zgłaszana przez lekser.
ErrorCode  — stały identyfikator klasy błędu.
"""

from __future__ import annotations

from enum import StrEnum

from .span import Span


class ErrorCode(StrEnum):
    """Stałe kody błędów parsera."""

    # leksykalne
    UNEXPECTED_SYMBOL   = "E_UNEXPECTED_SYMBOL"
    UNEXPECTED_EOF      = "E_UNEXPECTED_EOF"
    EXPECTED_SYMBOL     = "E_EXPECTED_SYMBOL"

    # składniowe
    EXPECTED_EXPRESSION = "E_EXPECTED_EXPRESSION"
    EXPECTED_DELIMITER  = "E_EXPECTED_DELIMITER"
    NON_ASSOCIATIVE     = "E_NON_ASSOCIATIVE"
    TRAILING_INPUT      = "E_TRAILING_INPUT"


class ParseError(ValueError):
    """
    Błąd parsowania z komunikatami i spanami.

    Użycie::

        err = ParseError(ErrorCode.UNEXPECTED_SYMBOL).with_msg("unexpected symbol '$'")
        err = err.with_span(Span(4, 1))
        err.messages  # ["unexpected symbol '$'"]
        err.spans     # [Span(start=4, length=1)]
    """

    def __init__(
        self,
        code:    ErrorCode,
        message: str | None = None,
        span:    Span | None = None,
    ) -> None:
        super().__init__()
        self.code:     ErrorCode  = code
        self.messages: list[str]  = []
        self.spans:    list[Span] = []
        if message is not None:
            self.with_msg(message)
        if span is not None:
            self.with_span(span)

    def with_msg(self, message: str) -> ParseError:
        self.messages.append(message)
        return self

    def with_span(self, span: Span) -> ParseError:
        self.spans.append(span)
        return self

    def __str__(self) -> str:
        return "; ".join(self.messages) or str(self.code)

    def excerpt(self, source: str) -> str:
        """
        Zwraca fragment źródła z podkreśleniem każdego spanu (^^^).

        Zakładamy, że wyrażenie mieści się w jednej linii — znaki nowej linii
        zastępowane są spacjami.
        """
        line  = source.replace("\n", " ").replace("\r", " ")
        lines = [line]
        for span in self.spans:
            lines.append(" " * span.start + "^" * max(span.length, 1))
        return "\n".join(lines)


class LexError(ParseError):
    """Błąd leksera (nieznany symbol, niedokończony operator)."""
