import pytest

from formula import (
    BinaryOperator,
    BinaryOperatorKind,
    Delimiter,
    ErrorCode,
    Identifier,
    LexError,
    ParseError,
    Span,
    TokenStream,
    TruthLiteral,
    UnaryOperator,
    UnaryOperatorKind,
)

NEG = UnaryOperatorKind.NEGATION
AND = BinaryOperatorKind.CONJUNCTION
OR  = BinaryOperatorKind.DISJUNCTION
XOR = BinaryOperatorKind.EXCLUSIVE_DISJUNCTION
IMP = BinaryOperatorKind.IMPLICATION
EQV = BinaryOperatorKind.EQUIVALENCE


def kinds(source: str) -> list:
    return [token.kind for token in TokenStream.parse(source).tokens]


def test_all_symbols():
    source = "A ab _a _0_a ( ) ¬ ~ ! && ∧ & . || ∨ | ⊕ ⊻ + ^ ↮ ≢ -> → ⇒ ⊃ == <-> ↔ ⇔ ≡ 1 0"
    assert kinds(source) == [
        Identifier("A"),
        Identifier("ab"),
        Identifier("_a"),
        Identifier("_0_a"),
        Delimiter.OPEN,
        Delimiter.CLOSE,
        UnaryOperator(NEG, "¬"),
        UnaryOperator(NEG, "~"),
        UnaryOperator(NEG, "!"),
        BinaryOperator(AND, "&&"),
        BinaryOperator(AND, "∧"),
        BinaryOperator(AND, "&"),
        BinaryOperator(AND, "."),
        BinaryOperator(OR, "||"),
        BinaryOperator(OR, "∨"),
        BinaryOperator(OR, "|"),
        BinaryOperator(XOR, "⊕"),
        BinaryOperator(XOR, "⊻"),
        BinaryOperator(XOR, "+"),
        BinaryOperator(XOR, "^"),
        BinaryOperator(XOR, "↮"),
        BinaryOperator(XOR, "≢"),
        BinaryOperator(IMP, "->"),
        BinaryOperator(IMP, "→"),
        BinaryOperator(IMP, "⇒"),
        BinaryOperator(IMP, "⊃"),
        BinaryOperator(EQV, "=="),
        BinaryOperator(EQV, "<->"),
        BinaryOperator(EQV, "↔"),
        BinaryOperator(EQV, "⇔"),
        BinaryOperator(EQV, "≡"),
        TruthLiteral(True),
        TruthLiteral(False),
    ]


def test_two_character_operators_without_whitespace():
    assert kinds("A&&B||C") == [
        Identifier("A"),
        BinaryOperator(AND, "&&"),
        Identifier("B"),
        BinaryOperator(OR, "||"),
        Identifier("C"),
    ]
    assert kinds("A&B") == [Identifier("A"), BinaryOperator(AND, "&"), Identifier("B")]
    assert kinds("A<->B") == [Identifier("A"), BinaryOperator(EQV, "<->"), Identifier("B")]


def test_unicode_identifier():
    assert kinds("zażółć ∧ gęślą") == [
        Identifier("zażółć"),
        BinaryOperator(AND, "∧"),
        Identifier("gęślą"),
    ]


def test_token_spans():
    tokens = TokenStream.parse("A && B").tokens
    assert [t.span for t in tokens] == [Span(0, 1), Span(2, 2), Span(5, 1)]


def test_spans_are_character_offsets():
    source = "¬A ↔ B"
    for token in TokenStream.parse(source).tokens:
        assert source[token.span.range] == str(token.kind)


@pytest.mark.parametrize(
    "source, code, span",
    [
        ("A $ B", ErrorCode.UNEXPECTED_SYMBOL, Span(2, 1)),
        ("A - B", ErrorCode.UNEXPECTED_SYMBOL, Span(2, 1)),
        ("A = B", ErrorCode.UNEXPECTED_SYMBOL, Span(2, 1)),
        ("A <- B", ErrorCode.EXPECTED_SYMBOL, Span(4, 1)),
        ("A <-", ErrorCode.UNEXPECTED_EOF, Span(4, 0)),
    ],
)
def test_lex_errors(source, code, span):
    with pytest.raises(LexError) as exc:
        TokenStream.parse(source)
    assert exc.value.code == code
    assert exc.value.spans == [span]


def test_unexpected_symbol_message():
    with pytest.raises(LexError, match="unexpected symbol '\\$'"):
        TokenStream.parse("A $ B")


def test_lex_error_is_parse_error():
    with pytest.raises(ParseError):
        TokenStream.parse("<-")


def test_stream_navigation():
    tokens = TokenStream.parse("A & B")
    assert not tokens.is_empty()
    assert tokens.peek().kind == Identifier("A")
    assert tokens.try_peek().kind == Identifier("A")
    assert tokens.span() == Span(0, 1)

    assert tokens.next().kind == Identifier("A")
    assert tokens.last_span == Span(0, 1)
    assert tokens.try_next().kind == BinaryOperator(AND, "&")
    assert tokens.expect(Identifier("B")).span == Span(4, 1)

    assert tokens.is_empty()
    assert tokens.try_peek() is None
    assert tokens.try_next() is None
    assert tokens.span() == Span(5, 0)
    assert tokens.last_span == Span(4, 1)


def test_eof_errors():
    tokens = TokenStream.parse("A ")
    tokens.next()
    with pytest.raises(ParseError) as exc:
        tokens.peek()
    assert exc.value.code == ErrorCode.UNEXPECTED_EOF
    assert exc.value.spans == [Span(2, 0)]

    with pytest.raises(ParseError):
        tokens.next()


def test_empty_stream_span():
    tokens = TokenStream.parse("   ")
    assert len(tokens) == 0
    assert tokens.is_empty()
    assert tokens.span() == Span(0, 0)


def test_expect_mismatch():
    tokens = TokenStream.parse("A )")
    with pytest.raises(ParseError) as exc:
        tokens.expect(Delimiter.OPEN)
    assert exc.value.code == ErrorCode.EXPECTED_SYMBOL
    assert exc.value.messages == ["expected symbol '('"]
    assert exc.value.spans == [Span(0, 1)]


def test_span_addition():
    assert Span(2, 3) + Span(8, 1) == Span(2, 7)
    assert Span(8, 1) + Span(2, 3) == Span(2, 7)
    assert Span(0, 10) + Span(3, 2) == Span(0, 10)
    assert Span(4, 2).end == 6
    assert "hello world"[Span(6, 5).range] == "world"


def test_error_accumulates_messages():
    err = ParseError(ErrorCode.EXPECTED_EXPRESSION, "expected expression", Span(0, 1))
    err.with_msg("while parsing operand").with_span(Span(0, 5))
    assert err.messages == ["expected expression", "while parsing operand"]
    assert err.spans == [Span(0, 1), Span(0, 5)]
    assert str(err) == "expected expression; while parsing operand"
    assert err.excerpt("A & B").splitlines() == ["A & B", "^", "^^^^^"]
