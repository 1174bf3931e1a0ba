import pytest

from formula import (
    Atomic,
    Binary,
    BinaryOperatorKind,
    ErrorCode,
    Paren,
    ParseError,
    Parser,
    Span,
    TokenStream,
    TruthValue,
    Unary,
    parse,
    variables,
)


@pytest.mark.parametrize(
    "source",
    [
        "A",
        "~A",
        "A & B",
        "A | B",
        "A -> B",
        "A <-> B",
        "A ⊕ B",
        "A ^ B",
        "(A -> B) & (B -> C)",
        "A -> (B -> C)",
        "(A -> B) -> C",
        "(A -> B) & (B -> C) & (C -> D)",
        "(A -> B)",
        "¬¬¬A",
        "A && B || C",
        "A ∧ ¬B ⇒ C ≡ D",
        "1 | 0",
        "!(A . B) + C",
    ],
)
def test_round_trip(source):
    assert str(parse(source)) == source


def test_round_trip_normalizes_whitespace():
    assert str(parse("  A&&(B  ->~C) ")) == "A && (B -> ~C)"


@pytest.mark.parametrize(
    "source",
    [
        "A -> B -> C",
        "A <-> B == C",
        "A -> B & C -> D",
        "A & B -> C -> D",
    ],
)
def test_non_associative_chain_is_rejected(source):
    with pytest.raises(ParseError) as exc:
        parse(source)
    assert exc.value.code == ErrorCode.NON_ASSOCIATIVE
    assert exc.value.messages == ["non-associative operators must be parenthesized"]


def test_non_associative_error_spans_whole_chain():
    with pytest.raises(ParseError) as exc:
        parse("A -> B -> C")
    assert exc.value.spans == [Span(0, 11)]


def test_equal_precedence_chain_leans_left():
    expr = parse("A & B & C")
    assert str(expr) == "A & B & C"
    assert isinstance(expr, Binary)
    assert isinstance(expr.lhs, Binary)
    assert str(expr.lhs) == "A & B"
    assert expr.rhs == Atomic("C", Span(8, 1))


def test_xor_chain_leans_left():
    expr = parse("A ^ B ^ C")
    assert str(expr.lhs) == "A ^ B"


@pytest.mark.parametrize(
    "source, top, lhs, rhs",
    [
        ("A | B & C", BinaryOperatorKind.DISJUNCTION, "A", "B & C"),
        ("A & B | C", BinaryOperatorKind.DISJUNCTION, "A & B", "C"),
        ("A -> B & C", BinaryOperatorKind.IMPLICATION, "A", "B & C"),
        ("A & B -> C", BinaryOperatorKind.IMPLICATION, "A & B", "C"),
        ("A & B | C -> D", BinaryOperatorKind.IMPLICATION, "A & B | C", "D"),
        ("A | B & C | D", BinaryOperatorKind.DISJUNCTION, "A | B & C", "D"),
        ("A -> B <-> C", BinaryOperatorKind.EQUIVALENCE, "A -> B", "C"),
        ("A <-> B -> C", BinaryOperatorKind.EQUIVALENCE, "A", "B -> C"),
        ("A ^ B | C", BinaryOperatorKind.EXCLUSIVE_DISJUNCTION, "A", "B | C"),
    ],
)
def test_precedence(source, top, lhs, rhs):
    expr = parse(source)
    assert isinstance(expr, Binary)
    assert expr.operator.kind == top
    assert str(expr.lhs) == lhs
    assert str(expr.rhs) == rhs


def test_nested_lhs_shape():
    expr = parse("A & B | C -> D")
    assert expr.lhs.operator.kind == BinaryOperatorKind.DISJUNCTION
    assert str(expr.lhs.lhs) == "A & B"


def test_negation_nests():
    expr = parse("¬¬¬A")
    depth = 0
    while isinstance(expr, Unary):
        depth += 1
        expr = expr.operand
    assert depth == 3
    assert expr == Atomic("A", Span(3, 1))


def test_negation_binds_tighter_than_binary():
    expr = parse("~A & B")
    assert isinstance(expr, Binary)
    assert isinstance(expr.lhs, Unary)


def test_node_spans():
    expr = parse("(A) & ~B")
    assert expr.span == Span(0, 8)
    assert expr.operator_span == Span(4, 1)
    assert expr.lhs == Paren(Atomic("A", Span(1, 1)), Span(0, 3))
    assert expr.rhs.span == Span(6, 2)
    assert expr.rhs.operator_span == Span(6, 1)


def test_parent_span_covers_children():
    def check(expr):
        match expr:
            case Binary(lhs=lhs, rhs=rhs, span=span):
                for child in (lhs, rhs):
                    assert span.start <= child.span.start and child.span.end <= span.end
                    check(child)
            case Unary(operand=operand, span=span) | Paren(inner=operand, span=span):
                assert span.start <= operand.span.start and operand.span.end <= span.end
                check(operand)

    check(parse("(A -> B) & ~(C | D & E) <-> 1"))


def test_truth_values():
    expr = parse("1 & 0")
    assert expr.lhs == TruthValue(True, Span(0, 1))
    assert expr.rhs == TruthValue(False, Span(4, 1))


@pytest.mark.parametrize(
    "source, code, span",
    [
        ("(A & B", ErrorCode.EXPECTED_DELIMITER, Span(0, 6)),
        ("A &", ErrorCode.UNEXPECTED_EOF, Span(3, 0)),
        ("& A", ErrorCode.EXPECTED_EXPRESSION, Span(0, 1)),
        ("()", ErrorCode.EXPECTED_EXPRESSION, Span(1, 1)),
        (")", ErrorCode.EXPECTED_EXPRESSION, Span(0, 1)),
        ("A B", ErrorCode.TRAILING_INPUT, Span(2, 1)),
        ("A )", ErrorCode.TRAILING_INPUT, Span(2, 1)),
        ("", ErrorCode.UNEXPECTED_EOF, Span(0, 0)),
        ("~", ErrorCode.UNEXPECTED_EOF, Span(1, 0)),
    ],
)
def test_syntax_errors(source, code, span):
    with pytest.raises(ParseError) as exc:
        parse(source)
    assert exc.value.code == code
    assert exc.value.spans == [span]


def test_parser_leaves_unconsumed_tokens():
    tokens = TokenStream.parse("A & B )")
    expr = Parser().parse(tokens)
    assert str(expr) == "A & B"
    assert not tokens.is_empty()
    assert tokens.span() == Span(6, 1)


def test_operator_spelling_is_kept():
    expr = parse("A ∧ B")
    assert expr.operator.spelling == "∧"
    assert expr.operator.kind == BinaryOperatorKind.CONJUNCTION


def test_variables():
    assert variables(parse("A & (B | ~A) -> C")) == ["A", "B", "C"]
    assert variables(parse("1 -> 0")) == []
