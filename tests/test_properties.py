"""Property-based tests for scanner invariants using Hypothesis."""

from hypothesis import given, settings
from hypothesis import strategies as st

from kumo.token import DELIMITERS, KEYWORDS, OPERATORS, Token, TokenType
from kumo.tokenize import Scanner

identifiers = st.from_regex(r"[A-Za-z_]+", fullmatch=True).filter(
    lambda word: word not in KEYWORDS
)
numbers = st.from_regex(r"[0-9]+(\.[0-9]+)?", fullmatch=True)

tokens = st.one_of(
    st.sampled_from([Token(kind) for kind in KEYWORDS.values()]),
    st.sampled_from([Token(kind) for kind in OPERATORS.values()]),
    st.sampled_from([Token(kind) for kind in DELIMITERS.values()]),
    identifiers.map(lambda word: Token(TokenType.Identifier, word)),
    numbers.map(lambda text: Token(TokenType.NumLiteral, text)),
)
whitespace = st.text(alphabet=" \t\n\r", min_size=1, max_size=4)


def scan(source: str) -> list[Token]:
    return list(Scanner(source))


@given(st.lists(tokens, max_size=30))
@settings(max_examples=200)
def test_rescanning_lexemes_reproduces_tokens(expected: list[Token]) -> None:
    source = " ".join(token.lexeme for token in expected)
    assert scan(source) == expected


@given(st.lists(tokens, min_size=1, max_size=20), st.data())
@settings(max_examples=100)
def test_whitespace_never_ends_the_stream(expected: list[Token], data) -> None:
    parts = [data.draw(whitespace)]
    for token in expected:
        parts.append(token.lexeme)
        parts.append(data.draw(whitespace))
    assert scan("".join(parts)) == expected


@given(st.text(max_size=200))
@settings(max_examples=200)
def test_never_raises_and_always_terminates(source: str) -> None:
    scanner = Scanner(source)
    calls = 0
    while scanner.ch is not None:
        scanner.next_token()
        calls += 1
        assert calls <= len(scanner.input)
    assert scanner.next_token() is None
