import pytest

from brainfart.errors import UnmatchedCloseBracket, UnmatchedOpenBracket
from brainfart.lexer import lex_char, tokenize
from brainfart.token import Token, TokenType


def positions(tokens):
    return [(t.type.value, t.line, t.column) for t in tokens]


@pytest.mark.parametrize('char, expected', [
    ('>', TokenType.MOVE_RIGHT),
    ('<', TokenType.MOVE_LEFT),
    ('+', TokenType.ADD),
    ('-', TokenType.SUB),
    ('.', TokenType.OUTPUT),
    (',', TokenType.INPUT),
    ('[', TokenType.LOOP_START),
    (']', TokenType.LOOP_END),
])
def test_lex_char_commands(char, expected):
    assert lex_char(char) is expected


@pytest.mark.parametrize('char', ['a', ' ', '#', '0', '\t', '('])
def test_lex_char_ignores_other_characters(char):
    assert lex_char(char) is None


def test_single_command():
    assert tokenize('+') == [Token(TokenType.ADD, 1, 1)]


def test_empty_source():
    assert tokenize('') == []


def test_whitespace_advances_column():
    assert tokenize('  >\n ') == [Token(TokenType.MOVE_RIGHT, 1, 3)]


def test_positions_across_lines():
    assert positions(tokenize('> ++ <\n-  ')) == [
        ('>', 1, 1),
        ('+', 1, 3),
        ('+', 1, 4),
        ('<', 1, 6),
        ('-', 2, 1),
    ]


def test_comment_text_is_skipped():
    assert positions(tokenize('Observe the following:\n ,+++.')) == [
        (',', 2, 2),
        ('+', 2, 3),
        ('+', 2, 4),
        ('+', 2, 5),
        ('.', 2, 6),
    ]


def test_carriage_return_counts_as_line_break():
    # \r\n is two line breaks
    assert positions(tokenize('\r\n+')) == [('+', 3, 1)]
    assert positions(tokenize('a\rb-')) == [('-', 2, 2)]


def test_non_ascii_characters_take_one_column():
    assert positions(tokenize('é\t+')) == [('+', 1, 3)]


def test_brackets_are_emitted():
    assert positions(tokenize('[[]]')) == [
        ('[', 1, 1),
        ('[', 1, 2),
        (']', 1, 3),
        (']', 1, 4),
    ]


def test_unmatched_close_bracket_at_start():
    with pytest.raises(UnmatchedCloseBracket) as excinfo:
        tokenize(']')
    assert excinfo.value.token == Token(TokenType.LOOP_END, 1, 1)


def test_unmatched_close_bracket_position():
    with pytest.raises(UnmatchedCloseBracket) as excinfo:
        tokenize('[+]\n  ]')
    assert (excinfo.value.token.line, excinfo.value.token.column) == (2, 3)


def test_close_bracket_fails_before_end_of_scan():
    # the stray ] is reported even though a [ is also left open afterwards
    with pytest.raises(UnmatchedCloseBracket):
        tokenize('][')


@pytest.mark.parametrize('source', ['[', '[[]', '+[>[-]', '[]['])
def test_unmatched_open_bracket(source):
    with pytest.raises(UnmatchedOpenBracket) as excinfo:
        tokenize(source)
    assert excinfo.value.token is None
