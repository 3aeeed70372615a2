import pytest

from minishell.lexer import LexError, check_limit, is_space, tokenize
from minishell.tokens import TokenType


def values(line):
    return [token.value for token in tokenize(line)]


def kinds(line):
    return [token.type for token in tokenize(line)]


def test_empty_line_has_no_tokens():
    assert tokenize("") == []


def test_blank_line_has_only_eof():
    tokens = tokenize("   \t")
    assert [(t.value, t.type, t.index) for t in tokens] == [(None, TokenType.EOF, 0)]


def test_example_command_line():
    line = 'ls -la | (echo "test" | cat -e) && (yes 5 || ls -la)'
    assert values(line) == [
        "ls", "-la", "|", "(", "echo", '"', "test", '"', "|", "cat", "-e", ")",
        "&&", "(", "yes", "5", "||", "ls", "-la", ")", None,
    ]


def test_redirections_without_spaces():
    assert kinds("a>>b<<c<d>e") == [
        TokenType.WORD, TokenType.R_APP, TokenType.WORD, TokenType.L_APP,
        TokenType.WORD, TokenType.L_RED, TokenType.WORD, TokenType.R_RED,
        TokenType.WORD, TokenType.EOF,
    ]


@pytest.mark.parametrize(
    "line, expected",
    [
        ("|||", ["||", "|", None]),
        (">>>", [">>", ">", None]),
        ("<<<", ["<<", "<", None]),
        ("a||b", ["a", "||", "b", None]),
    ],
)
def test_two_character_operators_win(line, expected):
    assert values(line) == expected


def test_categories():
    tokens = tokenize("(a) | 'b'")
    by_value = {t.value: t.category for t in tokens}
    assert by_value["("] == TokenType.DELIMITER
    assert by_value[")"] == TokenType.DELIMITER
    assert by_value["'"] == TokenType.DELIMITER
    assert by_value["|"] == TokenType.OP
    assert by_value["a"] == TokenType.WORD
    assert by_value[None] == TokenType.EOF


def test_indices_are_consecutive():
    tokens = tokenize("echo a && echo b > out")
    assert [t.index for t in tokens] == list(range(len(tokens)))


def test_exactly_one_eof_at_end():
    tokens = tokenize("cat < in | wc -l  ")
    assert [t.type for t in tokens].count(TokenType.EOF) == 1
    assert tokens[-1].type == TokenType.EOF


def test_values_rebuild_line_without_spaces():
    line = "ls -la | grep x >> log && (cat 'f')"
    rebuilt = "".join(t.value for t in tokenize(line) if t.value is not None)
    assert rebuilt == line.replace(" ", "")


def test_tabs_and_newlines_separate_words():
    assert values("a\tb\nc") == ["a", "b", "c", None]


def test_text_after_nul_is_ignored():
    assert values("ls\0 | wc") == ["ls", None]


@pytest.mark.parametrize("line", ["&", "a & b", "&&&", "echo &x"])
def test_lone_ampersand_is_rejected(line):
    with pytest.raises(LexError) as info:
        tokenize(line)
    assert line[info.value.position] == "&"


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_true(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "\0", "\x08", "\x0e", "|"])
def test_is_space_false(c):
    assert is_space(c) is False


@pytest.mark.parametrize("c", ["<", ">", "|", "&", "(", ")", '"', "'", " ", "\t"])
def test_check_limit_true(c):
    assert check_limit(c) is True


@pytest.mark.parametrize("c", ["a", "-", "$", "*"])
def test_check_limit_false(c):
    assert check_limit(c) is False