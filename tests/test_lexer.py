import pytest

from minishell.environment import Environment
from minishell.lexer import is_blank, tokenize


@pytest.fixture
def env():
    return Environment(["HOME=/root", "PATH=/usr/bin", "SPACED=a b", "A=x"])


def test_is_blank():
    assert is_blank(" ") is True
    assert is_blank("\t") is True
    assert is_blank("\n") is False
    assert is_blank("a") is False


def test_plain_words(env):
    assert tokenize("echo hello world", env) == ["echo", "hello", "world"]


def test_empty_and_blank_lines(env):
    assert tokenize("", env) == []
    assert tokenize(" \t  ", env) == []


def test_tabs_separate_newlines_do_not(env):
    assert tokenize("a\tb", env) == ["a", "b"]
    assert tokenize("a\nb", env) == ["a\nb"]


def test_operators_split_words(env):
    assert tokenize("cat<in>>out|wc", env) == ["cat", "<", "in", ">>", "out", "|", "wc"]


def test_operator_runs(env):
    assert tokenize("||", env) == ["|", "|"]
    assert tokenize(">>>", env) == [">>", ">"]
    assert tokenize("<<<", env) == ["<<", "<"]
    assert tokenize("<>", env) == ["<", ">"]


def test_quotes_keep_blanks(env):
    assert tokenize("echo 'a b' \"c d\"", env) == ["echo", "a b", "c d"]


def test_adjacent_pieces_join(env):
    assert tokenize("a\"b\"'c'd", env) == ["abcd"]


def test_single_quotes_do_not_expand(env):
    assert tokenize("echo '$HOME'", env) == ["echo", "$HOME"]


def test_double_quotes_expand(env):
    assert tokenize('"$HOME/x"', env) == ["/root/x"]


def test_unquoted_expansion(env):
    assert tokenize("cd $HOME", env) == ["cd", "/root"]


def test_exit_status_expansion(env):
    assert tokenize("echo $?", env, 42) == ["echo", "42"]
    assert tokenize('"$?"x', env, 7) == ["7x"]


def test_undefined_variable_is_empty(env):
    assert tokenize("echo $NOPE", env) == ["echo", ""]


def test_dollar_without_name_is_literal(env):
    assert tokenize("echo $ $- \"$\"", env) == ["echo", "$", "$-", "$"]


def test_no_field_splitting(env):
    assert tokenize("echo $SPACED", env) == ["echo", "a b"]


def test_name_stops_at_non_alnum(env):
    assert tokenize("$A_B", env) == ["x_B"]


def test_quoted_operator_is_a_plain_token(env):
    assert tokenize("echo '|' \"a|b\"", env) == ["echo", "|", "a|b"]


def test_unterminated_quote_raises(env):
    with pytest.raises(ValueError):
        tokenize("echo 'open", env)
    with pytest.raises(ValueError):
        tokenize('echo "open', env)


def test_tokens_round_trip_for_simple_words(env):
    words = ["ls", "-la", "/tmp"]
    assert tokenize(" ".join(words), env) == words