import pytest

from iptables_save_parser.errors import TokenizeError
from iptables_save_parser.tokenizer import split_arguments


def test_whitespace_runs_collapse():
    assert split_arguments("-A  INPUT\t-j   ACCEPT ") == ["-A", "INPUT", "-j", "ACCEPT"]


def test_quotes_are_literal_by_default():
    assert split_arguments('--comment "a b"') == ["--comment", '"a', 'b"']


def test_quoted_mode():
    assert split_arguments('--comment "a b"', quoted=True) == ["--comment", "a b"]


def test_unbalanced_quote():
    with pytest.raises(TokenizeError):
        split_arguments('--comment "oops', quoted=True)
