import pytest

from enginekit.args import AppArgs


def test_new_cache_is_empty():
    args = AppArgs()
    assert args.is_empty()
    assert args.list_options() == []
    assert args.default_args() == []


def test_default_args_before_options():
    args = AppArgs()
    args.append("file1 file2 -x 1 2 -y")
    assert args.default_args() == ["file1", "file2"]
    assert args.option_args("-x") == ["1", "2"]
    assert args.option_args("-y") == []
    assert not args.is_empty()


def test_option_lookup_ignores_case():
    args = AppArgs("-Verbose on")
    assert args.has_option("-VERBOSE")
    assert args("-verbose")
    assert "-vErBoSe" in args
    assert args.option_args("-verbose") == ["on"]


def test_missing_option():
    args = AppArgs("-a 1")
    assert not args.has_option("-b")
    assert args.option_args("-b") == []


def test_repeated_option_accumulates():
    args = AppArgs()
    args.append("-x 1 2")
    args.append("-x 3")
    args.append("-x 4 -x 5")
    assert args.option_args("-x") == ["1", "2", "3", "4", "5"]


def test_list_options_sorted():
    args = AppArgs("-zeta -alpha -mid 7")
    assert args.list_options() == sorted(["-zeta", "-alpha", "-mid"])


def test_extra_spaces_are_ignored():
    args = AppArgs("  a   -o   b  ")
    assert args.default_args() == ["a"]
    assert args.option_args("-o") == ["b"]


def test_returned_lists_are_copies():
    args = AppArgs("d -o v")
    args.option_args("-o").append("x")
    args.default_args().append("y")
    assert args.option_args("-o") == ["v"]
    assert args.default_args() == ["d"]


@pytest.mark.parametrize("line", ["", "   "])
def test_blank_input_keeps_cache_empty(line):
    args = AppArgs()
    args.append(line)
    assert args.is_empty()