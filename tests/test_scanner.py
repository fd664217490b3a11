## dashopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from dashopts.parser import parse_declaration
from dashopts.registry import Registry
from dashopts.scanner import scan, classify
from dashopts.errors import MissingValueError, UnknownOptionError, OptionReferenceError


@pytest.fixture
def registry():
    return Registry([parse_declaration("h/help"), parse_declaration("i/input=file_path")])


def test_classify_token_forms():
    assert classify("--help") == ("long", "help")
    assert classify("-h") == ("short", "h")
    assert classify("--") == ("long", "")
    assert classify("-") == ("short", "")
    assert classify("app") is None


def test_long_flag_is_hit(registry):
    result = scan(["app", "--help"], registry)
    assert result.hit("help") is True
    assert result.hit("input") is False
    assert result.positional == ["app"]


def test_short_capture_from_next_token(registry):
    result = scan(["app", "-i", "img.png"], registry)
    assert result.hit("input") is True
    assert result.value("input") == "img.png"
    assert result.positional == ["app"]


def test_short_capture_inline(registry):
    result = scan(["app", "-i=img.png"], registry)
    assert result.hit("input") is True
    assert result.value("input") == "img.png"
    assert result.positional == ["app"]


def test_long_capture_inline_keeps_later_equals(registry):
    result = scan(["--input=a=b"], registry)
    assert result.value("input") == "a=b"


def test_captured_token_is_never_an_option(registry):
    result = scan(["--input", "--help"], registry)
    assert result.value("input") == "--help"
    assert result.hit("help") is False


def test_trailing_capture_without_value_fails(registry):
    with pytest.raises(MissingValueError, match=r"must supply value") as info:
        scan(["app", "-i"], registry)
    assert info.value.position == 1
    assert info.value.token == "-i"


def test_inline_empty_value_fails(registry):
    with pytest.raises(OptionReferenceError, match=r"empty value"):
        scan(["--input="], registry)


def test_inline_value_on_flag_is_ignored(registry):
    result = scan(["--help=yes"], registry)
    assert result.hit("help") is True
    assert result.value("help") == ""


def test_unknown_option_strict_fails(registry):
    with pytest.raises(UnknownOptionError, match=r"`--nope`"):
        scan(["app", "--nope"], registry)


def test_unknown_option_lenient_is_positional(registry):
    result = scan(["app", "--nope"], registry, strict=False)
    assert result.positional == ["app", "--nope"]


def test_short_and_long_do_not_cross_match(registry):
    result = scan(["-help", "--h"], registry, strict=False)
    assert result.hit("help") is False
    assert result.positional == ["-help", "--h"]


def test_bare_dashes_never_match_options_without_short():
    reg = Registry([parse_declaration("/verbose")])
    result = scan(["-", "--"], reg, strict=False)
    assert result.hit("verbose") is False
    assert result.positional == ["-", "--"]
    with pytest.raises(UnknownOptionError):
        scan(["-"], reg)


def test_positional_order_is_preserved(registry):
    result = scan(["a", "--help", "b", "-i", "c", "d"], registry)
    assert result.positional == ["a", "b", "d"]
    assert result.value("input") == "c"


def test_scanning_twice_gives_identical_results(registry):
    first = scan(["-h", "-i", "x"], registry)
    second = scan(["-h", "-i", "x"], registry)
    assert first == second
    assert first is not second


def test_each_pass_starts_from_reset_state(registry):
    scan(["-h", "-i", "x"], registry)
    result = scan(["plain"], registry)
    assert result.hits() == []
    assert result.values() == {}


def test_unknown_query_is_none(registry):
    result = scan([], registry)
    assert result.hit("nope") is None
    assert result.value("nope") is None


def test_result_summaries(registry):
    result = scan(["-h", "--input", "x"], registry)
    assert result.hits() == ["help", "input"]
    assert result.values() == {"input": "x"}


def test_verbose_trace_prints_matches(registry, capsys):
    scan(["app", "-i", "x"], registry, verbosity=1)
    out = capsys.readouterr().out
    assert "matched i/input=file_path" in out
    assert "value of --input" in out
    assert "positional" not in out

    scan(["app"], registry, verbosity=2)
    assert "positional" in capsys.readouterr().out
