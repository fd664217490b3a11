## dashopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import dashopts.api as D


def test_parse_args_one_shot():
    p = D.parse_args({"h/help": "Show help.", "i/input=file_path": "Input image."}, ["app", "-i", "img.png"])
    assert p.hit("input") is True
    assert p.value("input") == "img.png"
    assert p.last.positional == ["app"]


def test_parse_args_lenient():
    p = D.parse_args({"h/help": ""}, ["--nope", "-h"], strict=False)
    assert p.hit("help") is True
    assert p.last.positional == ["--nope"]


def test_error_types_are_exported():
    assert issubclass(D.DeclarationSyntaxError, SyntaxError)
    assert issubclass(D.UnknownOptionError, ReferenceError)
    assert issubclass(D.MissingValueError, D.DashOptsError)
    result = D.try_parse_declaration("nope")
    assert isinstance(result, D.DeclarationSyntaxError)


def test_render_help_helpers():
    opt = D.parse_declaration("i/input=file_path", "Input image.")
    assert D.render_help(opt, color=False) == "-i, --input <file_path>\n    Input image."
    assert D.format_help(D.Registry([opt]), color=False) == D.render_help(opt, color=False)
