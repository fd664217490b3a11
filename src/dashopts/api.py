## dashopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Mapping, Sequence

from .types import Option, Match, ScanResult
from .errors import *
from .parser import parse_declaration, try_parse_declaration, split_arguments
from .registry import Registry, WILDCARD
from .formatting import render_help, format_help
from .runtime import OptionParser


def parse_args(declarations: Mapping[str, str], argv: Sequence[str], strict: bool = True) -> OptionParser:
    """Build a parser from `{declaration: description}` and run one pass over `argv`."""
    parser = OptionParser.from_mapping(declarations, strict=strict)
    parser.process(argv)
    return parser
