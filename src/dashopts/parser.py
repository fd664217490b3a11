## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark

from .types import Option
from .errors import DeclarationSyntaxError


# Only the `short/long` head of a declaration goes through the grammar; anything
# after the first `=` is a free-form placeholder and is never validated.
GRAMMAR = r"""declaration: short SLASH long
short: WORD?
long: WORD

SLASH: "/"
WORD: /[A-Za-z0-9_]+/
"""

_PARSER = lark.Lark(GRAMMAR, start='declaration', parser="lalr", lexer="contextual", propagate_positions=True)


def _token_value(node: lark.Tree) -> str:
    return next((ch.value for ch in node.children if isinstance(ch, lark.Token)), '')


def parse_declaration(text: str, description: str = '') -> Option:
    head, eq, placeholder = text.partition('=')

    try:
        tree = _PARSER.parse(head)
    except lark.exceptions.UnexpectedCharacters as exc:
        raise DeclarationSyntaxError(f"Invalid character `{exc.char}` in declaration `{text}`.",
                                     declaration=text, char=exc.char, column=exc.column) from None
    except (lark.exceptions.UnexpectedToken, lark.exceptions.UnexpectedEOF) as exc:
        token = getattr(exc, 'token', None)
        if token is not None and token.type == 'SLASH':
            # A second separator is just another character outside the word class.
            raise DeclarationSyntaxError(f"Invalid character `/` in declaration `{text}`.",
                                         declaration=text, char='/', column=token.column) from None
        # Every character was valid, so the grammar ran out of input early.
        reason = "missing separator `/`" if '/' not in head else "empty long name"
        raise DeclarationSyntaxError(f"Declaration `{text}` has {reason}.", declaration=text) from None

    nodes = {ch.data: ch for ch in tree.children if isinstance(ch, lark.Tree)}
    short = _token_value(nodes['short']) if 'short' in nodes else ''
    return Option(long=_token_value(nodes['long']), short=short,
                  capture=bool(eq), placeholder=placeholder, description=description)


def try_parse_declaration(text: str, description: str = '') -> Option | DeclarationSyntaxError:
    """Same as `parse_declaration()` but returns the failure instead of raising it."""
    try:
        return parse_declaration(text, description)
    except DeclarationSyntaxError as exc:
        return exc


def split_arguments(text: str) -> list[str]:
    # No quoting or escaping, whitespace only.
    return text.split()
