## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable

from .types import Option, Match, ScanResult
from .errors import MissingValueError, UnknownOptionError
from .registry import Registry


def classify(token: str) -> tuple[str, str] | None:
    """Return `('long'|'short', key)` for option-shaped tokens, None for positionals."""
    if token.startswith('--'): return 'long', token[2:]
    if token.startswith('-'): return 'short', token[1:]
    return None


def _trace(step: int, token: str, note: str) -> None:
    print(f"\033[90m{step:>3} :\033[0m  {token:<24} \033[36m{note}\033[0m")


def scan(tokens: Iterable[str], registry: Registry, strict: bool = True, verbosity: int = 0) -> ScanResult:
    result = ScanResult(matches={opt.long: Match() for opt in registry})
    tokens = list(tokens)
    awaiting: Option | None = None

    for step, token in enumerate(tokens):
        if awaiting is not None:
            result.matches[awaiting.long].value = token
            if verbosity > 0: _trace(step, token, f"value of --{awaiting.long}")
            awaiting = None
            continue

        if (form := classify(token)) is None:
            result.positional.append(token)
            if verbosity == 2: _trace(step, token, "positional")
            continue

        kind, key = form
        name, eq, inline = key.partition('=')
        option = registry.find_long(name) if kind == 'long' else registry.find_short(name)

        if option is None:
            if strict:
                raise UnknownOptionError(f"Unknown option `{token}` at position {step}.", token=token, position=step)
            result.positional.append(token)
            if verbosity == 2: _trace(step, token, "unknown, kept as positional")
            continue

        result.matches[option.long].hit = True
        if verbosity > 0: _trace(step, token, f"matched {option}")
        if not option.capture:
            continue

        if eq:
            if not inline:
                raise MissingValueError(f"Option `{token}` at position {step} has an empty value after `=`.",
                                        token=token, position=step)
            result.matches[option.long].value = inline
        elif step + 1 >= len(tokens):
            raise MissingValueError(f"Option `{token}` must supply value, but it is the last argument.",
                                    token=token, position=step)
        else:
            awaiting = option

    return result
