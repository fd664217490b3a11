## dashopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable, Mapping, Sequence

from .types import Option, ScanResult
from .parser import parse_declaration, split_arguments
from .registry import Registry
from .scanner import scan
from .formatting import format_help


class OptionParser:
    """Facade tying a registry to scanning passes and their most recent result."""

    def __init__(self, options: Iterable[Option | str] = (), strict: bool = True, verbosity: int = 0):
        self.registry = Registry(opt if isinstance(opt, Option) else parse_declaration(opt) for opt in options)
        self.strict = strict
        self.verbosity = verbosity
        self.last: ScanResult | None = None

    @classmethod
    def from_mapping(cls, declarations: Mapping[str, str], strict: bool = True, verbosity: int = 0) -> "OptionParser":
        parser = cls(strict=strict, verbosity=verbosity)
        parser.registry = Registry.from_mapping(declarations)
        return parser

    # Registration ────────────────────────────────────────────────────────────────────────────
    def push(self, option: Option) -> None:
        self.registry.push(option)

    def declare(self, text: str, description: str = '') -> Option:
        return self.registry.push_declaration(text, description)

    def drop(self, long: str) -> None:
        self.registry.drop(long)

    # Scanning ────────────────────────────────────────────────────────────────────────────────
    def process(self, tokens: Sequence[str]) -> list[str]:
        # Cleared first so a failing pass never leaves a stale result behind.
        self.last = ScanResult()
        self.last = scan(tokens, self.registry, strict=self.strict, verbosity=self.verbosity)
        return self.last.positional

    def process_string(self, text: str) -> list[str]:
        return self.process(split_arguments(text))

    # Queries ─────────────────────────────────────────────────────────────────────────────────
    def hit(self, long: str) -> bool | None:
        if long not in self.registry: return None
        return self.last is not None and bool(self.last.hit(long))

    def value(self, long: str) -> str | None:
        if long not in self.registry: return None
        return (self.last.value(long) if self.last is not None else None) or ''

    def help(self, color: bool = True) -> str:
        return format_help(self.registry, color=color)

