## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable, Iterator, Mapping
from itertools import combinations

from .types import Option
from .errors import OptionCollisionError
from .parser import parse_declaration


WILDCARD = '*'


def _collision(a: Option, b: Option) -> str | None:
    if a.long == b.long: return f"long form `--{a.long}`"
    if a.short and a.short == b.short: return f"short form `-{a.short}`"
    return None


class Registry:
    """Insertion-ordered options keyed by their `long` name."""

    def __init__(self, options: Iterable[Option] = ()):
        options = list(options)
        for (i, a), (j, b) in combinations(enumerate(options), 2):
            if (what := _collision(a, b)) is not None:
                raise OptionCollisionError(f"Options `{a}` (#{i}) and `{b}` (#{j}) both declare {what}.",
                                           first=a, second=b, positions=(i, j))
        self._options: dict[str, Option] = {opt.long: opt for opt in options}

    @classmethod
    def from_mapping(cls, declarations: Mapping[str, str]) -> "Registry":
        return cls(parse_declaration(text, description) for text, description in declarations.items())

    # Mutation ────────────────────────────────────────────────────────────────────────────────
    def push(self, option: Option) -> None:
        if option.short and (other := self.find_short(option.short)) and other.long != option.long:
            raise OptionCollisionError(f"Option `{option}` reuses short form `-{option.short}` of `{other}`.",
                                       first=other, second=option, positions=(self.index(other.long), len(self)))
        # Same `long` is a replacement, which moves the option to the end.
        self._options.pop(option.long, None)
        self._options[option.long] = option

    def push_declaration(self, text: str, description: str = '') -> Option:
        option = parse_declaration(text, description)
        self.push(option)
        return option

    def drop(self, long: str) -> None:
        if long == WILDCARD:
            self._options.clear()
        else:
            self._options.pop(long, None)

    # Lookup ──────────────────────────────────────────────────────────────────────────────────
    def get(self, long: str) -> Option | None:
        return self._options.get(long)

    def find_long(self, key: str) -> Option | None:
        return self._options.get(key) if key else None

    def find_short(self, key: str) -> Option | None:
        # An empty key never matches, not even an option declared without a short form.
        if not key: return None
        return next((opt for opt in self._options.values() if opt.short == key), None)

    def index(self, long: str) -> int:
        return list(self._options).index(long)

    def __contains__(self, long: str) -> bool:
        return long in self._options

    def __iter__(self) -> Iterator[Option]:
        return iter(list(self._options.values()))

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self):
        return f"Registry({', '.join(str(opt) for opt in self._options.values())})"
