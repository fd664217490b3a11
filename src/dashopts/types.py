## dashopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Option:
    long: str
    short: str = ''
    capture: bool = False
    placeholder: str = ''        # Display-only, used by help when `capture` is set.
    description: str = ''

    def __post_init__(self):
        if not self.long:
            raise ValueError("Option requires a non-empty `long` name.")

    def __str__(self):
        decl = f"{self.short}/{self.long}"
        return decl + f"={self.placeholder}" if self.capture else decl

    @property
    def label(self) -> str:
        return self.placeholder or self.long

    def with_description(self, description: str) -> "Option":
        return replace(self, description=description)


@dataclass
class Match:
    hit: bool = False
    value: str = ''


@dataclass
class ScanResult:
    """Outcome of a single scanning pass; a new one is built every pass."""
    positional: list[str] = field(default_factory=list)
    matches: dict[str, Match] = field(default_factory=dict)

    def hit(self, long: str) -> bool | None:
        return m.hit if (m := self.matches.get(long)) is not None else None

    def value(self, long: str) -> str | None:
        return m.value if (m := self.matches.get(long)) is not None else None

    def hits(self) -> list[str]:
        return [name for name, m in self.matches.items() if m.hit]

    def values(self) -> dict[str, str]:
        return {name: m.value for name, m in self.matches.items() if m.hit and m.value}
