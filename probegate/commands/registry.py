from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .types import CommandHandler


@dataclass(frozen=True)
class CommandRegistry:
    entries: Mapping[str, CommandHandler] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only view so concurrent lookups never observe a mutation
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def from_entries(cls, pairs: Iterable[tuple[str, CommandHandler]]) -> CommandRegistry:
        entries: dict[str, CommandHandler] = {}
        for verb, handler in pairs:
            if not verb:
                raise ValueError("verb must be a non-empty string")
            if verb in entries:
                raise ValueError(f"duplicate verb: {verb}")
            entries[verb] = handler
        return cls(entries=entries)

    def lookup(self, verb: str) -> CommandHandler | None:
        return self.entries.get(verb)

    def verbs(self) -> list[str]:
        return sorted(self.entries)

    def __contains__(self, verb: object) -> bool:
        return verb in self.entries

    def __len__(self) -> int:
        return len(self.entries)
