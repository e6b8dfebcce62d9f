from dataclasses import dataclass, field
from typing import Mapping


@dataclass(slots=True, frozen=True)
class LabelSelector:
    """Equality-based label selector. Every label must match exactly."""

    match_labels: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_labels(cls, labels: Mapping[str, str]) -> "LabelSelector":
        return cls(
            match_labels=tuple(sorted(labels.items()))
        )

    def matches(self, labels: Mapping[str, str]) -> bool:
        return all(
            labels.get(key) == value for key, value in self.match_labels
        )

    def __str__(self) -> str:
        return ",".join(
            f"{key}={value}" for key, value in self.match_labels
        )
