"""Health report types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class Status(str, Enum):
    """Status reported to the health endpoint."""

    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True)
class HealthReport:
    """Result of a single health check."""

    status: Status
    details: Mapping[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is Status.UP

    @classmethod
    def up(cls, **details: Any) -> "HealthReport":
        return cls(status=Status.UP, details=details)

    @classmethod
    def down(cls, **details: Any) -> "HealthReport":
        return cls(status=Status.DOWN, details=details)

    def to_dict(self) -> dict[str, Any]:
        return {"status": self.status.value, "details": dict(self.details)}


@dataclass(frozen=True)
class CompositeHealth:
    """Aggregate health over named contributors."""

    components: Mapping[str, HealthReport]

    @property
    def status(self) -> Status:
        if any(report.status is Status.DOWN for report in self.components.values()):
            return Status.DOWN
        return Status.UP

    @property
    def ok(self) -> bool:
        return self.status is Status.UP

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "components": {
                name: report.to_dict() for name, report in self.components.items()
            },
        }
