"""Pydantic models for health responses."""

from typing import Any
from pydantic import BaseModel, Field

from cassandra_health import CompositeHealth, HealthReport


class HealthResponse(BaseModel):
    """Report of a single contributor."""

    status: str
    details: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_report(cls, report: HealthReport) -> "HealthResponse":
        return cls(**report.to_dict())


class CompositeHealthResponse(BaseModel):
    """Aggregate report over every registered contributor."""

    status: str
    components: dict[str, HealthResponse] = Field(default_factory=dict)

    @classmethod
    def from_health(cls, health: CompositeHealth) -> "CompositeHealthResponse":
        return cls(
            status=health.status.value,
            components={
                name: HealthResponse.from_report(report)
                for name, report in health.components.items()
            },
        )
