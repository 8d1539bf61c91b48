"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

Severity: TypeAlias = Literal["low", "medium", "high"]
Classification: TypeAlias = Literal["violation", "healthy"]
WeightMode: TypeAlias = Literal["per_match", "per_finding"]
Status: TypeAlias = Literal["pass", "needs_work", "critical"]
ComplexityTier: TypeAlias = Literal["healthy", "monitor", "refactor"]
Priority: TypeAlias = Literal["p1", "p2", "p3"]
ToolName: TypeAlias = Literal["composition", "testability", "graph", "recommend"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
