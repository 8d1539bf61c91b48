"""Reporting package for tcalint outputs."""

from __future__ import annotations

from .stdout import CompositionReporter, GraphReporter, RecommendReporter, TestabilityReporter
from .structured import composition_payload, graph_payload, recommend_payload, testability_payload

__all__ = [
    "CompositionReporter",
    "GraphReporter",
    "RecommendReporter",
    "TestabilityReporter",
    "composition_payload",
    "graph_payload",
    "recommend_payload",
    "testability_payload",
]
