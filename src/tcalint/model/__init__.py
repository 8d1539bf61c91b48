"""Core data models for tcalint."""

from .entities import (
    ComplexityEntry,
    Detection,
    FileAnalysis,
    Finding,
    GraphReport,
    Recommendation,
    RecommendationPlan,
    Rule,
    ScanResult,
)

__all__ = [
    "ComplexityEntry",
    "Detection",
    "FileAnalysis",
    "Finding",
    "GraphReport",
    "Recommendation",
    "RecommendationPlan",
    "Rule",
    "ScanResult",
]
