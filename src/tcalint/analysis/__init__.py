"""Derived analyses built on top of a scan result."""

from .complexity import build_graph_report
from .extraction import recommend_extractions

__all__ = ["build_graph_report", "recommend_extractions"]
