"""Fixed effort buckets for extraction recommendations."""

from __future__ import annotations

PRIORITY_P1: str = "p1"
PRIORITY_P2: str = "p2"
PRIORITY_P3: str = "p3"
PRIORITY_ORDER: tuple[str, ...] = (PRIORITY_P1, PRIORITY_P2, PRIORITY_P3)

# Hours added to the effort total per recommendation in each tier.
PRIORITY_HOURS: dict[str, int] = {
    PRIORITY_P1: 2,
    PRIORITY_P2: 5,
    PRIORITY_P3: 6,
}

P1_EFFORT: str = "2 hours"
P1_IMPACT: str = "Unblocks unit testing"
P2_EFFORT: str = "4-6 hours"
P2_LARGE_EFFORT: str = "8-12 hours"
P2_IMPACT: str = "+1000 testable lines"
P3_EFFORT: str = "4-8 hours"
P3_IMPACT: str = "Improved clarity"

PRIORITY_HEADINGS: dict[str, str] = {
    PRIORITY_P1: "PRIORITY 1 (Do First - Unblocks Testing)",
    PRIORITY_P2: "PRIORITY 2 (Next Sprint - Maintainability)",
    PRIORITY_P3: "PRIORITY 3 (Future - Clarity)",
}

SPRINT_PLAN: dict[str, str] = {
    PRIORITY_P1: "Week 1: Priority 1 items (~{hours}h) - unblock testing",
    PRIORITY_P2: "Week 2-3: Priority 2 items (~{hours}h) - maintain code",
    PRIORITY_P3: "Week 4+: Priority 3 items (~{hours}h) - improve clarity",
}
