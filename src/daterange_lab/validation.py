"""Sanity checks for the date-range calculus."""

from dataclasses import dataclass
from datetime import tzinfo

from daterange_lab.chrono.zone import (
    add_days,
    add_years,
    end_of_day,
    start_of_day,
    start_of_month,
    to_local,
    weekday_of,
)
from daterange_lab.features.month_grid import build_month_grid
from daterange_lab.humanize.relative_time import relative_time
from daterange_lab.rules.eligibility import eligible
from daterange_lab.rules.predefined import PREDEFINED_LABELS, predefined_ranges


@dataclass
class CheckResult:
    """Result of a validation check.

    Attributes:
        name: Unique identifier for the check.
        status: One of "pass", "fail", "warn", "skip".
        message: Human-readable result message.
        details: Optional dict with additional data.
    """

    name: str
    status: str  # "pass", "fail", "warn", "skip"
    message: str
    details: dict | None = None

    @property
    def passed(self) -> bool:
        """True if status is pass, warn or skip (not a failure)."""
        return self.status in ("pass", "warn", "skip")

    @property
    def is_warning(self) -> bool:
        """True if status is warn or skip."""
        return self.status in ("warn", "skip")


def check_catalog(zone: str | tzinfo, today) -> list[CheckResult]:
    """Check quick-pick labels, order and ordering invariants."""
    results = []
    catalog = predefined_ranges(zone, today)

    labels = tuple(label for label, _ in catalog)
    results.append(CheckResult(
        name="catalog_labels",
        status="pass" if labels == PREDEFINED_LABELS else "fail",
        message=f"Quick picks in order: {', '.join(labels)}",
        details={"labels": list(labels)},
    ))

    inverted = [label for label, r in catalog if r.begins_at > r.ends_at]
    results.append(CheckResult(
        name="catalog_ordering",
        status="pass" if not inverted else "fail",
        message=f"Ranges with begin > end: {len(inverted)} found",
        details={"inverted": inverted},
    ))

    if catalog != predefined_ranges(zone, today):
        results.append(CheckResult(
            name="catalog_determinism",
            status="fail",
            message="Quick picks differ between two identical calls",
        ))
    else:
        results.append(CheckResult(
            name="catalog_determinism",
            status="pass",
            message="Quick picks identical across calls",
        ))

    today_range = catalog[0].range
    expected = (start_of_day(zone, today), end_of_day(zone, today))
    results.append(CheckResult(
        name="catalog_today_bounds",
        status="pass" if (today_range.begins_at, today_range.ends_at) == expected else "fail",
        message=f"Today = {today_range.begins_at} .. {today_range.ends_at}",
    ))

    return results


def check_eligibility(zone: str | tzinfo, today) -> list[CheckResult]:
    """Check weekend exclusion over the current month and the anchor window."""
    results = []

    grid = build_month_grid(zone, today)
    weekend_enabled = grid[(grid["dow"] >= 5) & grid["eligible"]]
    results.append(CheckResult(
        name="eligibility_weekends",
        status="pass" if weekend_enabled.empty else "fail",
        message=f"Weekend days enabled this month: {len(weekend_enabled)} found",
        details={"dates": weekend_enabled["date"].tolist()},
    ))

    # First weekday on or after today, used as anchor.
    anchor = start_of_day(zone, today)
    while weekday_of(zone, anchor).is_weekend:
        anchor = add_days(zone, anchor, 1)
    upper = add_years(zone, anchor, 1)

    anchor_ok = eligible(zone, anchor, anchor)
    upper_excluded = not eligible(zone, upper, anchor)
    results.append(CheckResult(
        name="eligibility_anchor_window",
        status="pass" if anchor_ok and upper_excluded else "fail",
        message=(
            f"Anchor {to_local(zone, anchor).date()} eligible: {anchor_ok}, "
            f"{to_local(zone, upper).date()} excluded: {upper_excluded}"
        ),
    ))

    return results


def check_relative_time(zone: str | tzinfo, today) -> list[CheckResult]:
    """Check relative-time phrases around today."""
    cases = [
        (0, "today"),
        (1, "1 day from now"),
        (-1, "1 day ago"),
        (10, "10 days from now"),
        (-10, "10 days ago"),
    ]

    mismatches = {}
    for days, expected in cases:
        actual = relative_time(zone, today, add_days(zone, today, days))
        if actual != expected:
            mismatches[days] = actual

    return [CheckResult(
        name="relative_symmetry",
        status="pass" if not mismatches else "fail",
        message=f"Relative-time phrases around today: {len(mismatches)} mismatches",
        details={"mismatches": mismatches},
    )]


def check_month_boundary(zone: str | tzinfo, today) -> list[CheckResult]:
    """Check that the month grid covers the whole local month."""
    grid = build_month_grid(zone, today)
    first = to_local(zone, start_of_month(zone, today))
    expected_days = first.days_in_month

    if len(grid) != expected_days:
        status = "fail"
    elif grid["is_today"].sum() != 1:
        status = "warn"
    else:
        status = "pass"

    return [CheckResult(
        name="grid_month_days",
        status=status,
        message=f"Month grid rows: {len(grid)} (expected {expected_days})",
    )]


def run_all_checks(zone: str | tzinfo, today) -> list[CheckResult]:
    """Run all validation checks."""
    results = []
    results.extend(check_catalog(zone, today))
    results.extend(check_eligibility(zone, today))
    results.extend(check_relative_time(zone, today))
    results.extend(check_month_boundary(zone, today))
    return results


def format_results(results: list[CheckResult]) -> str:
    """Format check results for display."""
    lines = []
    lines.append("=" * 60)
    lines.append("DATE RANGE LAB VALIDATION")
    lines.append("=" * 60)

    passed = sum(1 for r in results if r.status == "pass")
    failed = sum(1 for r in results if r.status == "fail")
    warned = sum(1 for r in results if r.status in ("warn", "skip"))

    # Group by category
    categories = {}
    for r in results:
        category = r.name.split("_")[0]
        categories.setdefault(category, []).append(r)

    for category, checks in categories.items():
        lines.append("")
        lines.append(f"[{category.upper()}]")
        for r in checks:
            lines.append(f"  [{r.status.upper()}] {r.message}")

    lines.append("")
    lines.append("=" * 60)
    summary_parts = [f"{passed} passed"]
    if warned > 0:
        summary_parts.append(f"{warned} warned")
    summary_parts.append(f"{failed} failed")
    lines.append(f"SUMMARY: {', '.join(summary_parts)}")
    lines.append("=" * 60)

    return "\n".join(lines)
