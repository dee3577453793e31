"""
Longitudinal Trend Analysis

Follows each marker across a patient's dated snapshots and classifies the
movement as improving / stable / worsening.  Results that do not carry a
number ("Negative", "See note") are dropped rather than read as zero.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from labinsight.utils import get_logger, TrendAnalysisError
from .base import LabSnapshot, TrendAnalysis, TrendDirection, TrendStatus
from .markers import MARKER_ALIASES, parse_number

logger = get_logger(__name__)

# Relative change (percent) below which a marker counts as stable.
STABLE_CHANGE_PCT = 5.0

# Markers where a rising value is clinically adverse, and vice versa.
HIGHER_IS_WORSE = (
    "glucose", "hba1c", "total_cholesterol", "ldl", "triglycerides",
    "creatinine", "alt", "ast", "alkaline_phosphatase", "crp", "esr",
    "wbc", "troponin",
)
LOWER_IS_WORSE = ("hdl", "gfr")

# Derived lipid values that mention HDL but rise with risk
# ("Non-HDL Cholesterol", "LDL/HDL Ratio", "Total/HDL Ratio").
HIGHER_IS_WORSE_NAMES = ("non-hdl", "non hdl", "nonhdl", "ratio")


def _parse_date(raw: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(str(raw).strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise TrendAnalysisError(
            f"Snapshot date is not ISO-8601: {raw!r}",
            details={"date": str(raw)},
        ) from exc
    # Mixed naive and offset-aware dates must stay comparable.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _mentions(name: str, alias: str) -> bool:
    """Whole-word match, so "ast" does not fire on "Fasting Insulin"."""
    return re.search(rf"(?<![a-z0-9]){re.escape(alias)}(?![a-z0-9])", name) is not None


def _polarity(test_name: str) -> Optional[int]:
    """+1 when higher is worse, -1 when lower is worse, None when unknown."""
    name = test_name.strip().lower()
    if any(_mentions(name, word) for word in HIGHER_IS_WORSE_NAMES):
        return 1
    for marker in LOWER_IS_WORSE + HIGHER_IS_WORSE:
        for alias in MARKER_ALIASES[marker]:
            if _mentions(name, alias):
                return -1 if marker in LOWER_IS_WORSE else 1
    return None


def _direction(values: np.ndarray, stable: bool) -> TrendDirection:
    steps = np.diff(values)
    base = np.abs(values[:-1])
    # Any move away from zero is an unbounded relative step.
    with np.errstate(divide="ignore", invalid="ignore"):
        step_pct = np.where(
            base > 0,
            np.abs(steps) / np.where(base > 0, base, 1) * 100,
            np.where(steps == 0, 0.0, np.inf),
        )

    if stable and np.all(step_pct < STABLE_CHANGE_PCT):
        return TrendDirection.STABLE
    if np.all(steps >= 0):
        return TrendDirection.INCREASING
    if np.all(steps <= 0):
        return TrendDirection.DECREASING
    return TrendDirection.FLUCTUATING


def _time_span(dates: Sequence[datetime]) -> str:
    if not dates:
        return "0 days"
    days = abs((max(dates) - min(dates)).days)
    return f"{days} day" if days == 1 else f"{days} days"


def _analyse_marker(name: str, points: List[Tuple[datetime, float]]) -> TrendAnalysis:
    points = sorted(points, key=lambda p: p[0])
    dates = [p[0] for p in points]

    if len(points) < 2:
        return TrendAnalysis(
            test_name=name,
            trend=TrendStatus.INSUFFICIENT_DATA,
            direction=TrendDirection.STABLE,
            change_percent=0.0,
            time_span=_time_span(dates),
            interpretation=f"At least two numeric results are needed to assess {name}",
        )

    values = np.array([p[1] for p in points], dtype=float)
    first, last = float(values[0]), float(values[-1])
    delta = last - first

    # A baseline of zero has no relative change; report 0.0 and judge by sign.
    if first == 0:
        change_pct = 0.0
        stable = delta == 0
        change_text = "no change" if stable else f"from 0 to {last:g}"
    else:
        change_pct = round(delta / abs(first) * 100, 1)
        stable = abs(change_pct) < STABLE_CHANGE_PCT
        change_text = f"{change_pct:+.1f}%"

    direction = _direction(values, stable)

    if stable:
        trend = TrendStatus.STABLE
        interpretation = f"{name} has remained stable ({change_text})"
    else:
        polarity = _polarity(name)
        if polarity is None:
            trend = TrendStatus.STABLE
            interpretation = (
                f"{name} changed ({change_text}); "
                "its clinical direction could not be classified"
            )
        elif (delta > 0) == (polarity > 0):
            trend = TrendStatus.WORSENING
            interpretation = f"{name} is moving away from the healthy range ({change_text})"
        else:
            trend = TrendStatus.IMPROVING
            interpretation = f"{name} is moving toward the healthy range ({change_text})"

    return TrendAnalysis(
        test_name=name,
        trend=trend,
        direction=direction,
        change_percent=change_pct,
        time_span=_time_span(dates),
        interpretation=interpretation,
    )


def analyze_trends(history: Sequence[LabSnapshot]) -> List[TrendAnalysis]:
    """
    Analyse every marker that appears in `history`.

    Args:
        history: Dated snapshots in any order.

    Returns:
        One TrendAnalysis per distinct test name, in first-seen order.

    Raises:
        TrendAnalysisError: a snapshot date is not ISO-8601.
    """
    display: Dict[str, str] = {}
    series: Dict[str, List[Tuple[datetime, float]]] = {}

    for snapshot in history:
        when = _parse_date(snapshot.date)
        for lab in snapshot.lab_values:
            key = (lab.test_name or "").strip().lower()
            if not key:
                continue
            if key not in display:
                display[key] = lab.test_name.strip()
                series[key] = []
            value = parse_number(lab.result)
            if value is None:
                logger.debug(f"Trend: skipping non-numeric result for {lab.test_name!r}")
                continue
            series[key].append((when, value))

    return [_analyse_marker(display[key], series[key]) for key in display]
