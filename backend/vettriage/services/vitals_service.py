"""
Vital signs feed.

Derives a status badge for raw wearable measurements against reference
ranges, and provides the sample stream used when no live wearable is attached.
"""

import math
from typing import Dict, List, NamedTuple, Optional

from ..models.triage import BadgeStyle, VitalKind, VitalReading


class ReferenceRange(NamedTuple):
    name: str
    unit: str
    low: float
    high: float


# Wearable resting baselines
REFERENCE_RANGES: Dict[VitalKind, ReferenceRange] = {
    VitalKind.HEART_RATE: ReferenceRange("Heart rate", "BPM", 60.0, 87.0),
    VitalKind.RESPIRATION: ReferenceRange("Respiration", "RPM", 10.0, 30.0),
    VitalKind.TEMPERATURE: ReferenceRange("Temperature", "°F", 100.5, 102.0),
}

# Deviation of a reading just outside its range; grows to 1.0 one range-width out
BOUNDARY_DEVIATION = 0.75


def _format_value(value: float, unit: str) -> str:
    if unit == "°F":
        return f"{value:g}{unit}"
    return f"{value:g} {unit}"


def measure(kind: VitalKind, value: float) -> VitalReading:
    """Build a reading for a raw measurement and derive its status."""
    ref = REFERENCE_RANGES[VitalKind(kind)]
    shown = _format_value(value, ref.unit)

    if value > ref.high:
        pct = round((value - ref.high) / ref.high * 100)
        badge = f"+{pct}%" if pct else "Alert"
        status, trend = BadgeStyle.WARNING, "Elevated"
    elif value < ref.low:
        pct = round((ref.low - value) / ref.low * 100)
        badge = f"-{pct}%" if pct else "Alert"
        status, trend = BadgeStyle.WARNING, "Below target"
    else:
        status, badge, trend = BadgeStyle.SUCCESS, "Stable", "Within target"

    return VitalReading(
        name=ref.name,
        details=f"{shown} · {trend}",
        badge=badge,
        status=status,
        kind=VitalKind(kind),
        value=value,
        unit=ref.unit
    )


def deviation_score(reading: VitalReading) -> Optional[float]:
    """Distance of a measured reading from its reference range, in [0, 1].

    Returns None when the reading carries no kind or value to measure.
    """
    if reading.kind is None or reading.value is None:
        return None
    value = float(reading.value)
    if not math.isfinite(value):
        return 1.0

    ref = REFERENCE_RANGES[reading.kind]
    if value > ref.high:
        excess = value - ref.high
    elif value < ref.low:
        excess = ref.low - value
    else:
        return 0.0

    width = ref.high - ref.low
    return BOUNDARY_DEVIATION + (1.0 - BOUNDARY_DEVIATION) * min(1.0, excess / width)


def no_signal(kind: VitalKind) -> VitalReading:
    """Placeholder reading for a sensor that is not reporting."""
    ref = REFERENCE_RANGES[VitalKind(kind)]
    return VitalReading(
        name=ref.name,
        details="No signal from wearable",
        badge="No reading",
        status=BadgeStyle.INFO,
        kind=VitalKind(kind),
        unit=ref.unit
    )


def mock_stream() -> List[VitalReading]:
    """Sample wearable readings: 92 BPM, 26 RPM, 102.1°F."""
    return [
        measure(VitalKind.HEART_RATE, 92.0),
        measure(VitalKind.RESPIRATION, 26.0),
        measure(VitalKind.TEMPERATURE, 102.1),
    ]
