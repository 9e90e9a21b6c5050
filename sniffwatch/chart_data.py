"""Per-second traffic samples shown in the live traffic chart."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

WINDOW_SECONDS = 30
"""Number of most recent samples each series keeps."""

_I64_MAX = 2**63 - 1

Point = tuple[int, int]


class ChartType(Enum):
    """Which quantity the chart displays."""

    PACKETS = "packets"
    BYTES = "bytes"

    @classmethod
    def all(cls) -> tuple[ChartType, ...]:
        """Return the chart kinds in the order they are offered to the user."""
        return (cls.BYTES, cls.PACKETS)


@dataclass
class TrafficCounters:
    """Running totals of filtered traffic and their values at the last sample."""

    tot_sent_bytes: int = 0
    tot_received_bytes: int = 0
    tot_sent_packets: int = 0
    tot_received_packets: int = 0
    tot_sent_bytes_prev: int = 0
    tot_received_bytes_prev: int = 0
    tot_sent_packets_prev: int = 0
    tot_received_packets_prev: int = 0


@dataclass
class TrafficChart:
    """Sliding windows of per-second traffic, one series per direction and unit.

    Sent values are stored as negative numbers so that outgoing traffic is
    drawn below the axis and incoming traffic above it.
    """

    ticks: int = 0
    sent_bytes: deque[Point] = field(default_factory=deque)
    received_bytes: deque[Point] = field(default_factory=deque)
    sent_packets: deque[Point] = field(default_factory=deque)
    received_packets: deque[Point] = field(default_factory=deque)
    min_sent_bytes: int = 0
    max_received_bytes: int = 0
    min_sent_packets: int = 0
    max_received_packets: int = 0
    chart_type: ChartType = ChartType.BYTES

    def change_kind(self, kind: ChartType) -> None:
        """Switch the chart between packets and bytes."""
        self.chart_type = kind


def _delta(current: int, previous: int) -> int:
    delta = current - previous
    if delta < 0:
        raise ValueError(
            f"traffic counter decreased from {previous} to {current}"
        )
    if delta > _I64_MAX:
        raise ValueError(f"traffic delta {delta} does not fit in 64 bits")
    return delta


def _push(points: deque[Point], point: Point) -> None:
    while len(points) >= WINDOW_SECONDS:
        points.popleft()
    points.append(point)


def update_charts_data(counters: TrafficCounters, chart: TrafficChart) -> None:
    """Record one second of traffic in ``chart`` and advance the counters.

    The amount since the previous sample is appended to every series, each
    series keeps only its last 30 samples, the extremes are recomputed and the
    "previous" counters are moved forward to the current totals.

    Raises ValueError if a total went down or a delta exceeds 64 bits.
    """
    second = chart.ticks
    chart.ticks += 1

    sent_bytes = _delta(counters.tot_sent_bytes, counters.tot_sent_bytes_prev)
    received_bytes = _delta(
        counters.tot_received_bytes, counters.tot_received_bytes_prev
    )
    sent_packets = _delta(counters.tot_sent_packets, counters.tot_sent_packets_prev)
    received_packets = _delta(
        counters.tot_received_packets, counters.tot_received_packets_prev
    )

    _push(chart.sent_bytes, (second, -sent_bytes))
    chart.min_sent_bytes = get_min(chart.sent_bytes)
    counters.tot_sent_bytes_prev = counters.tot_sent_bytes

    _push(chart.received_bytes, (second, received_bytes))
    chart.max_received_bytes = get_max(chart.received_bytes)
    counters.tot_received_bytes_prev = counters.tot_received_bytes

    _push(chart.sent_packets, (second, -sent_packets))
    chart.min_sent_packets = get_min(chart.sent_packets)
    counters.tot_sent_packets_prev = counters.tot_sent_packets

    _push(chart.received_packets, (second, received_packets))
    chart.max_received_packets = get_max(chart.received_packets)
    counters.tot_received_packets_prev = counters.tot_received_packets


def get_min(points: Iterable[Point]) -> int:
    """Return the smallest y value, never above 0."""
    return min((y for _, y in points), default=0) if points else 0 if False else min(
        [0, *(y for _, y in points)]
    )


def get_max(points: Iterable[Point]) -> int:
    """Return the largest y value, never below 0."""
    return max([0, *(y for _, y in points)])