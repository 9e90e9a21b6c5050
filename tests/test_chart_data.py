from collections import deque

import pytest

from sniffwatch.chart_data import (
    ChartType,
    TrafficChart,
    TrafficCounters,
    get_max,
    get_min,
    update_charts_data,
)


def _sent():
    return deque([(0, -500)] + [(i, -1000) for i in range(1, 29)])


def _received():
    return deque([(0, 1000)] + [(i, 21000) for i in range(1, 29)])


def test_chart_data_updates():
    sent = _sent()
    received = _received()
    tot_sent = 1000 * 28 + 500
    tot_received = 21000 * 28 + 1000
    chart = TrafficChart(
        ticks=29,
        sent_bytes=deque(sent),
        received_bytes=deque(received),
        sent_packets=deque(sent),
        received_packets=deque(received),
        min_sent_bytes=-1000,
        max_received_bytes=21000,
        min_sent_packets=-1000,
        max_received_packets=21000,
        chart_type=ChartType.PACKETS,
    )
    counters = TrafficCounters(
        tot_sent_bytes=tot_sent + 1111,
        tot_received_bytes=tot_received + 2222,
        tot_sent_packets=tot_sent + 3333,
        tot_received_packets=tot_received + 4444,
        tot_sent_bytes_prev=tot_sent,
        tot_received_bytes_prev=tot_received,
        tot_sent_packets_prev=tot_sent,
        tot_received_packets_prev=tot_received,
    )

    assert get_min(sent) == -1000
    assert get_max(received) == 21000

    update_charts_data(counters, chart)

    assert get_min(chart.sent_packets) == -3333
    assert get_max(chart.received_bytes) == 21000

    assert counters.tot_sent_bytes_prev == tot_sent + 1111
    assert counters.tot_received_bytes_prev == tot_received + 2222
    assert counters.tot_sent_packets_prev == tot_sent + 3333
    assert counters.tot_received_packets_prev == tot_received + 4444

    sent_bytes = deque(sent)
    sent_bytes.append((29, -1111))
    received_packets = deque(received)
    received_packets.append((29, 4444))
    sent_packets = deque(sent)
    sent_packets.append((29, -3333))
    received_bytes = deque(received)
    received_bytes.append((29, 2222))

    assert chart.ticks == 30
    assert chart.min_sent_bytes == -1111
    assert chart.min_sent_packets == -3333
    assert chart.max_received_bytes == 21000
    assert chart.max_received_packets == 21000
    assert chart.sent_bytes == sent_bytes
    assert chart.received_packets == received_packets
    assert chart.sent_packets == sent_packets
    assert chart.received_bytes == received_bytes

    counters.tot_sent_bytes += 99
    counters.tot_received_packets += 990
    counters.tot_received_bytes += 2
    update_charts_data(counters, chart)
    counters.tot_sent_bytes += 77
    counters.tot_received_packets += 1
    counters.tot_sent_packets += 220
    update_charts_data(counters, chart)

    for series in (sent_bytes, received_packets, sent_packets, received_bytes):
        series.popleft()
        series.popleft()
    sent_bytes.extend([(30, -99), (31, -77)])
    received_packets.extend([(30, 990), (31, 1)])
    sent_packets.extend([(30, 0), (31, -220)])
    received_bytes.extend([(30, 2), (31, 0)])

    assert chart.ticks == 32
    assert chart.min_sent_bytes == -1111
    assert chart.min_sent_packets == -3333
    assert chart.max_received_bytes == 21000
    assert chart.max_received_packets == 21000
    assert chart.sent_bytes == sent_bytes
    assert chart.received_packets == received_packets
    assert chart.sent_packets == sent_packets
    assert chart.received_bytes == received_bytes


def test_get_min_and_max_of_empty_are_zero():
    assert get_min([]) == 0
    assert get_max([]) == 0


def test_first_update_on_new_chart():
    chart = TrafficChart()
    counters = TrafficCounters(
        tot_sent_bytes=10,
        tot_received_bytes=20,
        tot_sent_packets=1,
        tot_received_packets=2,
    )
    update_charts_data(counters, chart)
    assert chart.ticks == 1
    assert list(chart.sent_bytes) == [(0, -10)]
    assert list(chart.received_bytes) == [(0, 20)]
    assert list(chart.sent_packets) == [(0, -1)]
    assert list(chart.received_packets) == [(0, 2)]
    assert chart.min_sent_bytes == -10
    assert chart.max_received_packets == 2


def test_window_keeps_last_thirty_samples():
    chart = TrafficChart()
    counters = TrafficCounters()
    for _ in range(45):
        counters.tot_received_bytes += 3
        update_charts_data(counters, chart)
    assert chart.ticks == 45
    assert len(chart.received_bytes) == 30
    assert chart.received_bytes[0] == (15, 3)
    assert chart.received_bytes[-1] == (44, 3)
    assert len(chart.sent_packets) == 30


def test_decreasing_counter_raises():
    chart = TrafficChart()
    counters = TrafficCounters(tot_sent_bytes=5, tot_sent_bytes_prev=10)
    with pytest.raises(ValueError):
        update_charts_data(counters, chart)


def test_delta_too_large_raises():
    chart = TrafficChart()
    counters = TrafficCounters(tot_received_packets=2**63)
    with pytest.raises(ValueError):
        update_charts_data(counters, chart)


def test_change_kind():
    chart = TrafficChart()
    assert chart.chart_type is ChartType.BYTES
    chart.change_kind(ChartType.PACKETS)
    assert chart.chart_type is ChartType.PACKETS


def test_chart_type_order():
    assert ChartType.all() == (ChartType.BYTES, ChartType.PACKETS)