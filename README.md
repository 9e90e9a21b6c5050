# sniffwatch

Building blocks for a network traffic monitor: country codes, the choice of flag
pictures shown next to hosts, and the per-second bookkeeping behind a live
traffic chart.

## Modules

- `sniffwatch.country` — `Country` is an enumeration of ISO 3166-1 alpha-2 codes.
  `Country.from_code("IT")` gives `Country.IT`; any code it does not know gives
  `Country.ZZ`, the unknown country, whose `str()` is the empty string. Every
  other member's `str()` is its code.
- `sniffwatch.flag_assets` — `Flag` names the SVG flag pictures, plus the special
  pictures `HOME`, `MULTICAST`, `BROADCAST`, `UNKNOWN` and `COMPUTER`.
  `Flag.filename()` gives the picture's file name (for example `Flag.US.filename()`
  is `"usa.svg"`). `FLAGS_DIRECTORY`, `FLAGS_WIDTH_SMALL` (20.0) and
  `FLAGS_WIDTH_BIG` (37.5) are the directory and widths the pictures are meant for.
- `sniffwatch.flags` — `flag_for_country(country, is_local, traffic_type)` returns a
  `FlagChoice` holding a `Flag` and a tooltip. A known country gets its own flag
  and its code as tooltip; territories such as `Country.RE` or `Country.UM` share
  the flag of their sovereign state. For `Country.ZZ` the choice is the home
  picture if the address is local, otherwise the multicast, broadcast or unknown
  picture depending on the `TrafficType`. `computer_flag(is_my_address, traffic_type)`
  chooses the picture for the monitored side of a connection, and
  `flag_height(width)` gives the 4:3 height of a picture. Tooltips are English text.
- `sniffwatch.chart_data` — `TrafficChart` keeps, for sent and received bytes and
  packets, the values of the last 30 seconds together with the bounds of the y
  axis. `update_charts_data(counters, chart)` is to be called once a second with a
  `TrafficCounters` holding running totals: it appends the amount since the last
  call to each series (sent values as negative numbers, received as positive),
  drops samples older than 30 seconds, recomputes the bounds and moves the
  counters' "previous" totals forward. It raises `ValueError` if a total went
  down or a delta does not fit in 64 bits. `get_min` and `get_max` return the
  lowest and highest y value of a series, clamped at 0. `chart.change_kind(ChartType.PACKETS)`
  switches the chart between packets and bytes.

## Installation

```
pip install .
```

## Usage

```python
from sniffwatch.chart_data import TrafficChart, TrafficCounters, update_charts_data

chart = TrafficChart()
counters = TrafficCounters()
counters.tot_sent_bytes += 1500
counters.tot_received_bytes += 4000
update_charts_data(counters, chart)
print(chart.sent_bytes)          # deque([(0, -1500)])
print(chart.max_received_bytes)  # 4000
```

```python
from sniffwatch.country import Country
from sniffwatch.flags import TrafficType, flag_for_country

choice = flag_for_country(Country.from_code("GP"), False, TrafficType.UNICAST)
print(choice.flag.filename(), choice.tooltip)  # fr.svg GP
```

## Command line

```
sniffwatch --help
sniffwatch --version
```

Only the first option is looked at. `--help` (`-h`) and `--version` (`-v`) print
their text and exit with status 0; any other option is reported on standard
error and the command exits with status 1. Run without options, it prints
nothing and exits with status 0.

## What this package does not do

It does not capture packets, look addresses up in a geolocation database, draw
charts or flags, or provide a graphical interface. It supplies the data and
choices such a monitor needs; counting traffic and displaying it are left to
the program that uses it.

## Tests

```
pip install .[test]
pytest
```