"""Choice of the flag picture and tooltip shown next to a host."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sniffwatch.country import Country
from sniffwatch.flag_assets import Flag

MULTICAST_TOOLTIP = "Multicast"
BROADCAST_TOOLTIP = "Broadcast"
LOCAL_TOOLTIP = "Local network"
UNKNOWN_TOOLTIP = "Unknown location"
ADAPTER_TOOLTIP = "Your network adapter"

# Territories that are shown with the flag of another country.
_SHARED_FLAGS: dict[Country, Flag] = {
    Country.HM: Flag.AU,
    Country.BL: Flag.FR,
    Country.GF: Flag.FR,
    Country.GP: Flag.FR,
    Country.MF: Flag.FR,
    Country.MQ: Flag.FR,
    Country.PM: Flag.FR,
    Country.RE: Flag.FR,
    Country.WF: Flag.FR,
    Country.YT: Flag.FR,
    Country.BQ: Flag.NL,
    Country.SJ: Flag.NO,
    Country.UM: Flag.US,
}


class TrafficType(Enum):
    """How a packet is addressed."""

    UNICAST = "unicast"
    MULTICAST = "multicast"
    BROADCAST = "broadcast"


@dataclass(frozen=True)
class FlagChoice:
    """A flag picture together with the tooltip displayed over it."""

    flag: Flag
    tooltip: str


def _special_flag(traffic_type: TrafficType) -> FlagChoice:
    if traffic_type is TrafficType.MULTICAST:
        return FlagChoice(Flag.MULTICAST, MULTICAST_TOOLTIP)
    if traffic_type is TrafficType.BROADCAST:
        return FlagChoice(Flag.BROADCAST, BROADCAST_TOOLTIP)
    return FlagChoice(Flag.UNKNOWN, UNKNOWN_TOOLTIP)


def flag_for_country(
    country: Country, is_local: bool, traffic_type: TrafficType
) -> FlagChoice:
    """Return the flag and tooltip for a country.

    Known countries show their own flag (or the flag of the country they
    belong to) with their code as tooltip.  For an unknown country the
    picture depends on whether the address is local and on the traffic type.
    """
    if country is Country.ZZ:
        if is_local:
            return FlagChoice(Flag.HOME, LOCAL_TOOLTIP)
        return _special_flag(traffic_type)
    flag = _SHARED_FLAGS.get(country) or Flag[country.name]
    return FlagChoice(flag, str(country))


def computer_flag(is_my_address: bool, traffic_type: TrafficType) -> FlagChoice:
    """Return the picture and tooltip for an address of the local machine side."""
    if is_my_address:
        return FlagChoice(Flag.COMPUTER, ADAPTER_TOOLTIP)
    return _special_flag(traffic_type)


def flag_height(width: float) -> float:
    """Return the height of a flag drawn at ``width`` (flags are 4:3)."""
    return width * 0.75