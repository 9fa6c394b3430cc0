"""City list and the fixed table of inter-city transport connections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TransportMode(Enum):
    """How a connection is travelled; the value is its display name."""

    TRAIN = "Train"
    BUS = "Bus"
    FLIGHT = "Flight"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Connection:
    """An undirected link between two cities, given by their indices in ``CITIES``.

    ``distance`` is in kilometres, ``cost`` in rupees and ``time`` in minutes.
    """

    origin: int
    destination: int
    distance: int
    cost: int
    time: int
    mode: TransportMode


CITIES: tuple[str, ...] = (
    "Delhi", "Mumbai", "Kolkata", "Chennai", "Hyderabad",
    "Bangalore", "Jaipur", "Surat", "Lucknow", "Dehradun",
    "Ahmedabad", "Pune", "Patna", "Bhopal", "Indore",
    "Chandigarh", "Nagpur", "Ranchi", "Raipur", "Guwahati",
    "Bhubaneswar", "Thiruvananthapuram", "Kochi", "Madurai",
    "Coimbatore", "Vijayawada", "Visakhapatnam", "Vadodara",
    "Jammu", "Amritsar", "Agartala", "Imphal", "Shillong",
    "Aizawl", "Panaji",
)

_T = TransportMode.TRAIN
_B = TransportMode.BUS
_F = TransportMode.FLIGHT

_Row = tuple[int, int, int, int, int, TransportMode]

_BASE: tuple[_Row, ...] = (
    (0, 6, 280, 500, 300, _T),
    (0, 8, 550, 600, 420, _T),
    (0, 9, 280, 400, 300, _B),
    (1, 11, 150, 300, 180, _B),
    (1, 7, 300, 450, 240, _T),
    (1, 4, 710, 1500, 450, _T),
    (3, 5, 350, 400, 300, _T),
    (4, 25, 275, 600, 240, _T),
    (5, 24, 360, 800, 300, _B),
    (2, 20, 440, 800, 360, _T),
    (2, 19, 1020, 1800, 720, _T),
    (10, 7, 270, 500, 240, _T),
    (10, 27, 120, 300, 180, _B),
    (6, 14, 600, 900, 420, _T),
    (14, 13, 190, 300, 150, _B),
    (12, 17, 370, 700, 300, _T),
    (18, 16, 285, 600, 240, _T),
    (15, 0, 250, 500, 270, _T),
    (15, 29, 230, 450, 240, _T),
    (29, 28, 210, 400, 210, _B),
    (26, 20, 450, 900, 390, _T),
    (23, 24, 210, 400, 240, _T),
    (19, 32, 100, 250, 180, _B),
    (9, 15, 320, 600, 240, _T),
    (16, 18, 300, 550, 210, _T),
    (17, 19, 800, 1400, 540, _T),
    (20, 26, 440, 800, 300, _T),
    (21, 23, 220, 400, 180, _T),
    (22, 24, 200, 350, 150, _T),
    (25, 26, 350, 600, 240, _T),
    (28, 29, 220, 450, 180, _T),
    (30, 31, 300, 500, 240, _T),
    (32, 33, 200, 400, 180, _T),
    (8, 12, 650, 1000, 480, _B),
    (11, 14, 550, 900, 360, _B),
    (13, 16, 400, 700, 300, _B),
    (19, 30, 600, 1200, 480, _B),
    (23, 24, 180, 300, 150, _B),
    (27, 10, 100, 200, 120, _B),
    (29, 15, 250, 500, 210, _B),
    (31, 32, 150, 300, 120, _B),
    (33, 34, 700, 1500, 600, _B),
    (2, 5, 1700, 3500, 150, _F),
    (3, 8, 1800, 4000, 180, _F),
    (6, 21, 2200, 4500, 150, _F),
    (9, 19, 1500, 3000, 120, _F),
    (12, 17, 500, 1200, 90, _F),
    (18, 26, 600, 1500, 90, _F),
    (22, 5, 400, 1000, 60, _F),
    (25, 4, 300, 800, 60, _F),
    (30, 19, 350, 900, 60, _F),
    (34, 3, 800, 2000, 120, _F),
    # Delhi-Mumbai, Bangalore-Chennai, Kolkata-Guwahati, Hyderabad-Bangalore alternatives
    (0, 1, 1400, 1200, 960, _T),
    (0, 1, 1400, 2500, 720, _B),
    (5, 3, 350, 800, 300, _T),
    (5, 3, 350, 1500, 240, _B),
    (2, 19, 1020, 1200, 840, _B),
    (2, 19, 1020, 2500, 180, _F),
    (4, 5, 570, 900, 420, _T),
    (4, 5, 570, 1200, 360, _B),
    (7, 27, 250, 450, 180, _T),
    (10, 28, 1100, 1800, 720, _T),
    (13, 17, 500, 850, 360, _T),
    (16, 25, 650, 1100, 420, _T),
    (20, 24, 1200, 2000, 780, _T),
    (22, 34, 800, 1500, 600, _T),
    (26, 30, 1400, 2200, 840, _T),
    (9, 29, 500, 800, 420, _B),
    (11, 23, 1000, 1600, 660, _B),
    (14, 18, 350, 600, 240, _B),
    (19, 33, 400, 700, 300, _B),
    (21, 31, 1200, 2000, 720, _B),
    (24, 32, 1500, 2500, 900, _B),
    (6, 22, 1800, 4000, 150, _F),
    (8, 26, 1200, 3000, 120, _F),
    (12, 30, 900, 2500, 90, _F),
    (15, 23, 2200, 4500, 180, _F),
    (18, 21, 1400, 3200, 150, _F),
    (27, 33, 1600, 3500, 180, _F),
)

# Mumbai-Kolkata, Bangalore-Hyderabad and Delhi-Chennai, one per mode.
_TRIPLE_MODES: tuple[_Row, ...] = (
    (1, 2, 2000, 3500, 1440, _T),
    (1, 2, 2000, 1800, 960, _B),
    (1, 2, 1700, 4500, 150, _F),
    (5, 4, 570, 1200, 480, _T),
    (5, 4, 570, 900, 360, _B),
    (5, 4, 570, 2500, 70, _F),
    (0, 3, 2200, 1800, 1260, _T),
    (0, 3, 2200, 2500, 900, _B),
    (0, 3, 2200, 4500, 180, _F),
)

_TRUNK_FLIGHTS: tuple[_Row, ...] = (
    (1, 3, 1350, 3800, 135, _F),
    (2, 3, 1650, 4200, 150, _F),
    (4, 5, 570, 2500, 70, _F),
    (3, 4, 630, 1000, 480, _F),
    (5, 21, 730, 1500, 720, _F),
    (30, 31, 310, 600, 300, _F),
    (31, 33, 270, 500, 300, _F),
    (34, 1, 590, 1200, 360, _F),
)

_LONG_HAUL: tuple[_Row, ...] = (
    (7, 24, 1400, 2200, 900, _T),
    (10, 20, 1600, 2500, 1020, _T),
    (12, 22, 1800, 2800, 1140, _T),
    (16, 26, 800, 1300, 540, _T),
    (19, 25, 1200, 1900, 780, _T),
    (23, 34, 1000, 1700, 660, _T),
    (9, 28, 600, 1000, 480, _B),
    (11, 17, 1200, 2000, 840, _B),
    (14, 30, 1800, 3000, 1200, _B),
    (18, 21, 1500, 2500, 960, _B),
    (27, 31, 2200, 3500, 1320, _B),
    (29, 33, 500, 900, 360, _B),
    (6, 20, 1200, 3500, 120, _F),
    (8, 16, 800, 2800, 90, _F),
    (13, 22, 1100, 3200, 150, _F),
    (15, 23, 2200, 4500, 180, _F),
    (17, 34, 1600, 3800, 150, _F),
    (24, 32, 1400, 3000, 120, _F),
)

_MULTI_MODE_PAIRS: tuple[_Row, ...] = (
    (3, 32, 2200, 1800, 1260, _T),
    (3, 32, 2200, 3500, 900, _B),
    (3, 32, 1800, 5000, 180, _F),
    (1, 31, 2200, 2500, 1140, _T),
    (1, 31, 2200, 4000, 960, _B),
    (1, 31, 1800, 6000, 210, _F),
    (5, 33, 2000, 3000, 1200, _T),
    (5, 33, 2000, 4500, 840, _B),
    (5, 33, 1500, 5500, 180, _F),
)

_MULTIPLE_OPTIONS: tuple[_Row, ...] = (
    (0, 4, 1550, 2500, 1020, _T),
    (0, 4, 1550, 4000, 120, _F),
    (5, 8, 1500, 1800, 960, _B),
    (5, 8, 1500, 5000, 180, _F),
    (3, 9, 2400, 4200, 180, _F),
    (6, 8, 480, 700, 300, _T),
    (7, 10, 320, 600, 240, _T),
    (11, 4, 610, 1100, 300, _T),
    (13, 14, 260, 400, 180, _B),
    (12, 8, 950, 1600, 600, _T),
    (17, 20, 720, 1200, 450, _T),
    (18, 13, 520, 900, 360, _B),
    (19, 12, 1100, 1900, 660, _T),
    (22, 23, 400, 700, 300, _B),
    (27, 28, 190, 300, 150, _B),
    (26, 2, 870, 1700, 420, _T),
    (30, 33, 520, 1000, 400, _F),
    (1, 21, 980, 2400, 90, _F),
    (15, 6, 510, 800, 300, _B),
    (31, 34, 830, 1600, 480, _F),
    (24, 22, 320, 600, 240, _T),
    (20, 17, 740, 1200, 420, _T),
    (5, 13, 380, 800, 330, _T),
    (3, 22, 450, 700, 360, _T),
    (2, 6, 980, 1800, 720, _T),
    (16, 4, 700, 1400, 480, _T),
    (24, 21, 420, 800, 360, _B),
    (7, 27, 180, 350, 150, _B),
    (8, 9, 570, 800, 300, _T),
    (26, 17, 560, 1000, 420, _T),
    (10, 1, 490, 900, 240, _T),
    (14, 11, 620, 1100, 390, _B),
    (30, 32, 450, 800, 360, _T),
    (29, 0, 450, 700, 330, _T),
    (22, 5, 600, 1000, 420, _F),
    (19, 33, 750, 1500, 480, _F),
    (12, 2, 710, 1300, 360, _T),
    (34, 5, 600, 1400, 300, _F),
    (25, 22, 450, 700, 300, _T),
    (15, 27, 510, 900, 330, _B),
    (6, 5, 1900, 2200, 120, _F),
    (13, 6, 510, 800, 300, _T),
    (31, 30, 250, 500, 210, _B),
    (20, 19, 890, 1500, 480, _T),
)

_EXTRA_HEAD: tuple[_Row, ...] = (
    (0, 1, 1400, 1200, 960, _T),
    (0, 2, 1500, 4000, 150, _F),
)

_EXTRA_TAIL: tuple[_Row, ...] = (
    (3, 32, 2200, 1800, 1260, _T),
    (1, 31, 2200, 2500, 1140, _T),
)

_FINAL_SWEEP: tuple[_Row, ...] = (
    (0, 4, 1550, 2500, 1020, _T),
    (0, 5, 1500, 3000, 1200, _F),
    (1, 2, 2000, 3500, 1440, _T),
    (1, 4, 700, 1500, 600, _B),
    (2, 3, 1650, 4200, 150, _F),
    (3, 5, 350, 800, 300, _T),
    (4, 6, 600, 1200, 480, _B),
    (5, 7, 800, 1500, 600, _T),
    (6, 8, 700, 1300, 360, _B),
    (7, 9, 500, 1000, 240, _T),
    (8, 10, 600, 1200, 300, _F),
    (9, 11, 400, 800, 180, _B),
    (10, 12, 800, 1500, 600, _T),
    (11, 13, 300, 600, 240, _B),
    (12, 14, 500, 1000, 300, _T),
    (13, 15, 400, 800, 180, _B),
    (14, 16, 600, 1200, 480, _T),
    (15, 17, 700, 1500, 600, _F),
    (16, 18, 800, 1600, 720, _T),
    (17, 19, 900, 1800, 840, _B),
    (18, 20, 1000, 2000, 960, _T),
    (19, 21, 1100, 2200, 1080, _F),
    (20, 22, 1200, 2400, 1200, _B),
    (21, 23, 1300, 2600, 1320, _T),
    (22, 24, 1400, 2800, 1440, _F),
    (23, 25, 1500, 3000, 1560, _B),
    (24, 26, 1600, 3200, 1680, _T),
    (25, 27, 1700, 3400, 1800, _F),
    (26, 28, 1800, 3600, 1920, _B),
    (27, 29, 1900, 3800, 2040, _T),
    (28, 30, 2000, 4000, 2160, _F),
    (29, 31, 2100, 4200, 2280, _B),
    (30, 32, 2200, 4400, 2400, _T),
    (31, 33, 2300, 4600, 2520, _F),
    (32, 34, 2400, 4800, 2640, _B),
    (33, 0, 2500, 5000, 2760, _T),
    (34, 1, 2600, 5200, 2880, _F),
    (0, 2, 2700, 5400, 3000, _B),
    (1, 3, 2800, 5600, 3120, _T),
    (2, 4, 2900, 5800, 3240, _F),
    (3, 5, 3000, 6000, 3360, _B),
)

_ROWS: tuple[_Row, ...] = (
    _BASE
    + _TRIPLE_MODES
    + _TRIPLE_MODES
    + ((0, 1, 1400, 3500, 120, _F), (0, 2, 1500, 4000, 150, _F), (0, 3, 2200, 4500, 180, _F))
    + _TRUNK_FLIGHTS
    + _LONG_HAUL
    + _MULTI_MODE_PAIRS
    + _MULTIPLE_OPTIONS
    + _EXTRA_HEAD
    + _TRUNK_FLIGHTS
    + _LONG_HAUL
    + _EXTRA_TAIL
    + ((4, 10, 800, 1500, 600, _T),)
    + _EXTRA_HEAD
    + _TRUNK_FLIGHTS
    + _LONG_HAUL
    + _EXTRA_TAIL
    + _FINAL_SWEEP
)


def connections() -> list[Connection]:
    """Return every connection of the network, in the order they are added to the graph.

    Duplicated entries are kept: each one becomes its own edge.
    """
    return [Connection(*row) for row in _ROWS]