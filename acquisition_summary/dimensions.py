#!/usr/bin/env python
# -*- coding: utf-8 -*-

from typing import Dict

###############################################################################


class DimensionNames:
    """Dimension letters used by image readers."""

    Time = "T"
    Channel = "C"
    SpatialZ = "Z"


class AxisNames:
    """Axis names used as keys of the intended acquisition dimensions."""

    Time = "time"
    Channel = "channel"
    Z = "z"
    Position = "position"


# Reader dimensions that map onto an acquisition axis
READER_DIMENSION_TO_AXIS: Dict[str, str] = {
    DimensionNames.Time: AxisNames.Time,
    DimensionNames.Channel: AxisNames.Channel,
    DimensionNames.SpatialZ: AxisNames.Z,
}
