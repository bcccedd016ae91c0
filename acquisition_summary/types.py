#!/usr/bin/env python
# -*- coding: utf-8 -*-

from pathlib import Path
from typing import Any, Mapping, Union

###############################################################################

# IO Types
PathLike = Union[str, Path]


# Collaborator Types
# These are owned by the acquisition engine and only carried by the summary
# metadata, never inspected.

# Planned extent along each named acquisition axis, e.g. {"time": 10, "z": 5}
Coords = Mapping[str, int]

# A multi-axis physical location visited during acquisition
StagePosition = Any

# Arbitrary user annotations, keys unique
PropertyMap = Mapping[str, Any]
