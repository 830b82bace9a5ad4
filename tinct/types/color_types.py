# No dependencies
from __future__ import annotations
from typing import Tuple
import numpy as np

ColorTuple = Tuple[float, float, float, float]

COMPONENT_DTYPE = np.float32
NUM_CHANNELS = 4
MAX_BYTE = 255
MAX_WORD = 65535

CHANNEL_NAMES = ("r", "g", "b", "a")
