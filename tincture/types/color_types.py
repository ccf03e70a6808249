from __future__ import annotations
from typing import Tuple, Union
import numpy as np

Scalar = int | float
ChannelValue = Union[np.generic, Scalar]
ChannelTriple = Tuple[np.generic, np.generic, np.generic]
