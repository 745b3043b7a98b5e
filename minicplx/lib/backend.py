#!/usr/bin/env python
# coding: utf-8
"""Global numerical backend and scalar type definitions.
"""

import numpy as np

FLOAT32 = np.float32
FLOAT64 = np.float64
