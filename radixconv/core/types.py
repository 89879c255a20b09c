"""radixconv.core.types

Значение числа всегда хранится как обычный Python `int` в диапазоне uint64;
numpy-тип используется только внутри декодера, где нужна арифметика
по модулю 2^64.
"""

from __future__ import annotations

import numpy as np

UINT64_MAX: int = 2**64 - 1

UInt64 = np.uint64
