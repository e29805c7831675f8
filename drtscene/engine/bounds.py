# 파일: engine/bounds.py
"""
데이터셋 최대 시각(ceiling) 계산
- trip/passenger 마지막 timestamp 중 최대값
- 최소 60분, 비정상(NaN/inf/0 이하)이면 60분
"""

from __future__ import annotations
from typing import Any, Iterable, Optional
import math
import numpy as np

from ..utils.utils import last_num

def _last_times(records: Iterable[Any]):
    for r in records or []:
        if not isinstance(r, dict):
            continue
        v = last_num(r.get("timestamp"))
        if v is not None:
            yield v

def max_timestamp(records: Optional[Iterable[Any]]) -> float:
    vals = np.fromiter(_last_times(records), dtype=float)
    if vals.size == 0:
        return 0.0
    return max(0.0, float(np.nanmax(vals)))

def compute_ceiling(trips: Optional[Iterable[Any]], passengers: Optional[Iterable[Any]],
                    min_ceiling: float = 60.0) -> float:
    m = max(float(min_ceiling), max_timestamp(trips), max_timestamp(passengers))
    if not math.isfinite(m) or m <= 0:
        return 60.0
    return m
