"""
파일명: temporal.py
경로/타임스탬프 시각 보간
- locate_segment(): t가 속한 구간 인덱스 (마지막 이후면 마지막 구간으로 고정)
- interpolate(): 두 좌표 선형 보간 (alpha 0~1 클램프)
- position_at(): 위 둘을 합친 현재 위치
"""

from __future__ import annotations
from typing import Optional, Sequence
import numpy as np

from ..utils.utils import is_num, is_coord, count_num

def locate_segment(timestamps: Sequence, t: float) -> Optional[int]:
    """
    timestamps[i] <= t < timestamps[i+1] 인 i 반환.
    - t >= 마지막 timestamp → len-2 (먼저 검사)
    - 못 찾으면(첫 시각 이전 등) 0
    - 숫자 timestamp 2개 미만 → None (호출측에서 제외)
    """
    if timestamps is None or len(timestamps) < 2 or count_num(timestamps) < 2:
        return None
    n = len(timestamps)
    last = timestamps[-1]
    if is_num(last) and t >= last:
        return n - 2
    for k in range(n - 1):
        t0, t1 = timestamps[k], timestamps[k + 1]
        if is_num(t0) and is_num(t1) and t0 <= t < t1:
            return k
    return 0

def interpolate(a: Sequence[float], b: Sequence[float], t0, t1, t: float) -> list:
    """a→b 선형 보간. t1 <= t0(퇴화 구간)이면 a 그대로."""
    if not (is_num(t0) and is_num(t1)) or t1 <= t0:
        return [float(x) for x in a]
    alpha = max(0.0, min(1.0, (t - t0) / (t1 - t0)))
    pa = np.asarray(a, dtype=float)
    pb = np.asarray(b, dtype=float)
    return (pa + (pb - pa) * alpha).tolist()

def position_at(route: Sequence, timestamps: Sequence, t: float) -> Optional[list]:
    idx = locate_segment(timestamps, t)
    if idx is None or not route:
        return None
    i0 = max(0, min(idx, len(route) - 1))
    i1 = max(0, min(idx + 1, len(route) - 1))
    j0 = max(0, min(idx, len(timestamps) - 1))
    j1 = max(0, min(idx + 1, len(timestamps) - 1))
    a, b = route[i0], route[i1]
    if not (is_coord(a) and is_coord(b)):
        return None
    return interpolate(a, b, timestamps[j0], timestamps[j1], t)
