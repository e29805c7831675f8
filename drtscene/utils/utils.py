"""
파일명: utils.py
수치 판별/시각 표시 보조 함수
"""

import math
import numbers
from typing import Any, Optional, Sequence

def is_num(x: Any) -> bool:
    # bool 제외, NaN/inf 제외 (pandas 결측은 NaN으로 들어옴)
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        return False
    return math.isfinite(float(x))

def is_seq(x: Any) -> bool:
    return isinstance(x, (list, tuple))

def is_coord(x: Any) -> bool:
    """[lon, lat] 형태(숫자 2개 이상)인지"""
    return is_seq(x) and len(x) >= 2 and is_num(x[0]) and is_num(x[1])

def last_num(seq: Any) -> Optional[float]:
    """시퀀스 마지막 원소가 숫자면 반환, 아니면 None"""
    if not is_seq(seq) or not seq:
        return None
    v = seq[-1]
    return float(v) if is_num(v) else None

def count_num(seq: Sequence[Any]) -> int:
    return sum(1 for v in seq if is_num(v))

def _add_zero(v: int) -> str:
    return f"{v:02d}"

def format_hhmm(t: float) -> str:
    """
    분 단위 시각 → "HH:MM".
    반올림은 half-up(0.5분은 올림), 시는 24로 나눈 나머지.
    """
    m = int(math.floor(float(t) + 0.5))
    return f"{_add_zero(int(m / 60) % 24)}:{_add_zero(m % 60)}"
