# 파일: engine/visibility.py
"""
엔티티별 가시성 판정 (시각 t 기준)
- 차량: 정상 trip이면 항상 (꼬리 자르기는 렌더러 trail_length 담당)
- 대기 승객: t_request <= t < t_pickup (반개구간)
- 목적지: t_pickup <= t <= t_drop
- 매칭 아크(차량→픽업): t_start <= t <= t_pickup
- 탑승 아크(현재→목적지): t_pickup <= t <= t_drop
각 함수는 기여 레코드 또는 None(제외)을 반환
"""

from __future__ import annotations
from typing import Any, Dict, Optional

from ..models.data_models import trip_fields, passenger_fields, pickup_drop_times, copy_coord
from ..utils.utils import is_num, is_coord
from .temporal import position_at

def vehicle_record(trip: Any) -> Optional[Dict[str, Any]]:
    f = trip_fields(trip)
    if f is None:
        return None
    route, ts = f
    if not all(is_coord(c) for c in route):
        return None
    return {"route": [copy_coord(c) for c in route], "timestamp": list(ts)}

def waiting_passenger(p: Any, t: float) -> Optional[Dict[str, Any]]:
    f = passenger_fields(p)
    if f is None:
        return None
    loc, t_req, t_pick = f
    if not (t_req <= t < t_pick):
        return None
    return {"location": copy_coord(loc), "timestamp": [t_req, t_pick]}

def active_destination(trip: Any, t: float) -> Optional[Dict[str, Any]]:
    f = trip_fields(trip)
    if f is None:
        return None
    route, ts = f
    start, end = pickup_drop_times(ts)
    if not (is_num(start) and is_num(end)) or not (start <= t <= end):
        return None
    drop = route[-1]
    if not is_coord(drop):
        return None
    return {"location": copy_coord(drop)}

def _connector(route, ts, t: float, target) -> Optional[Dict[str, Any]]:
    curr = position_at(route, ts, t)
    if curr is None or not is_coord(target):
        return None
    return {"source": curr, "target": copy_coord(target)}

def match_connector(trip: Any, t: float) -> Optional[Dict[str, Any]]:
    """차량 현재위치 → 픽업 지점(route[1])"""
    f = trip_fields(trip)
    if f is None:
        return None
    route, ts = f
    start = ts[0]
    pickup, _ = pickup_drop_times(ts)
    if not (is_num(start) and is_num(pickup)) or not (start <= t <= pickup):
        return None
    return _connector(route, ts, t, route[1])

def occupied_connector(trip: Any, t: float) -> Optional[Dict[str, Any]]:
    """탑승 중: 현재위치 → 목적지(route[-1])"""
    f = trip_fields(trip)
    if f is None:
        return None
    route, ts = f
    pickup, drop = pickup_drop_times(ts)
    if not (is_num(pickup) and is_num(drop)) or not (pickup <= t <= drop):
        return None
    return _connector(route, ts, t, route[-1])
