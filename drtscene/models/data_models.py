"""
파일명: data_models.py
장면(Scene) 자료구조 정의 + 원시 레코드(trip/passenger) 무결성 검사
- trip: {"route": [[lon,lat], ...], "timestamp": [min, ...]}
- passenger: {"location": [lon,lat], "timestamp": [t_request, t_pickup]}
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..utils.utils import is_num, is_seq, is_coord, count_num

Coord = List[float]

@dataclass
class Scene:
    time: float
    vehicles: List[Dict[str, Any]] = field(default_factory=list)            # {"route", "timestamp"}
    waiting_passengers: List[Dict[str, Any]] = field(default_factory=list)  # {"location", "timestamp"}
    destinations: List[Dict[str, Any]] = field(default_factory=list)        # {"location"}
    connectors_a: List[Dict[str, Any]] = field(default_factory=list)        # 차량→픽업 {"source", "target"}
    connectors_b: List[Dict[str, Any]] = field(default_factory=list)        # 현재→목적지 {"source", "target"}
    trail_length: float = 0.5                                                # 렌더러 꼬리 길이(분)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "time": self.time,
            "vehicles": self.vehicles,
            "waitingPassengers": self.waiting_passengers,
            "destinations": self.destinations,
            "connectorsA": self.connectors_a,
            "connectorsB": self.connectors_b,
            "trailLength": self.trail_length,
        }

    def counts(self) -> Dict[str, int]:
        return {
            "vehicles": len(self.vehicles),
            "waiting": len(self.waiting_passengers),
            "destinations": len(self.destinations),
            "connectors_a": len(self.connectors_a),
            "connectors_b": len(self.connectors_b),
        }

def copy_coord(c) -> Coord:
    return [float(x) for x in c]

def trip_fields(trip: Any) -> Optional[Tuple[list, list]]:
    """
    정상 trip이면 (route, timestamp) 반환, 아니면 None.
    - route/timestamp 둘 다 길이 ≥ 2, 길이 동일
    - 숫자 timestamp 최소 2개
    """
    if not isinstance(trip, dict):
        return None
    route, ts = trip.get("route"), trip.get("timestamp")
    if not (is_seq(route) and is_seq(ts)):
        return None
    if len(route) < 2 or len(ts) < 2 or len(route) != len(ts):
        return None
    if count_num(ts) < 2:
        return None
    return route, ts

def pickup_drop_times(ts: list) -> Tuple[Any, Any]:
    # 픽업 = ts[1] (하나뿐이면 ts[0]), 드롭 = ts[-1]
    pickup = ts[1] if len(ts) > 1 else ts[0]
    return pickup, ts[-1]

def passenger_fields(p: Any) -> Optional[Tuple[list, float, float]]:
    """정상 passenger면 (location, t_request, t_pickup), 아니면 None"""
    if not isinstance(p, dict):
        return None
    loc, ts = p.get("location"), p.get("timestamp")
    if not is_coord(loc) or not is_seq(ts) or len(ts) != 2:
        return None
    if not (is_num(ts[0]) and is_num(ts[1])):
        return None
    return loc, float(ts[0]), float(ts[1])
