# 파일: engine/projector.py
"""
시각 t의 장면 투영
- 입력(trips/passengers)은 읽기만 함, 출력은 매 호출마다 새로 생성
- 아크 두 종류는 SceneParams.show_match_arcs / show_occ_arcs로 각각 토글
"""

from __future__ import annotations
from typing import Any, Iterable, Optional

from ..config.config import SceneParams
from ..models.data_models import Scene
from .visibility import (
    vehicle_record,
    waiting_passenger,
    active_destination,
    match_connector,
    occupied_connector,
)

def _collect(items: Iterable[Any], fn, *args) -> list:
    out = []
    for it in items:
        rec = fn(it, *args)
        if rec is not None:
            out.append(rec)
    return out

def project(trips: Optional[Iterable[Any]], passengers: Optional[Iterable[Any]],
            t: float, flags: Optional[SceneParams] = None) -> Scene:
    P = flags if flags is not None else SceneParams()
    trips = list(trips or [])
    passengers = list(passengers or [])

    return Scene(
        time=t,
        trail_length=P.trail_length,
        vehicles=_collect(trips, vehicle_record),
        waiting_passengers=_collect(passengers, waiting_passenger, t),
        destinations=_collect(trips, active_destination, t),
        connectors_a=_collect(trips, match_connector, t) if P.show_match_arcs else [],
        connectors_b=_collect(trips, occupied_connector, t) if P.show_occ_arcs else [],
    )
