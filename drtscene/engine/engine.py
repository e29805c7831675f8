# 파일: engine/engine.py
"""
리플레이 세션/헤드리스 실행
- ReplaySession: 데이터셋 + 시계 + ceiling 캐시(데이터셋 identity 바뀔 때만 재계산)
- run_replay(): floor→end까지 tick 하며 일정 간격(분)마다 장면 스냅샷 수집
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple
import time

from ..config.config import SceneParams
from ..models.data_models import Scene
from ..utils.utils import format_hhmm
from .bounds import compute_ceiling
from .clock import SimClock
from .projector import project

# ----------------- 유틸 -----------------
def _fmt_hms(sec: float) -> str:
    sec = int(max(0, sec))
    h = sec // 3600; m = (sec % 3600) // 60; s = sec % 60
    return f"{h:d}:{m:02d}:{s:02d}"

def snapshot_record(scene: Scene) -> Dict[str, Any]:
    rec = scene.to_dict()
    rec["label"] = format_hhmm(scene.time)
    return rec

# ----------------- 세션 -----------------
class ReplaySession:
    def __init__(self, P: Optional[SceneParams] = None,
                 trips: Optional[List[dict]] = None, passengers: Optional[List[dict]] = None):
        self.P = P if P is not None else SceneParams()
        self.clock = SimClock(self.P.start_min, self.P.min_ceiling_min, self.P.step_min)
        self.trips: List[dict] = []
        self.passengers: List[dict] = []
        self._bounds_key: Optional[Tuple[int, int]] = None
        self.ceiling = self.clock.ceiling
        self.set_data(trips, passengers)

    def set_data(self, trips: Optional[List[dict]], passengers: Optional[List[dict]]) -> float:
        """데이터셋 교체. 같은 객체가 다시 들어오면 ceiling 재계산 생략."""
        self.trips = trips if trips is not None else []
        self.passengers = passengers if passengers is not None else []
        key = (id(self.trips), id(self.passengers))
        if key != self._bounds_key:
            self.ceiling = compute_ceiling(self.trips, self.passengers, self.P.min_ceiling_min)
            self.clock.set_ceiling(self.ceiling)
            self._bounds_key = key
            print(f"[DATA] trips={len(self.trips)} | passengers={len(self.passengers)} | "
                  f"ceiling={self.ceiling:.2f} ({format_hhmm(self.ceiling)})", flush=True)
        return self.ceiling

    def frame(self, t: Optional[float] = None) -> Scene:
        # 시계 스레드 프레임과 겹치지 않도록 clock.lock 안에서 투영
        with self.clock.lock:
            return project(self.trips, self.passengers, self.clock.t if t is None else t, self.P)

    def tick(self) -> Scene:
        with self.clock.lock:
            self.clock.tick()
            return self.frame()

    def seek(self, t: float) -> Scene:
        with self.clock.lock:
            self.clock.seek(t)
            return self.frame()

    def start(self, on_frame: Callable[[Scene], None]):
        self.clock.start(lambda t: on_frame(self.frame(t)), self.P.frame_interval_sec)

    def stop(self):
        self.clock.stop()

# ------------- 헤드리스 실행 -------------
def run_replay(trips: Optional[List[dict]], passengers: Optional[List[dict]], P: SceneParams,
               end_min: Optional[float] = None, every_min: float = 5.0) -> Dict[str, Any]:
    """
    floor부터 end_min(없으면 ceiling)까지 한 사이클 재생.
    every_min 분마다(첫 프레임 포함) 스냅샷 저장. 되감기가 일어나면 종료.
    스냅샷 간격은 프레임 수(every/step)로 셈 → 부동소수 누적오차로 한 프레임 밀리지 않음.
    마지막 스냅샷이 end가 아니면 end 시각 스냅샷을 추가.
    """
    sess = ReplaySession(P, trips, passengers)
    clock = sess.clock
    end = sess.ceiling if end_min is None else min(float(end_min), sess.ceiling)
    every = max(float(every_min), clock.step)
    every_frames = max(1, int(round(every / clock.step)))
    tol = clock.step / 2

    snapshots: List[Dict[str, Any]] = []
    frames = 0
    last_snap: Optional[float] = None
    start_wall = time.perf_counter()
    print(f"[REPLAY] {format_hhmm(clock.t)} → {format_hhmm(end)} | step={clock.step} | every={every}분", flush=True)

    def _snap(t: float):
        scene = sess.frame(t)
        snapshots.append(snapshot_record(scene))
        c = scene.counts()
        print(f"  → {format_hhmm(t)} | 차량 {c['vehicles']} | 대기 {c['waiting']} | 목적지 {c['destinations']}", flush=True)

    while True:
        t = clock.t
        if frames % every_frames == 0:
            _snap(t)
            last_snap = t
        prev = t
        t = clock.tick()
        frames += 1
        if t < prev or t > end + tol:
            break

    # ceiling 직전 누적오차로 되감긴 경우 등: end 프레임 보충
    if end >= clock.floor and (last_snap is None or abs(last_snap - end) > tol):
        _snap(end)

    elapsed = time.perf_counter() - start_wall
    print(f"[REPLAY] 완료! 프레임 {frames} | 스냅샷 {len(snapshots)} | 경과 {_fmt_hms(elapsed)}", flush=True)
    return {"ceiling": sess.ceiling, "frames": frames, "snapshots": snapshots}
