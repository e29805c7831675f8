# 파일: engine/clock.py
"""
리플레이 시계
- tick(): t += step, ceiling 초과 시 floor로 되감기(순환 재생)
- seek(): 외부(슬라이더)에서 임의 시각 지정, 되감기/클램프 없음
- start()/stop(): 프레임 주기 반복 실행 핸들 (stop은 다음 프레임부터 중단)
"""

from __future__ import annotations
from typing import Callable, Dict, Optional
import threading

from ..utils.utils import format_hhmm

class SimClock:
    def __init__(self, floor: float = 7 * 60, ceiling: float = 60.0, step: float = 0.02):
        if not step > 0:
            raise ValueError(f"step은 양수여야 합니다: {step}")
        self.floor = float(floor)
        self.ceiling = float(ceiling)
        self.step = float(step)
        self._t = self.floor
        # tick/seek + 해당 프레임 투영을 한 번에 하나만 (재진입 허용)
        self.lock = threading.RLock()
        self._stop_evt: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    # ---------- 상태 ----------
    @property
    def t(self) -> float:
        return self._t

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def set_ceiling(self, ceiling: float):
        self.ceiling = float(ceiling)

    # ---------- 전이 ----------
    def tick(self) -> float:
        with self.lock:
            nxt = self._t + self.step
            if nxt > self.ceiling:
                nxt = self.floor
            self._t = nxt
            return nxt

    def seek(self, t: float) -> float:
        with self.lock:
            self._t = float(t)
            return self._t

    # ---------- 슬라이더용 ----------
    def scrubber_state(self) -> Dict[str, object]:
        return {"time": self._t, "min": self.floor, "max": self.ceiling, "label": format_hhmm(self._t)}

    # ---------- 주기 실행 ----------
    def start(self, on_tick: Callable[[float], None], interval_sec: float = 1 / 60):
        """
        interval_sec마다 tick → on_tick(t) 순서로 실행.
        tick + on_tick은 self.lock 안에서 실행 → seek(및 그 투영)과 겹치지 않음.
        on_tick 예외는 경고만 찍고 다음 프레임 계속.
        """
        if self.running:
            return
        stop_evt = threading.Event()

        def _loop():
            while not stop_evt.wait(interval_sec):
                with self.lock:
                    t = self.tick()
                    try:
                        on_tick(t)
                    except Exception as e:
                        print(f"[WARN] 프레임 처리 실패 t={t:.2f}: {e}", flush=True)

        self._stop_evt = stop_evt
        self._thread = threading.Thread(target=_loop, name="sim-clock", daemon=True)
        self._thread.start()
        print(f"[CLOCK] start t={self._t:.2f} | step={self.step} | interval={interval_sec:.4f}s", flush=True)

    def stop(self):
        """이후 tick만 막음. 실행 중인 on_tick은 끝까지 실행됨."""
        if self._stop_evt is None:
            return
        self._stop_evt.set()
        th = self._thread
        if th is not None and th is not threading.current_thread():
            th.join()
        self._stop_evt = None
        self._thread = None
        print(f"[CLOCK] stop t={self._t:.2f}", flush=True)
