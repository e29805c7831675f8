"""
리플레이(장면) 전역 파라미터와 입출력 경로 정의
- 시각 단위: 하루 기준 '분' (07:00 = 420)
- 프레임당 시계 증가량: 0.02분 (speed=0.5)
- 최대 시각(ceiling): 데이터 마지막 timestamp, 최소 60분
"""

from dataclasses import dataclass

# =========================
# 1) 파라미터 클래스
# =========================
@dataclass
class SceneParams:
    # ----- 시계 -----
    start_min: float = 7 * 60             # 시작 시각(분) = floor
    step_min: float = 0.01 * 2            # 프레임당 증가(분)
    min_ceiling_min: float = 60.0         # 최소 사이클 길이(분)
    frame_interval_sec: float = 1 / 60    # 프레임 간격(초), 약 60fps

    # ----- 렌더 계약(외부 레이어로 그대로 전달) -----
    trail_length: float = 0.5             # 차량 꼬리 길이(분)

    # ----- 연결선(아크) 토글 -----
    show_match_arcs: bool = False         # 차량→픽업 링크
    show_occ_arcs: bool = False           # 현재→목적지 링크

    # ----- 데이터 로드 -----
    fetch_timeout_sec: int = 30

# =========================
# 2) 입출력 경로/태그
# =========================
TRIPS_PATH: str = "data/trips.json"
PASSENGERS_PATH: str = "data/passengers.json"

RUN_TAG: str = "replay"                   # 시나리오 명칭

def _out(p: str) -> str:
    return f"outputs/{RUN_TAG}/{p}"

OUT_SCENES:  str = _out("scenes.json")
OUT_SUMMARY: str = _out("summary.json")

# =========================
# 3) 헤드리스 리플레이 범위/샘플링
# =========================
REPLAY_END_MIN:     float | None = None   # None → ceiling까지 한 사이클
SNAPSHOT_EVERY_MIN: float = 5.0           # 스냅샷 저장 간격(분)
