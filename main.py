# main.py - drtscene 패키지 기반 trip 리플레이 실행
"""
DRT trip/승객 리플레이 메인 실행 스크립트
(trips/passengers 로드 → 시계 한 사이클 재생 → 장면 스냅샷 저장)
"""

import sys
import time
from pathlib import Path

# === (0) 프로젝트 루트 설정 ===
PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

print(f"PROJECT_ROOT: {PROJECT_ROOT}")

# === (1) drtscene 패키지에서 필요한 모듈 임포트 ===
from drtscene.config.config import (
    SceneParams,
    TRIPS_PATH,
    PASSENGERS_PATH,
    RUN_TAG,
    OUT_SCENES,
    OUT_SUMMARY,
    REPLAY_END_MIN,
    SNAPSHOT_EVERY_MIN,
)

from drtscene.io.loaders import load_datasets
from drtscene.io.exporters import save_json
from drtscene.engine.engine import run_replay
from drtscene.utils.utils import format_hhmm

print(f">>> RUN_TAG: {RUN_TAG}")

# === (2) 시작 ===
start_time = time.time()

# === (3) 파라미터 인스턴스 ===
P = SceneParams()
print(f"\n>>> Params: {P}")
print(f">>> Start: {format_hhmm(P.start_min)} | end={REPLAY_END_MIN} | every={SNAPSHOT_EVERY_MIN}분")

# === (4) 데이터 로드 (실패 시 빈 데이터셋) ===
print("\n=== 데이터 로드 ===")
trips, passengers = load_datasets(
    str(PROJECT_ROOT / TRIPS_PATH),
    str(PROJECT_ROOT / PASSENGERS_PATH),
    P,
)

# === (5) 리플레이 실행 ===
print("\n=== 리플레이 실행 ===")
result = run_replay(trips, passengers, P, end_min=REPLAY_END_MIN, every_min=SNAPSHOT_EVERY_MIN)

# === (6) 결과 저장 ===
print("\n=== 결과 저장 ===")

output_files = {
    "scenes": PROJECT_ROOT / OUT_SCENES,
    "summary": PROJECT_ROOT / OUT_SUMMARY,
}

save_json(result["snapshots"], output_files["scenes"])
save_json({
    "ceiling": result["ceiling"],
    "frames": result["frames"],
    "snapshots": len(result["snapshots"]),
    "trips": len(trips),
    "passengers": len(passengers),
}, output_files["summary"])

print("[JSON SAVED]")
for k, v in output_files.items():
    print(f"  ✓ {v}")

# === (7) 결과 요약 ===
elapsed = time.time() - start_time

print("\n" + "=" * 50)
print("📊 리플레이 결과")
print("=" * 50)
print(f"  - Output Dir : outputs/{RUN_TAG}")
print(f"  - Trips      : {len(trips)}")
print(f"  - Passengers : {len(passengers)}")
print(f"  - Ceiling    : {result['ceiling']:.2f} ({format_hhmm(result['ceiling'])})")
print(f"  - Frames     : {result['frames']}")
print(f"  - Snapshots  : {len(result['snapshots'])}")
print(f"  - Elapsed(s) : {elapsed:.2f}")
print("=" * 50)
