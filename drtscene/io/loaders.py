# 파일명: io/loaders.py
# 설명:
# - trips / passengers 레코드 읽기 (URL → requests, .json/.parquet → pandas)
# - parquet 셀의 numpy 배열 → list 변환 (route/timestamp/location)
# - 로드 실패 시 빈 데이터셋으로 대체 (시계/장면은 빈 상태로 계속 동작)
# - 레코드 내용 보정은 하지 않음 (비정상 레코드는 장면 계산에서 제외됨)

from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
from pathlib import Path
import numpy as np
import pandas as pd
import requests

from ..config.config import SceneParams, TRIPS_PATH, PASSENGERS_PATH


# ---- 내부 유틸 ----
def _is_url(src: str) -> bool:
    return src.startswith("http://") or src.startswith("https://")

def _plain(v: Any) -> Any:
    """numpy 배열/스칼라 → 파이썬 list/float (중첩 포함)"""
    if isinstance(v, np.ndarray):
        return [_plain(x) for x in v.tolist()]
    if isinstance(v, (list, tuple)):
        return [_plain(x) for x in v]
    if isinstance(v, np.generic):
        return v.item()
    return v

def _frame_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    return [{k: _plain(v) for k, v in row.items()} for row in df.to_dict(orient="records")]

def _fetch_json(url: str, timeout: int) -> Any:
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.json()


# ---- 메인 로더 ----
def load_records(src: str, timeout: int = 30) -> List[Dict[str, Any]]:
    """
    레코드 리스트 읽기.
    - http(s):// → JSON 배열
    - *.json → 레코드 배열(JSON)
    - *.parquet → 행 단위 레코드
    그 외 확장자는 ValueError.
    """
    if _is_url(src):
        data = _fetch_json(src, timeout)
        if not isinstance(data, list):
            raise ValueError(f"{src}: 레코드 배열(JSON list)이 아닙니다 ({type(data).__name__})")
        return data

    path = Path(src)
    suffix = path.suffix.lower()
    if suffix in (".json", ".parquet") and not path.exists():
        raise FileNotFoundError(src)
    if suffix == ".json":
        # "timestamp" 컬럼 날짜 자동변환 방지 (분 단위 숫자 배열)
        df = pd.read_json(src, orient="records", dtype=False, convert_dates=False,
                          precise_float=True)
    elif suffix == ".parquet":
        df = pd.read_parquet(src)
    else:
        raise ValueError(f"지원하지 않는 형식: {src} (.json / .parquet / http(s) URL)")
    return _frame_to_records(df)


def load_datasets(
    trips_src: Optional[str] = None,
    passengers_src: Optional[str] = None,
    P: Optional[SceneParams] = None,
) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """
    trips/passengers 동시 로드. 하나라도 실패하면 ([], [])로 대체.
    """
    P = P if P is not None else SceneParams()
    trips_src = trips_src or TRIPS_PATH
    passengers_src = passengers_src or PASSENGERS_PATH
    try:
        trips = load_records(trips_src, P.fetch_timeout_sec)
        passengers = load_records(passengers_src, P.fetch_timeout_sec)
    except (requests.RequestException, OSError, ValueError) as e:
        print(f"[WARN] 데이터 자동 로드 실패 → 빈 데이터셋 사용: {e}", flush=True)
        return [], []

    print(f"[LOAD] trips {len(trips)}건 ({trips_src}) | passengers {len(passengers)}건 ({passengers_src})", flush=True)
    return trips, passengers
