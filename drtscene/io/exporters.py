"""
파일명: exporters.py
결과 객체를 JSON으로 저장
"""

import json
import os
from typing import Any

def save_json(obj: Any, path: str):
    parent = os.path.dirname(str(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)
