# config.py
from dataclasses import dataclass
from pathlib import Path
import json


@dataclass
class MapConfig:
    element_id: str = "map"
    width: int = 640
    height: int = 480
    center_lat: float | None = None
    center_lng: float | None = None
    zoom: int | None = None
    map_type: str = "roadmap"
    min_zoom: int = 0
    max_zoom: int = 21
    padding: int = 0


def load_json(path: str | Path | None) -> dict:
    if not path: return {}
    p = Path(path)
    if not p.exists(): raise FileNotFoundError(path)
    with p.open("r", encoding="utf-8") as f: return json.load(f)
