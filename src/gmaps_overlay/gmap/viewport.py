# gmap/viewport.py
"""
マーカー群が収まる center / zoom の算出。
WebMercator(EPSG:3857, 256px タイル) 上の範囲を、
ビューポートのピクセル数に収まる最大 zoom に丸める。
"""
from __future__ import annotations
from functools import lru_cache
from typing import Tuple

import numpy as np
from pyproj import Transformer

from gmaps_overlay.model.models import LatLng, LatLngBounds

INITIAL_RES = 156543.03392804097  # m/px at z=0 (3857, 256px)
MAX_LAT = 85.05112878  # WebMercator の有効範囲


@lru_cache(maxsize=None)
def _transformer(src: str, dst: str) -> Transformer:
    return Transformer.from_crs(src, dst, always_xy=True)


def to_mercator(lng: float, lat: float) -> Tuple[float, float]:
    """EPSG:4326 -> EPSG:3857"""
    return _transformer("EPSG:4326", "EPSG:3857").transform(lng, lat)


def from_mercator(x: float, y: float) -> Tuple[float, float]:
    """EPSG:3857 -> EPSG:4326, (lng, lat)"""
    return _transformer("EPSG:3857", "EPSG:4326").transform(x, y)


def _clamp_lat(lat: float) -> float:
    return float(np.clip(lat, -MAX_LAT, MAX_LAT))


def mercator_extent(bounds: LatLngBounds):
    """(Xmin, Ymin, Xmax, Ymax) [m]"""
    Xmin, Ymin = to_mercator(bounds.west, _clamp_lat(bounds.south))
    Xmax, Ymax = to_mercator(bounds.east, _clamp_lat(bounds.north))
    return Xmin, Ymin, Xmax, Ymax


def fit_zoom(bounds: LatLngBounds, width_px: int, height_px: int, *,
             min_zoom: int = 0, max_zoom: int = 21, padding_px: int = 0) -> int:
    if bounds.is_point():
        return int(max_zoom)

    avail_w = max(1, int(width_px) - 2 * int(padding_px))
    avail_h = max(1, int(height_px) - 2 * int(padding_px))
    Xmin, Ymin, Xmax, Ymax = mercator_extent(bounds)
    span_x, span_y = abs(Xmax - Xmin), abs(Ymax - Ymin)

    # 目安の zoom（必要 m/px から）
    target_m_per_px = max(1e-9, span_x / avail_w, span_y / avail_h)
    zoom = int(np.clip(int(round(np.log2(INITIAL_RES / target_m_per_px))), min_zoom, max_zoom))

    # 収まらなければ落とす
    m_per_px = INITIAL_RES / (2 ** zoom)
    w_px, h_px = span_x / m_per_px, span_y / m_per_px
    while (w_px > avail_w or h_px > avail_h) and zoom > min_zoom:
        zoom -= 1; w_px /= 2; h_px /= 2
    return int(zoom)


def fit_center(bounds: LatLngBounds) -> LatLng:
    """WebMercator 上の中点（緯度の単純平均ではない）"""
    Xmin, Ymin, Xmax, Ymax = mercator_extent(bounds)
    lon, lat = from_mercator((Xmin + Xmax) * 0.5, (Ymin + Ymax) * 0.5)
    return LatLng(float(np.clip(lat, -90.0, 90.0)), float(np.clip(lon, -180.0, 180.0)))
