from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable

from gmaps_overlay.core.map_object import JsExpr, js_literal


# --- 座標 -------------------------------------------------------------

@dataclass(frozen=True)
class LatLng:
    """WGS84 の緯度経度（google.maps.LatLng 相当）"""
    lat: float
    lng: float

    def __post_init__(self):
        lat, lng = float(self.lat), float(self.lng)
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"latitude out of range: {lat}")
        if not -180.0 <= lng <= 180.0:
            raise ValueError(f"longitude out of range: {lng}")
        object.__setattr__(self, "lat", lat)
        object.__setattr__(self, "lng", lng)

    def to_dict(self) -> Dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    def to_js(self) -> str:
        return f"new google.maps.LatLng({js_literal(self.lat)}, {js_literal(self.lng)})"

    def as_expr(self) -> JsExpr:
        return JsExpr(self.to_js())


@dataclass(frozen=True)
class LatLngBounds:
    """緯度経度の矩形（日付変更線をまたぐ範囲は扱わない）"""
    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_points(cls, points: Iterable[LatLng]) -> "LatLngBounds":
        pts = list(points)
        if not pts:
            raise ValueError("points is empty")
        lats = [p.lat for p in pts]
        lngs = [p.lng for p in pts]
        return cls(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))

    def extend(self, point: LatLng) -> "LatLngBounds":
        return LatLngBounds(
            south=min(self.south, point.lat),
            west=min(self.west, point.lng),
            north=max(self.north, point.lat),
            east=max(self.east, point.lng),
        )

    def contains(self, point: LatLng) -> bool:
        return self.south <= point.lat <= self.north and self.west <= point.lng <= self.east

    def center(self) -> LatLng:
        """単純な緯度経度の中点（地図上の中心は map.viewport.fit_center を使う）"""
        return LatLng((self.south + self.north) * 0.5, (self.west + self.east) * 0.5)

    def is_point(self) -> bool:
        return self.south == self.north and self.west == self.east

    def to_dict(self) -> Dict[str, float]:
        return {"south": self.south, "west": self.west, "north": self.north, "east": self.east}


__all__ = [
    "LatLng",
    "LatLngBounds",
]
