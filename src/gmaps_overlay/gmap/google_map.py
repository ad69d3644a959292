# gmap/google_map.py
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Tuple

from gmaps_overlay.config import MapConfig
from gmaps_overlay.core.map_object import MapObject, js_literal, to_int
from gmaps_overlay.model.models import LatLng, LatLngBounds
from gmaps_overlay.overlay.marker import Marker
from .viewport import fit_center, fit_zoom

MAP_TYPES = ("roadmap", "satellite", "hybrid", "terrain")

DEFAULT_CENTER = LatLng(0.0, 0.0)
DEFAULT_ZOOM = 1


class GoogleMap(MapObject):
    """
    google.maps.Map と、その上に置くマーカーの束ね。
    center / zoom を省略するとマーカー全体が収まるように決める。
    """

    def __init__(
        self,
        element_id: str = "map",
        *,
        center: LatLng | None = None,
        zoom: int | None = None,
        map_type: str = "roadmap",
        width_px: int = 640,
        height_px: int = 480,
        min_zoom: int = 0,
        max_zoom: int = 21,
        padding_px: int = 0,
    ):
        if map_type not in MAP_TYPES:
            raise ValueError(f"Unsupported map_type: {map_type}")
        self.element_id = element_id
        self.center = center
        self.zoom = to_int(zoom) if zoom is not None else None
        self.map_type = map_type
        self.width_px = to_int(width_px)
        self.height_px = to_int(height_px)
        self.min_zoom = to_int(min_zoom)
        self.max_zoom = to_int(max_zoom)
        self.padding_px = to_int(padding_px)
        self._markers: List[Marker] = []

    @classmethod
    def from_config(cls, cfg: MapConfig) -> "GoogleMap":
        center = None
        if cfg.center_lat is not None and cfg.center_lng is not None:
            center = LatLng(cfg.center_lat, cfg.center_lng)
        return cls(
            cfg.element_id,
            center=center,
            zoom=cfg.zoom,
            map_type=cfg.map_type,
            width_px=cfg.width,
            height_px=cfg.height,
            min_zoom=cfg.min_zoom,
            max_zoom=cfg.max_zoom,
            padding_px=cfg.padding,
        )

    # --- markers ---------------------------------------------------------

    @property
    def markers(self) -> Tuple[Marker, ...]:
        return tuple(self._markers)

    def add_marker(self, marker: Marker) -> "GoogleMap":
        self._markers.append(marker)
        return self

    def add_markers(self, markers: Iterable[Marker]) -> "GoogleMap":
        for m in markers:
            self.add_marker(m)
        return self

    def bounds(self) -> LatLngBounds | None:
        if not self._markers:
            return None
        return LatLngBounds.from_points(m.position for m in self._markers)

    # --- viewport --------------------------------------------------------

    def viewport(self) -> Tuple[LatLng, int]:
        """(center, zoom)。明示値 > マーカーからの自動計算 > 既定値"""
        b = self.bounds()
        center, zoom = self.center, self.zoom
        if center is None:
            center = fit_center(b) if b is not None else DEFAULT_CENTER
        if zoom is None:
            if b is not None:
                zoom = fit_zoom(b, self.width_px, self.height_px,
                                min_zoom=self.min_zoom, max_zoom=self.max_zoom,
                                padding_px=self.padding_px)
            else:
                zoom = DEFAULT_ZOOM
        return center, zoom

    # --- 出力 ------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        center, zoom = self.viewport()
        return {
            "element_id": self.element_id,
            "center": center.to_dict(),
            "zoom": zoom,
            "mapTypeId": self.map_type,
            "markers": [m.to_dict() for m in self._markers],
        }

    def to_js(self, function_name: str = "initMap") -> str:
        center, zoom = self.viewport()
        opts = {
            "center": center.as_expr(),
            "zoom": zoom,
            "mapTypeId": self.map_type,
        }
        lines = [
            f"function {function_name}() {{",
            f"  var map = new google.maps.Map(document.getElementById({js_literal(self.element_id)}), {js_literal(opts)});",
            "  var markers = [];",
        ]
        for m in self._markers:
            lines.append(f"  markers.push({m.to_js(map_var='map')});")
        lines.append("  return {map: map, markers: markers};")
        lines.append("}")
        return "\n".join(lines) + "\n"
