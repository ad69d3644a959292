# overlay/marker.py
from __future__ import annotations
from typing import Any, Dict

from gmaps_overlay.core.map_object import JsExpr, MapObject, js_literal, to_int
from gmaps_overlay.model.models import LatLng
from gmaps_overlay.overlay.marker_icon import MarkerIcon

ANIMATIONS = ("BOUNCE", "DROP")


def _as_latlng(lat_or_pos, lng=None) -> LatLng:
    if isinstance(lat_or_pos, LatLng):
        return lat_or_pos
    if lng is None:
        lat, lng = lat_or_pos
        return LatLng(lat, lng)
    return LatLng(lat_or_pos, lng)


class Marker(MapObject):
    """
    地図上のマーカー（google.maps.Marker 相当）。
    icon / shadow には MarkerIcon を渡す。
    """

    def __init__(
        self,
        position: LatLng,
        *,
        title: str | None = None,
        icon: MarkerIcon | None = None,
        shadow: MarkerIcon | None = None,
        draggable: bool = False,
        clickable: bool = True,
        visible: bool = True,
        z_index: int | None = None,
        animation: str | None = None,
    ):
        self.position = _as_latlng(position)
        self.title = title
        self.icon = icon
        self.shadow = shadow
        self.draggable = bool(draggable)
        self.clickable = bool(clickable)
        self.visible = bool(visible)
        self.z_index = to_int(z_index) if z_index is not None else None
        self.animation = None
        self.set_animation(animation)

    @classmethod
    def create(cls, lat: float, lng: float, **kwargs) -> "Marker":
        return cls(LatLng(lat, lng), **kwargs)

    # --- setters ---------------------------------------------------------

    def set_position(self, lat_or_pos, lng=None) -> "Marker":
        self.position = _as_latlng(lat_or_pos, lng)
        return self

    def set_title(self, title: str | None) -> "Marker":
        self.title = title
        return self

    def set_icon(self, icon: MarkerIcon | None) -> "Marker":
        self.icon = icon
        return self

    def set_shadow(self, shadow: MarkerIcon | None) -> "Marker":
        self.shadow = shadow
        return self

    def set_draggable(self, draggable: bool = True) -> "Marker":
        self.draggable = bool(draggable)
        return self

    def set_clickable(self, clickable: bool = True) -> "Marker":
        self.clickable = bool(clickable)
        return self

    def set_visible(self, visible: bool = True) -> "Marker":
        self.visible = bool(visible)
        return self

    def set_z_index(self, z_index) -> "Marker":
        self.z_index = to_int(z_index) if z_index is not None else None
        return self

    def set_animation(self, animation: str | None) -> "Marker":
        if animation is not None:
            animation = animation.upper()
            if animation not in ANIMATIONS:
                raise ValueError(f"Unsupported animation: {animation}")
        self.animation = animation
        return self

    # --- 出力 ------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"position": self.position.to_dict()}
        if self.title is not None:
            d["title"] = self.title
        if self.icon is not None:
            d["icon"] = self.icon.to_dict()
        if self.shadow is not None:
            d["shadow"] = self.shadow.to_dict()
        d["draggable"] = self.draggable
        d["clickable"] = self.clickable
        d["visible"] = self.visible
        if self.z_index is not None:
            d["zIndex"] = self.z_index
        if self.animation is not None:
            d["animation"] = self.animation
        return d

    def to_js(self, map_var: str | None = None) -> str:
        opts: Dict[str, Any] = {"position": self.position.as_expr()}
        if map_var:
            opts["map"] = JsExpr(map_var)
        if self.title is not None:
            opts["title"] = self.title
        if self.icon is not None:
            opts["icon"] = JsExpr(self.icon.to_js())
        if self.shadow is not None:
            opts["shadow"] = JsExpr(self.shadow.to_js())
        opts["draggable"] = self.draggable
        opts["clickable"] = self.clickable
        opts["visible"] = self.visible
        if self.z_index is not None:
            opts["zIndex"] = self.z_index
        if self.animation is not None:
            opts["animation"] = JsExpr(f"google.maps.Animation.{self.animation}")
        return f"new google.maps.Marker({js_literal(opts)})"
