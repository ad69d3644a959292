# overlay/marker_icon.py
"""
Marker icon descriptor.

Attach these to markers to display custom marker icons::

    icon = MarkerIcon("https://example.com/pin.png")
    icon.set_size(30, 30)
    shadow = MarkerIcon.create("https://example.com/shadow.png").set_anchor(0, 30)
    marker.set_icon(icon).set_shadow(shadow)
"""
from __future__ import annotations
import warnings
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Union

from gmaps_overlay.core.errors import InvalidResource
from gmaps_overlay.core.map_object import JsExpr, MapObject, js_literal, to_int
from gmaps_overlay.overlay.image_meta import ImageMetadataResolver, default_resolver


@dataclass
class MarkerIconOptions:
    """
    MarkerIcon の生成オプション。None = 未指定。
    - width/height: 両方指定されたときだけ画像本来のサイズを上書き
    - anchor_x/anchor_y: 既定は (floor(width/2), height) = 下辺中央
    - origin_x/origin_y: スプライト内の切り出し位置。既定は (0, 0)
    """
    width: int | None = None
    height: int | None = None
    anchor_x: int | None = None
    anchor_y: int | None = None
    origin_x: int | None = None
    origin_y: int | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "MarkerIconOptions":
        if not options:
            return cls()
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            warnings.warn(f"Unknown MarkerIcon option(s): {', '.join(unknown)}")
        kw = {k: (to_int(v) if v is not None else None) for k, v in options.items() if k in known}
        return cls(**kw)


OptionsLike = Union[MarkerIconOptions, Mapping[str, Any], None]


class MarkerIcon(MapObject):
    """
    マーカーアイコン（google.maps.Icon 相当）。
    生成時に画像のメタデータを解決できなければ InvalidResource。
    setter はすべて self を返すのでチェーンできる。
    """

    def __init__(self, source: str, options: OptionsLike = None, *,
                 resolver: ImageMetadataResolver | None = None):
        if not source:
            raise InvalidResource(source, "empty source")
        if not isinstance(options, MarkerIconOptions):
            options = MarkerIconOptions.from_mapping(options)

        size = (resolver or default_resolver()).resolve(source)
        self._source = source

        if options.width is None or options.height is None:
            self.width, self.height = to_int(size.width), to_int(size.height)
        else:
            self.width, self.height = to_int(options.width), to_int(options.height)

        self.anchor_x = to_int(options.anchor_x) if options.anchor_x is not None else self.width // 2
        self.anchor_y = to_int(options.anchor_y) if options.anchor_y is not None else self.height
        self.origin_x = to_int(options.origin_x) if options.origin_x is not None else 0
        self.origin_y = to_int(options.origin_y) if options.origin_y is not None else 0

    @classmethod
    def create(cls, source: str, options: OptionsLike = None, *,
               resolver: ImageMetadataResolver | None = None) -> "MarkerIcon":
        """Static constructor, handy for method chaining."""
        return cls(source, options, resolver=resolver)

    @property
    def source(self) -> str:
        return self._source

    # --- size ----------------------------------------------------------

    def set_width(self, width) -> "MarkerIcon":
        self.width = to_int(width)
        return self

    def set_height(self, height) -> "MarkerIcon":
        self.height = to_int(height)
        return self

    def set_size(self, width, height) -> "MarkerIcon":
        self.width = to_int(width)
        self.height = to_int(height)
        return self

    # --- anchor / origin -------------------------------------------------

    def set_anchor(self, x=None, y=None) -> "MarkerIcon":
        """The point on the icon placed on the map position. None keeps the current value."""
        if x is not None:
            self.anchor_x = to_int(x)
        if y is not None:
            self.anchor_y = to_int(y)
        return self

    def set_origin(self, x=None, y=None) -> "MarkerIcon":
        """Offset into a sprite sheet. None keeps the current value."""
        if x is not None:
            self.origin_x = to_int(x)
        if y is not None:
            self.origin_y = to_int(y)
        return self

    # --- 出力 ------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self._source,
            "size": {"width": self.width, "height": self.height},
            "anchor": {"x": self.anchor_x, "y": self.anchor_y},
            "origin": {"x": self.origin_x, "y": self.origin_y},
        }

    def to_js(self) -> str:
        return js_literal({
            "url": self._source,
            "size": JsExpr(f"new google.maps.Size({self.width}, {self.height})"),
            "anchor": JsExpr(f"new google.maps.Point({self.anchor_x}, {self.anchor_y})"),
            "origin": JsExpr(f"new google.maps.Point({self.origin_x}, {self.origin_y})"),
        })

    def __eq__(self, other) -> bool:
        if not isinstance(other, MarkerIcon):
            return NotImplemented
        return self.to_dict() == other.to_dict()
