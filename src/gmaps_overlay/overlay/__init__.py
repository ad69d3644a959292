"""
Overlay layer: 地図に重ねるオブジェクト群。

- image_meta: アイコン画像の幅/高さ解決（Pillow / requests）
- marker_icon: MarkerIcon（サイズ・アンカー・スプライト原点）
- marker: Marker（位置・タイトル・アイコン）
"""
from .image_meta import ImageSize, ImageMetadataResolver, PillowResolver, default_resolver
from .marker_icon import MarkerIcon, MarkerIconOptions
from .marker import Marker

__all__ = [
    "ImageSize",
    "ImageMetadataResolver",
    "PillowResolver",
    "default_resolver",
    "MarkerIcon",
    "MarkerIconOptions",
    "Marker",
]
