"""
gmaps_overlay: Google Maps JavaScript API のエンティティ（マーカー、アイコン、地図）を
サーバ側の値オブジェクトとして扱い、JSON 記述子 / 初期化用 JavaScript に書き出す。
"""
from gmaps_overlay.core.errors import GoogleMapsError, InvalidResource
from gmaps_overlay.model.models import LatLng, LatLngBounds
from gmaps_overlay.overlay.image_meta import ImageSize, PillowResolver
from gmaps_overlay.overlay.marker_icon import MarkerIcon, MarkerIconOptions
from gmaps_overlay.overlay.marker import Marker
from gmaps_overlay.gmap.google_map import GoogleMap
from gmaps_overlay.model.loader import MapLoader

__version__ = "0.1.0"

__all__ = [
    "GoogleMapsError",
    "InvalidResource",
    "LatLng",
    "LatLngBounds",
    "ImageSize",
    "PillowResolver",
    "MarkerIcon",
    "MarkerIconOptions",
    "Marker",
    "GoogleMap",
    "MapLoader",
]
