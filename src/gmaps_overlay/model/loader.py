from __future__ import annotations
import pathlib, json, warnings
from typing import Any, Dict, Iterable, List, Mapping

from jsonschema import validate

from gmaps_overlay.config import MapConfig
from gmaps_overlay.gmap.google_map import GoogleMap
from gmaps_overlay.overlay.image_meta import ImageMetadataResolver, PillowResolver
from gmaps_overlay.overlay.marker import Marker
from gmaps_overlay.overlay.marker_icon import MarkerIcon
from .models import LatLng

MARKER_KEYS = ("title", "draggable", "clickable", "visible", "z_index", "animation")


class MapLoader:
    """JSONファイルを読み込んで GoogleMap（+ アイコン/マーカー）を組み立てるローダ"""

    def __init__(self, validate_schema: bool = True, schema_dir: str | pathlib.Path | None = None,
                 resolver: ImageMetadataResolver | None = None):
        self.validate_schema = validate_schema
        self.resolver = resolver
        # デフォルト: このパッケージの schemas ディレクトリ
        if schema_dir is None:
            self.schema_dir = pathlib.Path(__file__).parent.parent / "schemas"
        else:
            self.schema_dir = pathlib.Path(schema_dir)

    def _load_json(self, path: str | pathlib.Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def _validate(self, instance: Any, schema_name: str) -> None:
        if self.validate_schema:
            schema = self._load_json(self.schema_dir / schema_name)
            validate(instance=instance, schema=schema)

    # --- 公開API ------------------------------------------------------

    def load(self, path: str | pathlib.Path) -> GoogleMap:
        """map.json → GoogleMap"""
        p = pathlib.Path(path)
        if not p.exists():
            raise FileNotFoundError(path)
        data = self._load_json(p)
        return self.build(data, base_dir=p.parent)

    def build(self, data: Mapping[str, Any], base_dir: str | pathlib.Path | None = None) -> GoogleMap:
        """読み込み済みの辞書 → GoogleMap"""
        self._validate(data, "map.schema.json")
        resolver = self.resolver or PillowResolver(base_dir=base_dir)

        icons = self.build_icons(data.get("icons", {}), resolver)
        markers = self.build_markers(data.get("markers", []), icons)
        gmap = GoogleMap.from_config(self.map_config(data.get("map", {})))
        return gmap.add_markers(markers)

    def map_config(self, item: Mapping[str, Any]) -> MapConfig:
        kw = {k: v for k, v in item.items() if k != "center"}
        center = item.get("center")
        if center:
            kw["center_lat"] = float(center["lat"])
            kw["center_lng"] = float(center["lng"])
        return MapConfig(**kw)

    def build_icons(self, items: Mapping[str, Mapping[str, Any]],
                    resolver: ImageMetadataResolver) -> Dict[str, MarkerIcon]:
        """icons → 名前→MarkerIcon の辞書（解決できなければ InvalidResource）"""
        icons: Dict[str, MarkerIcon] = {}
        for name, item in items.items():
            opts = {k: v for k, v in item.items() if k != "source"}
            icons[name] = MarkerIcon.create(item["source"], opts, resolver=resolver)
        return icons

    def build_markers(self, items: Iterable[Mapping[str, Any]],
                      icons: Mapping[str, MarkerIcon]) -> List[Marker]:
        markers: List[Marker] = []
        for item in items:
            kw = {k: item[k] for k in MARKER_KEYS if k in item}
            for slot in ("icon", "shadow"):
                ref = item.get(slot)
                if ref is None:
                    continue
                icon = icons.get(ref)
                if icon is None:
                    warnings.warn(f"Unknown {slot} '{ref}' for marker at ({item['lat']}, {item['lng']})")
                    continue
                kw[slot] = icon
            markers.append(Marker(LatLng(item["lat"], item["lng"]), **kw))
        return markers
