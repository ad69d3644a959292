"""
Core layer: 全オブジェクト共通の土台。

- errors: パッケージ共通の例外（GoogleMapsError / InvalidResource）
- map_object: MapObject 基底クラスと JavaScript リテラル生成
"""
from .errors import GoogleMapsError, InvalidResource
from .map_object import MapObject, JsExpr, js_literal, to_int

__all__ = ["GoogleMapsError", "InvalidResource", "MapObject", "JsExpr", "js_literal", "to_int"]
