# core/map_object.py
from __future__ import annotations
import json
import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class JsExpr:
    """そのまま出力する JavaScript 式（例: new google.maps.Point(0, 0)）"""
    code: str

    def __str__(self) -> str:
        return self.code


def to_int(value: Any) -> int:
    """
    数値フィールド共通の整数化。小数は切り捨て（0方向）。
    文字列は数値として解釈できるものだけ受け付ける。
    NaN / 無限大は 0。
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        return _trunc(float(value))
    if isinstance(value, str):
        s = value.strip()
        try:
            return int(s)
        except ValueError:
            return _trunc(float(s))
    raise TypeError(f"cannot coerce {type(value).__name__} to int: {value!r}")


def _trunc(f: float) -> int:
    if not math.isfinite(f):
        return 0
    return int(f)


def _js_string(s: str) -> str:
    # </script> をインライン埋め込みしても壊れないように
    return json.dumps(s).replace("</", "<\\/")


def js_literal(value: Any) -> str:
    """Python の値を JavaScript リテラルに変換する。"""
    if isinstance(value, JsExpr):
        return value.code
    if isinstance(value, MapObject):
        return value.to_js()
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return repr(float(value))
    if isinstance(value, str):
        return _js_string(value)
    if isinstance(value, dict):
        items = ", ".join(f"{_js_string(str(k))}: {js_literal(v)}" for k, v in value.items())
        return "{" + items + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(js_literal(v) for v in value) + "]"
    raise TypeError(f"cannot render {type(value).__name__} as JavaScript")


class MapObject(ABC):
    """
    地図上のエンティティ共通の基底クラス。
    - to_dict(): JSON 化できる記述子
    - to_js(): google.maps.* を生成する JavaScript 式
    """

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        ...

    @abstractmethod
    def to_js(self) -> str:
        ...

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"
