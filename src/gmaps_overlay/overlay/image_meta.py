# overlay/image_meta.py
"""
アイコン画像のメタデータ（幅/高さ）解決。

MarkerIcon からは ImageMetadataResolver プロトコルとしてのみ参照される。
- ローカルパス: Pillow で開いてヘッダだけ読む（デコードしない）
- http(s) URL : requests でストリーム取得し、ImageFile.Parser に
                ヘッダが揃うまで流し込む
リトライ・キャッシュはしない。失敗はすべて InvalidResource。
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import requests
from PIL import Image, ImageFile

from gmaps_overlay.core.errors import InvalidResource

logger = logging.getLogger(__name__)

URL_SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class ImageSize:
    width: int
    height: int
    format: str | None = None


class ImageMetadataResolver(Protocol):
    def resolve(self, source: str) -> ImageSize: ...


class PillowResolver:
    """Pillow (+ requests) による同期リゾルバ"""

    def __init__(
        self,
        base_dir: str | Path | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
        chunk_size: int = 1024,
        max_header_bytes: int = 64 * 1024,
    ):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.timeout = timeout
        self.session = session
        self.chunk_size = chunk_size
        self.max_header_bytes = max_header_bytes

    def resolve(self, source: str) -> ImageSize:
        if not source:
            raise InvalidResource(source, "empty source")
        if source.startswith(URL_SCHEMES):
            size = self._resolve_url(source)
        else:
            size = self._resolve_path(source)
        logger.debug("resolved %s -> %dx%d (%s)", source, size.width, size.height, size.format)
        return size

    # --- local file ----------------------------------------------------

    def _local_path(self, source: str) -> Path:
        p = Path(source)
        if self.base_dir is not None and not p.is_absolute():
            p = self.base_dir / p
        return p

    def _resolve_path(self, source: str) -> ImageSize:
        path = self._local_path(source)
        try:
            # Image.open はヘッダのみ読む（load() しない限りデコードされない）
            with Image.open(path) as img:
                w, h = img.size
                return ImageSize(int(w), int(h), img.format)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logger.warning("cannot read image header: %s (%s)", path, e)
            raise InvalidResource(source, str(e)) from e

    # --- remote --------------------------------------------------------

    def _resolve_url(self, url: str) -> ImageSize:
        http = self.session or requests
        parser = ImageFile.Parser()
        fed = 0
        try:
            with http.get(url, stream=True, timeout=self.timeout) as r:
                r.raise_for_status()
                for chunk in r.iter_content(chunk_size=self.chunk_size):
                    if not chunk:
                        continue
                    fed += len(chunk)
                    parser.feed(chunk)
                    if parser.image is not None:
                        w, h = parser.image.size
                        return ImageSize(int(w), int(h), parser.image.format)
                    if fed >= self.max_header_bytes:
                        logger.warning("no image header within %d bytes: %s", self.max_header_bytes, url)
                        raise InvalidResource(url, f"no image header within {self.max_header_bytes} bytes")
        except requests.RequestException as e:
            logger.warning("cannot fetch image: %s (%s)", url, e)
            raise InvalidResource(url, str(e)) from e
        except (OSError, Image.DecompressionBombError) as e:
            logger.warning("cannot parse image header: %s (%s)", url, e)
            raise InvalidResource(url, str(e)) from e

        logger.warning("stream ended before image header: %s", url)
        raise InvalidResource(url, "not an image")


_default: PillowResolver | None = None


def default_resolver() -> PillowResolver:
    global _default
    if _default is None:
        _default = PillowResolver()
    return _default
