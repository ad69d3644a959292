import io
import struct
import zlib
from pathlib import Path

import pytest
import requests
from PIL import Image


def make_png(path: Path, width: int, height: int) -> Path:
    Image.new("RGBA", (width, height), (255, 0, 0, 255)).save(path, format="PNG")
    return path


def png_bytes(width: int, height: int) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), (0, 128, 255)).save(buf, format="PNG")
    return buf.getvalue()


def _png_chunk(cid: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + cid + data + struct.pack(">I", zlib.crc32(cid + data) & 0xFFFFFFFF)


def png_header_only(width: int, height: int) -> bytes:
    """画素データなしの PNG（IHDR + 空の IDAT + IEND）。巨大なサイズも宣言できる"""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr)
            + _png_chunk(b"IDAT", b"") + _png_chunk(b"IEND", b""))


class StaticResolver:
    """テスト用: 固定サイズを返すリゾルバ"""

    def __init__(self, sizes: dict):
        self.sizes = sizes
        self.calls = []

    def resolve(self, source):
        from gmaps_overlay.core.errors import InvalidResource
        from gmaps_overlay.overlay.image_meta import ImageSize
        self.calls.append(source)
        if source not in self.sizes:
            raise InvalidResource(source, "unknown")
        w, h = self.sizes[source]
        return ImageSize(w, h, "PNG")


class FakeResponse:
    def __init__(self, body: bytes = b"", status: int = 200, exc: Exception | None = None):
        self.body = body
        self.status_code = status
        self.exc = exc
        self.closed = False
        self.served = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            chunk = self.body[i:i + chunk_size]
            self.served += len(chunk)
            yield chunk


class FakeSession:
    def __init__(self, responses: dict):
        self.responses = responses
        self.requested = []

    def get(self, url, stream=False, timeout=None):
        self.requested.append((url, stream, timeout))
        r = self.responses[url]
        if isinstance(r, Exception):
            raise r
        return r


@pytest.fixture
def icon_png(tmp_path):
    return make_png(tmp_path / "icon.png", 40, 60)


@pytest.fixture
def static_resolver():
    return StaticResolver({"icon.png": (40, 60), "sprite.png": (128, 32), "odd.png": (41, 61)})
