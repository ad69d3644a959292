import pytest
import requests

from gmaps_overlay import InvalidResource, MarkerIcon, PillowResolver
from conftest import FakeResponse, FakeSession, make_png, png_bytes, png_header_only

URL = "https://maps.example.com/icons/pin.png"


def test_local_file(icon_png):
    size = PillowResolver().resolve(str(icon_png))
    assert (size.width, size.height, size.format) == (40, 60, "PNG")


def test_relative_path_uses_base_dir(tmp_path):
    (tmp_path / "icons").mkdir()
    make_png(tmp_path / "icons" / "pin.png", 24, 36)
    size = PillowResolver(base_dir=tmp_path).resolve("icons/pin.png")
    assert (size.width, size.height) == (24, 36)


def test_not_an_image(tmp_path):
    p = tmp_path / "notes.png"
    p.write_text("definitely not a png", encoding="utf-8")
    with pytest.raises(InvalidResource) as ei:
        PillowResolver().resolve(str(p))
    assert isinstance(ei.value.__cause__, OSError)


def test_missing_file(tmp_path):
    with pytest.raises(InvalidResource):
        PillowResolver().resolve(str(tmp_path / "nope.png"))


def test_url_reads_header_only():
    session = FakeSession({URL: FakeResponse(png_bytes(32, 48))})
    size = PillowResolver(session=session, timeout=3.0, chunk_size=64).resolve(URL)
    assert (size.width, size.height) == (32, 48)
    assert session.requested == [(URL, True, 3.0)]


def test_url_icon_keeps_url_as_source():
    session = FakeSession({URL: FakeResponse(png_bytes(32, 48))})
    icon = MarkerIcon.create(URL, resolver=PillowResolver(session=session))
    assert icon.to_dict()["url"] == URL
    assert (icon.anchor_x, icon.anchor_y) == (16, 48)


def test_url_http_error():
    session = FakeSession({URL: FakeResponse(status=404)})
    with pytest.raises(InvalidResource) as ei:
        PillowResolver(session=session).resolve(URL)
    assert isinstance(ei.value.__cause__, requests.HTTPError)


def test_url_network_failure():
    session = FakeSession({URL: requests.ConnectionError("boom")})
    with pytest.raises(InvalidResource):
        PillowResolver(session=session).resolve(URL)


def test_url_not_an_image():
    session = FakeSession({URL: FakeResponse(b"<html>not found</html>")})
    with pytest.raises(InvalidResource, match="not an image"):
        PillowResolver(session=session).resolve(URL)


def test_empty_source():
    with pytest.raises(InvalidResource):
        PillowResolver().resolve("")


def test_huge_declared_size_local(tmp_path):
    p = tmp_path / "sheet.png"
    p.write_bytes(png_header_only(20000, 20000))
    with pytest.raises(InvalidResource) as ei:
        MarkerIcon.create(str(p))
    assert ei.value.source == str(p)


def test_huge_declared_size_url():
    session = FakeSession({URL: FakeResponse(png_header_only(20000, 20000))})
    with pytest.raises(InvalidResource):
        PillowResolver(session=session).resolve(URL)


def test_url_stops_reading_without_header():
    body = b"<html>" + b"x" * (1024 * 1024) + b"</html>"
    response = FakeResponse(body)
    resolver = PillowResolver(session=FakeSession({URL: response}),
                              chunk_size=1024, max_header_bytes=8 * 1024)
    with pytest.raises(InvalidResource, match="no image header within 8192 bytes"):
        resolver.resolve(URL)
    assert response.served <= 8 * 1024
    assert response.closed


def test_url_header_within_limit():
    session = FakeSession({URL: FakeResponse(png_bytes(8, 8))})
    size = PillowResolver(session=session, chunk_size=64, max_header_bytes=64).resolve(URL)
    assert (size.width, size.height) == (8, 8)
