# core/errors.py


class GoogleMapsError(Exception):
    """Base class for every error raised by gmaps_overlay."""


class InvalidResource(GoogleMapsError):
    """アイコン画像のメタデータ（幅/高さ）が取得できなかった"""

    def __init__(self, source: str, reason: str | None = None):
        self.source = source
        self.reason = reason
        msg = f"unable to load MarkerIcon: {source}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
