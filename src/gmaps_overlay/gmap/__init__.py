from .google_map import GoogleMap, MAP_TYPES
from .viewport import fit_center, fit_zoom

__all__ = ["GoogleMap", "MAP_TYPES", "fit_center", "fit_zoom"]
