"""
Query construction for the current weather endpoint.
"""

import math
from enum import Enum
from typing import Any, List, Optional, Tuple
from urllib.parse import quote, urlencode

from openweather_client.enums import Language, Units
from openweather_client.exceptions import InvalidQueryError
from openweather_client.models import Coordinates

QueryParams = List[Tuple[str, str]]


class FetchMode(Enum):
    """How a location is looked up."""

    NAME = "name"
    ID = "id"
    ZIP_CODE = "zip_code"
    COORDINATES = "coordinates"


def build_query(
    mode: FetchMode,
    query: Any,
    units: Units,
    language: Language,
    api_key: str,
) -> QueryParams:
    """
    Build the ordered query parameters for a lookup.

    Args:
        mode: Lookup mode
        query: Mode-specific input (name, id, zip code or coordinate pair)
        units: Requested unit system; DEFAULT omits the ``units`` parameter
        language: Requested response language
        api_key: OpenWeatherMap API key

    Returns:
        List of (key, value) pairs in request order

    Raises:
        InvalidQueryError: If the input is structurally invalid for the mode
    """
    params: QueryParams = [("appid", api_key), ("lang", language.token)]
    if units.token is not None:
        params.append(("units", units.token))

    params.extend(_mode_params(mode, query))
    return params


def build_url(base_url: str, params: QueryParams) -> str:
    """Join the base endpoint and the percent-encoded query string."""
    return f"{base_url}?{urlencode(params, quote_via=quote)}"


def _mode_params(mode: FetchMode, query: Any) -> QueryParams:
    if mode is FetchMode.NAME:
        return [("q", _require_text(query, "Location name"))]

    if mode is FetchMode.ID:
        if isinstance(query, bool) or not isinstance(query, int) or query <= 0:
            raise InvalidQueryError(f"Location ID must be a positive integer: {query!r}")
        return [("id", str(query))]

    if mode is FetchMode.ZIP_CODE:
        return [("zip", _require_text(query, "Zip code"))]

    if mode is FetchMode.COORDINATES:
        longitude, latitude = parse_coordinates(query)
        return [("lon", str(longitude)), ("lat", str(latitude))]

    raise InvalidQueryError(f"Unsupported fetch mode: {mode!r}")


def _require_text(value: Any, label: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidQueryError(f"{label} cannot be empty")
    return value.strip()


def parse_coordinates(value: Any) -> Tuple[float, float]:
    """
    Parse a longitude/latitude pair.

    Accepts a Coordinates instance, a two-item sequence, or a string such as
    ``"-0.1257,51.5085"`` (``|`` is accepted as separator too).

    Raises:
        InvalidQueryError: Unless exactly two finite floats are obtained
    """
    if isinstance(value, Coordinates):
        parts = [value.longitude, value.latitude]
    elif isinstance(value, str):
        parts = value.replace("|", ",").split(",")
    elif isinstance(value, (tuple, list)):
        parts = list(value)
    else:
        raise InvalidQueryError(f"A wrong coordinates format has been used: {value!r}")

    if len(parts) != 2:
        raise InvalidQueryError(f"Expected a longitude and a latitude: {value!r}")

    longitude = _to_finite_float(parts[0])
    latitude = _to_finite_float(parts[1])
    if longitude is None or latitude is None:
        raise InvalidQueryError(f"A wrong coordinates format has been used: {value!r}")
    return longitude, latitude


def _to_finite_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None
