"""Copyright (C) 2025 Pierre Marrec
SPDX-License-Identifier: GPL-3.0-or-later

GPX and TCX content parsers for route points.

Timestamps are ignored: pacing works on distance only.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
from lxml import etree
from streamlit.logger import get_logger

from services.pacer.errors import TrackParseError
from utils.coercion import safe_float_optional

logger = get_logger(__name__)

# Elements are matched by local name so GPX 1.0/1.1 and TCX v2 all parse
POINT_FRAME_COLUMNS = ["lat", "lon", "elevationM"]


def _parse_xml(content: bytes, label: str) -> etree._Element:
    try:
        return etree.fromstring(content)
    except etree.XMLSyntaxError as e:
        logger.warning(f"Invalid {label} XML: {e}", exc_info=True)
        raise TrackParseError(f"Error parsing {label} content") from e


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _child_text(element: etree._Element, name: str) -> Optional[str]:
    """Text of the first descendant with the given local name, any namespace."""
    for child in element.iter():
        if child is element or not isinstance(child.tag, str):
            continue
        if _local_name(child) == name and child.text:
            return child.text.strip()
    return None


def parse_gpx_points(gpx_bytes: bytes) -> pd.DataFrame:
    """Parse GPX content into route points.

    Reads track points (trkpt), falling back to route points (rtept) when the
    file has no track. Missing elevations are set to 0.

    Args:
        gpx_bytes: Raw GPX content as bytes

    Returns:
        DataFrame with columns: lat, lon, elevationM (empty if no points)

    Raises:
        TrackParseError: if the content is not well-formed XML
    """
    root = _parse_xml(gpx_bytes, "GPX")

    points = [el for el in root.iter() if isinstance(el.tag, str) and _local_name(el) == "trkpt"]
    if not points:
        points = [el for el in root.iter() if isinstance(el.tag, str) and _local_name(el) == "rtept"]
    if not points:
        logger.debug("No track or route points found in GPX")
        return pd.DataFrame(columns=POINT_FRAME_COLUMNS)

    rows = []
    for point in points:
        lat = safe_float_optional(point.get("lat"))
        lon = safe_float_optional(point.get("lon"))
        if lat is None or lon is None:
            logger.debug("Skipping GPX point without coordinates")
            continue
        elevation = safe_float_optional(_child_text(point, "ele"))
        rows.append({"lat": lat, "lon": lon, "elevationM": elevation if elevation is not None else 0.0})

    logger.debug(f"Parsed GPX: {len(rows)} points")
    return pd.DataFrame(rows, columns=POINT_FRAME_COLUMNS)


def parse_tcx_points(tcx_bytes: bytes) -> pd.DataFrame:
    """Parse TCX content into route points.

    Trackpoints without a Position are skipped; AltitudeMeters is optional.

    Raises:
        TrackParseError: if the content is not well-formed XML
    """
    root = _parse_xml(tcx_bytes, "TCX")

    rows = []
    for trackpoint in root.iter():
        if not isinstance(trackpoint.tag, str) or _local_name(trackpoint) != "Trackpoint":
            continue
        lat = safe_float_optional(_child_text(trackpoint, "LatitudeDegrees"))
        lon = safe_float_optional(_child_text(trackpoint, "LongitudeDegrees"))
        if lat is None or lon is None:
            continue
        elevation = safe_float_optional(_child_text(trackpoint, "AltitudeMeters"))
        rows.append({"lat": lat, "lon": lon, "elevationM": elevation if elevation is not None else 0.0})

    logger.debug(f"Parsed TCX: {len(rows)} points")
    return pd.DataFrame(rows, columns=POINT_FRAME_COLUMNS)
