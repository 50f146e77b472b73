"""
Domain model for the radiology scan document and its tolerant JSON parser.

The document arrives as untyped JSON from the network, the local cache or the
bundled asset. Parsing never fails on missing or wrong-typed fields; each one
falls back to a fixed default so consumers always get a fully populated tree.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

DEFAULT_VERSION = "1.0"
DEFAULT_CATEGORY_NAME = "Unknown Category"
DEFAULT_CATEGORY_COLOR = "#005EB8"
DEFAULT_SCAN_TITLE = "Unknown Scan"
DEFAULT_BLADDER = "N/A"
DEFAULT_INSTRUCTIONS = "No specific instructions."
DEFAULT_DURATION = "0"
DEFAULT_LEVEL = "Low"
DEFAULT_RADIATION_LEVEL = "Green"
DEFAULT_ASPECT_RATIO = 1.5


class DocumentDecodeError(ValueError):
    """Raised when payload text is not JSON or its root is not a JSON object."""


@dataclass(frozen=True)
class Meta:
    version: str = DEFAULT_VERSION
    contact_email: str = ""


@dataclass(frozen=True)
class Preparation:
    fasting_hours: int = 0
    bladder: str = DEFAULT_BLADDER
    instructions: str = DEFAULT_INSTRUCTIONS

    @property
    def requires_fasting(self) -> bool:
        return self.fasting_hours > 0


@dataclass(frozen=True)
class Logistics:
    duration_minutes: str = DEFAULT_DURATION
    noise_level: str = DEFAULT_LEVEL
    claustrophobia_risk: str = DEFAULT_LEVEL


@dataclass(frozen=True)
class Safety:
    radiation_level: str = DEFAULT_RADIATION_LEVEL
    radiation_note: str = ""
    contrast_risk: bool = False
    pregnancy_safe: bool = True

    @property
    def traffic_light(self) -> str:
        """Normalized radiation level: "green", "amber" or "red". Unknown values read as green."""
        level = self.radiation_level.strip().lower()
        if level in ("amber", "orange"):
            return "amber"
        if level == "red":
            return "red"
        return "green"


@dataclass(frozen=True)
class Media:
    icon_url: str = ""
    hero_image_url: str = ""
    hero_aspect_ratio: float = DEFAULT_ASPECT_RATIO

    @property
    def has_icon(self) -> bool:
        return bool(self.icon_url)

    @property
    def has_hero_image(self) -> bool:
        return bool(self.hero_image_url)


@dataclass(frozen=True)
class Scan:
    id: str = ""
    title: str = DEFAULT_SCAN_TITLE
    short_summary: str = ""
    full_description: str = ""
    preparation: Preparation = Preparation()
    logistics: Logistics = Logistics()
    safety: Safety = Safety()
    media: Media = Media()


@dataclass(frozen=True)
class Section:
    category_name: str = DEFAULT_CATEGORY_NAME
    color_hex: str = DEFAULT_CATEGORY_COLOR
    scans: tuple[Scan, ...] = ()


@dataclass(frozen=True)
class Document:
    """Root of one fetch. Replaced wholesale on every load."""

    meta: Meta = Meta()
    sections: tuple[Section, ...] = ()

    @property
    def version(self) -> str:
        return self.meta.version

    @property
    def contact_email(self) -> str:
        return self.meta.contact_email

    def all_scans(self) -> list[Scan]:
        """Every scan in section order, then scan order within each section."""
        return [scan for section in self.sections for scan in section.scans]

    def find_scan(self, scan_id: str) -> Scan | None:
        for scan in self.all_scans():
            if scan.id == scan_id:
                return scan
        return None


@dataclass(frozen=True)
class SearchResult:
    """A scan paired with its owning section's name and colour, for display."""

    scan: Scan
    category_name: str
    category_color: str


def empty_document() -> Document:
    """Last-resort document when no tier produced usable data."""
    return Document(meta=Meta(version="0.0", contact_email=""), sections=())


# --- Field coercion ---

def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _str(data: dict[str, Any], key: str, default: str) -> str:
    val = data.get(key)
    return val if isinstance(val, str) else default


def _bool(data: dict[str, Any], key: str, default: bool) -> bool:
    val = data.get(key)
    return val if isinstance(val, bool) else default


def _is_number(val: Any) -> bool:
    # bool is a subclass of int; JSON true/false must not count as numbers.
    # json.loads accepts NaN/Infinity, which are not usable values either.
    if not isinstance(val, (int, float)) or isinstance(val, bool):
        return False
    return isinstance(val, int) or math.isfinite(val)


def _fasting_hours(val: Any) -> int:
    if not _is_number(val):
        return 0
    if isinstance(val, float):
        if not val.is_integer():
            return 0
        val = int(val)
    return val if val >= 0 else 0


def _duration(val: Any) -> str:
    if isinstance(val, str):
        return val
    if _is_number(val):
        return str(val)
    return DEFAULT_DURATION


def _aspect_ratio(val: Any) -> float:
    if _is_number(val) and val > 0:
        return float(val)
    return DEFAULT_ASPECT_RATIO


def _objects(value: Any) -> list[dict[str, Any]]:
    """Keep the JSON objects of a list, in order. Non-lists yield nothing."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


# --- Parsers ---

def _parse_meta(data: dict[str, Any]) -> Meta:
    return Meta(
        version=_str(data, "version", DEFAULT_VERSION),
        contact_email=_str(data, "contact_email", ""),
    )


def _parse_preparation(data: dict[str, Any]) -> Preparation:
    return Preparation(
        fasting_hours=_fasting_hours(data.get("fasting_hours")),
        bladder=_str(data, "bladder", DEFAULT_BLADDER),
        instructions=_str(data, "instructions", DEFAULT_INSTRUCTIONS),
    )


def _parse_logistics(data: dict[str, Any]) -> Logistics:
    return Logistics(
        duration_minutes=_duration(data.get("duration_minutes")),
        noise_level=_str(data, "noise_level", DEFAULT_LEVEL),
        claustrophobia_risk=_str(data, "claustrophobia_risk", DEFAULT_LEVEL),
    )


def _parse_safety(data: dict[str, Any]) -> Safety:
    return Safety(
        radiation_level=_str(data, "radiation_level", DEFAULT_RADIATION_LEVEL),
        radiation_note=_str(data, "radiation_note", ""),
        contrast_risk=_bool(data, "contrast_risk", False),
        pregnancy_safe=_bool(data, "pregnancy_safe", True),
    )


def _parse_media(data: dict[str, Any]) -> Media:
    return Media(
        icon_url=_str(data, "icon_url", ""),
        hero_image_url=_str(data, "hero_image_url", ""),
        hero_aspect_ratio=_aspect_ratio(data.get("hero_aspect_ratio")),
    )


def _parse_scan(data: dict[str, Any]) -> Scan:
    return Scan(
        id=_str(data, "id", ""),
        title=_str(data, "title", DEFAULT_SCAN_TITLE),
        short_summary=_str(data, "short_summary", ""),
        full_description=_str(data, "full_description", ""),
        preparation=_parse_preparation(_mapping(data.get("preparation"))),
        logistics=_parse_logistics(_mapping(data.get("logistics"))),
        safety=_parse_safety(_mapping(data.get("safety"))),
        media=_parse_media(_mapping(data.get("media"))),
    )


def _parse_section(data: dict[str, Any]) -> Section:
    return Section(
        category_name=_str(data, "category_name", DEFAULT_CATEGORY_NAME),
        color_hex=_str(data, "category_color_hex", DEFAULT_CATEGORY_COLOR),
        scans=tuple(_parse_scan(s) for s in _objects(data.get("scans"))),
    )


def parse_document(value: Any) -> Document:
    """
    Build a Document from an already-decoded JSON value.

    Total: any input, including None or a non-object, yields a Document.
    Missing or wrong-typed fields take their defaults; list entries that are
    not objects are skipped. Section and scan order is preserved.
    """
    data = _mapping(value)
    return Document(
        meta=_parse_meta(_mapping(data.get("meta"))),
        sections=tuple(_parse_section(s) for s in _objects(data.get("sections"))),
    )


def parse_document_text(text: str) -> Document:
    """
    Decode JSON text and build a Document.

    Raises:
        DocumentDecodeError: If the text is not JSON or the root is not an object.
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise DocumentDecodeError(f"Invalid document JSON: {e}") from e
    if not isinstance(data, dict):
        raise DocumentDecodeError(
            f"Document root must be a JSON object, got {type(data).__name__}"
        )
    return parse_document(data)
