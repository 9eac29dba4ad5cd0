"""Shared pytest fixtures for the Planetary Atlas test suite."""

from __future__ import annotations

import io
import zipfile

import pytest

from planetary_atlas.models.feature import Feature, FeatureSource
from planetary_atlas.models.knowledge import KnowledgeBasePage

# ---------------------------------------------------------------------------
# KML / KMZ builders
# ---------------------------------------------------------------------------

KML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n<kml xmlns="http://www.opengis.net/kml/2.2">'


def placemark(
    name: str,
    coordinates: str,
    *,
    feature_type: str | None = None,
    diameter: str | None = None,
    origin: str | None = None,
) -> str:
    """Return one ``<Placemark>`` element with USGS-style SchemaData."""
    fields = []
    if feature_type is not None:
        fields.append(f'<SimpleData name="feature_type">{feature_type}</SimpleData>')
    if diameter is not None:
        fields.append(f'<SimpleData name="diameter">{diameter}</SimpleData>')
    if origin is not None:
        fields.append(f'<SimpleData name="origin">{origin}</SimpleData>')
    extended = (
        f"<ExtendedData><SchemaData>{''.join(fields)}</SchemaData></ExtendedData>" if fields else ""
    )
    return (
        f"<Placemark><name>{name}</name>{extended}"
        f"<Point><coordinates>{coordinates}</coordinates></Point></Placemark>"
    )


def kml_document(*placemarks: str) -> bytes:
    """Wrap placemarks in a KML document inside a Folder."""
    body = "".join(placemarks)
    return f"{KML_HEADER}<Document><Folder>{body}</Folder></Document></kml>".encode()


def kmz_archive(entries: dict[str, bytes]) -> bytes:
    """Zip *entries* (name to bytes) into an in-memory KMZ."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return buffer.getvalue()


def corrupt_entry(blob: bytes, name: str) -> bytes:
    """Invert the compressed bytes of entry *name*, leaving the zip headers intact."""
    info = zipfile.ZipFile(io.BytesIO(blob)).getinfo(name)
    data = bytearray(blob)
    offset = info.header_offset
    name_len = int.from_bytes(data[offset + 26 : offset + 28], "little")
    extra_len = int.from_bytes(data[offset + 28 : offset + 30], "little")
    start = offset + 30 + name_len + extra_len
    for i in range(start, start + info.compress_size):
        data[i] ^= 0xFF
    return bytes(data)


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def moon_kml() -> bytes:
    """Three well-formed lunar placemarks."""
    return kml_document(
        placemark("Tycho", "-11.36,-43.31", feature_type="Crater, craters", diameter="85.29"),
        placemark("Copernicus", "-20.08,9.62,0", feature_type="Crater, craters", diameter="96.07"),
        placemark("Tycho A", "-12.0,-40.0", feature_type="Crater, craters", diameter="19.5"),
    )


@pytest.fixture()
def moon_kmz(moon_kml: bytes) -> bytes:
    return kmz_archive({"MOON_nomenclature_center_pts.kml": moon_kml, "files/legend.png": b"PNG"})


@pytest.fixture()
def curated_moon() -> list[Feature]:
    """Three curated lunar features."""
    return [
        Feature("Tycho", "Crater", -43.3, -11.4, source=FeatureSource.CURATED),
        Feature("Mare Tranquillitatis", "Mare", 8.5, 31.4, source=FeatureSource.CURATED),
        Feature("Aristarchus", "Crater", 23.7, -47.4, source=FeatureSource.CURATED),
    ]


@pytest.fixture()
def olympus_page() -> KnowledgeBasePage:
    """A knowledge-base page with dated text and no infobox."""
    return KnowledgeBasePage(
        title="Olympus Mons",
        url="https://en.wikipedia.org/wiki/Olympus_Mons",
        intro="Olympus Mons is a large shield volcano on Mars. It is about 22 km high.",
        full_text=(
            "Olympus Mons is a large shield volcano on Mars. "
            "The volcano formed about 3.5 billion years ago. "
            "Its last eruption was about 25 million years ago, and earlier "
            "activity about 1.2 billion years ago built the aureole."
        ),
    )


# ---------------------------------------------------------------------------
# Builder fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_placemark():
    return placemark


@pytest.fixture()
def make_kml():
    return kml_document


@pytest.fixture()
def make_kmz():
    return kmz_archive


@pytest.fixture()
def make_corrupt_entry():
    return corrupt_entry
