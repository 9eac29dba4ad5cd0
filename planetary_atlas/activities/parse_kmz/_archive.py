"""KMZ container handling.

A KMZ is a zip archive holding one KML document and optional embedded
images. Container-level failures are reported on ``ArchiveContents.error``
instead of being raised.
"""

from __future__ import annotations

import io
import logging
import zipfile
import zlib
from dataclasses import dataclass, field

from planetary_atlas.activities.parse_kmz._constants import IMAGE_EXTENSIONS, KML_EXTENSION
from planetary_atlas.activities.parse_kmz._lxml_parser import parse_kml_document
from planetary_atlas.activities.parse_kmz._validation import KmzParseError
from planetary_atlas.models.feature import Feature

logger = logging.getLogger("planetary_atlas.activities.parse_kmz")

# Corrupt streams, truncated data, encrypted entries, unsupported compression
_ENTRY_READ_ERRORS = (
    zipfile.BadZipFile,
    OSError,
    EOFError,
    zlib.error,
    RuntimeError,
    NotImplementedError,
)


@dataclass(frozen=True, slots=True)
class AuxiliaryAsset:
    """An embedded file carried in the archive next to the KML document."""

    name: str
    data: bytes


@dataclass(slots=True)
class ArchiveContents:
    """Result of parsing one KMZ archive.

    Attributes:
        features: Usable point features, in document order.
        auxiliary_assets: Embedded image files.
        skipped_count: Placemarks dropped as malformed.
        error: Recoverable parse failure, or ``None`` on success.
    """

    features: list[Feature] = field(default_factory=list)
    auxiliary_assets: list[AuxiliaryAsset] = field(default_factory=list)
    skipped_count: int = 0
    error: KmzParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_kmz(blob: bytes) -> ArchiveContents:
    """Extract features and embedded images from a KMZ blob.

    The first ``*.kml`` entry in archive order is parsed. A corrupt
    container, a missing KML entry or malformed XML yields an empty
    result with ``error`` set; this function does not raise for bad input.
    """
    try:
        archive = zipfile.ZipFile(io.BytesIO(blob))
    except zipfile.BadZipFile as exc:
        return _failed(KmzParseError(f"Not a valid KMZ container: {exc}"))

    with archive:
        entries = [info for info in archive.infolist() if not info.is_dir()]
        kml_entry = next(
            (info for info in entries if info.filename.lower().endswith(KML_EXTENSION)), None
        )
        if kml_entry is None:
            return _failed(KmzParseError("KMZ archive contains no .kml document"))

        try:
            content = archive.read(kml_entry)
            assets = [
                AuxiliaryAsset(name=info.filename, data=archive.read(info))
                for info in entries
                if info.filename.lower().endswith(IMAGE_EXTENSIONS)
            ]
        except _ENTRY_READ_ERRORS as exc:
            return _failed(KmzParseError(f"Cannot read KMZ entry: {exc}"))

    try:
        features, skipped = parse_kml_document(content, source_filename=kml_entry.filename)
    except KmzParseError as exc:
        return _failed(exc, assets)

    logger.info(
        "Parsed %d feature(s) and %d asset(s) from %s (%d skipped)",
        len(features),
        len(assets),
        kml_entry.filename,
        skipped,
    )
    return ArchiveContents(features=features, auxiliary_assets=assets, skipped_count=skipped)


def _failed(error: KmzParseError, assets: list[AuxiliaryAsset] | None = None) -> ArchiveContents:
    logger.warning("KMZ parse failed: %s", error)
    return ArchiveContents(auxiliary_assets=assets or [], error=error)
