"""Feature pipeline activities.

- fetch_archive: Download a body's nomenclature archive
- parse_kmz: Extract point features from a KMZ archive
- reconcile: Merge archive and curated features, assign regions
- hierarchy: Group lettered satellite features under their parent
"""
