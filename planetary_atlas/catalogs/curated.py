"""Curated catalog of well-known features per body.

Used alongside the archive (archive records win on a name clash) and on
its own when the archive is unavailable. ``within_region`` is set only
where the containing region is known independently of the region boxes.
"""

from __future__ import annotations

from planetary_atlas.models.feature import Feature, FeatureSource


def _curated(
    name: str, feature_type: str, lat: float, lon: float, region: str | None = None
) -> Feature:
    return Feature(
        name=name,
        feature_type=feature_type,
        latitude=lat,
        longitude=lon,
        source=FeatureSource.CURATED,
        within_region=region,
    )


CURATED_FEATURES: dict[str, tuple[Feature, ...]] = {
    "Moon": (
        _curated("Aristarchus", "Crater", 23.7, -47.4, "Oceanus Procellarum"),
        _curated("Kepler", "Crater", 8.1, -38.0, "Oceanus Procellarum"),
        _curated("Copernicus", "Crater", 9.7, -20.1, "Oceanus Procellarum"),
        _curated("Pytheas", "Crater", 20.5, -20.6, "Mare Imbrium"),
        _curated("Archimedes", "Crater", 29.7, -4.0, "Mare Imbrium"),
        _curated("Plato", "Crater", 51.6, -9.3, "Mare Imbrium"),
        _curated("Timocharis", "Crater", 26.7, -13.1, "Mare Imbrium"),
        _curated("Bessel", "Crater", 21.8, 17.9, "Mare Serenitatis"),
        _curated("Plinius", "Crater", 15.4, 23.7, "Mare Serenitatis"),
        _curated("Maskelyne", "Crater", 2.2, 30.9, "Mare Tranquillitatis"),
        _curated("Moltke", "Crater", -0.6, 24.2, "Mare Tranquillitatis"),
        _curated("Theophilus", "Crater", -11.4, 26.4, "Mare Nectaris"),
        _curated("Rosse", "Crater", -17.9, 35.0, "Mare Nectaris"),
        _curated("Picard", "Crater", 14.6, 54.7, "Mare Crisium"),
        _curated("Peirce", "Crater", 18.3, 53.5, "Mare Crisium"),
        _curated("Langrenus", "Crater", -8.9, 61.1, "Mare Fecunditatis"),
        _curated("Petavius", "Crater", -25.3, 60.4, "Mare Fecunditatis"),
        _curated("Tycho", "Crater", -43.3, -11.4),
        _curated("Clavius", "Crater", -58.8, -14.4),
        _curated("Schickard", "Crater", -44.3, -55.3),
        _curated("Grimaldi", "Crater", -5.5, -68.6),
        _curated("Ptolemaeus", "Crater", -9.3, -1.8),
        _curated("Alphonsus", "Crater", -13.4, -2.8),
        _curated("Arzachel", "Crater", -18.2, -1.9),
        _curated("Eratosthenes", "Crater", 14.5, -11.3),
        _curated("Aristoteles", "Crater", 50.2, 17.4),
        _curated("Eudoxus", "Crater", 44.3, 16.3),
        _curated("Posidonius", "Crater", 31.8, 29.9),
        _curated("Atlas", "Crater", 46.7, 44.4),
        _curated("Hercules", "Crater", 46.7, 39.1),
        _curated("Endymion", "Crater", 53.6, 56.5),
        _curated("Gassendi", "Crater", -17.5, -40.1, "Mare Humorum"),
        _curated("Bullialdus", "Crater", -20.7, -22.2, "Mare Nubium"),
        _curated("Flamsteed", "Crater", -4.5, -44.3, "Oceanus Procellarum"),
        _curated("Mare Imbrium", "Mare", 32.8, -15.6),
        _curated("Mare Serenitatis", "Mare", 28.0, 17.5),
        _curated("Mare Tranquillitatis", "Mare", 8.5, 31.4),
        _curated("Mare Crisium", "Mare", 17.0, 59.1),
        _curated("Mare Fecunditatis", "Mare", -7.8, 51.3),
        _curated("Mare Nectaris", "Mare", -15.2, 35.5),
        _curated("Oceanus Procellarum", "Oceanus", 18.4, -57.4),
        _curated("Mare Nubium", "Mare", -21.3, -16.6),
        _curated("Mare Humorum", "Mare", -24.4, -38.6),
        _curated("Mare Frigoris", "Mare", 56.0, 1.4),
        _curated("Mare Vaporum", "Mare", 13.3, 3.6),
        _curated("Sinus Iridum", "Sinus", 44.1, -31.5, "Mare Imbrium"),
        _curated("Sinus Medii", "Sinus", 2.4, 1.7),
        _curated("Lacus Somniorum", "Lacus", 38.0, 29.2),
        _curated("Palus Putredinis", "Palus", 26.5, 0.4, "Mare Imbrium"),
    ),
    "Mars": (
        _curated("Olympus Mons", "Mons", 18.65, -133.8, "Tharsis Bulge"),
        _curated("Ascraeus Mons", "Mons", 11.9, -104.5, "Tharsis Bulge"),
        _curated("Pavonis Mons", "Mons", 1.5, -112.8, "Tharsis Bulge"),
        _curated("Arsia Mons", "Mons", -8.4, -120.1, "Tharsis Bulge"),
        _curated("Alba Mons", "Mons", 40.5, -109.9),
        _curated("Elysium Mons", "Mons", 25.0, 147.2),
        _curated("Hecates Tholus", "Tholus", 32.4, 150.2),
        _curated("Albor Tholus", "Tholus", 19.0, 150.5),
        _curated("Valles Marineris", "Vallis", -13.9, -59.2),
        _curated("Ius Chasma", "Chasma", -7.2, -85.8, "Valles Marineris"),
        _curated("Melas Chasma", "Chasma", -10.4, -72.0, "Valles Marineris"),
        _curated("Coprates Chasma", "Chasma", -13.9, -61.3, "Valles Marineris"),
        _curated("Candor Chasma", "Chasma", -6.4, -71.0, "Valles Marineris"),
        _curated("Hellas Planitia", "Planitia", -42.4, 70.5),
        _curated("Isidis Planitia", "Planitia", 12.9, 87.0),
        _curated("Argyre Planitia", "Planitia", -49.7, -43.4),
        _curated("Utopia Planitia", "Planitia", 46.7, 117.5),
        _curated("Chryse Planitia", "Planitia", 28.4, -40.0),
        _curated("Amazonis Planitia", "Planitia", 24.8, -158.0),
        _curated("Elysium Planitia", "Planitia", 3.0, 154.7),
        _curated("Acidalia Planitia", "Planitia", 46.7, -22.0),
        _curated("Syrtis Major Planum", "Planum", 8.4, 69.5),
        _curated("Meridiani Planum", "Planum", -1.9, -5.5),
        _curated("Lunae Planum", "Planum", 10.5, -68.0),
        _curated("Hesperia Planum", "Planum", -19.4, 110.0),
        _curated("Gale", "Crater", -5.4, 137.8),
        _curated("Jezero", "Crater", 18.4, 77.7),
        _curated("Huygens", "Crater", -14.0, 304.4),
        _curated("Schiaparelli", "Crater", -2.7, 343.4),
        _curated("Herschel", "Crater", -14.9, 230.3),
        _curated("Lowell", "Crater", -52.3, 278.8),
        _curated("Holden", "Crater", -26.4, 325.3),
        _curated("Eberswalde", "Crater", -23.9, 326.7),
        _curated("Endeavour", "Crater", -2.3, 354.5),
        _curated("Victoria", "Crater", -2.1, 354.5, "Meridiani Planum"),
        _curated("Gusev", "Crater", -14.6, 175.4),
        _curated("Kasei Valles", "Vallis", 24.6, -65.0),
        _curated("Ma'adim Vallis", "Vallis", -20.6, 182.1),
        _curated("Ares Vallis", "Vallis", 10.3, -25.8),
        _curated("Tiu Valles", "Vallis", 15.0, -36.0),
        _curated("Planum Boreum", "Planum", 85.0, 0.0),
        _curated("Planum Australe", "Planum", -85.0, 0.0),
        _curated("Terra Sabaea", "Terra", 2.0, 42.0),
        _curated("Terra Sirenum", "Terra", -39.7, -150.0),
        _curated("Terra Cimmeria", "Terra", -34.7, 145.0),
        _curated("Noachis Terra", "Terra", -45.0, 350.0),
        _curated("Noctis Labyrinthus", "Labyrinthus", -7.0, -100.0, "Tharsis Bulge"),
        _curated("Cerberus Fossae", "Fossae", 11.3, 166.37),
    ),
    "Mercury": (
        _curated("Caloris Planitia", "Planitia", 30.5, -189.8),
        _curated("Borealis Planitia", "Planitia", 73.4, -79.5),
        _curated("Beethoven", "Crater", -20.3, -123.6),
        _curated("Tolstoj", "Crater", -16.3, -164.5),
        _curated("Rembrandt", "Crater", -32.8, -88.3),
        _curated("Rachmaninoff", "Crater", 27.6, -57.6),
        _curated("Raditladi", "Crater", 27.0, -119.4, "Caloris Planitia"),
        _curated("Homer", "Crater", -1.4, -36.2),
        _curated("Goethe", "Crater", 79.6, -54.3),
        _curated("Raphael", "Crater", -20.0, -76.0),
        _curated("Praxiteles", "Crater", 27.2, -59.6),
        _curated("Schubert", "Crater", -43.3, -54.3),
        _curated("Brahms", "Crater", 58.5, -176.5),
        _curated("Vivaldi", "Crater", 13.7, -86.1),
        _curated("Bach", "Crater", -69.2, -103.7),
        _curated("Mozart", "Crater", 8.1, -190.5),
        _curated("Dickens", "Crater", -72.9, -153.3),
        _curated("Michelangelo", "Crater", -45.0, -109.1),
        _curated("Verdi", "Crater", -64.7, -168.6),
        _curated("Kuiper", "Crater", -11.3, -31.3),
        _curated("Degas", "Crater", 37.5, -126.4),
        _curated("Hokusai", "Crater", 57.7, -16.8),
        _curated("Kertész", "Crater", 27.5, -146.0),
        _curated("Matisse", "Crater", 24.1, -90.1),
        _curated("Picasso", "Crater", -4.7, -47.0),
        _curated("Renoir", "Crater", -18.9, -51.9),
        _curated("Shakespeare", "Crater", 49.7, -151.0),
        _curated("Stravinsky", "Crater", 50.5, -73.7),
        _curated("Vyasa", "Crater", 48.3, -81.1),
        _curated("Wagner", "Crater", 67.6, -114.0),
        _curated("Zeami", "Crater", 3.5, -147.2),
        _curated("Mansur", "Crater", 47.6, -162.5),
        _curated("Neruda", "Crater", -43.4, -179.0),
        _curated("Petrarch", "Crater", 30.5, -26.2),
        _curated("Discovery Rupes", "Rupes", -56.0, -38.0),
        _curated("Adventure Rupes", "Rupes", -65.0, -63.5),
        _curated("Victoria Rupes", "Rupes", -50.9, -31.1),
        _curated("Pantheon Fossae", "Fossae", 30.6, -197.0, "Caloris Planitia"),
        _curated("Apollodorus", "Crater", 30.9, -197.0, "Caloris Planitia"),
        _curated("Odin Planitia", "Planitia", 23.3, -171.6),
        _curated("Suisei Planitia", "Planitia", 59.2, -151.3),
        _curated("Tir Planitia", "Planitia", 0.8, -176.1),
        _curated("Budh Planitia", "Planitia", 22.0, -151.0),
    ),
    "Vesta": (
        _curated("Rheasilvia", "Crater", -75.0, 301.0),
        _curated("Veneneia", "Crater", -52.0, 325.0),
        _curated("Marcia", "Crater", -10.0, 190.0),
        _curated("Calpurnia", "Crater", -32.0, 170.0),
        _curated("Minucia", "Crater", -24.0, 145.0),
        _curated("Cornelia", "Crater", -9.0, 225.0),
        _curated("Numisia", "Crater", -8.0, 246.0),
        _curated("Postumia", "Crater", -25.0, 220.0),
        _curated("Vibidia", "Crater", -26.0, 140.0),
        _curated("Claudia", "Crater", 12.0, 215.0),
        _curated("Domitia", "Crater", -35.0, 178.0),
        _curated("Antonia", "Crater", -19.0, 75.0),
        _curated("Licinia", "Crater", 4.0, 140.0),
        _curated("Tuccia", "Crater", -4.0, 210.0),
        _curated("Arruntia", "Crater", -23.0, 240.0),
        _curated("Oppia", "Crater", -8.0, 307.0),
        _curated("Gegania", "Crater", -51.0, 198.0),
        _curated("Fabia", "Crater", -16.0, 199.0),
        _curated("Pomponia", "Crater", 15.0, 290.0),
        _curated("Vestalia Terra", "Terra", -20.0, 270.0),
    ),
}


def curated_features(body_key: str) -> list[Feature]:
    """Return the curated features for *body_key*; empty for uncatalogued bodies."""
    return list(CURATED_FEATURES.get(body_key, ()))
