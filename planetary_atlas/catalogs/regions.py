"""Large geographic regions per body.

Catalog order is significant: region assignment takes the first region
whose box contains a feature, so nested regions (Olympus Mons inside the
Tharsis Bulge) are listed before the regions that enclose them.
"""

from __future__ import annotations

from planetary_atlas.models.region import BoundingBox, Region


def _region(
    name: str, region_type: str, description: str, north: float, south: float, east: float, west: float
) -> Region:
    return Region(
        name=name,
        region_type=region_type,
        description=description,
        bounds=BoundingBox(north=north, south=south, east=east, west=west),
    )


REGIONS: dict[str, tuple[Region, ...]] = {
    "Moon": (
        _region("Mare Imbrium", "Mare", "Sea of Rains, a large lunar mare", 48.0, 19.0, 5.0, -20.0),
        _region("Mare Serenitatis", "Mare", "Sea of Serenity", 35.0, 17.0, 25.0, 10.0),
        _region(
            "Mare Tranquillitatis",
            "Mare",
            "Sea of Tranquility, the Apollo 11 landing site region",
            14.0, 0.0, 45.0, 23.0,
        ),
        _region("Mare Crisium", "Mare", "Sea of Crises", 24.0, 10.0, 65.0, 50.0),
        _region("Mare Fecunditatis", "Mare", "Sea of Fecundity", 0.0, -15.0, 60.0, 40.0),
        _region("Mare Nectaris", "Mare", "Sea of Nectar", -10.0, -20.0, 40.0, 25.0),
        _region(
            "Oceanus Procellarum",
            "Oceanus",
            "Ocean of Storms, the largest lunar mare",
            43.0, -23.0, -20.0, -65.0,
        ),
        _region("Mare Nubium", "Mare", "Sea of Clouds", -11.0, -30.0, -5.0, -25.0),
        _region("Mare Humorum", "Mare", "Sea of Moisture", -18.0, -32.0, -32.0, -45.0),
    ),
    "Mars": (
        _region(
            "Olympus Mons", "Mons", "Largest volcano in the solar system",
            25.0, 12.0, -127.0, -141.0,
        ),
        _region(
            "Valles Marineris", "Vallis", "Canyon system about 4000 km long",
            -2.0, -18.0, -30.0, -110.0,
        ),
        _region(
            "Tharsis Bulge", "Region", "Volcanic plateau with three major volcanoes",
            25.0, -15.0, -85.0, -135.0,
        ),
        _region(
            "Hellas Planitia", "Planitia", "Largest visible impact basin on Mars",
            -30.0, -55.0, 90.0, 50.0,
        ),
        _region("Isidis Planitia", "Planitia", "Ancient impact basin", 20.0, 5.0, 95.0, 75.0),
        _region(
            "Argyre Planitia", "Planitia", "Large impact basin in the southern highlands",
            -42.0, -57.0, -30.0, -55.0,
        ),
        _region(
            "Utopia Planitia", "Planitia",
            "Largest recognised impact basin, the Viking 2 landing site",
            55.0, 35.0, 130.0, 90.0,
        ),
        _region(
            "Chryse Planitia", "Planitia", "Smooth circular plain, the Viking 1 landing site",
            35.0, 15.0, -25.0, -55.0,
        ),
        _region(
            "Elysium Planitia", "Planitia",
            "Second largest volcanic region, the InSight landing site",
            10.0, -5.0, 160.0, 130.0,
        ),
        _region(
            "Syrtis Major Planum", "Planum", "Dark albedo feature visible from Earth",
            20.0, -5.0, 80.0, 60.0,
        ),
    ),
    "Mercury": (
        # Crosses the antimeridian
        _region(
            "Caloris Planitia", "Planitia", "Largest impact basin on Mercury, 1550 km across",
            45.0, 15.0, -175.0, 165.0,
        ),
        _region("Borealis Planitia", "Planitia", "Northern smooth plains", 85.0, 60.0, -60.0, -100.0),
    ),
    "Vesta": (
        _region(
            "Rheasilvia", "Crater",
            "Impact basin covering the southern hemisphere, 505 km across",
            -60.0, -90.0, 360.0, 0.0,
        ),
        _region(
            "Veneneia", "Crater", "Impact basin underlying Rheasilvia, 395 km across",
            -40.0, -65.0, 350.0, 300.0,
        ),
    ),
}


def regions_for(body_key: str) -> tuple[Region, ...]:
    """Return the region catalog for *body_key*; empty for bodies without one."""
    return REGIONS.get(body_key, ())
