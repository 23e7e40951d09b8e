"""
Swiss national grid (LV03) to WGS84 conversion.

Approximate polynomial from swisstopo. The Swiss grid uses x for the
North-South axis and y for the East-West axis.
"""

from ._arrays import as_arrays, unwrap

# LV03 false origin
FALSE_NORTHING = 2e5
FALSE_EASTING = 6e5

# Result of the polynomial is in units of 10000 seconds
SEXAGESIMAL_TO_DEGREES = 100. / 36.


def swiss_coords_to_lat_lon(x, y):
    """
    Convert Swiss grid coordinates to latitude and longitude.

    The false origin offsets are subtracted from x and y as given, so the
    inputs must be in the offsets' native unit (meters) for a geographically
    meaningful result.

    Args:
        x: Coordinate on the Swiss grid
        y: As x

    Returns:
        Tuple of (lat, lon) in degrees; latitude comes first
    """
    x, y = as_arrays("swiss_coords_to_lat_lon", x, y)
    # Shift origin and convert units
    x_c = (y - FALSE_NORTHING) / 1e6
    y_c = (x - FALSE_EASTING) / 1e6
    lon = (2.6779094 + 4.728982 * y_c + 0.791484 * y_c * x_c + 0.1306 * y_c * x_c**2 -
           0.0436 * x_c**3)
    lat = (16.9023892 + 3.238272 * x_c - 0.270978 * y_c**2 - 0.002528 * x_c**2 -
           0.0447 * y_c**2 * x_c - 0.014 * y_c**3)
    return unwrap(SEXAGESIMAL_TO_DEGREES * lat), unwrap(SEXAGESIMAL_TO_DEGREES * lon)
