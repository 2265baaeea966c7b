from typing import Optional

INVALID_DIRECTION = "error getting direction"

# Inclusive (low, high, label) buckets. 0 and 360 both read as north.
_BUCKETS = (
    (0, 22, "N"),
    (23, 67, "NE"),
    (68, 112, "E"),
    (113, 157, "SE"),
    (158, 202, "S"),
    (203, 247, "SW"),
    (248, 292, "W"),
    (293, 337, "NW"),
    (338, 360, "N"),
)


def compass_direction(degrees: int) -> Optional[str]:
    """
    Map a wind direction in degrees to an 8-point compass label.

    Values outside [0, 360] are not wrapped; they return None.
    """
    for low, high, label in _BUCKETS:
        if low <= degrees <= high:
            return label
    return None


def to_compass(degrees: int) -> str:
    """Same as `compass_direction`, with a marker string for invalid input."""
    label = compass_direction(degrees)
    return label if label is not None else INVALID_DIRECTION
