"""
Points fingerprint for unsaved-changes detection.

Not a security primitive: a fast rolling hash over a canonical JSON
rendering of the fields that define a point sequence.

Dependencies: json (stdlib)
System role: Change detector comparing live points with the last save
"""

import json
from collections.abc import Sequence

from area_sessions.models.session import TrackedPoint

_HASH_MASK = (1 << 64) - 1
_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _canonical_points(points: Sequence[TrackedPoint]) -> str:
    # float repr round-trips, so any bit-level coordinate change alters the text
    return json.dumps(
        [
            {
                "lat": float(p.point.lat),
                "lng": float(p.point.lng),
                "type": p.type,
                "timestamp": int(p.timestamp),
            }
            for p in points
        ],
        separators=(",", ":"),
        allow_nan=True,
    )


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def generate_points_hash(points: Sequence[TrackedPoint]) -> str:
    """
    Generate a deterministic fingerprint of a point sequence.

    Order-sensitive and sensitive to lat, lng, type and timestamp of every
    point. Defined for the empty sequence.

    Args:
        points: Recorded points in path order

    Returns:
        str: Lowercase base-36 digest
    """
    serialized = _canonical_points(points)

    digest = 0
    for byte in serialized.encode("utf-8"):
        digest = ((digest << 5) - digest + byte) & _HASH_MASK
    return _to_base36(digest)
