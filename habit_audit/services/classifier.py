"""
Band classification for a single marker value.

Two variants share one severity comparison:
- ``classify``: the six-band headline scale used for scoring
- ``classify_table``: the four-tier scale used by the breakdown table

They intentionally disagree at the extremes: "excellent" and "very bad"
only exist on the headline scale.
"""

from habit_audit.domain.models import Band, Bands, Classification, Marker, Penalties

# Multipliers applied to thresholds for the headline extremes
UPPER_EXTREME_FACTOR = 1.5
LOWER_EXTREME_FACTOR = 0.5
VERY_BAD_EXTRA_PENALTY = 2.0

BAND_ICONS: dict[Band, str] = {
    Band.EXCELLENT: "🌟",
    Band.GOOD: "✅",
    Band.MILD: "⚠️",
    Band.MODERATE: "⚠️",
    Band.HIGH: "❌",
    Band.VERY_BAD: "💀",
}


def _worse(value: float, threshold: float, invert: bool) -> bool:
    """Strict comparison: a value on the threshold stays in the lesser band."""
    return value < threshold if invert else value > threshold


def _severity(value: float, bands: Bands, penalties: Penalties, invert: bool) -> Classification:
    if _worse(value, bands.high, invert):
        return Classification(band=Band.HIGH, penalty=penalties.high)
    if _worse(value, bands.moderate, invert):
        return Classification(band=Band.MODERATE, penalty=penalties.moderate)
    if _worse(value, bands.mild, invert):
        return Classification(band=Band.MILD, penalty=penalties.mild)
    return Classification(band=Band.GOOD, penalty=0.0)


def classify(value: float, bands: Bands, penalties: Penalties, invert: bool) -> Classification:
    """
    Classify a value on the six-band headline scale.

    Non-inverted markers (lower is better):
        value > high * 1.5    -> very bad (penalties.high + 2)
        value > high          -> high
        value > moderate      -> moderate
        value > mild          -> mild
        value <= mild * 0.5   -> excellent
        otherwise             -> good

    Inverted markers mirror this with ``<``, ``high * 0.5`` for very bad and
    ``value >= mild * 1.5`` for excellent.
    """
    if invert:
        very_bad = value < bands.high * LOWER_EXTREME_FACTOR
        excellent = value >= bands.mild * UPPER_EXTREME_FACTOR
    else:
        very_bad = value > bands.high * UPPER_EXTREME_FACTOR
        excellent = value <= bands.mild * LOWER_EXTREME_FACTOR

    if very_bad:
        return Classification(
            band=Band.VERY_BAD, penalty=penalties.high + VERY_BAD_EXTRA_PENALTY
        )

    result = _severity(value, bands, penalties, invert)
    if result.band is Band.GOOD and excellent:
        return Classification(band=Band.EXCELLENT, penalty=0.0)
    return result


def classify_table(value: float, bands: Bands, penalties: Penalties, invert: bool) -> Classification:
    """Classify a value on the four-tier table scale (good/mild/moderate/high)."""
    return _severity(value, bands, penalties, invert)


def classify_marker(marker: Marker, value: float) -> Classification:
    return classify(value, marker.bands, marker.penalties, marker.invert)


def band_icon(band: Band) -> str:
    return BAND_ICONS[band]


def band_note(marker: Marker, band: Band) -> str | None:
    """Warning note for a table band: mild uses the mild note, moderate/high the high note."""
    if band is Band.MILD:
        return marker.notes.mild
    if band in (Band.MODERATE, Band.HIGH):
        return marker.notes.high
    return None
