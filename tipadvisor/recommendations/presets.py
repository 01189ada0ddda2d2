from __future__ import annotations

PREDEFINED_TIP_PERCENTAGES: tuple[int, ...] = (10, 18, 20, 25)


def match_preset(
    percentage: float,
    presets: tuple[int, ...] = PREDEFINED_TIP_PERCENTAGES,
) -> int | None:
    """Return the preset button equal to ``percentage``, or None for a custom value."""
    for preset in presets:
        if percentage == preset:
            return preset
    return None


def nearest_preset(
    percentage: float,
    presets: tuple[int, ...] = PREDEFINED_TIP_PERCENTAGES,
) -> int:
    # min() keeps the first of equal distances, so ties go to the lower preset
    return min(sorted(presets), key=lambda p: abs(p - percentage))
