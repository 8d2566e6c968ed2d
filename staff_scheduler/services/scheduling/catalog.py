"""
Static reference data: rotation patterns and shift catalogs per industry,
plus coverage preset defaults.
"""

from datetime import time
from typing import Optional, Union

from .types import (
    CoveragePreset,
    Industry,
    RotationPattern,
    ShiftCategory,
    ShiftDefinition,
)


NO_PATTERN_ID = "custom"

# 1 = working, 0 = off, one complete cycle
_5ON2OFF = (1, 1, 1, 1, 1, 0, 0)
_4ON4OFF = (1, 1, 1, 1, 0, 0, 0, 0)
_4ON3OFF = (1, 1, 1, 1, 0, 0, 0)
_3ON4OFF = (1, 1, 1, 0, 0, 0, 0)
_6ON1OFF = (1, 1, 1, 1, 1, 1, 0)
_2_2_3 = (1, 1, 0, 0, 1, 1, 1, 0, 0, 1, 1, 0, 0, 0)


ROTATION_PATTERNS: dict[Industry, list[RotationPattern]] = {
    Industry.HEALTHCARE: [
        RotationPattern(NO_PATTERN_ID, "Custom / No Pattern", None,
                        "Let the scheduler optimize for coverage"),
        RotationPattern("5on2off", "5 on, 2 off (Standard Week)", _5ON2OFF,
                        "Traditional Monday-Friday schedule with weekends off"),
        RotationPattern("4on4off", "4 on, 4 off", _4ON4OFF,
                        "Common for 12-hour shifts. Good for 24/7 coverage."),
        RotationPattern("3on4off", "3 on, 4 off (36-hour week)", _3ON4OFF,
                        "Three 12-hour shifts per week. Popular in nursing."),
        RotationPattern("7on7off", "7 on, 7 off", (1,) * 7 + (0,) * 7,
                        "Work a full week, off a full week."),
        RotationPattern(
            "dupont", "DuPont (4-week cycle)",
            (1, 1, 1, 1, 0, 0, 0, 1, 1, 1, 0, 1, 1, 1,
             0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0),
            "4 nights, 3 off, 3 days, 1 off, 3 nights, 3 off, 4 days, 7 off",
        ),
        RotationPattern("panama", "Panama / 2-2-3", _2_2_3,
                        "2 on, 2 off, 3 on, 2 off, 2 on, 3 off. Every other weekend off."),
    ],
    Industry.MANUFACTURING: [
        RotationPattern(NO_PATTERN_ID, "Custom / No Pattern", None,
                        "Let the scheduler optimize for coverage"),
        RotationPattern("5on2off", "5 on, 2 off (Standard Week)", _5ON2OFF,
                        "Traditional Monday-Friday, 8-hour shifts"),
        RotationPattern("4on3off", "4 on, 3 off (4x10)", _4ON3OFF,
                        "Four 10-hour days, three days off."),
        RotationPattern("4on4off", "4 on, 4 off", _4ON4OFF,
                        "12-hour shifts for continuous operations"),
        RotationPattern("continental", "Continental (Fast Rotation)",
                        (1, 1, 1, 1, 1, 1, 0, 0, 0, 0),
                        "2 days, 2 evenings, 2 nights, 4 off."),
        RotationPattern("panama", "Panama / 2-2-3", _2_2_3,
                        "2 on, 2 off, 3 on, 2 off, 2 on, 3 off."),
        RotationPattern("6on1off", "6 on, 1 off", _6ON1OFF,
                        "Six days working, one day rest."),
    ],
    Industry.PUBLIC_SAFETY: [
        RotationPattern(NO_PATTERN_ID, "Custom / No Pattern", None,
                        "Let the scheduler optimize for coverage"),
        RotationPattern("24on48off", "24 on, 48 off", (1, 0, 0),
                        "One 24-hour shift, two days off."),
        RotationPattern("24on72off", "24 on, 72 off", (1, 0, 0, 0),
                        "One 24-hour shift, three days off."),
        RotationPattern("4on4off", "4 on, 4 off (12-hour)", _4ON4OFF,
                        "Four 12-hour shifts, four days off."),
        RotationPattern("pitman", "Pitman Schedule", _2_2_3,
                        "2 on, 2 off, 3 on, 2 off, 2 on, 3 off."),
        RotationPattern("5on2off5on3off", "5-2, 5-3 Rotation",
                        (1, 1, 1, 1, 1, 0, 0, 1, 1, 1, 1, 1, 0, 0, 0),
                        "5 on, 2 off, then 5 on, 3 off."),
        RotationPattern("california", "California 3/12", _3ON4OFF,
                        "Three 12-hour shifts with 4 days off."),
    ],
    Industry.RETAIL: [
        RotationPattern(NO_PATTERN_ID, "Custom / No Pattern", None,
                        "Flexible scheduling based on demand"),
        RotationPattern("5on2off", "5 on, 2 off", _5ON2OFF,
                        "Standard 5-day work week"),
        RotationPattern("4on2off", "4 on, 2 off", (1, 1, 1, 1, 0, 0),
                        "Four days working, two days off."),
        RotationPattern("4on3off", "4 on, 3 off", _4ON3OFF,
                        "Four longer shifts with extended weekend"),
        RotationPattern("6on1off", "6 on, 1 off", _6ON1OFF,
                        "Six days working, one day off."),
        RotationPattern("split", "Split Week (3-1-3)", (1, 1, 1, 0, 1, 1, 1, 0, 0),
                        "3 on, 1 off, 3 on, then varying."),
    ],
    Industry.OTHER: [
        RotationPattern(NO_PATTERN_ID, "Custom / No Pattern", None,
                        "Flexible scheduling without fixed rotation"),
        RotationPattern("5on2off", "5 on, 2 off (Standard)", _5ON2OFF,
                        "Traditional Monday-Friday schedule"),
        RotationPattern("4on3off", "4 on, 3 off", _4ON3OFF,
                        "Four-day work week with three-day weekend"),
        RotationPattern("4on4off", "4 on, 4 off", _4ON4OFF,
                        "Balanced work-rest ratio for continuous coverage"),
        RotationPattern("6on2off", "6 on, 2 off", (1, 1, 1, 1, 1, 1, 0, 0),
                        "Six-day week with two consecutive days off"),
    ],
}


def _working(code: str, start: tuple[int, int], end: tuple[int, int], description: str) -> ShiftDefinition:
    return ShiftDefinition(
        code=code,
        category=ShiftCategory.WORKING,
        start_time=time(*start),
        end_time=time(*end),
        description=description,
    )


INDUSTRY_DEFAULTS: dict[Industry, dict] = {
    Industry.HEALTHCARE: {
        "shifts": [
            _working("D", (6, 0), (16, 0), "Day Shift"),
            _working("E", (14, 0), (0, 0), "Evening Shift"),
            _working("N", (20, 0), (6, 0), "Night Shift"),
            _working("S", (11, 0), (21, 0), "Swing Shift"),
            _working("F", (9, 0), (19, 0), "Flex Shift"),
            ShiftDefinition("B", ShiftCategory.BACKUP, description="Backup"),
            ShiftDefinition("A", ShiftCategory.ADMIN, description="Admin"),
        ],
        "constraints": {"min_rest_hours": 8, "max_hours_week": 60, "max_consecutive_days": 6},
    },
    Industry.MANUFACTURING: {
        "shifts": [
            _working("D", (6, 0), (14, 0), "Day Shift"),
            _working("A", (14, 0), (22, 0), "Afternoon Shift"),
            _working("N", (22, 0), (6, 0), "Night Shift"),
        ],
        "constraints": {"min_rest_hours": 8, "max_hours_week": 48, "max_consecutive_days": 5},
    },
    Industry.PUBLIC_SAFETY: {
        "shifts": [
            _working("D", (7, 0), (19, 0), "Day Shift"),
            _working("N", (19, 0), (7, 0), "Night Shift"),
            ShiftDefinition("R", ShiftCategory.BACKUP, description="Reserve"),
        ],
        "constraints": {"min_rest_hours": 12, "max_hours_week": 56, "max_consecutive_days": 4},
    },
    Industry.RETAIL: {
        "shifts": [
            _working("M", (6, 0), (14, 0), "Morning"),
            _working("D", (10, 0), (18, 0), "Day"),
            _working("E", (14, 0), (22, 0), "Evening"),
            _working("C", (18, 0), (0, 0), "Closing"),
        ],
        "constraints": {"min_rest_hours": 10, "max_hours_week": 40, "max_consecutive_days": 5},
    },
    Industry.OTHER: {
        "shifts": [
            _working("D", (9, 0), (17, 0), "Day Shift"),
            _working("E", (17, 0), (1, 0), "Evening Shift"),
        ],
        "constraints": {"min_rest_hours": 8, "max_hours_week": 40, "max_consecutive_days": 5},
    },
}


def _as_industry(industry: Union[Industry, str]) -> Industry:
    try:
        return Industry(industry)
    except ValueError:
        return Industry.OTHER


def get_rotation_patterns(industry: Union[Industry, str]) -> list[RotationPattern]:
    """Patterns offered for an industry (unknown industries fall back to OTHER)."""
    return ROTATION_PATTERNS[_as_industry(industry)]


def get_rotation_pattern(
    industry: Union[Industry, str],
    pattern_id: Optional[str]
) -> Optional[RotationPattern]:
    """Look up a pattern by id. Returns None if the id is unknown for the industry."""
    if pattern_id is None:
        pattern_id = NO_PATTERN_ID
    return next(
        (p for p in get_rotation_patterns(industry) if p.id == pattern_id),
        None,
    )


def get_industry_defaults(industry: Union[Industry, str]) -> dict:
    """Default shift catalog and constraint values for an industry."""
    defaults = INDUSTRY_DEFAULTS[_as_industry(industry)]
    return {
        "shifts": list(defaults["shifts"]),
        "constraints": dict(defaults["constraints"]),
    }


def default_coverage(
    shift_code: str,
    preset: CoveragePreset,
    day_code: str = "D",
    night_code: str = "N",
) -> int:
    """Headcount a preset implies for a shift with no explicit coverage."""
    if preset == CoveragePreset.EIGHT_BY_FIVE:
        return 1 if shift_code == day_code else 0
    if preset == CoveragePreset.TWELVE_BY_SEVEN:
        return 1 if shift_code in (day_code, night_code) else 0
    return 1


def required_coverage_for_day(
    shift: ShiftDefinition,
    preset: CoveragePreset,
    weekend: bool,
    day_code: str = "D",
    night_code: str = "N",
) -> int:
    """
    Required headcount for a shift on one day.

    Explicit coverage wins over the preset default. Working shifts need
    nobody on weekends under the 8x5 preset.
    """
    if shift.required_coverage is not None:
        coverage = shift.required_coverage
    else:
        coverage = default_coverage(shift.code, preset, day_code, night_code)

    if preset == CoveragePreset.EIGHT_BY_FIVE and weekend and shift.is_working:
        return 0
    return coverage
