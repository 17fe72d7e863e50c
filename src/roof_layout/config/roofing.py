# File: src/roof_layout/config/roofing.py

"""
Roofing-specific configuration for the Roof Layout Calculator.
This module contains the fixed tolerances, offsets and material rules the
horizontal and vertical solvers work from. All dimensions are millimetres.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, Any, Optional


class AbutmentSide(Enum):
    """
    Which roof edges meet a wall.

    An abutting edge gets no overhang and removes the dry verge and
    leading tile options for the whole course.
    """

    NONE = "NONE"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    BOTH = "BOTH"

    @property
    def abuts_left(self) -> bool:
        return self in (AbutmentSide.LEFT, AbutmentSide.BOTH)

    @property
    def abuts_right(self) -> bool:
        return self in (AbutmentSide.RIGHT, AbutmentSide.BOTH)


class MaterialType(Enum):
    """Roof covering families that change the batten setting-out."""

    SLATE = "Slate"
    FIBRE_CEMENT_SLATE = "Fibre Cement Slate"
    PLAIN_TILE = "Plain Tile"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> "MaterialType":
        """Map a form value to a material; anything unrecognised is OTHER."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value == value:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class VergeProfile:
    """
    Overhang rules for one verge finishing system.

    overhang: starting overhang on each side
    min_overhang: smallest overhang the system tolerates
    max_overhang: largest overhang the system tolerates
    """

    overhang: int
    min_overhang: int
    max_overhang: int


@dataclass(frozen=True)
class MaterialProfile:
    """
    Batten setting-out rules for a roof covering.

    first_batten_offset: added to (tile height - gutter overhang) to place
        the first batten
    eave_batten_drop: fixed distance from the first batten down to the eave
        batten, or None to drop by one maximum gauge
    under_eave_batten_drop: distance from the eave batten down to an extra
        under-eave batten, or None when the material has none
    shows_eave_batten: whether the eave batten is reported
    """

    first_batten_offset: int
    eave_batten_drop: Optional[int] = None
    under_eave_batten_drop: Optional[int] = None
    shows_eave_batten: bool = True


# Verge systems keyed by whether a dry verge is fitted
VERGE_PROFILES: Dict[bool, VergeProfile] = {
    True: VergeProfile(overhang=40, min_overhang=20, max_overhang=40),
    False: VergeProfile(overhang=50, min_overhang=25, max_overhang=75),
}

# Total width lost to abutment flashings
ABUTMENT_REDUCTIONS: Dict[AbutmentSide, int] = {
    AbutmentSide.NONE: 0,
    AbutmentSide.LEFT: 5,
    AbutmentSide.RIGHT: 5,
    AbutmentSide.BOTH: 10,
}

MATERIAL_PROFILES: Dict[MaterialType, MaterialProfile] = {
    MaterialType.SLATE: MaterialProfile(first_batten_offset=25),
    MaterialType.FIBRE_CEMENT_SLATE: MaterialProfile(
        first_batten_offset=25,
        under_eave_batten_drop=120,
    ),
    MaterialType.PLAIN_TILE: MaterialProfile(
        first_batten_offset=-15,
        eave_batten_drop=65,
    ),
    MaterialType.OTHER: MaterialProfile(
        first_batten_offset=-25,
        shows_eave_batten=False,
    ),
}

ROOFING_PARAMS: Dict[str, Any] = {
    # Smallest width or rafter height the solvers accept
    "min_measurement": 500,
    # Bond repeat: tiles wider than this repeat in pairs, otherwise threes
    "wide_tile_threshold": 300,
    "wide_tile_set_size": 2,
    "narrow_tile_set_size": 3,
    # Cut tile floor: a cut below both limits is enlarged to the larger one
    "min_cut_tile_width": 100,
    # Ridge offsets
    "ridge_offset_min": 25,
    "ridge_offset_min_dry_ridge": 40,
    "ridge_offset_max": 65,
    # Absolute floor for any gauge or cut course
    "min_gauge_floor": 75,
    # Reconciliation tolerances between input and reconstructed lengths
    "width_tolerance": 1,
    "height_tolerance": 3,
}


def get_roofing_param(name: str) -> Any:
    """
    Gets a roofing parameter by name.

    Args:
        name: Key in ROOFING_PARAMS

    Returns:
        The parameter value

    Raises:
        KeyError: If the parameter is not defined
    """
    if name not in ROOFING_PARAMS:
        raise KeyError(f"Unknown roofing parameter: {name}")
    return ROOFING_PARAMS[name]


def get_verge_profile(use_dry_verge: bool) -> VergeProfile:
    """Gets the overhang rules for a standard or dry verge."""
    return VERGE_PROFILES[bool(use_dry_verge)]


def get_material_profile(material: MaterialType) -> MaterialProfile:
    """Gets the batten rules for a roof covering."""
    return MATERIAL_PROFILES[material]
