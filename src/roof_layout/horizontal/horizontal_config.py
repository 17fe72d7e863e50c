# File: src/roof_layout/horizontal/horizontal_config.py
"""
Request record for horizontal tile course layout.

Example:
    >>> request = HorizontalRequest(
    ...     widths=[3000],
    ...     tile_cover_width=300,
    ...     min_spacing=10,
    ...     max_spacing=40,
    ...     abutment_side="LEFT",
    ... )
    >>> request.normalized().use_dry_verge
    False
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List

from ..config.roofing import AbutmentSide, get_roofing_param
from ..core.validation import coerce_flag, flag_to_form, validate_measurements


@dataclass
class HorizontalRequest:
    """Inputs for laying tiles across one or more roof widths.

    All lengths are millimetres. Every width in the batch is tiled with the
    same tile count; only the overhangs differ between widths.

    Attributes:
        widths: Roof widths, verge to verge (each >= 500mm)
        tile_cover_width: Exposed width of one tile
        min_spacing: Smallest gap between tiles the manufacturer allows
        max_spacing: Largest gap between tiles the manufacturer allows
        use_dry_verge: Whether a dry verge system is fitted
        abutment_side: Edges that meet a wall
        use_lh_tile: Whether a narrower leading tile starts each course
        lh_tile_width: Width of the leading tile
        cross_bonded: Whether alternate courses are offset by half a pitch
    """
    widths: List[float] = field(default_factory=list)
    tile_cover_width: float = 300
    min_spacing: float = 0
    max_spacing: float = 0
    use_dry_verge: bool = False
    abutment_side: AbutmentSide = AbutmentSide.NONE
    use_lh_tile: bool = False
    lh_tile_width: float = 0
    cross_bonded: bool = False

    def __post_init__(self):
        """Convert form strings to flags and enums."""
        self.widths = list(self.widths)
        self.use_dry_verge = coerce_flag(self.use_dry_verge, "use_dry_verge")
        self.use_lh_tile = coerce_flag(self.use_lh_tile, "use_lh_tile")
        self.cross_bonded = coerce_flag(self.cross_bonded, "cross_bonded")
        if isinstance(self.abutment_side, str):
            self.abutment_side = AbutmentSide(self.abutment_side.strip().upper())

    def validate(self) -> None:
        """Check the width batch.

        Raises:
            InputValidationError: If there are no widths or any is below 500mm
        """
        validate_measurements(
            self.widths,
            get_roofing_param("min_measurement"),
            field="widths",
            description="width",
        )

    def normalized(self) -> "HorizontalRequest":
        """Return the request with abutment overrides applied.

        Any abutment turns off the dry verge and the leading tile. Overhang
        rules are read from the requested verge before this is applied.
        """
        if self.abutment_side is AbutmentSide.NONE:
            return self
        return replace(self, use_dry_verge=False, use_lh_tile=False)

    @property
    def leading_tile_width(self) -> float:
        """Width of the leading tile actually laid (0 when not used)."""
        return self.lh_tile_width if self.use_lh_tile else 0

    @property
    def max_width(self) -> float:
        return max(self.widths)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase form record.

        Returns:
            Dictionary representation of the request
        """
        return {
            "widths": list(self.widths),
            "tileCoverWidth": self.tile_cover_width,
            "minSpacing": self.min_spacing,
            "maxSpacing": self.max_spacing,
            "useDryVerge": flag_to_form(self.use_dry_verge),
            "abutmentSide": self.abutment_side.value,
            "useLHTile": flag_to_form(self.use_lh_tile),
            "lhTileWidth": self.lh_tile_width,
            "crossBonded": flag_to_form(self.cross_bonded),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HorizontalRequest":
        """Create a request from the camelCase form record.

        Args:
            data: Dictionary with form fields

        Returns:
            HorizontalRequest instance
        """
        return cls(
            widths=data.get("widths", []),
            tile_cover_width=data.get("tileCoverWidth", 300),
            min_spacing=data.get("minSpacing", 0),
            max_spacing=data.get("maxSpacing", 0),
            use_dry_verge=data.get("useDryVerge", "NO"),
            abutment_side=data.get("abutmentSide", "NONE"),
            use_lh_tile=data.get("useLHTile", "NO"),
            lh_tile_width=data.get("lhTileWidth", 0),
            cross_bonded=data.get("crossBonded", "NO"),
        )
