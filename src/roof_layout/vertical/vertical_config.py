# File: src/roof_layout/vertical/vertical_config.py
"""
Request record for vertical batten gauge layout.

Example:
    >>> request = VerticalRequest(
    ...     rafter_heights=[2500],
    ...     gutter_overhang=50,
    ...     material_type="Plain Tile",
    ...     slate_tile_height=265,
    ...     min_gauge=280,
    ...     max_gauge=345,
    ... )
    >>> request.material_type
    <MaterialType.PLAIN_TILE: 'Plain Tile'>
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..config.roofing import MaterialType, get_roofing_param
from ..core.validation import coerce_flag, flag_to_form, validate_measurements


@dataclass
class VerticalRequest:
    """Inputs for setting out battens up one or more rafters.

    All lengths are millimetres. Every rafter in the batch gets the same
    number of courses; gauges and ridge offsets are realized per rafter.

    Attributes:
        rafter_heights: Rafter lengths, eave to ridge (each >= 500mm)
        gutter_overhang: Distance the first course oversails into the gutter
        material_type: Roof covering family
        slate_tile_height: Length of one slate or tile
        min_gauge: Smallest batten gauge the manufacturer allows
        max_gauge: Largest batten gauge the manufacturer allows
        use_dry_ridge: Whether a dry ridge system is fitted
    """
    rafter_heights: List[float] = field(default_factory=list)
    gutter_overhang: float = 0
    material_type: MaterialType = MaterialType.OTHER
    slate_tile_height: float = 0
    min_gauge: float = 0
    max_gauge: float = 0
    use_dry_ridge: bool = False

    def __post_init__(self):
        """Convert form strings to flags and enums."""
        self.rafter_heights = list(self.rafter_heights)
        self.material_type = MaterialType.from_value(self.material_type)
        self.use_dry_ridge = coerce_flag(self.use_dry_ridge, "use_dry_ridge")

    def validate(self) -> None:
        """Check the rafter batch.

        Raises:
            InputValidationError: If there are no rafters or any is below 500mm
        """
        validate_measurements(
            self.rafter_heights,
            get_roofing_param("min_measurement"),
            field="rafter_heights",
            description="rafter height",
        )

    @property
    def max_rafter_height(self) -> float:
        return max(self.rafter_heights)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase form record."""
        return {
            "rafterHeights": list(self.rafter_heights),
            "gutterOverhang": self.gutter_overhang,
            "materialType": self.material_type.value,
            "slateTileHeight": self.slate_tile_height,
            "minGauge": self.min_gauge,
            "maxGauge": self.max_gauge,
            "useDryRidge": flag_to_form(self.use_dry_ridge),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VerticalRequest":
        """Create a request from the camelCase form record."""
        return cls(
            rafter_heights=data.get("rafterHeights", []),
            gutter_overhang=data.get("gutterOverhang", 0),
            material_type=data.get("materialType", MaterialType.OTHER.value),
            slate_tile_height=data.get("slateTileHeight", 0),
            min_gauge=data.get("minGauge", 0),
            max_gauge=data.get("maxGauge", 0),
            use_dry_ridge=data.get("useDryRidge", "NO"),
        )
