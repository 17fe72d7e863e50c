from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Dict, Any, Optional, Union, Literal

from roof_layout.horizontal import HorizontalRequest
from roof_layout.vertical import VerticalRequest

YesNo = Union[bool, Literal["YES", "NO"]]


def _normalize_flag(v: Any) -> Any:
    """Accept yes/no in any case, as the calculator form sends it."""
    if isinstance(v, str):
        return v.strip().upper()
    return v


class HorizontalLayoutInput(BaseModel):
    """Input data model for horizontal tile course layout."""
    model_config = ConfigDict(populate_by_name=True)

    widths: List[float] = Field(
        description="Roof widths in mm; all widths share one tile count"
    )
    tile_cover_width: float = Field(
        alias="tileCoverWidth",
        description="Exposed width of one tile in mm"
    )
    min_spacing: float = Field(
        alias="minSpacing",
        description="Smallest gap between tiles in mm"
    )
    max_spacing: float = Field(
        alias="maxSpacing",
        description="Largest gap between tiles in mm"
    )
    use_dry_verge: YesNo = Field(default="NO", alias="useDryVerge")
    abutment_side: Literal["NONE", "LEFT", "RIGHT", "BOTH"] = Field(
        default="NONE",
        alias="abutmentSide",
        description="Edges that meet a wall"
    )
    use_lh_tile: YesNo = Field(default="NO", alias="useLHTile")
    lh_tile_width: float = Field(
        default=0,
        alias="lhTileWidth",
        description="Width of the leading tile in mm",
        ge=0
    )
    cross_bonded: YesNo = Field(default="NO", alias="crossBonded")

    @field_validator('use_dry_verge', 'use_lh_tile', 'cross_bonded', 'abutment_side', mode='before')
    @classmethod
    def normalize_choice(cls, v: Any) -> Any:
        return _normalize_flag(v)

    def to_request(self) -> HorizontalRequest:
        """Convert to the solver request."""
        return HorizontalRequest(
            widths=self.widths,
            tile_cover_width=self.tile_cover_width,
            min_spacing=self.min_spacing,
            max_spacing=self.max_spacing,
            use_dry_verge=self.use_dry_verge,
            abutment_side=self.abutment_side,
            use_lh_tile=self.use_lh_tile,
            lh_tile_width=self.lh_tile_width,
            cross_bonded=self.cross_bonded,
        )


class VerticalLayoutInput(BaseModel):
    """Input data model for vertical batten gauge layout."""
    model_config = ConfigDict(populate_by_name=True)

    rafter_heights: List[float] = Field(
        alias="rafterHeights",
        description="Rafter heights in mm; all rafters share one course count"
    )
    gutter_overhang: float = Field(
        alias="gutterOverhang",
        description="Distance the first course oversails into the gutter in mm"
    )
    material_type: str = Field(
        alias="materialType",
        description="Slate, Fibre Cement Slate, Plain Tile or any other covering"
    )
    slate_tile_height: float = Field(
        alias="slateTileHeight",
        description="Length of one slate or tile in mm",
        gt=0
    )
    min_gauge: float = Field(alias="minGauge", description="Smallest batten gauge in mm")
    max_gauge: float = Field(alias="maxGauge", description="Largest batten gauge in mm")
    use_dry_ridge: YesNo = Field(default="NO", alias="useDryRidge")

    @field_validator('use_dry_ridge', mode='before')
    @classmethod
    def normalize_choice(cls, v: Any) -> Any:
        return _normalize_flag(v)

    def to_request(self) -> VerticalRequest:
        """Convert to the solver request."""
        return VerticalRequest(
            rafter_heights=self.rafter_heights,
            gutter_overhang=self.gutter_overhang,
            material_type=self.material_type,
            slate_tile_height=self.slate_tile_height,
            min_gauge=self.min_gauge,
            max_gauge=self.max_gauge,
            use_dry_ridge=self.use_dry_ridge,
        )


class LayoutResponse(BaseModel):
    """Solved layout returned by both layout endpoints."""
    solution: str = Field(description="Display name of the solution tier")
    tier: Literal["full", "split", "cut"] = Field(description="Solution tier tag")
    warning: Optional[str] = Field(
        default=None, description="Advisory text for the estimator"
    )
    display: List[Dict[str, Any]] = Field(
        description="Field-labelled display record for each measurement"
    )
    layout: Dict[str, Any] = Field(description="Complete layout record")

    @classmethod
    def from_layout(cls, layout) -> "LayoutResponse":
        return cls(
            solution=layout.label,
            tier=layout.tier.value,
            warning=layout.warning,
            display=[layout.to_display_dict(i) for i in range(layout.measurement_count)],
            layout=layout.to_dict(),
        )
