from fastapi import APIRouter
from typing import Dict

from api.models.layout_models import (
    HorizontalLayoutInput,
    LayoutResponse,
    VerticalLayoutInput,
)
from api.utils.errors import handle_exception
from roof_layout.core.errors import RoofLayoutError
from roof_layout.core.layout_result import HORIZONTAL_TIER_LABELS, VERTICAL_TIER_LABELS
from roof_layout.horizontal import solve_horizontal
from roof_layout.vertical import solve_vertical

# Set up logging
import logging
logger = logging.getLogger("roof_layout.api")

router = APIRouter()


@router.post("/horizontal", response_model=LayoutResponse)
async def horizontal_layout(layout_input: HorizontalLayoutInput):
    """
    Compute the tile course layout across one or more roof widths.

    Every width in the request shares one tile count; the response carries
    a display record per width.
    """
    logger.info(f"Horizontal layout requested for {len(layout_input.widths)} width(s)")
    try:
        layout = solve_horizontal(layout_input.to_request())
    except RoofLayoutError as e:
        logger.warning(f"Horizontal layout rejected: {e}")
        raise handle_exception(e, axis="horizontal")

    return LayoutResponse.from_layout(layout)


@router.post("/vertical", response_model=LayoutResponse)
async def vertical_layout(layout_input: VerticalLayoutInput):
    """
    Compute the batten gauge layout up one or more rafters.

    Every rafter in the request shares one course count; the response carries
    a display record per rafter.
    """
    logger.info(f"Vertical layout requested for {len(layout_input.rafter_heights)} rafter(s)")
    try:
        layout = solve_vertical(layout_input.to_request())
    except RoofLayoutError as e:
        logger.warning(f"Vertical layout rejected: {e}")
        raise handle_exception(e, axis="vertical")

    return LayoutResponse.from_layout(layout)


@router.get("/tiers", response_model=Dict[str, Dict[str, str]])
async def list_tiers():
    """Display names of each solution tier, per axis."""
    return {
        "horizontal": {tier.value: label for tier, label in HORIZONTAL_TIER_LABELS.items()},
        "vertical": {tier.value: label for tier, label in VERTICAL_TIER_LABELS.items()},
    }
