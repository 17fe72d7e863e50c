# File: src/roof_layout/config/__init__.py

"""
Configuration package for the Roof Layout Calculator.
Provides the fixed roofing tolerances and material rules:
- Verge and abutment overhang rules
- Ridge offsets and gauge floors
- Material batten setting-out
"""

from roof_layout.config.roofing import (
    ABUTMENT_REDUCTIONS,
    MATERIAL_PROFILES,
    ROOFING_PARAMS,
    VERGE_PROFILES,
    AbutmentSide,
    MaterialProfile,
    MaterialType,
    VergeProfile,
    get_material_profile,
    get_roofing_param,
    get_verge_profile,
)

__all__ = [
    "ABUTMENT_REDUCTIONS",
    "MATERIAL_PROFILES",
    "ROOFING_PARAMS",
    "VERGE_PROFILES",
    "AbutmentSide",
    "MaterialProfile",
    "MaterialType",
    "VergeProfile",
    "get_material_profile",
    "get_roofing_param",
    "get_verge_profile",
]
