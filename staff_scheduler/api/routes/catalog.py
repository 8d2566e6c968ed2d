from typing import List
from fastapi import APIRouter

from staff_scheduler.schemas.catalog import (
    IndustryDefaultsResponse,
    RotationPatternResponse,
    ShiftDefinitionResponse,
)
from staff_scheduler.services.scheduling.catalog import get_industry_defaults, get_rotation_patterns
from staff_scheduler.services.scheduling.types import Industry

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/industries/{industry}/patterns", response_model=List[RotationPatternResponse])
def list_rotation_patterns(industry: Industry):
    return [
        RotationPatternResponse(
            id=p.id,
            name=p.name,
            description=p.description,
            pattern=list(p.pattern) if p.pattern else None,
            cycle_length=p.cycle_length,
        )
        for p in get_rotation_patterns(industry)
    ]


@router.get("/industries/{industry}/defaults", response_model=IndustryDefaultsResponse)
def get_defaults(industry: Industry):
    """Default shift catalog and constraints for an industry"""
    defaults = get_industry_defaults(industry)
    return IndustryDefaultsResponse(
        industry=industry.value,
        shifts=[ShiftDefinitionResponse.model_validate(s) for s in defaults["shifts"]],
        **defaults["constraints"],
    )
