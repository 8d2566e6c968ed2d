from pydantic import BaseModel
from datetime import time
from typing import List, Optional

from staff_scheduler.services.scheduling.types import ShiftCategory


class RotationPatternResponse(BaseModel):
    id: str
    name: str
    description: str
    pattern: Optional[List[int]]
    cycle_length: int


class ShiftDefinitionResponse(BaseModel):
    code: str
    category: ShiftCategory
    start_time: Optional[time]
    end_time: Optional[time]
    description: str

    class Config:
        from_attributes = True


class IndustryDefaultsResponse(BaseModel):
    industry: str
    shifts: List[ShiftDefinitionResponse]
    min_rest_hours: int
    max_hours_week: int
    max_consecutive_days: int
