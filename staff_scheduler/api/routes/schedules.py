from fastapi import APIRouter, HTTPException

from staff_scheduler.schemas.schedules import ScheduleRequest, ScheduleResponse
from staff_scheduler.services.scheduling import (
    ScheduleInputError,
    generate_schedule,
    regenerate_schedule,
)
from staff_scheduler.services.scheduling.data_loader import load_schedule_context

router = APIRouter(prefix="/schedules", tags=["schedules"])


@router.post("/generate", response_model=ScheduleResponse)
def generate(payload: ScheduleRequest):
    """Generate a schedule. Pass a seed to reproduce an earlier run exactly."""
    try:
        context = load_schedule_context(payload)
        result = generate_schedule(context, seed=payload.seed)
    except ScheduleInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ScheduleResponse.from_result(context, result)


@router.post("/regenerate", response_model=ScheduleResponse)
def regenerate(payload: ScheduleRequest):
    """Generate again with a jittered seed - any seed in the payload is ignored"""
    try:
        context = load_schedule_context(payload)
        result = regenerate_schedule(context)
    except ScheduleInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return ScheduleResponse.from_result(context, result)
