import logging

from fastapi import FastAPI
from staff_scheduler.api.routes import catalog, schedules
from staff_scheduler.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Staff Scheduler API", version="0.1.0", debug=settings.DEBUG)

app.include_router(schedules.router, prefix=settings.API_PREFIX)
app.include_router(catalog.router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok", "env": settings.ENV}
