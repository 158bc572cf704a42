import logging

from fastapi import FastAPI
from lensroster.api.routes import availability
from lensroster.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="LensRoster API", version="0.1.0", debug=settings.DEBUG)

app.include_router(availability.router, prefix=settings.API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok"}
