from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from allergy_guard.api.routes import router as api_router
from allergy_guard.config import settings
from allergy_guard.logging import configure_logging, get_logger

app = FastAPI(title="Allergy Guard API")
logger = get_logger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.cors_allow_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def on_startup() -> None:
    configure_logging(settings.log_level)
    logger.info("startup: env=%s danger_threshold=%s", settings.env, settings.danger_severity_threshold)


app.include_router(api_router)
