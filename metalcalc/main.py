from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .calculators.registry import list_calculators
from .routers import calculations, materials

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("metalcalc")

app = FastAPI(
    title=settings.APP_NAME,
    description="Weight and cost of structural-metal stock from profile dimensions",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculations.router, prefix="/api")
app.include_router(materials.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "metalcalc"}


@app.on_event("startup")
def log_startup():
    logger.info("%s ready, %d profile formulas registered", settings.APP_NAME, len(list_calculators()))
