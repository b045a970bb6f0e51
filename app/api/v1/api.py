from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter
from app.api.v1.endpoints import projects, banks, currencies, guarantee_letters, credits, grid, health_check
from app.core.database import create_db_and_tables

router = APIRouter()
router.include_router(projects.router, prefix="/api/v1", tags=["Projeler"])
router.include_router(banks.router, prefix="/api/v1", tags=["Bankalar"])
router.include_router(currencies.router, prefix="/api/v1", tags=["Para Birimleri & Kurlar"])
router.include_router(guarantee_letters.router, prefix="/api/v1", tags=["Teminat Mektupları"])
router.include_router(credits.router, prefix="/api/v1", tags=["Krediler"])
router.include_router(grid.router, prefix="/api/v1", tags=["Tablo"])
router.include_router(health_check.router, tags=["services"])


@asynccontextmanager
async def lifespan(app: FastAPI):
	create_db_and_tables()
	yield
