# app/api/v1/endpoints/health_check.py
from fastapi import APIRouter
from pydantic import BaseModel

from app.core.config import settings

router = APIRouter()


class HealthCheck(BaseModel):
	service_name: str
	status: str


@router.get("/health_check", response_model=HealthCheck)
def health_check() -> HealthCheck:
	return HealthCheck(service_name=settings.PROJECT_NAME, status="healthy")
