import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.v1 import api
from app.core.config import settings

logging.basicConfig(
	level=settings.LOG_LEVEL,
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
	title=settings.PROJECT_NAME,
	description="Teminat mektubu ve kredi takip API'si",
	version="1.0.0",
	lifespan=api.lifespan,
)

# The grid UI runs on its own dev server
app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(api.router)


if __name__ == "__main__":
	import uvicorn
	
	uvicorn.run("main:app", host="0.0.0.0", port=5000, reload=True)
