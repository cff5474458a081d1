from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from logging_setup import setup_logging
from api.transcode import router as transcode_router
from services.case_transform import CaseTransformMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    yield


app = FastAPI(
    title=settings.app_name,
    description="snake_case / camelCase key transcoding API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(CaseTransformMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(transcode_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
