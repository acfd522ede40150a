from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import router
from config import settings
from services.recommendation_orchestrator import get_orchestrator


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Builds the providers and loads the skill graph; a bad graph path stops startup
    get_orchestrator()
    yield


app = FastAPI(
    title="Skill Match API",
    description="Skill compatibility scoring and project/employee recommendations",
    version="1.0.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
