import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rumor_check.config import Config
from rumor_check.routers.analyze import router as analyze_router
from rumor_check.services.llm_agent import AnalysisClient

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # fails startup when OPENAI_API_KEY is missing
    app.state.analysis_client = AnalysisClient()
    yield
    await app.state.analysis_client.close()


app = FastAPI(title="Rumor Check API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
def root():
    return {"status": "ok", "message": "Backend running"}

app.include_router(analyze_router, prefix="/api")
