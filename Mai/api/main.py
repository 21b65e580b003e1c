import logging
from functools import lru_cache
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from Mai.config import Settings
from Mai.exceptions import GenerationError
from Mai.generation import HPFGenerator
from Mai.models import NarrativeContext, NarrativeResult, PromptPayload
from Mai.narrative import build_prompt_payload

logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_generator(settings: Annotated[Settings, Depends(get_settings)]) -> HPFGenerator:
    return HPFGenerator(settings)


GeneratorDep = Annotated[HPFGenerator, Depends(get_generator)]


class GenerateRequest(BaseModel):
    system_prompt: str
    user_prompt: str


app = FastAPI(
    title="Mai API",
    description="History / Present / Future narratives for layered app workflows.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

hpf_router = APIRouter(prefix="/hpf", tags=["H/P/F"])


@hpf_router.post("", response_model=NarrativeResult)
async def local_hpf(context: NarrativeContext, generator: GeneratorDep):
    return generator.local(context)


@hpf_router.post("/prompt", response_model=PromptPayload)
async def hpf_prompt(context: NarrativeContext):
    return build_prompt_payload(context)


@hpf_router.post("/generate", response_model=NarrativeResult)
def generate_hpf_for_context(context: NarrativeContext, generator: GeneratorDep):
    return generator.generate(context)


app.include_router(hpf_router)


@app.post("/generate-hpf", response_model=NarrativeResult, tags=["H/P/F"])
def generate_hpf(request: GenerateRequest, generator: GeneratorDep):
    payload = PromptPayload(system_prompt=request.system_prompt, user_prompt=request.user_prompt)
    try:
        return generator.remote(payload)
    except GenerationError as e:
        logger.error(f"HPF generation error: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))


@app.get("/", tags=["Root"])
async def read_root():
    return {"message": "Mai backend is running. See /docs for documentation."}


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
    )
    settings = get_settings()
    logger.info("Starting Uvicorn server for development...")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level="info")
