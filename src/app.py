# ============================================================
# Diagram Codegen FastAPI App
# ------------------------------------------------------------
# Thin HTTP surface over CodeGenerator:
#   - diagram / code / text generation routes
#   - component catalog listing
#   - Echo, Ollama or OpenAI clients (via settings.LLM_ENGINE)
# ============================================================

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel
from typing import Dict, List
from functools import lru_cache
import logging

# --- Local imports ---
from src.settings import settings, configure_logging
from src.catalog import all_components, load_catalog
from src.generate import CodeGenerator, GenerationError, GenerationLog
from src.generate.clients import build_model_client

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# ------------------------------------------------------------
# 🔧 Generator wiring
# ------------------------------------------------------------
@lru_cache(maxsize=1)
def get_generator() -> CodeGenerator:
    model_client = build_model_client(settings)
    return CodeGenerator(
        model_client=model_client,
        catalog=load_catalog(settings.CATALOG_PATH),
        audit_log=GenerationLog(settings.LOG_ROOT),
        strict_audit=settings.STRICT_AUDIT,
    )


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Diagram Codegen API", version="0.1")


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class GenerateRequest(BaseModel):
    prompt: str


class GeneratePayload(BaseModel):
    output: str
    model: str
    kind: str


class CatalogPayload(BaseModel):
    categories: Dict[str, List[str]]


def _run(kind: str, fn, prompt: str, gen: CodeGenerator) -> GeneratePayload:
    try:
        output = fn(prompt)
    except GenerationError as e:
        logger.warning("%s generation failed: %s", kind, e)
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.exception("%s generation crashed", kind)
        raise HTTPException(status_code=500, detail=str(e))
    return GeneratePayload(output=output, model=gen.model_name, kind=kind)


# ------------------------------------------------------------
# 🧩 Generation routes
# ------------------------------------------------------------
@app.post("/generate/diagram", response_model=GeneratePayload)
def generate_diagram(req: GenerateRequest, gen: CodeGenerator = Depends(get_generator)):
    return _run("diagram", gen.generate_diagram, req.prompt, gen)


@app.post("/generate/code", response_model=GeneratePayload)
def generate_code(req: GenerateRequest, gen: CodeGenerator = Depends(get_generator)):
    return _run("code", gen.generate_code, req.prompt, gen)


@app.post("/generate/text", response_model=GeneratePayload)
def generate_text(req: GenerateRequest, gen: CodeGenerator = Depends(get_generator)):
    return _run("text", gen.generate_text, req.prompt, gen)


# ------------------------------------------------------------
# 📚 Catalog
# ------------------------------------------------------------
@app.get("/catalog", response_model=CatalogPayload)
def catalog(gen: CodeGenerator = Depends(get_generator)):
    return CatalogPayload(categories=all_components(gen.catalog).to_dict())


# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": f"{settings.APP_NAME} service running."}
