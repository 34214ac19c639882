import logging
import os
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from algorithms.lcs import compare_similarity, lcs_length
from algorithms.ranking import EmptyOptionsError, find_best_index, get_similarity_ratings

logger = logging.getLogger(__name__)

def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

MAX_TEXT_CHARS = _int_env("MAX_TEXT_CHARS", 20000)
MAX_OPTIONS = _int_env("MAX_OPTIONS", 1000)

app = FastAPI(title="Similar String API", version="1.0")

# CORS for demos; set CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

class PairRequest(BaseModel):
    left: str
    right: str

class RankRequest(BaseModel):
    target: str
    options: List[str]

class LcsResponse(BaseModel):
    length: int

class CompareResponse(BaseModel):
    similarity: float

class BestResponse(BaseModel):
    match: str
    index: int
    similarity: float

class RatingsResponse(BaseModel):
    ratings: List[float]

def _check_limits(*texts: str, options: int = 0) -> None:
    max_chars, max_options = MAX_TEXT_CHARS, MAX_OPTIONS
    if options > max_options:
        logger.warning("rejected request with %d options (limit %d)", options, max_options)
        raise HTTPException(status_code=413, detail=f"too many options (limit {max_options})")
    for t in texts:
        if len(t) > max_chars:
            logger.warning("rejected text of %d chars (limit %d)", len(t), max_chars)
            raise HTTPException(status_code=413, detail=f"text too long (limit {max_chars} chars)")

@app.get("/health")
def health():
    return {"ok": True}

@app.post("/api/lcs", response_model=LcsResponse)
def lcs(req: PairRequest):
    _check_limits(req.left, req.right)
    return LcsResponse(length=lcs_length(req.left, req.right))

@app.post("/api/compare", response_model=CompareResponse)
def compare(req: PairRequest):
    _check_limits(req.left, req.right)
    sim = compare_similarity(req.left, req.right)
    logger.debug("compare %d vs %d chars -> %.6f", len(req.left), len(req.right), sim)
    return CompareResponse(similarity=round(sim, 6))

@app.post("/api/best", response_model=BestResponse)
def best(req: RankRequest):
    _check_limits(req.target, *req.options, options=len(req.options))
    try:
        i, sim = find_best_index(req.target, req.options)
    except EmptyOptionsError as e:
        logger.warning("best match requested with no options")
        raise HTTPException(status_code=400, detail=str(e))
    return BestResponse(match=req.options[i], index=i, similarity=round(sim, 6))

@app.post("/api/ratings", response_model=RatingsResponse)
def ratings(req: RankRequest):
    _check_limits(req.target, *req.options, options=len(req.options))
    scores = get_similarity_ratings(req.target, req.options)
    logger.debug("rated %d options", len(scores))
    return RatingsResponse(ratings=[round(s, 6) for s in scores])

# Run with: uvicorn api.main:app --host 0.0.0.0 --port 8000
