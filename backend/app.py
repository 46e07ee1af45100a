"""
HairScore INCI Analyzer FastAPI application.

Endpoints:
    GET    /                                   Health check
    GET    /example                            Worked example INCI list
    POST   /analyze                            INCI text -> score, breakdown, summary, hair needs
    POST   /analyses                           Analyze and save to the user's history
    GET    /analyses/{user_id}                 Saved analyses, newest first
    DELETE /analyses/{user_id}/{analysis_id}   Delete one saved analysis
    POST   /tts                                Read text (e.g. an analysis summary) aloud
    GET    /recommendations?needs=...          Smart Picks products for the given hair-need tags
"""
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel
from typing import List, Optional
import logging
from dotenv import load_dotenv
from pathlib import Path

# Load env vars
load_dotenv(Path(__file__).parent / ".env")

from core.config import get_log_level, get_tts_enabled, log_config
from core.analysis_storage import (
    get_analysis_store,
    save_analysis,
    list_analyses,
    delete_analysis,
)
from core.evaluation.ingredient_analyzer import analyze, EXAMPLE_INCI
from core.external_apis.elevenlabs_tts import synthesize_speech
from core.recommendations import recommend

# Logger
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

# Initialize App
app = FastAPI(title="HairScore INCI Analyzer API")

log_config()

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

analysis_store = get_analysis_store()


# --- Request Models ---
class AnalyzeRequest(BaseModel):
    inci_text: str


class SaveAnalysisRequest(BaseModel):
    user_id: str
    inci_text: str


class SpeechRequest(BaseModel):
    text: str


# --- Endpoints ---

@app.get("/")
def health_check():
    return {"status": "ok", "service": "HairScore INCI Analyzer"}


@app.get("/example")
def example():
    return {"inci_text": EXAMPLE_INCI}


@app.post("/analyze")
def analyze_inci(request: AnalyzeRequest):
    """Score an INCI list. Empty input is a valid request and yields score 0."""
    logger.info("Analyze request chars=%d", len(request.inci_text))
    result = analyze(request.inci_text)
    return result.to_dict()


@app.post("/analyses")
def create_analysis(request: SaveAnalysisRequest):
    """Analyze and persist to the user's history."""
    result = analyze(request.inci_text)
    if not result.ingredients:
        raise HTTPException(status_code=400, detail="No ingredients to analyze.")
    try:
        saved = save_analysis(request.user_id, request.inci_text, result, store=analysis_store)
    except Exception as e:
        logger.error("Save analysis failed user_id=%s: %s", request.user_id, e, exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    return saved.to_dict()


@app.get("/analyses/{user_id}")
def get_analyses(user_id: str):
    try:
        return [a.to_dict() for a in list_analyses(user_id, store=analysis_store)]
    except Exception as e:
        logger.error("List analyses failed user_id=%s: %s", user_id, e)
        raise HTTPException(status_code=500, detail=str(e))


@app.delete("/analyses/{user_id}/{analysis_id}")
def remove_analysis(user_id: str, analysis_id: str):
    try:
        deleted = delete_analysis(user_id, analysis_id, store=analysis_store)
    except Exception as e:
        logger.error("Delete analysis failed user_id=%s id=%s: %s", user_id, analysis_id, e)
        raise HTTPException(status_code=500, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Analysis not found")
    return {"status": "deleted", "id": analysis_id}


@app.post("/tts")
def read_aloud(request: SpeechRequest):
    """Synthesize speech for the given text. 503 when TTS is not configured."""
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")
    if not get_tts_enabled():
        raise HTTPException(status_code=503, detail="Text-to-speech is not configured")
    speech = synthesize_speech(request.text)
    if not speech.ok:
        logger.error("TTS failed status=%s error=%s", speech.status_code, speech.error)
        raise HTTPException(status_code=502, detail=speech.error or "TTS failed")
    return Response(content=speech.audio, media_type=speech.content_type)


@app.get("/recommendations")
def recommendations(needs: List[str] = Query(default=[]), limit: Optional[int] = Query(default=None, ge=1)):
    """Smart Picks. Pass hairNeeds from an analysis as repeated ?needs=...; none returns the full catalog."""
    picks = recommend(needs, limit=limit)
    return {"needs": needs, "products": [p.to_dict() for p in picks]}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
