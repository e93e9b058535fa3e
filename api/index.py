"""
FastAPI wrapper for Typo Matcher - Vercel Serverless Function.

This module exposes text classification as a REST API for deployment on
Vercel.
"""

from enum import Enum
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from typo_matcher import __version__
from typo_matcher.classifier import classify
from typo_matcher.config import DEFAULT_MAX_TEXT_LENGTH, MatchingConfig
from typo_matcher.rendering import render_plain, summarize

app = FastAPI(
    title="Typo Matcher API",
    description="Char-level comparison of a typed text against an exemplary text",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class LetterCaseActionEnum(str, Enum):
    """Letter-case action selection."""
    compare_as_is = "compare_as_is"  # Record case mistakes, keep letters
    capitalized = "capitalized"
    uppercase = "uppercase"
    lowercase = "lowercase"


class ClassifyRequest(BaseModel):
    """Request model for text classification."""
    compared: str = Field(..., max_length=DEFAULT_MAX_TEXT_LENGTH, description="Text to check")
    exemplary: str = Field(..., max_length=DEFAULT_MAX_TEXT_LENGTH, description="Reference text")
    letter_case_action: Optional[LetterCaseActionEnum] = Field(
        None,
        description="Letter-case action. Omit to ignore letter cases."
    )
    required_matched_chars: Optional[Union[int, str]] = Field(
        None,
        description="Required quantity of correct chars: a count like 3 or a percentage like '50%'"
    )
    acceptable_wrong_chars: Optional[Union[int, str]] = Field(
        None,
        description="Acceptable quantity of wrong chars: a count like 2 or a percentage like '25%'"
    )


class ClassifiedCharResponse(BaseModel):
    """A single classified char."""
    value: str
    kind: str
    letter_case_correct: Optional[bool] = None
    expected_char: Optional[str] = None


class ClassifyResponse(BaseModel):
    """Response model for classification results."""
    chars: list[ClassifiedCharResponse]
    summary: dict
    plain: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=__version__
    )


@app.post("/api/classify", response_model=ClassifyResponse)
def classify_text(request: ClassifyRequest):
    """
    Classify a compared text relying on an exemplary text.

    Returns every char with its kind, a summary of counts, and a plain-text
    rendering where missing runs are in () and extra runs in [].

    Texts are limited to DEFAULT_MAX_TEXT_LENGTH chars, and the endpoint runs
    in the threadpool since the alignment search is CPU-bound.
    """
    try:
        config = MatchingConfig.from_dict({
            "letter_case_action": request.letter_case_action.value if request.letter_case_action else None,
            "required_matched_chars": request.required_matched_chars,
            "acceptable_wrong_chars": request.acceptable_wrong_chars,
        })
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    classified = classify(request.compared, request.exemplary, config)

    return ClassifyResponse(
        chars=[ClassifiedCharResponse(**char.to_dict()) for char in classified],
        summary=summarize(classified),
        plain=render_plain(classified),
    )


@app.get("/api/info")
async def api_info():
    """API information endpoint."""
    return {
        "name": "Typo Matcher API",
        "version": __version__,
        "endpoints": {
            "GET /api/health": "Health check",
            "POST /api/classify": "Classify a compared text against an exemplary text",
        },
        "letter_case_actions": [action.value for action in LetterCaseActionEnum],
        "max_text_length": DEFAULT_MAX_TEXT_LENGTH,
    }
