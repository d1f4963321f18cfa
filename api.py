from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from complexity.highlight import UnsupportedLanguageError, highlight_markup
from complexity.model import (
	AnalyzeRequest,
	AnalyzeResult,
	HighlightRequest,
	HighlightResult,
)
from complexity.narrate import analyze as analyze_source, render


log = logging.getLogger(__name__)

app = FastAPI(title="Complexity Narrator API")


@app.post("/analyze", response_model=AnalyzeResult)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	signals, steps = analyze_source(req.code)
	return AnalyzeResult(steps=steps, text=render(steps), signals=signals)


@app.post("/highlight", response_model=HighlightResult)
def highlight(req: HighlightRequest) -> HighlightResult:
	try:
		markup = highlight_markup(req.code, req.language)
	except UnsupportedLanguageError as e:
		log.warning("Highlight requested for unsupported language %r", e.language)
		raise HTTPException(status_code=400, detail=str(e))
	return HighlightResult(language=req.language, markup=markup)
