from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .highlight import DEFAULT_LANGUAGE


class RecursionInfo(BaseModel):
	model_config = ConfigDict(frozen=True)

	function_name: str
	call_count: int = Field(ge=2)


class AnalysisSignals(BaseModel):
	model_config = ConfigDict(frozen=True)

	loop_count: int = Field(default=0, ge=0)
	loop_depth: int = Field(default=0, ge=0)
	recursion: Optional[RecursionInfo] = None
	is_binary_search: bool = False
	is_linear_search: bool = False


class AnalyzeRequest(BaseModel):
	code: str


class AnalyzeResult(BaseModel):
	steps: List[str]
	text: str
	signals: Optional[AnalysisSignals] = None


class HighlightRequest(BaseModel):
	code: str
	language: str = DEFAULT_LANGUAGE


class HighlightResult(BaseModel):
	language: str
	markup: str

