"""Regular-expression detectors for recursion and search idioms.

Each detector looks at the raw text as a whole. None of them understands C:
they are presence tests over fixed patterns and inherit every blind spot of
those patterns.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Tuple

from .model import RecursionInfo


# Greedy body: with several functions the match runs to the last "}" in the text.
# Names are ASCII word characters only, so "cafébar(" anchors on "bar".
FUNCTION_DEFINITION: Pattern[str] = re.compile(r"([A-Za-z0-9_]+)\s*\([^)]*\)\s*\{([\s\S]*)\}")

EQUALITY_IF: Pattern[str] = re.compile(r"if\s*\([^)]*==[^)]*\)")

BINARY_SEARCH_PATTERNS: Tuple[Pattern[str], ...] = (
	re.compile(r"while\s*\([^)]*<=?[^)]*\)"),
	re.compile(r"mid\s*=\s*\(?[^)]*low\s*\+\s*high[^)]*\)?"),
	EQUALITY_IF,
	re.compile(r"else\s+if\s*\([^)]*<"),
)

LINEAR_SEARCH_PATTERNS: Tuple[Pattern[str], ...] = (
	re.compile(r"for\s*\([^)]*i[^)]*<[^)]*n[^)]*\)"),
	EQUALITY_IF,
)


def first_function_name(text: str) -> Optional[str]:
	match = FUNCTION_DEFINITION.search(text)
	if match is None:
		return None
	return match.group(1)


def count_calls(text: str, name: str) -> int:
	# The definition itself is counted, and "xfib(" counts for "fib".
	return len(re.findall(rf"{re.escape(name)}\s*\(", text))


def detect_recursion(text: str) -> Optional[RecursionInfo]:
	"""Report the first defined function as recursive if its name occurs twice.

	A call count of 2 means the definition plus one call.
	"""
	name = first_function_name(text)
	if name is None:
		return None
	calls = count_calls(text, name)
	if calls < 2:
		return None
	return RecursionInfo(function_name=name, call_count=calls)


def is_binary_search(text: str) -> bool:
	"""Bounded ``while``, ``mid`` from ``low + high``, an ``==`` test and an ``else if`` with ``<``."""
	return all(p.search(text) for p in BINARY_SEARCH_PATTERNS)


def is_linear_search(text: str) -> bool:
	"""A ``for`` condition with ``i`` bounded by ``n`` plus an ``==`` test."""
	return all(p.search(text) for p in LINEAR_SEARCH_PATTERNS)

