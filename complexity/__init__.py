"""Heuristic time-complexity narration for snippets of C source text.

Modules:
- line_scan.py: Loop counting and brace-nesting depth over raw lines.
- patterns.py: Regex detectors for recursion and binary/linear search idioms.
- model.py: Signal and request/response data structures.
- narrate.py: Step-by-step complexity narration; ``analyze_code`` entry point.
- highlight.py: HTML escaping and syntax highlighting for display.
"""

from .narrate import analyze_code

__all__ = [
	"analyze_code",
	"line_scan",
	"patterns",
	"model",
	"narrate",
	"highlight",
]

