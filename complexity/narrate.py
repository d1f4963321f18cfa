from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from .line_scan import scan_loops
from .model import AnalysisSignals, RecursionInfo
from .patterns import detect_recursion, is_binary_search, is_linear_search


log = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please provide source text."

MASTER_B = 2
MASTER_F = "n"
CASE_TWO_TOLERANCE = 0.01


def collect_signals(text: str) -> AnalysisSignals:
	loop_count, loop_depth = scan_loops(text)
	signals = AnalysisSignals(
		loop_count=loop_count,
		loop_depth=loop_depth,
		recursion=detect_recursion(text),
		is_binary_search=is_binary_search(text),
		is_linear_search=is_linear_search(text),
	)
	log.debug("Collected signals: %s", signals)
	return signals


def polynomial_steps(depth: int) -> List[str]:
	if depth == 1:
		return ["➡️ Time Complexity: O(n)", "", "T(n) = C1 + C2·n"]
	if depth == 2:
		return ["➡️ Time Complexity: O(n²)", "", "T(n) = C1 + C2·n + C3·n²"]
	return [
		f"➡️ Time Complexity: O(n^{depth})",
		"",
		f"T(n) = C1 + C2·n + ... + C{depth + 1}·n^{depth}",
	]


def loop_steps(signals: AnalysisSignals) -> List[str]:
	if signals.loop_count == 0:
		return ["", "❌ No loops detected"]

	parts: List[str] = [
		"",
		f"➡️ Detected {signals.loop_count} loop(s)",
		f"➡️ Loop nesting level: {signals.loop_depth}",
	]
	# Search patterns are not gated on depth.
	if signals.is_binary_search:
		parts += ["", "🔎 Detected pattern of Binary Search", "➡️ Time Complexity: O(log n)", "", "T(n) = C1 + C2·log₂(n)"]
	elif signals.is_linear_search:
		parts += ["", "🔎 Detected pattern of Linear Search", "➡️ Time Complexity: O(n)", "", "T(n) = C1 + C2·n"]
	else:
		parts += polynomial_steps(signals.loop_depth)
	return parts


def recursion_steps(recursion: RecursionInfo) -> List[str]:
	a = recursion.call_count
	b = MASTER_B
	f = MASTER_F
	log_b_a = math.log(a) / math.log(b)
	exponent = f"{log_b_a:.2f}"

	parts: List[str] = [
		"",
		f"🔁 Recursive function detected: {recursion.function_name}",
		f"➡️ Recursive calls: {a}",
		"➡️ Assuming divide-and-conquer form: T(n) = a·T(n/b) + f(n)",
		"",
		f"Step 1: T(n) = {a}·T(n/{b}) + C·{f}",
		f"Step 2: log_b(a) = log_{b}({a}) = {exponent}",
		f"Step 3: Compare f(n) = Θ({f}) to n^log_b(a) = Θ(n^{exponent})",
	]
	if abs(log_b_a - 1) < CASE_TWO_TOLERANCE:
		parts += [
			"→ Case 2: f(n) = Θ(n^log_b(a)) ⇒ T(n) = Θ(n log n)",
			"",
			"🟢 Final Time Complexity: O(n log n)",
		]
	elif log_b_a > 1:
		parts.append(f"→ Case 1: T(n) = Θ(n^{exponent})")
	else:
		parts.append("→ Case 3: T(n) = Θ(n)")
	return parts


def narrate(signals: AnalysisSignals) -> List[str]:
	"""Render the step-by-step derivation for a set of signals.

	Empty strings in the result stand for blank separator lines.
	"""
	steps: List[str] = ["🔍 Code Analysis Started"]
	steps += loop_steps(signals)
	if signals.recursion is not None:
		steps += recursion_steps(signals.recursion)
	if signals.loop_count == 0 and signals.recursion is None:
		steps += ["", "📦 No loops or recursion detected → O(1)", "T(n) = C1"]
	return steps


def analyze(text: str) -> Tuple[Optional[AnalysisSignals], List[str]]:
	"""Return the signals and narration for ``text``.

	Blank input skips analysis: no signals, and the message as the only step.
	"""
	if not text.strip():
		return None, [EMPTY_INPUT_MESSAGE]
	signals = collect_signals(text)
	return signals, narrate(signals)


def analyze_code(text: str) -> List[str]:
	return analyze(text)[1]


def render(steps: List[str]) -> str:
	return "\n".join(steps)

