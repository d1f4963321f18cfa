from __future__ import annotations

from typing import Iterable, List, Tuple


LOOP_KEYWORDS: Tuple[str, ...] = ("for", "while")
CLOSING_BRACE = "}"


def split_lines(text: str) -> List[str]:
	return text.split("\n")


def starts_loop(line: str) -> bool:
	# Prefix test only: "forward = 1;" counts as a loop start.
	return line.strip().startswith(LOOP_KEYWORDS)


def closes_block(line: str) -> bool:
	return line.strip() == CLOSING_BRACE


def scan_loops(text: str) -> Tuple[int, int]:
	"""Return ``(loop_count, loop_depth)`` for the given source text.

	Every loop-start line opens one level of nesting and only a line holding a
	lone ``}`` closes one, so brace-less loop bodies and ``} else {`` lines
	leave the running depth higher than the real nesting.
	"""
	return scan_lines(split_lines(text))


def scan_lines(lines: Iterable[str]) -> Tuple[int, int]:
	loop_count = 0
	loop_depth = 0
	current_depth = 0
	for line in lines:
		if starts_loop(line):
			loop_count += 1
			current_depth += 1
			if current_depth > loop_depth:
				loop_depth = current_depth
		if closes_block(line):
			current_depth = max(0, current_depth - 1)
	return loop_count, loop_depth

