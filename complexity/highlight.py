from __future__ import annotations

from markupsafe import escape
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound


DEFAULT_LANGUAGE = "c"
NARRATION_LANGUAGE = "text"


class UnsupportedLanguageError(ValueError):
	def __init__(self, language: str):
		self.language = language
		super().__init__(f"Unsupported language: {language}")


def escape_text(text: str) -> str:
	"""Entity-encode ``&``, ``<`` and ``>`` (and quotes) for embedding in HTML."""
	return str(escape(text))


def highlight_markup(text: str, language: str = DEFAULT_LANGUAGE) -> str:
	"""Return span-only HTML for ``text``; Pygments never rejects broken source."""
	if language == NARRATION_LANGUAGE:
		return escape_text(text)
	try:
		lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
	except ClassNotFound as e:
		raise UnsupportedLanguageError(language) from e
	return highlight(text, lexer, HtmlFormatter(nowrap=True))


def stylesheet() -> str:
	return HtmlFormatter().get_style_defs(".highlight")
