from __future__ import annotations

import argparse
import json
import logging
import sys

import uvicorn

from complexity.narrate import analyze, render


def read_source(parser: argparse.ArgumentParser, path: str) -> str:
	if path == "-":
		buffer = getattr(sys.stdin, "buffer", None)
		if buffer is None:
			return sys.stdin.read()
		return buffer.read().decode("utf-8", errors="replace")
	try:
		with open(path, "r", encoding="utf-8", errors="replace") as fh:
			return fh.read()
	except OSError as e:
		parser.error(f"cannot read {path}: {e}")


def cmd_analyze(args: argparse.Namespace) -> None:
	signals, steps = analyze(read_source(args.parser, args.path))

	if args.json:
		payload = {"signals": signals.model_dump() if signals else None, "steps": steps}
		print(json.dumps(payload, indent=2, ensure_ascii=False))
	else:
		print(render(steps))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("web.app:app", host=args.host, port=args.port, reload=args.reload)


def main(argv=None) -> None:
	parser = argparse.ArgumentParser(prog="complexity")
	parser.add_argument(
		"--log-level",
		default="WARNING",
		choices=["DEBUG", "INFO", "WARNING", "ERROR"],
		help="Logging verbosity",
	)
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Narrate the estimated time complexity of a C snippet")
	pa.add_argument("path", nargs="?", default="-", help="Source file, or - for stdin")
	pa.add_argument("--json", action="store_true", help="Print signals and steps as JSON")
	pa.set_defaults(func=cmd_analyze, parser=pa)

	ps = sub.add_parser("serve", help="Run the web interface")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args(argv)
	logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
	args.func(args)


if __name__ == "__main__":
	main()
