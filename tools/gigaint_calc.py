#!/usr/bin/env python3
"""
Command-line calculator over the gigaint engine.

    gigaint_calc.py add 1999999999111111111 -3222222222111111111000000000
    gigaint_calc.py power_mod 2 1000 1000000007
    gigaint_calc.py run steps.yaml

A script is a YAML list of ``{op: <operation>, args: [<integer>, ...]}``
mappings. Every step prints one result line. The first failure prints one
line on stderr and the process exits with status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import yaml  # noqa: E402

from gigaint.config import load_config  # noqa: E402
from gigaint.core.engine import OpResult, Operation, arity, evaluate  # noqa: E402

logger = logging.getLogger("gigaint_calc")


class ScriptError(Exception):
    pass


def _require_mapping(obj: Any, *, name: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ScriptError(f"{name} must be a mapping")
    return obj


def _require_list(obj: Any, *, name: str) -> list[Any]:
    if not isinstance(obj, list):
        raise ScriptError(f"{name} must be a list")
    return obj


def _require_str(obj: Any, *, name: str) -> str:
    if not isinstance(obj, str) or not obj.strip():
        raise ScriptError(f"{name} must be a non-empty string")
    return obj.strip()


def load_script(path: Path) -> list[tuple[str, list[str]]]:
    """Parse and shape-check a YAML script (fail-closed)."""
    raw = path.read_text(encoding="utf-8")
    steps = _require_list(yaml.safe_load(raw), name="script")
    out: list[tuple[str, list[str]]] = []
    for idx, step_obj in enumerate(steps):
        step = _require_mapping(step_obj, name=f"script[{idx}]")
        op = _require_str(step.get("op"), name=f"script[{idx}].op")
        operands: list[str] = []
        for j, arg in enumerate(_require_list(step.get("args", []), name=f"script[{idx}].args")):
            if isinstance(arg, bool) or not isinstance(arg, (int, str)):
                raise ScriptError(f"script[{idx}].args[{j}] must be an integer")
            operands.append(str(arg))
        out.append((op, operands))
    return out


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _emit(result: OpResult) -> int:
    if not result.ok:
        kind = result.error_kind.value if result.error_kind else "error"
        return _fail(f"{kind}: {result.message}")
    print(result.value)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Arbitrary-precision integer calculator")
    sub = p.add_subparsers(dest="command", required=True)
    for op in Operation:
        sp = sub.add_parser(op.value, help=f"{op.value} ({arity(op)} operand(s))")
        sp.add_argument("operands", nargs=arity(op), metavar="N", help="decimal integer")
    run = sub.add_parser("run", help="evaluate a YAML script of operations")
    run.add_argument("script", help="path to the YAML script")
    return p


def main(argv: list[str] | None = None) -> int:
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%m/%d/%Y %H:%M:%S",
    )
    args = build_parser().parse_args(argv)

    if args.command != "run":
        return _emit(evaluate(args.command, *args.operands))

    try:
        steps = load_script(Path(args.script))
    except (OSError, yaml.YAMLError, ScriptError) as exc:
        return _fail(f"script error: {exc}")
    logger.debug("running %d step(s) from %s", len(steps), args.script)
    for op, operands in steps:
        status = _emit(evaluate(op, *operands))
        if status:
            return status
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
