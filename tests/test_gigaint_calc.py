from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def _load_tool():
    path = ROOT / "tools" / "gigaint_calc.py"
    spec = importlib.util.spec_from_file_location("gigaint_calc", path)
    assert spec and spec.loader, f"Could not load spec from {path}"
    module = importlib.util.module_from_spec(spec)
    sys.modules["gigaint_calc"] = module
    spec.loader.exec_module(module)
    return module


calc = _load_tool()


def test_single_operation(capsys) -> None:
    assert calc.main(["add", "1999999999111111111", "-3222222222111111111000000000"]) == 0
    assert capsys.readouterr().out == "-3222222220111111111888888889\n"


def test_power_mod(capsys) -> None:
    assert calc.main(["power_mod", "2", "1000", "1000000007"]) == 0
    assert capsys.readouterr().out.strip() == str(pow(2, 1000, 1_000_000_007))


def test_negative_operands(capsys) -> None:
    assert calc.main(["multiply", "-3", "-4"]) == 0
    assert capsys.readouterr().out == "12\n"


def test_error_prints_one_line(capsys) -> None:
    assert calc.main(["divide", "1", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("division_by_zero: ")
    assert captured.err.count("\n") == 1


def test_malformed_operand(capsys) -> None:
    assert calc.main(["add", "12a", "1"]) == 1
    assert capsys.readouterr().err.startswith("malformed_literal: ")


def test_wrong_operand_count_is_usage_error() -> None:
    with pytest.raises(SystemExit) as exc:
        calc.main(["add", "1"])
    assert exc.value.code == 2


def test_run_script(tmp_path: Path, capsys) -> None:
    script = tmp_path / "steps.yaml"
    script.write_text(
        "- {op: add, args: [1, 2]}\n"
        "- {op: negate, args: ['1000000000']}\n"
        "- op: log\n"
        "  args: [1024, 2]\n",
        encoding="utf-8",
    )
    assert calc.main(["run", str(script)]) == 0
    assert capsys.readouterr().out.splitlines() == ["3", "-1000000000", "10"]


def test_run_script_stops_at_first_failure(tmp_path: Path, capsys) -> None:
    script = tmp_path / "steps.yaml"
    script.write_text(
        "- {op: add, args: [1, 2]}\n"
        "- {op: modulo, args: [5, 0]}\n"
        "- {op: add, args: [3, 4]}\n",
        encoding="utf-8",
    )
    assert calc.main(["run", str(script)]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["3"]
    assert captured.err.startswith("division_by_zero: ")


def test_run_script_unknown_op(tmp_path: Path, capsys) -> None:
    script = tmp_path / "steps.yaml"
    script.write_text("- {op: sqrt, args: [4]}\n", encoding="utf-8")
    assert calc.main(["run", str(script)]) == 1
    assert capsys.readouterr().err.startswith("unknown_operation: ")


@pytest.mark.parametrize(
    "body",
    [
        "op: add\n",
        "- [add, 1, 2]\n",
        "- {args: [1, 2]}\n",
        "- {op: add, args: 1}\n",
        "- {op: add, args: [1.5, 2]}\n",
        "- {op: add, args: [true, 2]}\n",
        "- {op: add, args: [1, 2]\n",
    ],
)
def test_bad_script(tmp_path: Path, capsys, body: str) -> None:
    script = tmp_path / "steps.yaml"
    script.write_text(body, encoding="utf-8")
    assert calc.main(["run", str(script)]) == 1
    assert capsys.readouterr().err.startswith("script error: ")


def test_missing_script(tmp_path: Path, capsys) -> None:
    assert calc.main(["run", str(tmp_path / "absent.yaml")]) == 1
    assert capsys.readouterr().err.startswith("script error: ")


def test_load_script_shapes(tmp_path: Path) -> None:
    script = tmp_path / "steps.yaml"
    script.write_text("- {op: ' abs ', args: [-5]}\n- {op: negate}\n", encoding="utf-8")
    assert calc.load_script(script) == [("abs", ["-5"]), ("negate", [])]
