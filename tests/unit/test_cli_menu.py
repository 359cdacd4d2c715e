"""
Тесты для консольного меню

Проверяет:
1. MenuConfig: значения по умолчанию, валидация, разбор аргументов
2. VectorMenu: все опции, защиту от операций без ввода,
   вывод ошибок без завершения цикла, выход по 0 и по EOF
3. Логирование: JSONFormatter и setup_logging
"""

import json
import logging

import pytest

from src.cli.config import MenuConfig
from src.cli.logging_setup import JSONFormatter, setup_logging
from src.cli.menu import MSG_BYE, MSG_NO_INPUT, MSG_UNKNOWN, VectorMenu, main


# =============================================================================
# HELPERS
# =============================================================================


class ScriptedConsole:
    """Подменяет input/print: отдаёт заготовленные строки, собирает вывод."""

    def __init__(self, *lines: str):
        self._lines = list(lines)
        self.output: list[str] = []

    def input(self, prompt: str = "") -> str:
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def print(self, text: str = "") -> None:
        self.output.append(text)

    def results(self) -> list[str]:
        """Вывод без текста меню."""
        return [line for line in self.output if "===" not in line]


def run_menu(*lines: str, config: MenuConfig | None = None) -> list[str]:
    console = ScriptedConsole(*lines)
    exit_code = VectorMenu(config, input_fn=console.input, output_fn=console.print).run()
    assert exit_code == 0
    return console.results()


# =============================================================================
# CONFIG
# =============================================================================


class TestMenuConfig:
    """Тесты MenuConfig"""

    def test_defaults(self) -> None:
        config = MenuConfig()
        assert config.dimension == 3
        assert config.dtype == "float64"
        assert config.log_level == "WARNING"
        assert config.log_format == "text"

    def test_dtype_normalised(self) -> None:
        assert MenuConfig(dtype="int").dtype == "int64"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"dimension": 0},
            {"dimension": -2},
            {"dimension": 2.5},
            {"dtype": "bool"},
            {"log_level": "LOUD"},
            {"log_format": "xml"},
        ],
    )
    def test_invalid_values_rejected(self, kwargs) -> None:
        with pytest.raises(ValueError):
            MenuConfig(**kwargs)

    def test_from_args(self) -> None:
        config = MenuConfig.from_args(
            ["--dimension", "2", "--dtype", "int32", "--log-level", "debug", "--log-format", "json"]
        )
        assert config == MenuConfig(dimension=2, dtype="int32", log_level="DEBUG", log_format="json")

    def test_from_args_defaults(self) -> None:
        assert MenuConfig.from_args([]) == MenuConfig()


# =============================================================================
# MENU
# =============================================================================


class TestVectorMenu:
    """Тесты цикла меню"""

    def test_add_and_subtract(self) -> None:
        output = run_menu("1", "1 2 3", "4 5 6", "2", "3", "0")
        assert "v1 + v2 = [5.0, 7.0, 9.0]" in output
        assert "v1 - v2 = [-3.0, -3.0, -3.0]" in output
        assert output[-1] == MSG_BYE

    def test_values_may_span_lines(self) -> None:
        output = run_menu("1", "1", "2", "3 4", "5 6", "6", "0")
        assert "Vector 1: [1.0, 2.0, 3.0]" in output
        assert "Vector 2: [4.0, 5.0, 6.0]" in output

    def test_choice_and_values_on_one_line(self) -> None:
        output = run_menu("1 1 2 3 4 5 6", "6", "0")
        assert "Vector 2: [4.0, 5.0, 6.0]" in output

    def test_scalar_multiply_and_divide(self) -> None:
        output = run_menu("1", "2 4 6", "1 1 1", "4", "2", "5", "2", "0")
        assert "v1 * scalar = [4.0, 8.0, 12.0]" in output
        assert "v2 * scalar = [2.0, 2.0, 2.0]" in output
        assert "v1 / scalar = [1.0, 2.0, 3.0]" in output
        assert "v2 / scalar = [0.5, 0.5, 0.5]" in output

    def test_float_division_by_zero_prints_inf(self) -> None:
        output = run_menu("1", "1 -1 2", "0 0 0", "5", "0", "0")
        assert "v1 / scalar = [inf, -inf, inf]" in output

    def test_integer_division_by_zero_reported(self) -> None:
        config = MenuConfig(dtype="int64")
        output = run_menu("1", "7 -7 1", "1 2 3", "5", "0", "5", "2", "0", config=config)
        assert "Error: integer division by zero" in output
        assert "v1 / scalar = [3, -3, 0]" in output

    @pytest.mark.parametrize("choice", ["2", "3", "4", "5", "6"])
    def test_operations_require_input(self, choice: str) -> None:
        output = run_menu(choice, "0")
        assert MSG_NO_INPUT in output

    def test_unknown_option(self) -> None:
        output = run_menu("9", "abc", "0")
        assert output.count(MSG_UNKNOWN) == 2

    def test_bad_number_reported_and_vectors_kept(self) -> None:
        output = run_menu("1", "1 2 3", "4 5 6", "1", "1 x", "6", "0")
        assert any(line.startswith("Error: cannot read 'x'") for line in output)
        assert "Vector 1: [1.0, 2.0, 3.0]" in output

    def test_eof_exits_cleanly(self) -> None:
        output = run_menu("1", "1 2 3")
        assert output[-1] == MSG_BYE

    def test_custom_dimension(self) -> None:
        output = run_menu("1", "1 2", "3 4", "2", "0", config=MenuConfig(dimension=2))
        assert "v1 + v2 = [4.0, 6.0]" in output

    def test_main_uses_builtin_console(self, monkeypatch, capsys) -> None:
        lines = iter(["1", "1 2", "3 4", "2", "0"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
        monkeypatch.setattr(logging, "root", logging.RootLogger(logging.WARNING))

        assert main(["--dimension", "2", "--dtype", "int64"]) == 0
        assert "v1 + v2 = [4, 6]" in capsys.readouterr().out


# =============================================================================
# LOGGING
# =============================================================================


class TestLogging:
    """Тесты настройки логирования"""

    def test_json_formatter(self) -> None:
        record = logging.LogRecord("src.cli", logging.INFO, __file__, 1, "hello %s", ("world",), None)
        record.dimension = 3
        record.operation = "add"
        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "hello world"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "src.cli"
        assert payload["dimension"] == 3
        assert "dtype" not in payload
        assert "operation" not in payload

    @pytest.mark.parametrize("fmt, formatter_type", [("json", JSONFormatter), ("text", logging.Formatter)])
    def test_setup_logging(self, monkeypatch, fmt: str, formatter_type) -> None:
        root = logging.RootLogger(logging.WARNING)
        monkeypatch.setattr(logging, "root", root)

        handler = setup_logging("debug", fmt)
        assert handler in root.handlers
        assert isinstance(handler.formatter, formatter_type)
        assert root.level == logging.DEBUG
