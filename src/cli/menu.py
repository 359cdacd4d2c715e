"""Интерактивное меню операций над двумя векторами.

Тонкий слой ввода-вывода поверх публичного контракта FixedVector:
ввод двух векторов, сложение, вычитание, умножение и деление на скаляр,
вывод текущих векторов. Ошибки библиотеки и ошибки разбора чисел
выводятся пользователю, цикл продолжается.
"""

import logging
from collections import deque
from typing import Any, Callable, Final, Sequence

import numpy as np

from src.cli.config import MenuConfig
from src.cli.logging_setup import setup_logging
from src.core.domain.fixed_vector import FixedVector
from src.core.math.numerical_safeguards import FixedVectorError

logger = logging.getLogger(__name__)

MENU_TEXT: Final[str] = """
=== Vector operations ===
1. Enter vectors
2. Add vectors
3. Subtract vectors
4. Multiply vectors by a scalar
5. Divide vectors by a scalar
6. Show current vectors
0. Exit"""

PROMPT_CHOICE: Final[str] = "Choose an option: "
MSG_NO_INPUT: Final[str] = "Please enter the vectors first!"
MSG_UNKNOWN: Final[str] = "Unknown option, try again."
MSG_BYE: Final[str] = "Bye!"


class VectorMenu:
    """Цикл меню над двумя векторами размерности config.dimension.

    input_fn / output_fn подменяются в тестах.
    """

    def __init__(
        self,
        config: MenuConfig | None = None,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], Any] | None = None,
    ):
        self.config = config or MenuConfig()
        self._input = input_fn or input
        self._output = output_fn or print
        self._tokens: deque[str] = deque()
        self._parse = np.dtype(self.config.dtype).type

        self.v1 = FixedVector.default(self.config.dtype, self.config.dimension)
        self.v2 = FixedVector.default(self.config.dtype, self.config.dimension)
        self.has_input = False

        self._actions: dict[str, Callable[[], None]] = {
            "1": self.enter_vectors,
            "2": self.add_vectors,
            "3": self.subtract_vectors,
            "4": self.multiply_by_scalar,
            "5": self.divide_by_scalar,
            "6": self.show_vectors,
        }

    def _next_token(self, prompt: str) -> str:
        while not self._tokens:
            self._tokens.extend(self._input(prompt).split())
        return self._tokens.popleft()

    def _read_number(self, prompt: str) -> Any:
        token = self._next_token(prompt)
        try:
            return self._parse(token)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"cannot read {token!r} as {self.config.dtype}") from e

    def _read_vector(self, name: str) -> FixedVector:
        vector = FixedVector.default(self.config.dtype, self.config.dimension)
        prompt = f"Enter {name} ({self.config.dimension} values): "
        for i in range(self.config.dimension):
            vector[i] = self._read_number(prompt)
        return vector

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def enter_vectors(self) -> None:
        v1 = self._read_vector("vector 1")
        v2 = self._read_vector("vector 2")
        self.v1, self.v2 = v1, v2
        self.has_input = True

    def add_vectors(self) -> None:
        self._output(f"v1 + v2 = {self.v1 + self.v2}")

    def subtract_vectors(self) -> None:
        self._output(f"v1 - v2 = {self.v1 - self.v2}")

    def multiply_by_scalar(self) -> None:
        scalar = self._read_number("Enter a scalar: ")
        self._output(f"v1 * scalar = {self.v1 * scalar}")
        self._output(f"v2 * scalar = {self.v2 * scalar}")

    def divide_by_scalar(self) -> None:
        scalar = self._read_number("Enter a scalar: ")
        self._output(f"v1 / scalar = {self.v1 / scalar}")
        self._output(f"v2 / scalar = {self.v2 / scalar}")

    def show_vectors(self) -> None:
        self._output(f"Vector 1: {self.v1}")
        self._output(f"Vector 2: {self.v2}")

    # =========================================================================
    # LOOP
    # =========================================================================

    def handle(self, choice: str) -> bool:
        """Выполнение одной опции. Возвращает False, если нужно выйти."""
        if choice == "0":
            self._output(MSG_BYE)
            return False

        action = self._actions.get(choice)
        if action is None:
            self._output(MSG_UNKNOWN)
            return True
        if choice != "1" and not self.has_input:
            self._output(MSG_NO_INPUT)
            return True

        try:
            action()
        except (FixedVectorError, ZeroDivisionError, ValueError) as e:
            logger.info("option %s failed: %s", choice, e)
            self._output(f"Error: {e}")
        return True

    def run(self) -> int:
        """Цикл меню до выбора 0 или конца ввода. Возвращает код выхода."""
        while True:
            self._output(MENU_TEXT)
            try:
                self._tokens.clear()
                choice = self._next_token(PROMPT_CHOICE)
                if not self.handle(choice):
                    return 0
            except EOFError:
                self._output(MSG_BYE)
                return 0


def main(argv: Sequence[str] | None = None) -> int:
    config = MenuConfig.from_args(argv)
    setup_logging(config.log_level, config.log_format)
    logger.debug("menu started", extra={"dimension": config.dimension, "dtype": config.dtype})
    return VectorMenu(config).run()
