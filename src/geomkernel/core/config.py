"""
KernelConfig — конфигурация вычислительного ядра

Единственная точка настройки ядра:
- eps: порог близости к нулю (closeness-to-zero)
- check_shapes: проверка размерностей в matrix/vector операциях

Значения по умолчанию совпадают с константами numerical_safeguards.
Переопределение через environment:
    GEOMKERNEL_EPS           — float > 0
    GEOMKERNEL_CHECK_SHAPES  — 1/0, true/false, yes/no, on/off
"""

import math
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from geomkernel.core.math.numerical_safeguards import EPS

ENV_EPS = "GEOMKERNEL_EPS"
ENV_CHECK_SHAPES = "GEOMKERNEL_CHECK_SHAPES"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class KernelConfig:
    """Конфигурация ядра.

    Attributes:
        eps: порог, ниже которого |x| считается нулём (default 1e-6)
        check_shapes: проверять размерности в linalg (default True)
    """

    eps: float = EPS
    check_shapes: bool = True

    def __post_init__(self) -> None:
        if not math.isfinite(self.eps) or self.eps <= 0:
            raise ValueError(f"eps must be a positive finite float, got {self.eps}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "KernelConfig":
        """
        Построение конфигурации из environment.

        Отсутствующие переменные берут значения по умолчанию.

        Args:
            environ: mapping переменных (default: os.environ)

        Raises:
            ValueError: если значение переменной не парсится
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw_eps = env.get(ENV_EPS)
        if raw_eps is not None and raw_eps.strip():
            try:
                eps = float(raw_eps)
            except ValueError:
                raise ValueError(f"{ENV_EPS} must be a float, got {raw_eps!r}")
            config = replace(config, eps=eps)

        raw_check = env.get(ENV_CHECK_SHAPES)
        if raw_check is not None and raw_check.strip():
            config = replace(config, check_shapes=_parse_bool(ENV_CHECK_SHAPES, raw_check))

        return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


# Активная конфигурация процесса (lazy, из environment)
_ACTIVE_CONFIG: Optional[KernelConfig] = None


def get_config() -> KernelConfig:
    """Активная конфигурация; при первом вызове читается из environment."""
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = KernelConfig.from_env()
    return _ACTIVE_CONFIG


def set_config(config: Optional[KernelConfig]) -> None:
    """
    Замена активной конфигурации.

    None сбрасывает конфигурацию: следующий get_config() перечитает environment.
    """
    global _ACTIVE_CONFIG
    _ACTIVE_CONFIG = config
