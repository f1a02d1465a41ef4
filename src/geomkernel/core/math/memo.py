"""
Memoizer — кэширование чистых функций

Обёртка memoize(f) гарантирует:
- f'(*args) == f(*args) для любых аргументов
- f вычисляется не более одного раза на каждый ключ аргументов
- повторная обёртка возвращает существующий wrapper (идемпотентность)

КЛЮЧ КЭША:
    Позиционные аргументы, приведённые к тексту и склеенные через ",".
    Целые float пишутся без дробной части, поэтому 3 и 3.0 делят запись.
    Аргументы с одинаковым текстом (3 и "3") коллизируют — это известное
    ограничение, а не ошибка.

ВРЕМЯ ЖИЗНИ:
    Кэш живёт столько же, сколько wrapper; вытеснения нет. Домены —
    малые целые числа, рост кэша ограничен.
    Wrapper хранится на самой функции (f.memo) и собирается вместе с ней,
    в том числе для lambda, создаваемых на каждый вызов. Callable без
    записываемых атрибутов (builtins, bound methods) хранятся в реестре
    модуля до конца процесса.

ПОТОКОБЕЗОПАСНОСТЬ:
    Поиск и вставка выполняются под threading.Lock. Сама f вычисляется
    вне блокировки: при одновременном первом вызове f может быть
    вычислена дважды, результат одинаков (f чистая).
"""

import functools
import threading
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from geomkernel.core.math.numerical_safeguards import is_integral
from geomkernel.log import get_logger

logger = get_logger(__name__)


def make_key(args: Tuple[Any, ...]) -> str:
    """
    Ключ кэша для кортежа аргументов.

    Examples:
        >>> make_key((5, 2))
        '5,2'
        >>> make_key((5.0, 2))
        '5,2'
        >>> make_key((0.5,))
        '0.5'
        >>> make_key(())
        ''
    """
    return ",".join(_key_part(arg) for arg in args)


def _key_part(arg: Any) -> str:
    if isinstance(arg, float) and not isinstance(arg, bool) and is_integral(arg):
        return str(int(arg))
    return str(arg)


class MemoCache:
    """
    Явный объект кэша (append-only dict под блокировкой).

    Может создаваться wrapper-ом или передаваться снаружи, если несколько
    функций должны делить кэш или тесту нужно его очищать.
    """

    _MISSING = object()

    def __init__(self) -> None:
        self._entries: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def lookup(self, key: str) -> Any:
        """Значение по ключу или MemoCache._MISSING."""
        with self._lock:
            return self._entries.get(key, self._MISSING)

    def insert(self, key: str, value: Any) -> Any:
        """
        Вставка значения; при гонке сохраняется первое вставленное.

        Returns:
            Значение, оказавшееся в кэше
        """
        with self._lock:
            return self._entries.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._entries))

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class Memoized:
    """
    Мемоизированная функция.

    Attributes:
        cache: MemoCache с результатами
        __wrapped__: исходная функция
    """

    def __init__(self, func: Callable[..., Any], cache: Optional[MemoCache] = None) -> None:
        self.cache = cache if cache is not None else MemoCache()
        # копирует __name__/__doc__ и выставляет __wrapped__
        functools.update_wrapper(self, func)

    def __call__(self, *args: Any) -> Any:
        key = make_key(args)
        cached = self.cache.lookup(key)
        if cached is not MemoCache._MISSING:
            return cached

        logger.debug("memo miss: %s(%s)", getattr(self.__wrapped__, "__name__", "?"), key)
        return self.cache.insert(key, self.__wrapped__(*args))

    def __repr__(self) -> str:
        return f"<Memoized {self.__wrapped__!r} entries={len(self.cache)}>"


# Атрибут функции, на котором хранится её wrapper
MEMO_ATTRIBUTE = "memo"

# Реестр для callable без записываемых атрибутов (builtins, bound methods).
# Wrapper держит ссылку на функцию, записи не удаляются.
_REGISTRY: Dict[Callable[..., Any], Memoized] = {}
_REGISTRY_LOCK = threading.Lock()


def _attached(func: Callable[..., Any]) -> Optional[Memoized]:
    existing = getattr(func, MEMO_ATTRIBUTE, None)
    # functools.wraps копирует __dict__, поэтому проверяем владельца
    if isinstance(existing, Memoized) and existing.__wrapped__ is func:
        return existing
    return None


def memoize(func: Callable[..., Any], cache: Optional[MemoCache] = None) -> Memoized:
    """
    Мемоизация чистой функции позиционных аргументов.

    Идемпотентна: memoize(memoize(f)) is memoize(f), повторный
    memoize(f) возвращает тот же wrapper (переданный cache при этом
    игнорируется).

    Wrapper сохраняется в атрибуте f.memo и живёт, пока жива f.
    Только callable, не принимающие атрибуты, попадают в реестр модуля.

    Args:
        func: Чистая функция
        cache: Внешний кэш (optional)

    Returns:
        Memoized wrapper

    Examples:
        >>> square = memoize(lambda x: x * x)
        >>> square(4)
        16
        >>> memoize(square) is square
        True
    """
    if isinstance(func, Memoized):
        return func

    with _REGISTRY_LOCK:
        existing = _attached(func)
        if existing is not None:
            return existing

        wrapper = Memoized(func, cache)
        try:
            setattr(func, MEMO_ATTRIBUTE, wrapper)
            return wrapper
        except (AttributeError, TypeError):
            pass

        try:
            existing = _REGISTRY.get(func)
        except TypeError:
            # не hashable: wrapper без реестра
            return wrapper
        if existing is None:
            existing = _REGISTRY[func] = wrapper
        return existing
