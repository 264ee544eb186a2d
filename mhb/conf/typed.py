from __future__ import annotations

import dataclasses
import typing as t
from dataclasses import fields, is_dataclass


class ConfigCoerceError(TypeError):
    """Ошибка приведения конфигурации к типу с указанием пути."""
    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        prefix = f"{'.'.join(path)}: " if path else ""
        super().__init__(prefix + message)


_T = t.TypeVar("_T")


def build_typed(cls: type[_T], data: t.Any) -> _T:
    """
    Построить dataclass-объект по сырому словарю (обычно из YAML),
    рекурсивно приводя вложенные значения согласно type hints.

    Лишние ключи считаются ошибкой: опции, которых движок не знает,
    не должны молча игнорироваться.
    """
    try:
        return t.cast(_T, _coerce_dataclass(cls, data, path=()))
    except ConfigCoerceError:
        raise
    except Exception as e:
        raise ConfigCoerceError(f"failed to build {getattr(cls, '__name__', str(cls))}: {e}") from e


def _coerce_dataclass(cls: type, data: t.Any, path: tuple[str, ...]):
    if not isinstance(data, dict):
        raise ConfigCoerceError(f"expected mapping for {cls.__name__}, got {type(data).__name__}", path)

    # строгая проверка лишних ключей
    allowed = {f.name for f in fields(cls)}
    extras = set(data.keys()) - allowed
    if extras:
        raise ConfigCoerceError(f"unexpected keys: {sorted(map(str, extras))!r}", path)

    hints = t.get_type_hints(cls)
    kwargs = {}
    for f in fields(cls):
        f_path = (*path, f.name)
        if f.name in data:
            kwargs[f.name] = coerce(data[f.name], hints.get(f.name, t.Any), f_path)
        elif f.default is not dataclasses.MISSING:
            kwargs[f.name] = f.default
        elif f.default_factory is not dataclasses.MISSING:  # type: ignore[attr-defined]
            kwargs[f.name] = f.default_factory()  # type: ignore[misc]
        else:
            raise ConfigCoerceError("required field missing", f_path)
    return cls(**kwargs)


def coerce(value: t.Any, hint: t.Any, path: tuple[str, ...]) -> t.Any:
    """Рекурсивная нормализация согласно типу-подсказке."""
    origin = t.get_origin(hint)
    args = t.get_args(hint)

    if hint is t.Any:
        return value

    # Optional[T] / Union[…]
    if origin is t.Union:
        if value is None and type(None) in args:
            return None
        last_err: Exception | None = None
        for option in args:
            if option is type(None):
                continue
            try:
                return coerce(value, option, path)
            except ConfigCoerceError as e:
                last_err = e
        raise last_err if last_err else ConfigCoerceError("union alternatives exhausted", path)

    if origin is t.Literal:
        if value not in args:
            raise ConfigCoerceError(f"expected one of {args!r}, got {value!r}", path)
        return value

    # bool проверяется строго: YAML уже отдаёт true/false как bool
    if hint is bool:
        if isinstance(value, bool):
            return value
        raise ConfigCoerceError(f"expected bool, got {type(value).__name__}", path)

    if hint in (str, int, float):
        if isinstance(value, hint) and not isinstance(value, bool):
            return value
        try:
            return hint(value)
        except (TypeError, ValueError):
            raise ConfigCoerceError(f"expected {hint.__name__}, got {type(value).__name__}", path)

    if origin is dict:
        k_t, v_t = args or (t.Any, t.Any)
        if not isinstance(value, dict):
            raise ConfigCoerceError(f"expected dict, got {type(value).__name__}", path)
        return {
            coerce(k, k_t, (*path, "<key>")): coerce(v, v_t, (*path, str(k)))
            for k, v in value.items()
        }

    if origin is list:
        (elem_t,) = args or (t.Any,)
        if not isinstance(value, list):
            raise ConfigCoerceError(f"expected list, got {type(value).__name__}", path)
        return [coerce(v, elem_t, (*path, str(i))) for i, v in enumerate(value)]

    if isinstance(hint, type) and is_dataclass(hint):
        return _coerce_dataclass(hint, value, path)

    return value
