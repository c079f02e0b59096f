from __future__ import annotations
import inspect
import types
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union, get_args, get_origin

from typeinject.errors import UsageError

"""
──────────────────────────────────────────────────────────────────────────────
Callable introspection
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Turn an arbitrary callable into the ordered list of parameters the
    invoker has to resolve, plus its declared return annotation.

Mechanics:
    - inspect.signature(eval_str=True) so string / postponed annotations
      resolve to real types (functions, classes, partials, callable objects)
    - *args / **kwargs are dropped: nothing can be resolved for them
    - Optional[T] and T | None are recognised by strip_optional()
"""

EMPTY = inspect.Parameter.empty
_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class Param:
    name: str
    kind: Any
    annotation: Any
    default: Any

    @property
    def annotated(self) -> bool:
        return self.annotation is not EMPTY

    @property
    def has_default(self) -> bool:
        return self.default is not EMPTY

    @property
    def keyword_only(self) -> bool:
        return self.kind is inspect.Parameter.KEYWORD_ONLY


@dataclass(frozen=True)
class CallableSignature:
    params: Tuple[Param, ...]
    returns: Any


def describe(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or type(fn).__qualname__


def inspect_callable(fn: Callable[..., Any]) -> CallableSignature:
    if not callable(fn):
        raise UsageError(f"inject: non-callable {type(fn).__name__}")
    try:
        sig = inspect.signature(fn, eval_str=True)
    except NameError as e:
        raise UsageError(f"inject: cannot evaluate annotations of {describe(fn)}: {e}") from e
    except (TypeError, ValueError) as e:
        raise UsageError(f"inject: no signature available for {describe(fn)}") from e

    params = tuple(
        Param(name=p.name, kind=p.kind, annotation=p.annotation, default=p.default)
        for p in sig.parameters.values()
        if p.kind not in _SKIPPED_KINDS
    )
    return CallableSignature(params=params, returns=sig.return_annotation)


def strip_optional(typ: Any) -> Optional[Any]:
    """Return T for Optional[T] / T | None; None when typ is not optional."""
    origin = get_origin(typ)
    if origin is not Union and origin is not types.UnionType:
        return None
    args = get_args(typ)
    rest = tuple(a for a in args if a is not type(None))
    if len(rest) == len(args):
        return None
    if len(rest) == 1:
        return rest[0]
    return Union[rest]


def split_results(result: Any, returns: Any) -> List[Any]:
    """
    Spread a Python return value into the ordered result list:
        -> None           → []
        -> tuple[A, B]    → [a, b]
        anything else     → [result]
    """
    if returns is None or returns is type(None):
        return []
    if get_origin(returns) is tuple and isinstance(result, tuple):
        args = get_args(returns)
        if args and Ellipsis not in args:
            return list(result)
    return [result]
