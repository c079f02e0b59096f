from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence, Tuple

from typeinject.core.coerce import convert, satisfies
from typeinject.core.signature import CallableSignature, Param, describe, inspect_callable, split_results, strip_optional
from typeinject.errors import MissingDependencyError, UsageError, type_name

if TYPE_CHECKING:
    from typeinject.core.registry import Registry

"""
──────────────────────────────────────────────────────────────────────────────
Invocation (argument resolution)
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Resolve every parameter of a callable against a Registry and call it.

Mechanics:
    - Parameters are resolved in declaration order
    - Unnamed position  → type-keyed lookup (parent chain included)
    - Named position    → name-keyed lookup, then coercion when the stored
                          type does not satisfy the declared one
    - Optional[T]       → T is tried too; None is passed when both miss
    - Default values    → used when the lookup misses
    - All arguments are resolved before the callable runs; any failure
      aborts with nothing invoked

Used by:
    Registry.invoke / invoke_named / call / call_named
"""

logger = logging.getLogger(__name__)


def _resolve_by_type(registry: "Registry", param: Param) -> Any:
    if not param.annotated:
        if param.has_default:
            return param.default
        raise UsageError(f"inject: parameter '{param.name}' has no type annotation to resolve by")

    stored = registry.get_value(param.annotation)
    if stored is not None:
        return stored.value

    inner = strip_optional(param.annotation)
    if inner is not None:
        stored = registry.get_value(inner)
        if stored is not None:
            return stored.value

    if param.has_default:
        return param.default
    if inner is not None:
        return None
    logger.debug("[inject] missing %s for '%s'", type_name(param.annotation), param.name)
    raise MissingDependencyError(param.annotation, param.name)


def _resolve_by_name(registry: "Registry", param: Param, name: str) -> Any:
    stored = registry.get_named_value(name)
    if stored is None:
        if param.has_default:
            return param.default
        logger.debug("[inject] missing name %r for '%s'", name, param.name)
        raise MissingDependencyError(name, param.name)

    target = param.annotation
    if satisfies(stored, target):
        return stored.value
    inner = strip_optional(target)
    if inner is not None:
        if stored.value is None or satisfies(stored, inner):
            return stored.value
        target = inner

    conversion = convert(stored.value, stored.type, target, enabled=registry.settings.coerce_named)
    if conversion.ok:
        return conversion.value
    if conversion.unsupported:
        logger.debug("[inject] %s", conversion.error)
        raise conversion.error
    # right kinds, but the value itself does not fit the target type
    raise MissingDependencyError(name, param.name) from conversion.error


def resolve_arguments(
    registry: "Registry",
    sig: CallableSignature,
    names: Optional[Sequence[Optional[str]]] = None,
) -> Tuple[List[Any], Dict[str, Any]]:
    args: List[Any] = []
    kwargs: Dict[str, Any] = {}
    trace = registry.settings.trace_resolution

    for i, param in enumerate(sig.params):
        name = names[i] if names is not None else None
        if name:
            value = _resolve_by_name(registry, param, name)
        else:
            value = _resolve_by_type(registry, param)
        if trace:
            logger.debug("[inject] %s ← %s", param.name, f"name {name!r}" if name else type_name(param.annotation))

        if param.keyword_only:
            kwargs[param.name] = value
        else:
            args.append(value)
    return args, kwargs


def call(registry: "Registry", fn: Callable[..., Any], names: Optional[Sequence[Optional[str]]] = None) -> Tuple[Any, CallableSignature]:
    """Resolve and call `fn`; returns (raw return value, signature)."""
    sig = inspect_callable(fn)
    if names is not None and len(names) != len(sig.params):
        raise UsageError(f"inject: expecting {len(sig.params)} names, got {len(names)}")

    args, kwargs = resolve_arguments(registry, sig, names)
    if registry.settings.trace_resolution:
        logger.debug("[inject] calling %s with %d argument(s)", describe(fn), len(args) + len(kwargs))
    return fn(*args, **kwargs), sig


def invoke(registry: "Registry", fn: Callable[..., Any], names: Optional[Sequence[Optional[str]]] = None) -> List[Any]:
    result, sig = call(registry, fn, names)
    return split_results(result, sig.returns)
