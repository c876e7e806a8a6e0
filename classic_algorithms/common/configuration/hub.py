"""Layered configuration with typed, cached section access."""
from __future__ import annotations

from copy import deepcopy
from threading import RLock
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
import structlog

from .providers import ConfigProvider, merge_mappings

T = TypeVar("T", bound=BaseModel)
Listener = Callable[["ConfigurationHub"], None]

logger = structlog.get_logger(__name__)

_MISSING = object()


class ConfigNotFoundError(KeyError):
    """Raised when a configuration section is missing."""


class ConfigurationHub:
    """Merge payloads from several providers and hand out typed sections.

    Providers are applied in declaration order, so later providers override
    earlier ones key by key. Models built by :meth:`get` are cached per
    ``(path, model)`` until the next :meth:`reload`.
    """

    def __init__(self, providers: Iterable[ConfigProvider], eager_load: bool = True) -> None:
        self._providers: Tuple[ConfigProvider, ...] = tuple(providers)
        if not self._providers:
            raise ValueError("ConfigurationHub requires at least one provider")
        self._lock = RLock()
        self._raw: Dict[str, Any] = {}
        self._models: Dict[Tuple[Optional[str], type], BaseModel] = {}
        self._listeners: List[Listener] = []
        if eager_load:
            self.reload()

    def reload(self) -> None:
        """Re-read every provider and notify listeners."""

        merged: Dict[str, Any] = {}
        for provider in self._providers:
            payload = provider.load()
            if not isinstance(payload, Mapping):
                raise TypeError(f"Provider {type(provider).__name__} must return a mapping")
            merged = merge_mappings(merged, payload)
        with self._lock:
            self._raw = merged
            self._models.clear()
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("configuration listener failed", listener=repr(listener))

    def add_listener(self, callback: Listener) -> None:
        """Register ``callback`` to run after each reload."""

        self._listeners.append(callback)

    def get_raw(self) -> Dict[str, Any]:
        with self._lock:
            return deepcopy(self._raw)

    def get(
        self,
        path: Optional[str] = None,
        *,
        model: Optional[Type[T]] = None,
        default: Any = _MISSING,
    ) -> Any:
        """Return the value at dotted ``path`` (whole payload when None).

        With ``model`` the value is validated into that pydantic model.
        A missing path returns ``default`` when given, otherwise raises
        :class:`ConfigNotFoundError`.
        """

        with self._lock:
            value = self._raw if path is None else _lookup(self._raw, path)
            if value is _MISSING:
                if default is not _MISSING:
                    return default
                raise ConfigNotFoundError(path)
            if model is None:
                return deepcopy(value)
            key = (path, model)
            if key not in self._models:
                self._models[key] = model.model_validate(value)
            return self._models[key]

    def section(self, name: str, model: Type[T]) -> T:
        """Return section ``name`` as ``model``, or the model's defaults when absent."""

        try:
            return self.get(name, model=model)
        except ConfigNotFoundError:
            logger.debug("configuration section missing; using defaults", section=name)
            return model()


def _lookup(payload: Mapping[str, Any], path: str) -> Any:
    node: Any = payload
    for part in path.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node
