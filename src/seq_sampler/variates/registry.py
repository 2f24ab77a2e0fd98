"""Name-to-class table for uniform variate sources.

``SamplerConfig.variate_source_type`` names a source; the registry turns
that name into a configured instance. Sources shipped with the package
register themselves with ``@register_variate_source`` when their module is
imported. Sources from other distributions are advertised under the
``seq_sampler.variate_sources`` entry-point group and are only imported
when a name is not found among the registered ones.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, ClassVar

from seq_sampler.variates.base import UniformVariateSource

if TYPE_CHECKING:
    from collections.abc import Callable

    from seq_sampler.config import SamplerConfig

logger = logging.getLogger("seq_sampler")

PLUGIN_GROUP = "seq_sampler.variate_sources"


class VariateSourceRegistry:
    """Resolves source names and builds sources from configuration.

    Registered classes always win over a plugin advertising the same name.
    Registering a second, different class under a taken name is an error.
    """

    _sources: ClassVar[dict[str, type[UniformVariateSource]]] = {}
    _plugins_scanned: ClassVar[bool] = False

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[UniformVariateSource]], type[UniformVariateSource]]:
        """Class decorator adding a source under *name*.

        Raises:
            ValueError: If *name* already belongs to another class.
        """

        def decorator(source_cls: type[UniformVariateSource]) -> type[UniformVariateSource]:
            existing = cls._sources.setdefault(name, source_cls)
            if existing is not source_cls:
                raise ValueError(
                    f"Variate source name {name!r} is taken by {existing.__qualname__}"
                )
            return source_cls

        return decorator

    @classmethod
    def resolve(cls, name: str) -> type[UniformVariateSource]:
        """Return the class registered as *name*, scanning plugins if needed.

        Raises:
            KeyError: If no registered class or plugin provides *name*.
        """
        if name not in cls._sources:
            cls._scan_plugins()
        try:
            return cls._sources[name]
        except KeyError:
            known = ", ".join(sorted(cls._sources)) or "(none)"
            raise KeyError(f"Unknown variate source: {name!r}. Available: {known}") from None

    @classmethod
    def create(cls, name: str, config: SamplerConfig) -> UniformVariateSource:
        """Build the source registered as *name* via its ``from_config``.

        Raises:
            KeyError: If *name* is unknown.
            VariateUnavailableError: If the source cannot be set up.
        """
        source = cls.resolve(name).from_config(config)
        logger.debug("Created variate source %r for name %r", source.name, name)
        return source

    @classmethod
    def names(cls) -> list[str]:
        """Sorted names of every source, plugins included."""
        cls._scan_plugins()
        return sorted(cls._sources)

    @classmethod
    def _scan_plugins(cls) -> None:
        if cls._plugins_scanned:
            return
        cls._plugins_scanned = True

        for ep in importlib.metadata.entry_points(group=PLUGIN_GROUP):
            if ep.name in cls._sources:
                continue
            try:
                plugin = ep.load()
            except Exception:  # a broken plugin only loses its own name
                logger.warning("Cannot import variate source plugin %r (%s)", ep.name, ep.value)
                continue
            if not (isinstance(plugin, type) and issubclass(plugin, UniformVariateSource)):
                logger.warning(
                    "Ignoring plugin %r: %s is not a UniformVariateSource", ep.name, ep.value
                )
                continue
            cls._sources[ep.name] = plugin
            logger.debug("Registered variate source plugin %r", ep.name)


register_variate_source = VariateSourceRegistry.register
