from __future__ import annotations

import importlib
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .instruction import EMPTY_INSTRUCTION, RenderInstruction
from .toolkit import MapperToolkit, RawProps, create_toolkit

logger = logging.getLogger(__name__)

MapperFn = Callable[[RawProps, MapperToolkit], RenderInstruction | None]

# Fixed registration order; one module per cluster.
DEFAULT_MAPPER_MODULES: tuple[str, ...] = (
    "instrument_cluster.mappers.course_heading",
    "instrument_cluster.mappers.speed",
    "instrument_cluster.mappers.position",
    "instrument_cluster.mappers.distance",
    "instrument_cluster.mappers.environment",
    "instrument_cluster.mappers.wind",
    "instrument_cluster.mappers.time_of_day",
    "instrument_cluster.mappers.nav",
    "instrument_cluster.mappers.anchor",
    "instrument_cluster.mappers.vessel",
)


@dataclass(frozen=True, slots=True)
class MapperSpec:
    cluster: str
    translate: MapperFn


def _spec_from_module(module_name: str) -> MapperSpec | None:
    try:
        module = importlib.import_module(module_name)
    except Exception:
        logger.debug("mapper module %s failed to import, skipped", module_name, exc_info=True)
        return None

    cluster = getattr(module, "CLUSTER", None)
    translate = getattr(module, "translate", None)
    if not isinstance(cluster, str) or not callable(translate):
        logger.debug("mapper module %s lacks CLUSTER/translate, skipped", module_name)
        return None
    return MapperSpec(cluster=str(cluster), translate=translate)


class DispatchRegistry:
    """Immutable cluster -> mapper table plus the translate call.

    Specs are applied in order, so a later spec for an already registered
    cluster replaces the earlier one.
    """

    def __init__(
        self,
        specs: Iterable[MapperSpec],
        *,
        default_cluster: str = "",
        toolkit_factory: Callable[[RawProps], MapperToolkit] = create_toolkit,
    ) -> None:
        table: dict[str, MapperFn] = {}
        for spec in specs:
            if not isinstance(spec.cluster, str) or not callable(spec.translate):
                logger.debug("malformed mapper spec %r skipped", spec)
                continue
            table[spec.cluster] = spec.translate

        self._mappers: Mapping[str, MapperFn] = MappingProxyType(table)
        self._default_cluster = str(default_cluster or "")
        self._toolkit_factory = toolkit_factory
        logger.debug("dispatch registry built with clusters %s", sorted(table))

    @classmethod
    def from_specs(
        cls,
        specs: Iterable[MapperSpec],
        *,
        default_cluster: str = "",
    ) -> DispatchRegistry:
        return cls(specs, default_cluster=default_cluster)

    @classmethod
    def from_modules(
        cls,
        module_names: Iterable[str] = DEFAULT_MAPPER_MODULES,
        *,
        default_cluster: str = "",
    ) -> DispatchRegistry:
        specs = [s for s in (_spec_from_module(n) for n in module_names) if s is not None]
        return cls(specs, default_cluster=default_cluster)

    @property
    def mappers(self) -> Mapping[str, MapperFn]:
        return self._mappers

    @property
    def default_cluster(self) -> str:
        return self._default_cluster

    def clusters(self) -> tuple[str, ...]:
        return tuple(self._mappers)

    def translate(self, raw_props: RawProps | None) -> RenderInstruction:
        props: RawProps = raw_props if raw_props is not None else {}
        cluster = props.get("cluster") or self._default_cluster
        mapper = self._mappers.get(str(cluster))
        if mapper is None:
            return EMPTY_INSTRUCTION

        result = mapper(props, self._toolkit_factory(props))
        return result or EMPTY_INSTRUCTION
