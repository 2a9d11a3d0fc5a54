from __future__ import annotations

import logging
from collections.abc import Mapping

import pygame

from .config import ClusterWidgetConfig
from .instruction import EMPTY_INSTRUCTION, RenderInstruction, RendererKind
from .registry import DispatchRegistry
from .renderers import SubRenderer, default_sub_renderers
from .router import FinalizeFailure, RendererRouter
from .toolkit import RawProps

logger = logging.getLogger(__name__)


class ClusterWidget:
    """Host-facing ``translate`` / ``render`` / ``finalize`` triple.

    Nothing raised by a mapper or a painter escapes to the caller: a failed
    translate yields the empty instruction and a failed paint leaves the
    canvas as it was.
    """

    def __init__(self, registry: DispatchRegistry, router: RendererRouter) -> None:
        self._registry = registry
        self._router = router

    @property
    def registry(self) -> DispatchRegistry:
        return self._registry

    @property
    def router(self) -> RendererRouter:
        return self._router

    @property
    def wants_hide_native_head(self) -> bool:
        return self._router.wants_hide_native_head

    def translate(self, raw_props: RawProps | None) -> RenderInstruction:
        try:
            return self._registry.translate(raw_props)
        except Exception:
            logger.exception("translate failed for cluster %r", (raw_props or {}).get("cluster"))
            return EMPTY_INSTRUCTION

    def render(self, canvas: pygame.Surface, instruction: RenderInstruction) -> bool:
        try:
            self._router.render_canvas(canvas, instruction)
        except Exception:
            logger.exception("render failed for renderer %r", instruction.renderer)
            return False
        return True

    def update(self, canvas: pygame.Surface, raw_props: RawProps | None) -> RenderInstruction:
        instruction = self.translate(raw_props)
        self.render(canvas, instruction)
        return instruction

    def finalize(self, *args: object) -> tuple[FinalizeFailure, ...]:
        return self._router.finalize(*args)


def build_cluster_widget(
    *,
    config: ClusterWidgetConfig | None = None,
    renderers: Mapping[RendererKind, SubRenderer] | None = None,
) -> ClusterWidget:
    cfg = config or ClusterWidgetConfig()
    registry = DispatchRegistry.from_modules(cfg.mapper_modules, default_cluster=cfg.default_cluster)
    router = RendererRouter(renderers if renderers is not None else default_sub_renderers())
    return ClusterWidget(registry=registry, router=router)
