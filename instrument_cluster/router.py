from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

import pygame

from .instruction import RenderInstruction, RendererKind
from .renderers import SubRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FinalizeFailure:
    renderer: RendererKind | str
    error: Exception


class RendererRouter:
    """Routes an instruction to the sub-renderer named by its ``renderer`` field.

    Unknown or missing names fall back to the default renderer. Teardown fans
    out to every distinct sub-renderer, and one failing hook never stops the
    others from running.
    """

    def __init__(
        self,
        renderers: Mapping[RendererKind, SubRenderer],
        *,
        default: RendererKind = RendererKind.THREE_VALUE_TEXT,
    ) -> None:
        if default not in renderers:
            raise ValueError(f"default renderer {default!s} is not registered")
        self._renderers: dict[RendererKind, SubRenderer] = dict(renderers)
        self._default = default
        self._wants_hide_native_head = any(
            bool(getattr(r, "wants_hide_native_head", False)) for r in self._renderers.values()
        )
        self.finalize_failures: list[FinalizeFailure] = []

    @property
    def wants_hide_native_head(self) -> bool:
        return self._wants_hide_native_head

    @property
    def renderers(self) -> Mapping[RendererKind, SubRenderer]:
        return dict(self._renderers)

    def pick_renderer(self, instruction: RenderInstruction | Mapping[str, object] | None) -> SubRenderer:
        if isinstance(instruction, RenderInstruction):
            name: object = instruction.renderer
        elif isinstance(instruction, Mapping):
            name = instruction.get("renderer")
        else:
            name = None
        kind = RendererKind.lookup(name) if name is not None else None
        if kind is None:
            return self._renderers[self._default]
        return self._renderers.get(kind, self._renderers[self._default])

    def render_canvas(self, canvas: pygame.Surface, instruction: RenderInstruction) -> None:
        renderer = self.pick_renderer(instruction)
        renderer.render_canvas(canvas, instruction.merged_props())

    def finalize(self, *args: object) -> tuple[FinalizeFailure, ...]:
        failures: list[FinalizeFailure] = []
        seen: set[int] = set()
        for kind, renderer in self._renderers.items():
            if id(renderer) in seen:
                continue
            seen.add(id(renderer))
            hook = getattr(renderer, "finalize", None)
            if not callable(hook):
                continue
            try:
                hook(*args)
            except Exception as exc:
                logger.warning("finalize of %s failed: %s", kind, exc, exc_info=True)
                failures.append(FinalizeFailure(renderer=kind, error=exc))
        self.finalize_failures.extend(failures)
        return tuple(failures)
