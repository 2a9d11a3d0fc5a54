from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pytest

from instrument_cluster.instruction import RenderInstruction, RendererKind
from instrument_cluster.router import RendererRouter


@dataclass
class RecordingRenderer:
    wants_hide_native_head: bool = False
    fail_on_finalize: bool = False
    finalize_calls: list[tuple[object, ...]] = field(default_factory=list)
    painted: list[dict[str, object]] = field(default_factory=list)

    def render_canvas(self, canvas, props) -> None:
        self.painted.append(dict(props))

    def finalize(self, *args: object) -> None:
        self.finalize_calls.append(args)
        if self.fail_on_finalize:
            raise RuntimeError("teardown boom")


def _router(**overrides: RecordingRenderer) -> tuple[RendererRouter, dict[str, RecordingRenderer]]:
    parts = {
        "text": RecordingRenderer(),
        "compass": RecordingRenderer(wants_hide_native_head=True),
        "wind": RecordingRenderer(),
    }
    parts.update(overrides)
    router = RendererRouter(
        {
            RendererKind.THREE_VALUE_TEXT: parts["text"],
            RendererKind.COMPASS_GAUGE: parts["compass"],
            RendererKind.WIND_DIAL: parts["wind"],
        }
    )
    return router, parts


def test_failing_finalize_does_not_stop_siblings(caplog: pytest.LogCaptureFixture) -> None:
    router, parts = _router(compass=RecordingRenderer(fail_on_finalize=True))

    with caplog.at_level(logging.WARNING, logger="instrument_cluster.router"):
        failures = router.finalize("unmount", 7)

    assert parts["text"].finalize_calls == [("unmount", 7)]
    assert parts["compass"].finalize_calls == [("unmount", 7)]
    assert parts["wind"].finalize_calls == [("unmount", 7)]

    assert len(failures) == 1
    assert failures[0].renderer is RendererKind.COMPASS_GAUGE
    assert isinstance(failures[0].error, RuntimeError)
    assert router.finalize_failures == list(failures)
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_clean_finalize_reports_nothing() -> None:
    router, _ = _router()
    assert router.finalize() == ()
    assert router.finalize_failures == []


def test_shared_instance_is_finalized_once() -> None:
    shared = RecordingRenderer()
    router = RendererRouter(
        {RendererKind.THREE_VALUE_TEXT: shared, RendererKind.POSITION_COORDINATE: shared}
    )
    router.finalize()
    assert shared.finalize_calls == [()]


def test_pick_renderer_falls_back_to_default() -> None:
    router, parts = _router()

    assert router.pick_renderer(RenderInstruction(renderer=RendererKind.WIND_DIAL)) is parts["wind"]
    assert router.pick_renderer(RenderInstruction()) is parts["text"]
    # Known kind, but nothing registered for it.
    assert router.pick_renderer(RenderInstruction(renderer=RendererKind.SPEED_GAUGE)) is parts["text"]
    assert router.pick_renderer({"renderer": "CompassGaugeWidget"}) is parts["compass"]
    assert router.pick_renderer({"renderer": "NoSuchWidget"}) is parts["text"]
    assert router.pick_renderer(None) is parts["text"]


def test_wants_hide_native_head_if_any_renderer_asks() -> None:
    router, _ = _router()
    assert router.wants_hide_native_head is True

    plain = RendererRouter({RendererKind.THREE_VALUE_TEXT: RecordingRenderer()})
    assert plain.wants_hide_native_head is False


def test_render_canvas_passes_merged_props() -> None:
    router, parts = _router()
    instr = RenderInstruction(
        caption="HDG",
        renderer=RendererKind.COMPASS_GAUGE,
        renderer_props={"heading": 10.0, "caption": "HDT"},
    )

    router.render_canvas(object(), instr)

    assert parts["compass"].painted == [
        {"caption": "HDT", "renderer": RendererKind.COMPASS_GAUGE, "heading": 10.0}
    ]


def test_default_must_be_registered() -> None:
    with pytest.raises(ValueError):
        RendererRouter({RendererKind.WIND_DIAL: RecordingRenderer()})
