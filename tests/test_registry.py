from __future__ import annotations

import logging

import pytest

from instrument_cluster.instruction import EMPTY_INSTRUCTION, Cluster, Formatter, RenderInstruction
from instrument_cluster.registry import DEFAULT_MAPPER_MODULES, DispatchRegistry, MapperSpec


def test_default_registry_covers_every_cluster() -> None:
    reg = DispatchRegistry.from_modules()
    assert set(reg.clusters()) == {c.value for c in Cluster}
    assert len(DEFAULT_MAPPER_MODULES) == len(Cluster)


def test_unknown_cluster_yields_empty() -> None:
    reg = DispatchRegistry.from_modules()
    assert reg.translate({"cluster": "doesNotExist"}).to_dict() == {}
    assert reg.translate({}) is EMPTY_INSTRUCTION
    assert reg.translate(None) is EMPTY_INSTRUCTION


def test_default_cluster_used_when_props_have_none() -> None:
    reg = DispatchRegistry.from_modules(default_cluster="time")
    instr = reg.translate({"value": 0})
    assert instr.formatter is Formatter.TIME

    # An explicit cluster still wins over the default.
    assert reg.translate({"cluster": "anchor", "kind": "bogus"}).is_empty


def test_malformed_modules_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="instrument_cluster.registry")
    reg = DispatchRegistry.from_modules(
        [
            "instrument_cluster.mappers.anchor",
            "instrument_cluster.mappers.does_not_exist",
            "math",
        ]
    )

    assert reg.clusters() == ("anchor",)
    assert any("does_not_exist" in r.getMessage() for r in caplog.records)


def test_later_mapper_shadows_earlier() -> None:
    def first(props, toolkit):
        return RenderInstruction(value="first")

    def second(props, toolkit):
        return RenderInstruction(value="second")

    reg = DispatchRegistry.from_specs([MapperSpec("speed", first), MapperSpec("speed", second)])

    assert reg.clusters() == ("speed",)
    assert reg.translate({"cluster": "speed"}).value == "second"


def test_falsy_mapper_result_is_coerced_to_empty() -> None:
    reg = DispatchRegistry([MapperSpec("nav", lambda props, toolkit: None)])
    assert reg.translate({"cluster": "nav"}) is EMPTY_INSTRUCTION


def test_mapper_gets_toolkit_built_from_props() -> None:
    seen = {}

    def mapper(props, toolkit):
        seen["cap"] = toolkit.cap("x")
        return EMPTY_INSTRUCTION

    DispatchRegistry([MapperSpec("nav", mapper)]).translate({"cluster": "nav", "caption_x": "X"})
    assert seen == {"cap": "X"}


def test_mapper_table_is_read_only() -> None:
    reg = DispatchRegistry.from_modules()
    with pytest.raises(TypeError):
        reg.mappers["speed"] = lambda props, toolkit: None  # type: ignore[index]


def test_module_raising_at_import_is_skipped(tmp_path, monkeypatch, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / "cluster_mapper_broken.py").write_text('raise RuntimeError("bad mapper")\n')
    monkeypatch.syspath_prepend(str(tmp_path))
    caplog.set_level(logging.DEBUG, logger="instrument_cluster.registry")

    reg = DispatchRegistry.from_modules(["cluster_mapper_broken", "instrument_cluster.mappers.anchor"])

    assert reg.clusters() == ("anchor",)
    assert any("cluster_mapper_broken" in r.getMessage() for r in caplog.records)
