from __future__ import annotations

from instrument_cluster.instruction import EMPTY_INSTRUCTION, Formatter, RenderInstruction, RendererKind
from instrument_cluster.toolkit import compact, create_toolkit, num, out


def test_out_omits_absent_value() -> None:
    d = out(None, "C", "U", Formatter.DISTANCE, []).to_dict()

    assert "value" not in d
    assert d == {
        "caption": "C",
        "unit": "U",
        "formatter": Formatter.DISTANCE,
        "formatter_parameters": (),
    }


def test_out_keeps_present_falsy_values() -> None:
    d = out(0, "", None, None, None).to_dict()
    assert d == {"value": 0, "caption": ""}


def test_toolkit_reads_per_kind_caption_and_unit() -> None:
    tk = create_toolkit({"caption_sog": "SOG", "unit_sog": "kn"})
    assert tk.cap("sog") == "SOG"
    assert tk.unit("sog") == "kn"
    assert tk.cap("stw") is None
    assert create_toolkit(None).cap("sog") is None


def test_num_rejects_bools_and_non_finite() -> None:
    assert num("3.5") == 3.5
    assert num(2) == 2.0
    assert num(True) is None
    assert num("nan") is None
    assert num("abc") is None
    assert num(None) is None


def test_compact_drops_none() -> None:
    assert compact(a=1, b=None, c=False) == {"a": 1, "c": False}


def test_empty_instruction() -> None:
    assert EMPTY_INSTRUCTION.is_empty
    assert EMPTY_INSTRUCTION.to_dict() == {}
    assert EMPTY_INSTRUCTION.merged_props() == {}


def test_merged_props_overlay_wins() -> None:
    instr = RenderInstruction(
        value=1,
        caption="A",
        renderer=RendererKind.SPEED_GAUGE,
        renderer_props={"caption": "B", "min_value": 0.0},
    )
    assert instr.merged_props() == {
        "value": 1,
        "caption": "B",
        "renderer": RendererKind.SPEED_GAUGE,
        "min_value": 0.0,
    }


def test_renderer_kind_lookup() -> None:
    assert RendererKind.lookup("WindDialWidget") is RendererKind.WIND_DIAL
    assert RendererKind.lookup(RendererKind.COMPASS_GAUGE) is RendererKind.COMPASS_GAUGE
    assert RendererKind.lookup("NoSuchWidget") is None
    assert RendererKind.lookup(None) is None
