from __future__ import annotations

from sexp2cpp.emitter import Emitter


def test_append_keeps_order_and_text_verbatim() -> None:
    out = Emitter()
    out.append("class A { \n")
    out.append("")
    out.append('s ="a\\n";')
    assert out.fragments == ("class A { \n", "", 's ="a\\n";')
    assert out.text == 'class A { \ns ="a\\n";'
    assert out.getvalue() == out.text
    assert len(out) == 3


def test_fragments_view_is_a_copy() -> None:
    out = Emitter()
    out.append("x")
    view = out.fragments
    out.append("y")
    assert view == ("x",)
    assert out.text == "xy"
