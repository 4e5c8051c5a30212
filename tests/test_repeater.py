"""Tests Repeater — add/remove/edit, no-ops, rendu."""
from gohac_admin.editor import Repeater


def _faq_item():
    return {"question": "", "answer": ""}


def test_repeater_scenario():
    emitted = []
    rep = Repeater([{"question": "Q1", "answer": "A1"}], _faq_item, on_change=emitted.append)

    rep.add()
    assert len(rep) == 2
    assert rep.items[1] == {"question": "", "answer": ""}

    rep.remove(0)
    assert rep.items == [{"question": "", "answer": ""}]
    assert len(emitted) == 2


def test_add_uses_fresh_empty_item():
    rep = Repeater([], _faq_item)
    rep.add()
    rep.add()
    assert rep.items[0] is not rep.items[1]


def test_edit_replaces_whole_item():
    rep = Repeater([{"question": "Q", "answer": "A"}], _faq_item)
    rep.edit(0, {"question": "New"})
    assert rep.items == [{"question": "New"}]


def test_out_of_range_is_noop():
    emitted = []
    rep = Repeater(["a"], str, on_change=emitted.append)
    assert rep.remove(3) is False
    assert rep.edit(-1, "b") is False
    assert rep.items == ["a"]
    assert emitted == []


def test_input_list_not_mutated():
    items = ["a", "b"]
    rep = Repeater(items, str)
    rep.remove(0)
    assert items == ["a", "b"]


def test_render_empty_message_and_items():
    assert "Nothing here" in Repeater([], str, empty_message="Nothing here").render()
    html = Repeater(["x", "y"], str, render_item=lambda item, i: f"<b>{item}-{i}</b>",
                    add_button_text="Add Row").render()
    assert "#1" in html and "#2" in html
    assert "<b>y-1</b>" in html
    assert "Add Row" in html
