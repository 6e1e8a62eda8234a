import pytest

from recordtable.normalizers import normalize
from recordtable.sorting import Order
from recordtable.table import (
    TableState,
    build_head_cells,
    header_label,
    row_link,
    view_rows,
    visible_rows,
)


def test_header_label():
    assert header_label("loan_number") == "LOAN NUMBER"
    assert header_label("Jefe de proyecto") == "JEFE DE PROYECTO"


def test_head_cells_detect_numeric_from_first_row():
    rows = [{"code": "A", "amount": 3.5, "flag": True, "id": 1}]
    cells = build_head_cells(["code", "amount", "flag"], rows)
    assert [c.id for c in cells] == ["code", "amount", "flag"]
    assert [c.numeric for c in cells] == [False, True, False]


def test_head_cells_without_rows():
    cells = build_head_cells(["code"], [])
    assert cells[0].label == "CODE"
    assert cells[0].numeric is False


def test_request_sort_toggles():
    s = TableState(order_by="code")
    s = s.request_sort("code")
    assert (s.order_by, s.order) == ("code", Order.DESC)
    s = s.request_sort("code")
    assert s.order == Order.ASC
    s = s.request_sort("code").request_sort("title")
    assert (s.order_by, s.order) == ("title", Order.ASC)


def test_transitions_return_new_state():
    s = TableState()
    s2 = s.change_page(3)
    assert s.page == 0 and s2.page == 3


def test_rows_per_page_resets_page():
    s = TableState().change_page(4).change_rows_per_page(10)
    assert (s.page, s.rows_per_page) == (0, 10)


def test_bad_page_arguments():
    with pytest.raises(ValueError):
        TableState().change_page(-1)
    with pytest.raises(ValueError):
        TableState().change_rows_per_page(0)
    with pytest.raises(ValueError):
        TableState(page=-1)


def test_toggle_row_keeps_remaining_order():
    s = TableState()
    for rid in (1, 2, 3):
        s = s.toggle_row(rid)
    s = s.toggle_row(2)
    assert s.selected == (1, 3)
    assert s.is_selected(3) and not s.is_selected(2)


def test_select_all_and_clear():
    rows = [{"id": 1}, {"id": 2}]
    s = TableState().select_all(rows)
    assert s.selected == (1, 2)
    assert TableState().select_all(rows).select_all(rows, checked=False).selected == ()


def test_visible_rows_sorts_then_windows():
    records = [{"code": f"C{i:02d}", "id": i} for i in range(7)]
    rows = normalize(["code"], ["code"], records)
    s = TableState(order_by="code", order=Order.DESC, rows_per_page=5)
    page = visible_rows(rows, s)
    assert [r["id"] for r in page.rows] == [6, 5, 4, 3, 2]
    page2 = visible_rows(rows, s.change_page(1))
    assert [r["id"] for r in page2.rows] == [1, 0]
    assert page2.empty_rows == 3


def test_view_rows_plain_parameters():
    rows = [{"k": 2, "id": 0}, {"k": 1, "id": 1}]
    page = view_rows(rows, "k", "asc", page=0, rows_per_page=5)
    assert [r["id"] for r in page.rows] == [1, 0]


def test_row_link():
    assert row_link("/indicators", "BH-L1056") == "/indicators/BH-L1056"
    assert row_link("/indicators", 7) == "/indicators/7"
    # the path is used as given
    assert row_link("/indicators/", 7) == "/indicators//7"
    assert row_link("", "X") == "/X"


def test_head_cells_treat_non_builtin_reals_as_numeric():
    from fractions import Fraction

    cells = build_head_cells(["f"], [{"f": Fraction(1, 3), "id": 1}])
    assert cells[0].numeric is True
