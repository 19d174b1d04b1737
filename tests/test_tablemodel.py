import pytest

from sacheatfinder.tablemodel import TableModel, TableRole


def test_initial_contents():
    model = TableModel()
    assert model.row_count() == 2
    assert model.column_count() == 4
    assert model.data(0, 0, TableRole.TABLE_DATA) == "col0"
    assert model.data(1, 3, TableRole.TABLE_DATA) == "data3"


def test_heading_role():
    model = TableModel()
    assert model.data(0, 2, TableRole.HEADING) is True
    assert model.data(1, 2, TableRole.HEADING) is False


def test_unknown_role_returns_none():
    model = TableModel()
    assert model.data(0, 0, 0) is None


def test_role_names():
    names = TableModel().role_names()
    assert names[TableRole.TABLE_DATA] == "tabledata"
    assert names[TableRole.HEADING] == "heading"


def test_clear_and_add_rows():
    model = TableModel()
    model.clear()
    assert model.row_count() == 0
    header = ["Index", "Code", "JamCRC", "Associated code"]
    model.add_row(header)
    model.add_row(["20810792", "ASNAEB", "0x555fc201", "Clear Wanted Level"])
    assert model.row_count() == 2
    assert model.column_count() == len(header)
    assert model.data(1, 1, TableRole.TABLE_DATA) == "ASNAEB"
    assert model.data(0, 3, TableRole.TABLE_DATA) == "Associated code"


def test_add_row_copies_input():
    model = TableModel()
    row = ["a", "b"]
    model.add_row(row)
    row.append("c")
    assert model.data(2, 1, TableRole.TABLE_DATA) == "b"
    with pytest.raises(IndexError):
        model.data(2, 2, TableRole.TABLE_DATA)


def test_column_count_on_empty_table_raises():
    model = TableModel()
    model.clear()
    with pytest.raises(IndexError):
        model.column_count()