import pytest

from mightyui.textmodel import NEWLINE, MonospaceText, Row, TextModel


def _rows(model):
    start = 0
    while start < len(model):
        row = model.layout_row(start)
        yield start, row
        start += row.num_chars


def test_str_and_len_round_trip():
    model = MonospaceText("hello\nworld")
    assert str(model) == "hello\nworld"
    assert len(model) == len("hello\nworld")


def test_is_text_model():
    model = MonospaceText("abc")
    assert isinstance(model, TextModel)
    assert model.char_at(1) == "b"


def test_rows_split_at_newlines():
    text = "ab\ncde\nf"
    model = MonospaceText(text, char_width=10, line_height=20)
    pieces = [text[start:start + row.num_chars] for start, row in _rows(model)]
    assert pieces == ["ab\n", "cde\n", "f"]
    assert "".join(pieces) == text


def test_row_geometry_uses_metrics():
    model = MonospaceText("abc", char_width=10, line_height=20)
    row = model.layout_row(0)
    assert row.x0 == 0
    assert row.x1 == sum(model.char_width(0, i) for i in range(row.num_chars))
    assert row.ymax - row.ymin == 20
    assert row.baseline_y_delta == 20


def test_row_width_excludes_trailing_newline():
    model = MonospaceText("ab\ncd", char_width=10, line_height=20)
    row = model.layout_row(0)
    assert model.char_width(0, row.num_chars - 1) == 0
    assert row.x1 == sum(model.char_width(0, i) for i in range(row.num_chars))


def test_layout_past_end_is_empty():
    model = MonospaceText("ab", char_width=10, line_height=20)
    row = model.layout_row(len(model))
    assert row.num_chars == 0
    assert row.x1 == row.x0


def test_empty_text_has_empty_row():
    model = MonospaceText("")
    assert len(model) == 0
    assert model.layout_row(0) == Row(0.0, 0.0, 1.0, 0.0, 1.0, 0)


def test_insert_then_delete_round_trip():
    model = MonospaceText("hello")
    assert model.insert_chars(2, "XYZ") is True
    assert str(model) == "heXYZllo"
    model.delete_chars(2, 3)
    assert str(model) == "hello"


def test_insert_at_end_and_list_of_chars():
    model = MonospaceText("ab")
    model.insert_chars(len(model), [NEWLINE, "c"])
    assert str(model) == "ab\nc"


def test_char_at_out_of_range():
    model = MonospaceText("ab")
    with pytest.raises(IndexError):
        model.char_at(2)
    with pytest.raises(IndexError):
        model.char_at(-1)


def test_delete_out_of_range():
    model = MonospaceText("ab")
    with pytest.raises(IndexError):
        model.delete_chars(1, 5)
    with pytest.raises(ValueError):
        model.delete_chars(0, -1)
    assert str(model) == "ab"


def test_insert_out_of_range():
    model = MonospaceText("ab")
    with pytest.raises(IndexError):
        model.insert_chars(3, "x")
    assert str(model) == "ab"


def test_negative_row_start():
    with pytest.raises(IndexError):
        MonospaceText("ab").layout_row(-1)


@pytest.mark.parametrize("kwargs", [{"char_width": 0}, {"line_height": -1}])
def test_invalid_metrics(kwargs):
    with pytest.raises(ValueError):
        MonospaceText("ab", **kwargs)