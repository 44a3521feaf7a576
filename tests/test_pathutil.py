import pytest

from wiredoc.pathutil import get_by_path, set_by_path
from wiredoc.types import Array, Document, Int32


def new_doc():
    return Document(
        "client", Document("driver", Document("name", "nodejs")),
        "compression", Array("none"),
    )


@pytest.mark.parametrize(
    "path, value, expected",
    [
        (
            ("compression", "0"),
            "zstd",
            Document(
                "client", Document("driver", Document("name", "nodejs")),
                "compression", Array("zstd"),
            ),
        ),
        (
            ("client",),
            "foo",
            Document("client", "foo", "compression", Array("none")),
        ),
    ],
)
def test_set_by_path(path, value, expected):
    doc = new_doc()
    set_by_path(doc, value, *path)
    assert doc == expected
    assert get_by_path(doc, *path) == value


def test_get_by_path_nested():
    assert get_by_path(new_doc(), "client", "driver", "name") == "nodejs"
    assert get_by_path(new_doc(), "compression") == Array("none")


def test_set_by_path_on_array_root():
    arr = Array(Int32(1), Document("a", "b"))
    set_by_path(arr, "c", "1", "a")
    assert arr == Array(Int32(1), Document("a", "c"))


def test_set_keeps_key_order():
    doc = new_doc()
    set_by_path(doc, "foo", "client")
    assert doc.keys() == ["client", "compression"]


def test_empty_path():
    with pytest.raises(ValueError, match="path is empty"):
        set_by_path(new_doc(), "x")


def test_missing_key_is_not_created():
    doc = new_doc()
    with pytest.raises(KeyError):
        set_by_path(doc, "x", "client", "missing")
    assert doc == new_doc()


def test_index_out_of_bounds():
    with pytest.raises(IndexError):
        set_by_path(new_doc(), "x", "compression", "1")


def test_invalid_index():
    with pytest.raises(ValueError):
        set_by_path(new_doc(), "x", "compression", "first")


def test_scalar_in_path():
    with pytest.raises(TypeError):
        set_by_path(new_doc(), "x", "compression", "0", "deeper")