"""
Pruebas del controlador de sesión: registro de lotes, errores por archivo,
combinación y exportación.
"""
import pytest

import config
from controllers.csv_controller import CSVController
from services.csv_service import (
    FileCountExceededError,
    InvalidExtensionError,
    ReadFailureError,
)


@pytest.fixture
def controller():
    return CSVController()


def test_add_files_keeps_selection_order(controller, write_csv_file):
    a = write_csv_file("a.csv", "name,age\nAl,30\n")
    b = write_csv_file("b.csv", "name,city\nBo,NY\nCy,LA\n")
    result = controller.add_files([a, b])

    assert result.ok
    assert [f.name for f in controller.files] == ["a.csv", "b.csv"]
    assert controller.total_rows == 3
    assert controller.files[1].column_count == 2


def test_invalid_extension_does_not_stop_batch(controller, write_csv_file):
    bad = write_csv_file("notes.txt", "a\n1\n")
    good = write_csv_file("good.csv", "a\n1\n")
    result = controller.add_files([bad, good])

    assert [f.name for f in result.accepted] == ["good.csv"]
    assert len(result.errors) == 1
    assert isinstance(result.errors[0], InvalidExtensionError)
    assert "notes.txt" in result.messages[0]


def test_extension_check_is_case_insensitive(controller, write_csv_file):
    path = write_csv_file("UPPER.CSV", "a\n1\n")
    assert controller.add_files([path]).ok


def test_read_failure_is_reported_with_cause(controller, tmp_path, write_csv_file):
    good = write_csv_file("ok.csv", "a\n1\n")
    missing = str(tmp_path / "missing.csv")
    result = controller.add_files([missing, good])

    assert controller.file_count == 1
    assert isinstance(result.errors[0], ReadFailureError)
    assert result.errors[0].cause is not None


def test_more_than_max_files_rejects_whole_batch(controller):
    paths = [f"file_{i}.csv" for i in range(config.MAX_FILES + 1)]
    with pytest.raises(FileCountExceededError):
        controller.add_files(paths)
    assert controller.file_count == 0


def test_batch_over_limit_keeps_previous_files(write_csv_file):
    controller = CSVController(max_files=2)
    first = write_csv_file("first.csv", "a\n1\n")
    controller.add_files([first])

    with pytest.raises(FileCountExceededError) as exc:
        controller.add_files([first, first])
    assert exc.value.current == 1
    assert exc.value.incoming == 2
    assert [f.name for f in controller.files] == ["first.csv"]


def test_exactly_max_files_is_allowed(write_csv_file):
    controller = CSVController(max_files=3)
    path = write_csv_file("x.csv", "a\n1\n")
    controller.add_files([path, path, path])
    assert controller.file_count == 3


def test_progress_callback_called_per_file(controller, write_csv_file):
    calls = []
    paths = [write_csv_file(f"p{i}.csv", "a\n1\n") for i in range(3)]
    controller.add_files(paths, progress_callback=lambda done, total: calls.append((done, total)))
    assert calls == [(1, 3), (2, 3), (3, 3)]


def test_uploaded_files_get_distinct_ids(controller, write_csv_file):
    path = write_csv_file("same.csv", "a\n1\n")
    controller.add_files([path, path])
    ids = [f.id for f in controller.files]
    assert len(set(ids)) == 2


def test_remove_file(controller, write_csv_file):
    controller.add_files([write_csv_file("a.csv", "a\n1\n"), write_csv_file("b.csv", "b\n2\n")])
    controller.combine()
    target = controller.files[0].id

    assert controller.remove_file(target) is True
    assert [f.name for f in controller.files] == ["b.csv"]
    assert controller.combined is None
    assert controller.remove_file("unknown") is False


def test_combine_and_preview(controller, write_csv_file):
    controller.add_files([
        write_csv_file("a.csv", "name,age\n" + "".join(f"n{i},{i}\n" for i in range(4))),
        write_csv_file("b.csv", "name,city\nBo,NY\nCy,LA\n"),
    ])
    combined = controller.combine()

    assert combined.columns == ["name", "age", "city"]
    assert combined.row_count == 6
    columns, rows = controller.get_preview()
    assert columns == ["name", "age", "city"]
    assert len(rows) == config.PREVIEW_ROWS
    assert rows[4] == ["Bo", "", "NY"]


def test_combine_without_files(controller):
    result = controller.combine()
    assert result.columns == [] and result.rows == []
    assert controller.combined is None
    assert controller.get_preview() == ([], [])


def test_adding_files_invalidates_combined(controller, write_csv_file):
    controller.add_files([write_csv_file("a.csv", "a\n1\n")])
    controller.combine()
    controller.add_files([write_csv_file("b.csv", "b\n2\n")])
    assert controller.combined is None


def test_export_is_noop_without_rows(controller, tmp_path, write_csv_file):
    controller.add_files([write_csv_file("header_only.csv", "a,b\n")])
    controller.combine()
    out = tmp_path / config.OUTPUT_FILENAME

    assert controller.can_export() is False
    assert controller.export_csv(str(out)) is None
    assert controller.export_excel(str(tmp_path / config.EXCEL_FILENAME)) is None
    assert not out.exists()


def test_export_csv(controller, tmp_path, write_csv_file):
    controller.add_files([
        write_csv_file("a.csv", 'name,age\n"Smith, John",30\n'),
        write_csv_file("b.csv", "name,city\nBo,NY\n"),
    ])
    controller.combine()
    out = tmp_path / config.OUTPUT_FILENAME

    assert controller.export_csv(str(out)) == str(out)
    assert out.read_text(encoding="utf-8") == 'name,age,city\n"Smith, John",30,\nBo,,NY'


def test_clear(controller, write_csv_file):
    controller.add_files([write_csv_file("a.csv", "a\n1\n")])
    controller.clear()
    assert controller.file_count == 0
    assert controller.total_rows == 0


def test_binary_file_is_rejected_without_stopping_batch(controller, tmp_path, write_csv_file):
    binary = tmp_path / "dump.csv"
    binary.write_bytes(b"a,b\n\x00\x01\x02")
    good = write_csv_file("good.csv", "a\n1\n")
    result = controller.add_files([str(binary), good])

    assert [f.name for f in controller.files] == ["good.csv"]
    assert isinstance(result.errors[0], ReadFailureError)
