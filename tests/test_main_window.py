"""
Pruebas de los helpers de la ventana principal (sin abrir ventanas).
"""
import pytest

tkinter = pytest.importorskip("tkinter")
pytest.importorskip("tkinterdnd2")

from models.csv_model import CSVData  # noqa: E402
from ui.main_window import SAVE_CSV_LABEL, dropped_paths, save_csv_label  # noqa: E402


@pytest.fixture
def interp():
    return tkinter.Tcl()


def test_save_label_without_combined_data_has_no_row_count():
    assert save_csv_label(None) == SAVE_CSV_LABEL


def test_save_label_shows_row_count():
    combined = CSVData(columns=["a"], rows=[["1"], ["2"]])
    assert save_csv_label(combined) == f"{SAVE_CSV_LABEL} (2 filas)"


def test_dropped_paths_with_spaces(interp):
    data = "{/tmp/mis datos/a.csv} /tmp/b.csv"
    assert dropped_paths(interp, data) == ["/tmp/mis datos/a.csv", "/tmp/b.csv"]


def test_dropped_paths_single_file(interp):
    assert dropped_paths(interp, "/tmp/solo.csv") == ["/tmp/solo.csv"]


def test_dropped_paths_feed_controller_in_order(interp, write_csv_file):
    from controllers.csv_controller import CSVController

    a = write_csv_file("uno dos.csv", "x\n1\n")
    b = write_csv_file("tres.csv", "y\n2\n")
    data = "{" + a + "} {" + b + "}"

    controller = CSVController()
    controller.add_files(dropped_paths(interp, data))
    assert [f.name for f in controller.files] == ["uno dos.csv", "tres.csv"]
