"""
Configuración de pytest.

Agrega la raíz del repositorio a sys.path para que 'import services...' funcione.
"""
import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def write_csv_file(tmp_path):
    """Crea un archivo en tmp_path con el texto dado y devuelve su ruta como str."""
    def _write(name, text, encoding="utf-8"):
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return str(path)
    return _write
