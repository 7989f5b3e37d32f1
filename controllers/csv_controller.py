import logging
import os
from typing import Callable, List, Optional, Sequence, Tuple

import config
from models.csv_model import CSVData, UploadedFile
from services import export_service, merge_service
from services.csv_service import (
    CSVService,
    CSVServiceError,
    FileCountExceededError,
    ReadFailureError,
)

logger = logging.getLogger(__name__)


class BatchResult:
    """
    Resultado de registrar un lote de archivos:
      - accepted: archivos agregados a la sesión, en el orden de selección
      - errors: un error por archivo rechazado (extensión o lectura)
    """
    def __init__(self):
        self.accepted: List[UploadedFile] = []
        self.errors: List[CSVServiceError] = []

    @property
    def messages(self) -> List[str]:
        return [str(e) for e in self.errors]

    @property
    def ok(self) -> bool:
        return not self.errors


class CSVController:
    def __init__(self, max_files: int = config.MAX_FILES):
        self.max_files = max_files
        self._files: List[UploadedFile] = []
        self._combined: CSVData | None = None

    # =========================================================================
    #  ARCHIVOS DE LA SESIÓN
    # =========================================================================
    @property
    def files(self) -> List[UploadedFile]:
        return list(self._files)

    @property
    def file_count(self) -> int:
        return len(self._files)

    @property
    def total_rows(self) -> int:
        return sum(f.row_count for f in self._files)

    def add_files(self, paths: Sequence[str], progress_callback: Optional[Callable[[int, int], None]] = None) -> BatchResult:
        """
        Registra un lote de archivos.
        Si el lote supera el máximo de archivos se rechaza completo
        (FileCountExceededError) y la sesión no cambia. Los errores de un
        archivo no detienen el resto del lote.
        """
        paths = list(paths)
        if len(paths) + len(self._files) > self.max_files:
            logger.warning("Lote rechazado: %d + %d archivos supera el máximo de %d",
                           len(self._files), len(paths), self.max_files)
            raise FileCountExceededError(len(self._files), len(paths), self.max_files)

        result = BatchResult()
        total = len(paths)
        for i, path in enumerate(paths):
            name = os.path.basename(path)
            try:
                entry = self._load_file(path, name)
            except CSVServiceError as e:
                logger.warning("Archivo rechazado: %s", e)
                result.errors.append(e)
            else:
                result.accepted.append(entry)
                logger.info("Archivo agregado: %s (%d filas, %d columnas)",
                            name, entry.row_count, entry.column_count)
            if progress_callback:
                progress_callback(i + 1, total)

        self._files.extend(result.accepted)
        if result.accepted:
            self._combined = None
        return result

    def _load_file(self, path: str, name: str) -> UploadedFile:
        try:
            data = CSVService.read_csv(path)
        except CSVServiceError:
            raise
        except Exception as e:
            raise ReadFailureError(name, e) from e
        return UploadedFile(name=name, path=path, data=data)

    def remove_file(self, file_id: str) -> bool:
        for i, f in enumerate(self._files):
            if f.id == file_id:
                del self._files[i]
                self._combined = None
                logger.info("Archivo quitado: %s", f.name)
                return True
        return False

    def clear(self):
        self._files.clear()
        self._combined = None

    # =========================================================================
    #  COMBINACIÓN
    # =========================================================================
    def combine(self) -> CSVData:
        if not self._files:
            self._combined = None
            return CSVData()
        self._combined = merge_service.combine([f.data for f in self._files])
        logger.info("Combinados %d archivos: %d filas, %d columnas",
                    len(self._files), self._combined.row_count, self._combined.column_count)
        return self._combined

    @property
    def combined(self) -> CSVData | None:
        return self._combined

    def can_export(self) -> bool:
        return self._combined is not None and self._combined.row_count > 0

    def get_preview(self, limit: int = config.PREVIEW_ROWS) -> Tuple[List[str], List[List[str]]]:
        if self._combined is None:
            return [], []
        return list(self._combined.columns), self._combined.head(limit)

    # =========================================================================
    #  EXPORTACIÓN
    # =========================================================================
    def export_csv(self, path: str) -> Optional[str]:
        # Sin filas combinadas no hay nada que descargar
        if not self.can_export():
            return None
        return export_service.write_csv(self._combined, path)

    def export_excel(self, path: str) -> Optional[str]:
        if not self.can_export():
            return None
        return export_service.write_excel(self._combined, path)
