"""
Registro en memoria de formularios enviados.
"""

import logging
from typing import Iterator

from dynaform.config import SubmittedRecord
from dynaform.exceptions import LedgerIndexError

logger = logging.getLogger(__name__)


class SubmissionLedger:
    """
    Lista ordenada de registros enviados, en orden de envío.

    Vive solo durante la sesión. Los registros se pueden retirar para
    edición (checkout) o eliminar.
    """

    def __init__(self, records=None):
        self._records: list[SubmittedRecord] = list(records or [])

    @property
    def entries(self) -> tuple[SubmittedRecord, ...]:
        """Registros actuales (copia inmutable)."""
        return tuple(self._records)

    def append(self, record: SubmittedRecord) -> None:
        """Agrega un registro al final."""
        self._records.append(record)
        logger.debug("Registro %s agregado (total: %d)", record.id, len(self._records))

    def checkout(self, index: int) -> SubmittedRecord:
        """
        Retira el registro en la posición dada y lo retorna.

        Raises:
            LedgerIndexError: Si el índice está fuera de rango
        """
        self._check_index(index)
        record = self._records.pop(index)
        logger.debug("Registro %s retirado para edición", record.id)
        return record

    def delete(self, index: int) -> SubmittedRecord:
        """
        Elimina el registro en la posición dada.

        Raises:
            LedgerIndexError: Si el índice está fuera de rango
        """
        self._check_index(index)
        record = self._records.pop(index)
        logger.debug("Registro %s eliminado", record.id)
        return record

    def _check_index(self, index: int) -> None:
        # Sin índices negativos: -1 no significa "el último"
        if not 0 <= index < len(self._records):
            raise LedgerIndexError(index, len(self._records))

    def __getitem__(self, index: int) -> SubmittedRecord:
        self._check_index(index)
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SubmittedRecord]:
        return iter(tuple(self._records))

    def __bool__(self) -> bool:
        return bool(self._records)
