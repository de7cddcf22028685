import os
import re
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from hotel_reservations.core.logging import get_logger
from hotel_reservations.models.errors import (
    InvalidResourceIdError,
    MalformedRecordError,
    PersistenceReadError,
    PersistenceWriteError,
    RecordDecodeError,
)
from hotel_reservations.models.reservation import Reservation

log = get_logger(__name__)

DELIMITER = ","
FIELD_COUNT = 4
_ROOM_ID = re.compile(r"[+-]?[0-9]+")


class LoadReport:
    """Resultado de leer el fichero: reservas decodificadas y líneas descartadas."""

    def __init__(self):
        self.reservations: List[Reservation] = []
        self.line_numbers: List[int] = []  # línea de origen de cada reserva
        self.skipped: List[Tuple[int, str]] = []  # [(número de línea, motivo), ...]

    def add(self, line_number: int, reservation: Reservation):
        self.reservations.append(reservation)
        self.line_numbers.append(line_number)

    def skip(self, line_number: int, reason: str):
        self.skipped.append((line_number, reason))

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def ok(self) -> bool:
        return not self.skipped

    def __repr__(self):
        return f"<LoadReport: {len(self.reservations)} reservas, {self.skipped_count} descartadas>"


# ----------------------------
# Codec de una línea
# ----------------------------
def encode_reservation(reservation: Reservation) -> str:
    """
    guest_name,resource_id,category,payment_status
    Sin escape: una coma dentro del nombre rompe la línea al volver a leerla.
    """
    return DELIMITER.join([
        reservation.guest_name,
        str(reservation.resource_id),
        reservation.category,
        reservation.payment_status,
    ])


def decode_reservation(line: str) -> Reservation:
    """
    Convierte una línea en Reservation.
    Exige exactamente cuatro campos: con más de cuatro (una coma dentro del nombre)
    la línea se rechaza con MalformedRecordError en lugar de ignorar los sobrantes.
    El número de habitación debe ser un entero en dígitos ASCII, sin espacios.
    """
    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise MalformedRecordError(
            f"Se esperaban {FIELD_COUNT} campos y hay {len(parts)}", line=line
        )
    name, raw_id, category, payment_status = parts
    if not _ROOM_ID.fullmatch(raw_id):
        raise InvalidResourceIdError(f"Número de habitación inválido: {raw_id!r}", line=line)
    return Reservation(name, int(raw_id), category, payment_status)


# ----------------------------
# Fichero completo
# ----------------------------
def load_reservations(path: Union[str, Path]) -> LoadReport:
    """
    Lee todas las reservas del fichero en orden.
    Si el fichero no existe devuelve un informe vacío (primera ejecución).
    Las líneas que no se pueden decodificar se descartan y se cuentan.
    """
    p = Path(path)
    report = LoadReport()
    if not p.exists():
        return report

    try:
        with p.open("r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise PersistenceReadError(f"No se pudo leer {p}: {exc}") from exc

    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            report.add(number, decode_reservation(line))
        except RecordDecodeError as exc:
            log.warning("reservation_line_skipped", path=str(p), line_number=number, reason=str(exc))
            report.skip(number, str(exc))

    log.debug("reservations_read", path=str(p), count=len(report.reservations), skipped=report.skipped_count)
    return report


def save_reservations(reservations: Iterable[Reservation], path: Union[str, Path]):
    """
    Reescribe el fichero completo, una reserva por línea.
    Todo el contenido se codifica antes de tocar el disco; luego se escribe en
    un .tmp y se hace os.replace sobre el destino. Si algo falla el .tmp se
    borra y el fichero original queda como estaba.
    """
    p = Path(path)
    tmp = p.with_name(p.name + ".tmp")
    try:
        data = "".join(encode_reservation(r) + "\n" for r in reservations).encode("utf-8")
    except (TypeError, UnicodeError) as exc:
        raise PersistenceWriteError(f"No se pudo codificar {p}: {exc}") from exc

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("wb") as f:
            f.write(data)
        os.replace(str(tmp), str(p))
    except OSError as exc:
        if tmp.exists():
            tmp.unlink()
        raise PersistenceWriteError(f"No se pudo escribir {p}: {exc}") from exc
