import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from hotel_reservations import config
from hotel_reservations.core import results
from hotel_reservations.core.logging import get_logger
from hotel_reservations.core.results import Result
from hotel_reservations.models.errors import PersistenceWriteError
from hotel_reservations.models.inventory import ALL_CATEGORIES, Inventory
from hotel_reservations.models.reservation import Reservation
from hotel_reservations.models.resource import Room
from hotel_reservations.models import reservation_store as store

log = get_logger(__name__)


class Ledger:
    """Libro de reservas del hotel.

    Es dueño del inventario de habitaciones y de la lista de reservas, y el único
    que cambia Room.booked. Cada reserva/cancelación comprueba, muta y reescribe
    el fichero dentro de la misma sección crítica, de modo que al volver de
    book()/cancel() el fichero ya refleja el estado en memoria.

    Invariante: room.booked es True si y sólo si hay exactamente una Reservation
    con ese resource_id en self.reservations.
    """

    def __init__(
        self,
        ranges: Optional[Iterable[Tuple[int, int, str]]] = None,
        path: Optional[Union[str, Path]] = None,
        autoload: bool = True,
        paid_label: str = config.PAID_LABEL,
    ):
        self.inventory = Inventory(config.ROOM_RANGES if ranges is None else ranges)
        self.path = Path(path) if path else config.RESERVATIONS_PATH
        self.paid_label = paid_label
        self.reservations: List[Reservation] = []  # orden de inserción
        self.load_report = store.LoadReport()
        self._lock = threading.RLock()
        if autoload:
            self.reload()

    # ----------------------------
    # Carga y reconciliación
    # ----------------------------
    def reload(self) -> store.LoadReport:
        """
        Lee el fichero y reconstruye la ocupación de las habitaciones.
        Las líneas que apuntan a una habitación inexistente, o a una ya reservada
        por una línea anterior, se descartan y quedan en load_report.skipped.
        """
        with self._lock:
            raw = store.load_reservations(self.path)
            for room in self.inventory:
                room.mark_free()
            self.reservations = []
            report = store.LoadReport()
            report.skipped = list(raw.skipped)

            for number, reservation in zip(raw.line_numbers, raw.reservations):
                room = self.inventory.find_by_id(reservation.resource_id)
                if room is None:
                    reason = f"La habitación {reservation.resource_id} no existe en el inventario"
                elif room.booked:
                    reason = f"La habitación {reservation.resource_id} ya tiene una reserva anterior"
                else:
                    room.mark_booked()
                    self.reservations.append(reservation)
                    report.add(number, reservation)
                    continue
                log.warning("reservation_line_skipped", path=str(self.path), line_number=number, reason=reason)
                report.skip(number, reason)

            report.skipped.sort(key=lambda item: item[0])
            self.load_report = report

        log.info(
            "reservations_loaded",
            path=str(self.path),
            count=len(report.reservations),
            skipped=report.skipped_count,
        )
        return report

    # ----------------------------
    # Transiciones Libre <-> Reservada
    # ----------------------------
    def book(self, guest_name: str, resource_id: int) -> Result:
        with self._lock:
            room = self.inventory.find_by_id(resource_id)
            if room is None:
                return results.room_not_found(resource_id)
            if room.booked:
                return results.already_booked(resource_id)

            reservation = Reservation(guest_name, room.id, room.category, self.paid_label)
            room.mark_booked()
            self.reservations.append(reservation)
            try:
                self._flush()
            except PersistenceWriteError as exc:
                self.reservations.pop()
                room.mark_free()
                log.error("reservations_flush_failed", action="book", room=room.id, error=str(exc))
                return results.write_failed(room.id, str(exc))

        log.info("reservation_booked", room=room.id, category=room.category)
        return Result.success(
            f"Reserva confirmada: habitación {room.id} para {guest_name}.",
            resource_id=room.id,
            guest_name=guest_name,
        )

    def cancel(self, resource_id: int) -> Result:
        with self._lock:
            room = self.inventory.find_by_id(resource_id)
            if room is None:
                return results.room_not_found(resource_id)
            if not room.booked:
                return results.not_booked(resource_id)

            index = self._index_of(resource_id)
            reservation = self.reservations.pop(index)
            room.mark_free()
            try:
                self._flush()
            except PersistenceWriteError as exc:
                self.reservations.insert(index, reservation)
                room.mark_booked()
                log.error("reservations_flush_failed", action="cancel", room=room.id, error=str(exc))
                return results.write_failed(room.id, str(exc))

        log.info("reservation_cancelled", room=room.id)
        return Result.success(
            f"Se ha cancelado la reserva de la habitación {room.id}.",
            resource_id=room.id,
            guest_name=reservation.guest_name,
        )

    def flush(self) -> Result:
        """Reescribe el fichero con el estado actual sin cambiar nada en memoria."""
        with self._lock:
            try:
                self._flush()
            except PersistenceWriteError as exc:
                log.error("reservations_flush_failed", action="flush", error=str(exc))
                return results.write_failed(None, str(exc), rolled_back=False)
            count = len(self.reservations)
        return Result(True, f"Guardadas {count} reservas en {self.path}.")

    # Llamar siempre con el lock tomado
    def _flush(self):
        store.save_reservations(self.reservations, self.path)

    def _index_of(self, resource_id: int) -> int:
        for i, r in enumerate(self.reservations):
            if r.resource_id == resource_id:
                return i
        raise LookupError(f"Room {resource_id} is booked but has no reservation")

    # ----------------------------
    # Consultas (sólo lectura)
    # ----------------------------
    def find_by_id(self, resource_id: int) -> Optional[Room]:
        return self.inventory.find_by_id(resource_id)

    def find_reservation_by_resource_id(self, resource_id: int) -> Optional[Reservation]:
        with self._lock:
            for r in self.reservations:
                if r.resource_id == resource_id:
                    return r
        return None

    def list_all(self) -> List[Reservation]:
        """Copia de las reservas en orden de inserción (la más reciente al final)."""
        with self._lock:
            return list(self.reservations)

    def list_rooms(self, category: Optional[str] = None) -> List[Room]:
        return self.inventory.get_rooms_by_category(category)

    def available_rooms(self, category: Optional[str] = None) -> List[Room]:
        with self._lock:
            return self.inventory.get_available_rooms_by_category(category)

    def occupancy(self) -> Dict[str, Dict[str, int]]:
        """
        Conteo de habitaciones por categoría y total ('All').
        {'Standard': {'total': 10, 'booked': 1, 'free': 9}, ..., 'All': {...}}
        """
        summary = {}
        with self._lock:
            for category in self.inventory.categories() + [ALL_CATEGORIES]:
                rooms = self.inventory.get_rooms_by_category(category)
                booked = sum(1 for r in rooms if r.booked)
                summary[category] = {"total": len(rooms), "booked": booked, "free": len(rooms) - booked}
        return summary

    def __repr__(self):
        return f"<Ledger: {len(self.reservations)} reservas / {len(self.inventory)} habitaciones ({self.path})>"
