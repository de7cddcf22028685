from typing import List, Optional, Tuple, Union

from hotel_reservations.core.ledger import Ledger
from hotel_reservations.core.results import ERROR_PREFIX
from hotel_reservations.models.inventory import ALL_CATEGORIES


class Controller:
    """
    Adaptador entre la interfaz y el Ledger.

    Provee métodos sencillos que la interfaz puede llamar con el texto tal cual
    lo escribe el usuario:
    - book(guest_name, room_text) -> (ok: bool, mensaje: str)
    - cancel(room_text) -> (ok: bool, mensaje: str)
    - room_details(room_id) -> dict | None
    - list_rooms(category) / list_reservations() -> listas de dicts serializables
    Los mensajes de fallo empiezan siempre por 'Error:'.
    """

    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    # -----------------------
    # Read helpers (UI <--- backend)
    # -----------------------
    def categories(self) -> List[str]:
        return [ALL_CATEGORIES] + self.ledger.inventory.categories()

    def list_rooms(self, category: str = ALL_CATEGORIES) -> List[dict]:
        return [r.to_dict() for r in self.ledger.list_rooms(category)]

    def list_reservations(self) -> List[dict]:
        """Filas para el informe de reservas: habitación, categoría, huésped, pago."""
        return [
            {
                "room": r.resource_id,
                "category": r.category,
                "guest": r.guest_name,
                "payment": r.payment_status,
            }
            for r in self.ledger.list_all()
        ]

    def room_details(self, room_id: int) -> Optional[dict]:
        room = self.ledger.find_by_id(room_id)
        if room is None:
            return None
        details = room.to_dict()
        details["status"] = "Booked" if room.booked else "Available"
        reservation = self.ledger.find_reservation_by_resource_id(room_id)
        if reservation is not None:
            details["guest"] = reservation.guest_name
            details["payment"] = reservation.payment_status
        return details

    def load_summary(self) -> Optional[str]:
        """Aviso para mostrar si al arrancar se descartaron líneas del fichero."""
        report = self.ledger.load_report
        if report.ok:
            return None
        lines = ", ".join(str(number) for number, _ in report.skipped)
        return (
            f"Aviso: se descartaron {report.skipped_count} líneas de "
            f"{self.ledger.path.name} (líneas {lines})."
        )

    # -----------------------
    # Mutation helpers (UI ---> backend)
    # -----------------------
    def book(self, guest_name: str, room_text: Union[str, int]) -> Tuple[bool, str]:
        name = (guest_name or "").strip()
        if not name:
            return (False, f"{ERROR_PREFIX} Introduce el nombre del huésped.")
        room_id, error = self._parse_room(room_text)
        if error:
            return (False, error)
        ok, message = self.ledger.book(name, room_id)
        return (ok, message)

    def cancel(self, room_text: Union[str, int]) -> Tuple[bool, str]:
        room_id, error = self._parse_room(room_text)
        if error:
            return (False, error)
        ok, message = self.ledger.cancel(room_id)
        return (ok, message)

    def _parse_room(self, room_text) -> Tuple[Optional[int], Optional[str]]:
        if isinstance(room_text, int) and not isinstance(room_text, bool):
            return (room_text, None)
        try:
            return (int(str(room_text).strip()), None)
        except (TypeError, ValueError):
            return (None, f"{ERROR_PREFIX} '{room_text}' no es un número de habitación válido.")
