from typing import Iterable, List, Optional, Tuple

from hotel_reservations.models.resource import Room

ALL_CATEGORIES = "All"


class Inventory:
    """
    Catálogo fijo de habitaciones del hotel.
    Se construye una sola vez a partir de rangos (inicio, fin, categoría);
    después no se añaden ni se eliminan habitaciones.
    """

    def __init__(self, ranges: Optional[Iterable[Tuple[int, int, str]]] = None):
        self.rooms = []  # orden de inserción: ascendente dentro de cada bloque de categoría
        self._by_id = {}
        if ranges:
            self.initialize(ranges)

    # ----------------------------
    # Construcción
    # ----------------------------
    def initialize(self, ranges: Iterable[Tuple[int, int, str]]):
        """
        Crea una habitación libre por cada número de cada rango [inicio, fin].
        Rangos solapados son un error de configuración: lanza ValueError.
        """
        for start, end, category in ranges:
            self.add_rooms(start, end, category)

    def add_rooms(self, start: int, end: int, category: str):
        if start > end:
            raise ValueError(f"Rango de habitaciones inválido: {start}-{end}")
        for room_id in range(start, end + 1):
            if room_id in self._by_id:
                raise ValueError(f"La habitación {room_id} aparece en más de un rango")
            room = Room(room_id, category)
            self.rooms.append(room)
            self._by_id[room_id] = room

    # ----------------------------
    # Búsquedas
    # ----------------------------
    def find_by_id(self, room_id) -> Optional[Room]:
        """Busca una habitación por su número."""
        return self._by_id.get(room_id)

    def categories(self) -> List[str]:
        """Categorías distintas en el orden en que aparecen."""
        seen = []
        for r in self.rooms:
            if r.category not in seen:
                seen.append(r.category)
        return seen

    def get_rooms_by_category(self, category: Optional[str] = None) -> List[Room]:
        """Devuelve las habitaciones de una categoría ('All' o None = todas)."""
        if category is None or category == ALL_CATEGORIES:
            return list(self.rooms)
        return [r for r in self.rooms if r.category == category]

    def get_available_rooms_by_category(self, category: Optional[str] = None) -> List[Room]:
        return [r for r in self.get_rooms_by_category(category) if r.is_available]

    def __len__(self):
        return len(self.rooms)

    def __iter__(self):
        return iter(self.rooms)

    def __repr__(self):
        return f"<Inventory: {len(self.rooms)} habitaciones>"
