class Room:
    """
    Representa una habitación reservable del hotel.
    El número y la categoría son fijos; sólo cambia el estado de ocupación.
    """
    def __init__(self, room_id: int, category: str):
        if not isinstance(room_id, int) or isinstance(room_id, bool) or room_id < 1:
            raise ValueError("El número de habitación debe ser un entero positivo.")
        if not category or not isinstance(category, str):
            raise ValueError("La categoría de la habitación debe ser una cadena no vacía.")
        self._id = room_id
        self._category = category
        self._booked = False

    @property
    def id(self) -> int:
        return self._id

    @property
    def category(self) -> str:
        return self._category

    @property
    def booked(self) -> bool:
        return self._booked

    # Sólo el Ledger debe llamar a estos dos métodos
    def mark_booked(self):
        """Marca la habitación como ocupada."""
        self._booked = True

    def mark_free(self):
        """Marca la habitación como libre."""
        self._booked = False

    @property
    def is_available(self):
        return not self.booked

    def __eq__(self, other):
        if not isinstance(other, Room):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        estado = "Ocupada" if self.booked else "Libre"
        return f"<Room: {self._id} {self._category} ({estado})>"

    def to_dict(self):
        """Convierte la habitación a un diccionario serializable."""
        return {
            "id": self._id,
            "category": self._category,
            "booked": self.booked,
        }
