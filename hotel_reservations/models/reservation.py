class Reservation:
    """
    Reserva activa de una habitación.
    La categoría es una copia de la de la habitación en el momento de reservar.
    Los campos son de sólo lectura: el Ledger es quien crea y elimina reservas.
    """

    def __init__(self, guest_name: str, resource_id: int, category: str, payment_status: str):
        self._guest_name = guest_name
        self._resource_id = resource_id
        self._category = category
        self._payment_status = payment_status

    @property
    def guest_name(self) -> str:
        return self._guest_name

    @property
    def resource_id(self) -> int:
        return self._resource_id

    @property
    def category(self) -> str:
        return self._category

    @property
    def payment_status(self) -> str:
        return self._payment_status

    def _key(self):
        return (self._guest_name, self._resource_id, self._category, self._payment_status)

    def __eq__(self, other):
        if not isinstance(other, Reservation):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"<Reservation {self.guest_name} room={self.resource_id} {self.category} ({self.payment_status})>"
