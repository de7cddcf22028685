from typing import Optional

ERROR_PREFIX = "Error:"

# Motivos de fallo
RESOURCE_NOT_FOUND = "ResourceNotFound"
ALREADY_BOOKED = "AlreadyBooked"
NOT_BOOKED = "NotBooked"
PERSISTENCE_WRITE_FAILURE = "PersistenceWriteFailure"


class Result:
    """
    Resultado de book/cancel.
    ok=True lleva el número de habitación (y el huésped al reservar);
    ok=False lleva el motivo. message siempre es texto listo para mostrar
    y empieza por 'Error:' sólo cuando ok es False.
    """

    def __init__(self, ok: bool, message: str, reason: Optional[str] = None,
                 resource_id: Optional[int] = None, guest_name: Optional[str] = None):
        self.ok = ok
        self.message = message
        self.reason = reason
        self.resource_id = resource_id
        self.guest_name = guest_name

    @classmethod
    def success(cls, message: str, resource_id: int, guest_name: Optional[str] = None):
        return cls(True, message, resource_id=resource_id, guest_name=guest_name)

    @classmethod
    def failure(cls, reason: str, detail: str, resource_id: Optional[int] = None):
        return cls(False, f"{ERROR_PREFIX} {detail}", reason=reason, resource_id=resource_id)

    def __iter__(self):
        # permite desempaquetar como (ok, mensaje)
        yield self.ok
        yield self.message

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return (self.ok, self.message, self.reason, self.resource_id, self.guest_name) == (
            other.ok, other.message, other.reason, other.resource_id, other.guest_name)

    def __repr__(self):
        if self.ok:
            return f"<Result ok room={self.resource_id}>"
        return f"<Result {self.reason}: {self.message}>"


def room_not_found(room_id) -> Result:
    return Result.failure(RESOURCE_NOT_FOUND, f"La habitación {room_id} no existe.", resource_id=room_id)


def already_booked(room_id) -> Result:
    return Result.failure(ALREADY_BOOKED, f"La habitación {room_id} ya está reservada.", resource_id=room_id)


def not_booked(room_id) -> Result:
    return Result.failure(NOT_BOOKED, f"No hay ninguna reserva para la habitación {room_id}.", resource_id=room_id)


def write_failed(room_id, detail: str, rolled_back: bool = True) -> Result:
    text = f"No se pudieron guardar las reservas ({detail})."
    if rolled_back:
        text += " No se aplicó ningún cambio."
    return Result.failure(PERSISTENCE_WRITE_FAILURE, text, resource_id=room_id)
