class ReservationStoreError(Exception):
    """Base de los errores de lectura/escritura del fichero de reservas."""


class RecordDecodeError(ReservationStoreError, ValueError):
    """Una línea del fichero no se puede convertir en Reservation."""

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class MalformedRecordError(RecordDecodeError):
    pass


class InvalidResourceIdError(RecordDecodeError):
    pass


class PersistenceWriteError(ReservationStoreError):
    """No se pudo reescribir el fichero (permisos, disco lleno...)."""


class PersistenceReadError(ReservationStoreError):
    pass
