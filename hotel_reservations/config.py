import os
from pathlib import Path

# Carpeta de trabajo del usuario (mismo criterio que ~/.hotel_planner)
DATA_DIR = Path.home() / ".hotel_reservations"
RESERVATIONS_FILE_NAME = "reservations.txt"
RESERVATIONS_PATH = DATA_DIR / RESERVATIONS_FILE_NAME

# Partición fija de números de habitación por categoría: (inicio, fin, categoria)
ROOM_RANGES = [
    (101, 110, "Standard"),
    (201, 205, "Deluxe"),
    (301, 303, "Suite"),
]

# Etiqueta de pago que se guarda al confirmar una reserva
PAID_LABEL = "Paid"

LOG_LEVEL = os.environ.get("HOTEL_RESERVATIONS_LOG_LEVEL", "INFO")
