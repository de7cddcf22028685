from pathlib import Path

from hotel_reservations.core.controller import Controller
from hotel_reservations.core.ledger import Ledger
from hotel_reservations.core.logging import setup_logging


def print_rooms(controller, category="All"):
    for r in controller.list_rooms(category):
        estado = "Ocupada" if r["booked"] else "Libre"
        print(f" - {r['id']} {r['category']:<9} {estado}")


def main():
    setup_logging()
    project_dir = Path(__file__).resolve().parent
    demo_path = project_dir / "demo_reservations.txt"

    # Cargar reservas previas (si existen) y reconciliar las habitaciones
    ledger = Ledger(path=demo_path)
    controller = Controller(ledger)
    print(f"Reservas cargadas desde: {demo_path} ({len(ledger.list_all())})")
    aviso = controller.load_summary()
    if aviso:
        print(aviso)

    print("\nHabitaciones Suite:")
    print_rooms(controller, "Suite")

    # --- Demo: reservar, intentar reservar de nuevo y cancelar ---
    print("\n--- Demo: reservas ---")
    for name, room in [("Alice", "101"), ("Bob", "101"), ("", "102"), ("Carol", "999"), ("Dave", "abc")]:
        ok, message = controller.book(name, room)
        print(f"book({name!r}, {room!r}) -> {message}")

    print("\nDetalle de la habitación 101:", controller.room_details(101))

    print("\nTodas las reservas:")
    for row in controller.list_reservations():
        print(f" - {row['room']} | {row['category']} | {row['guest']} | {row['payment']}")

    ok, message = controller.cancel("101")
    print(f"\ncancel('101') -> {message}")
    ok, message = controller.cancel("101")
    print(f"cancel('101') -> {message}")

    print("\nOcupación:")
    for category, counts in ledger.occupancy().items():
        print(f" - {category}: {counts['booked']}/{counts['total']} ocupadas")


if __name__ == "__main__":
    main()
