#!/usr/bin/env python3
"""
Interactive booking form in the terminal.

Usage:
  python3 scripts/book_local.py
  BOOKING_OFFLINE=true python3 scripts/book_local.py   # fallback data only

What it does:
- Drives the same BookingController a rendered form would use
- Keeps polling slot availability in the background while you type
- Prints the form after every command
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from barber_booking.application.use_cases.booking_controller import BookingController  # noqa: E402
from barber_booking.application.utils.time_slots import display_time  # noqa: E402
from barber_booking.core.config import settings  # noqa: E402
from barber_booking.core.logging_config import configure_logging  # noqa: E402
from barber_booking.wiring.dependencies import get_booking_controller  # noqa: E402

HELP = """Commands:
  /services            -> list services
  /service <id>        -> pick a service
  /date <YYYY-MM-DD>   -> pick a date (snapped into the bookable range)
  /slots               -> reload available slots
  /time <HH:MM>        -> pick a slot
  /name <text>         -> set your name
  /phone <text>        -> set your phone (formatted as you type)
  /submit              -> confirm the reservation
  /quit                -> exit"""


def _print_header() -> None:
    print(f"\n{settings.BUSINESS_NAME}: reservas")
    print("-" * 60)
    print("Type /help for commands.")
    print("-" * 60)


def _print_form(controller: BookingController) -> None:
    state = controller.state
    service = controller.selected_service
    print("\n--- Form ---")
    print(f"servicio: {service.label if service else '-'}")
    print(f"fecha:    {state.date or '-'}  (rango {controller.min_date} .. {controller.max_date})")
    if state.slots_loading:
        print("horarios: Cargando horarios...")
    elif state.slots:
        print("horarios: " + " ".join(display_time(slot) for slot in state.slots))
    else:
        print(f"horarios: {controller.empty_slots_message}")
    if state.time:
        print(f"Horario seleccionado: {controller.selected_time_label}")
    print(f"nombre:   {state.name or '-'}")
    print(f"teléfono: {state.phone or '-'}")
    if state.message.text:
        print(f"[{state.message.kind}] {state.message.text}")


async def _handle(controller: BookingController, cmd: str, arg: str) -> bool:
    if cmd == "/services":
        for service_id, label in controller.service_options():
            marker = "*" if service_id == controller.state.service_id else " "
            print(f" {marker} {service_id}: {label}")
    elif cmd == "/service":
        await controller.select_service(arg)
    elif cmd == "/date":
        await controller.select_date(arg)
    elif cmd == "/slots":
        await controller.load_slots()
    elif cmd == "/time":
        if not controller.select_time(arg):
            print(f"Horario no disponible: {arg}")
    elif cmd == "/name":
        controller.set_name(arg)
    elif cmd == "/phone":
        controller.set_phone(arg)
        controller.blur_phone()
    elif cmd == "/submit":
        await controller.submit()
    else:
        return False
    return True


async def main() -> None:
    configure_logging()
    controller = get_booking_controller()
    _print_header()
    await controller.load_services()
    _print_form(controller)

    try:
        while True:
            try:
                user_text = (await asyncio.to_thread(input, "\n> ")).strip()
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                return

            if not user_text:
                continue

            cmd, _, arg = user_text.partition(" ")
            cmd = cmd.lower()
            if cmd in ("/quit", "/exit"):
                print("Bye!")
                return
            if cmd == "/help":
                print(HELP)
                continue

            if not await _handle(controller, cmd, arg.strip()):
                print("Unknown command. Type /help.")
                continue
            _print_form(controller)
    finally:
        await controller.close()


if __name__ == "__main__":
    asyncio.run(main())
