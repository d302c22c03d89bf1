"""A vending machine and an application that asks it for a drink."""

from __future__ import annotations

from typing import Protocol


class DrinkSource(Protocol):
    """Anything that can hand out a drink by brand."""

    def get_drink(self, brand: str) -> str: ...


class VendingMachine:
    """Vends any brand asked for."""

    def get_drink(self, brand: str) -> str:
        """Return the message shown when ``brand`` is served."""
        return f"Enjoy your {brand}"


class Application:
    """Orders a coke from its machine."""

    def __init__(self, machine: DrinkSource | None = None) -> None:
        self.machine: DrinkSource = machine if machine is not None else VendingMachine()

    def run(self) -> str:
        """Print and return the machine's reply to an order for a coke."""
        message = self.machine.get_drink("coke")
        print(message)
        return message