# solid/machines.py
from typing import List
from solid.interfaces import IPrinter, IScanner, IFaxer

# Segregated capabilities, by name
CAPABILITIES = {
    "fax": IFaxer,
    "print": IPrinter,
    "scan": IScanner,
}


class SimplePrinter(IPrinter):
    """
    [ISP] Depends only on IPrinter.
    No scan/fax methods exist on this class, not even failing ones.
    """
    def print_document(self) -> None:
        print("Printing document")


class AdvancedMachine(IPrinter, IScanner, IFaxer):
    """Implements several small interfaces."""
    def print_document(self) -> None:
        print("Printing document")

    def scan(self) -> None:
        print("Scanning document")

    def fax(self) -> None:
        print("Sending fax")


def print_with(printer: IPrinter) -> None:
    printer.print_document()


def scan_with(scanner: IScanner) -> None:
    scanner.scan()


def fax_with(faxer: IFaxer) -> None:
    faxer.fax()


def capabilities(machine) -> List[str]:
    """
    Names of the segregated interfaces a machine satisfies.
    Reporting only; the coordinators above never call this.
    """
    return sorted(name for name, iface in CAPABILITIES.items() if isinstance(machine, iface))
