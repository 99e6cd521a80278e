# solid/interfaces.py
from abc import ABC, abstractmethod


# --- Open/Closed ---

class INotifier(ABC):
    """
    [OCP] Interface for notification senders.
    A new channel (Slack, push, ...) is added by subclassing this class,
    without touching the interface or the code that sends notifications.
    """
    @abstractmethod
    def send(self, message: str) -> bool:
        """Deliver a message"""
        pass


class IPaymentMethod(ABC):
    """
    [OCP] Interface for payment methods.
    Replaces a processor that switches on a method name string.
    """
    @abstractmethod
    def process(self, amount: float) -> bool:
        """Charge the given amount"""
        pass


# --- Dependency Inversion ---

class IReportGenerator(ABC):
    """
    [DIP] Abstraction owned by the report service (high-level module).
    Low-level generators (PDF, HTML) depend on it, not the other way around.
    """
    @abstractmethod
    def generate(self, content: str) -> None:
        pass


# --- Liskov Substitution ---

class IFlyingBird(ABC):
    """
    [LSP] A bird that can actually fly.
    Any subclass must perform flight when fly() is called; a no-op or an
    error is a contract violation.
    """
    @abstractmethod
    def fly(self) -> None:
        pass


class IRunningBird(ABC):
    """[LSP] A bird that moves on the ground."""
    @abstractmethod
    def run(self) -> None:
        pass


# --- Interface Segregation ---

class IPrinter(ABC):
    @abstractmethod
    def print_document(self) -> None:
        pass


class IScanner(ABC):
    @abstractmethod
    def scan(self) -> None:
        pass


class IFaxer(ABC):
    @abstractmethod
    def fax(self) -> None:
        pass


# --- Single Responsibility ---
# One interface per reason to change.

class IOrderRepository(ABC):
    @abstractmethod
    def save(self, order_id: int) -> None:
        """Persist an order"""
        pass


class IPaymentService(ABC):
    @abstractmethod
    def process(self, amount: float) -> None:
        """Charge the order amount"""
        pass


class IEmailService(ABC):
    @abstractmethod
    def send(self) -> None:
        """Send the order confirmation"""
        pass


class IInvoiceService(ABC):
    @abstractmethod
    def generate(self, order_id: int) -> None:
        """Produce the order invoice"""
        pass
