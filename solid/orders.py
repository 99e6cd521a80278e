# solid/orders.py
from typing import Optional
from solid.interfaces import IOrderRepository, IPaymentService, IEmailService, IInvoiceService


class OrderRepository(IOrderRepository):
    """Changes only when database logic changes."""
    def save(self, order_id: int) -> None:
        print(f"Saving order {order_id} to database")


class PaymentService(IPaymentService):
    """Changes only when the payment gateway changes."""
    def process(self, amount: float) -> None:
        print(f"Processing payment of {amount:.2f}")


class ConfirmationEmailService(IEmailService):
    """Changes only when the email provider changes."""
    def send(self) -> None:
        print("Sending confirmation email")


class InvoiceService(IInvoiceService):
    """Changes only when the invoice format changes."""
    def generate(self, order_id: int) -> None:
        print(f"Generating invoice for order {order_id}")


class OrderService:
    """
    [SRP] Coordinates the order workflow and nothing else.
    Database, payment, email and invoice logic each live in their own
    collaborator; this class only sequences the calls.
    """
    def __init__(self,
                 repo: Optional[IOrderRepository] = None,
                 payment: Optional[IPaymentService] = None,
                 email: Optional[IEmailService] = None,
                 invoice: Optional[IInvoiceService] = None):
        self.repo = repo if repo is not None else OrderRepository()
        self.payment = payment if payment is not None else PaymentService()
        self.email = email if email is not None else ConfirmationEmailService()
        self.invoice = invoice if invoice is not None else InvoiceService()

    def place_order(self, order_id: int, amount) -> None:
        """save -> process -> send -> generate"""
        # a bad amount fails here, before any collaborator runs
        amount = float(amount)
        self.repo.save(order_id)
        self.payment.process(amount)
        self.email.send()
        self.invoice.generate(order_id)
