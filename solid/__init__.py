"""
SOLID Examples Package

Short examples of the five SOLID design principles:
notifications, payments, orders, birds, printers and reports
"""

__version__ = "1.0.0"
__author__ = "SOLID Examples Team"

from solid.errors import SolidExampleError, UnsupportedOperationError
from solid.interfaces import (
    INotifier, IPaymentMethod, IReportGenerator,
    IFlyingBird, IRunningBird,
    IPrinter, IScanner, IFaxer,
    IOrderRepository, IPaymentService, IEmailService, IInvoiceService,
)
from solid.notifiers import EmailService, SmsService, SlackService, NotificationCenter, send_notification
from solid.payments import CreditCardPayment, PayPalPayment, UpiPayment, process_payment, get_payment_method, list_payment_methods
from solid.orders import OrderRepository, PaymentService, ConfirmationEmailService, InvoiceService, OrderService
from solid.birds import Sparrow, Ostrich, Penguin, make_bird_fly, make_bird_run
from solid.machines import SimplePrinter, AdvancedMachine, print_with, scan_with, fax_with, capabilities
from solid.reports import PDFGenerator, HTMLGenerator, ReportService

__all__ = [
    "SolidExampleError",
    "UnsupportedOperationError",
    "INotifier",
    "IPaymentMethod",
    "IReportGenerator",
    "IFlyingBird",
    "IRunningBird",
    "IPrinter",
    "IScanner",
    "IFaxer",
    "IOrderRepository",
    "IPaymentService",
    "IEmailService",
    "IInvoiceService",
    "EmailService",
    "SmsService",
    "SlackService",
    "NotificationCenter",
    "send_notification",
    "CreditCardPayment",
    "PayPalPayment",
    "UpiPayment",
    "process_payment",
    "get_payment_method",
    "list_payment_methods",
    "OrderRepository",
    "PaymentService",
    "ConfirmationEmailService",
    "InvoiceService",
    "OrderService",
    "Sparrow",
    "Ostrich",
    "Penguin",
    "make_bird_fly",
    "make_bird_run",
    "SimplePrinter",
    "AdvancedMachine",
    "print_with",
    "scan_with",
    "fax_with",
    "capabilities",
    "PDFGenerator",
    "HTMLGenerator",
    "ReportService",
]
