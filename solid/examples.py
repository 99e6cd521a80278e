# solid/examples.py
"""
One runner per principle. Each runner builds the variants (composition
root) and hands them to the coordinators.
"""
from solid.notifiers import EmailService, SmsService, SlackService, NotificationCenter, send_notification
from solid.payments import get_payment_method, process_payment
from solid.orders import OrderService
from solid.birds import Sparrow, Ostrich, make_bird_fly, make_bird_run
from solid.machines import SimplePrinter, AdvancedMachine, print_with, scan_with, fax_with, capabilities
from solid.reports import PDFGenerator, HTMLGenerator, ReportService
import config


def run_srp():
    """Single Responsibility: order placement split into collaborators."""
    service = OrderService()
    service.place_order(config.DEMO_ORDER_ID, config.DEMO_ORDER_AMOUNT)


def run_ocp():
    """Open/Closed: notifications and payments extended by new variants."""
    send_notification(EmailService())
    send_notification(SmsService())

    # Future case: Slack plugs in without edits anywhere else
    center = NotificationCenter([EmailService(), SmsService(), SlackService()])
    center.notify_all()

    for name, amount in config.DEMO_PAYMENTS:
        process_payment(get_payment_method(name), amount)


def run_lsp():
    """Liskov Substitution: only real flyers are passed where flight is expected."""
    make_bird_fly(Sparrow())
    # An Ostrich is an IRunningBird, never an IFlyingBird
    make_bird_run(Ostrich())


def run_isp():
    """Interface Segregation: small interfaces instead of one fat Machine."""
    simple = SimplePrinter()
    advanced = AdvancedMachine()

    print_with(simple)
    print_with(advanced)
    scan_with(advanced)
    fax_with(advanced)

    print(f"[ISP] SimplePrinter: {', '.join(capabilities(simple))}")
    print(f"[ISP] AdvancedMachine: {', '.join(capabilities(advanced))}")


def run_dip():
    """Dependency Inversion: the report service receives its generator."""
    ReportService(PDFGenerator()).create_report()
    ReportService(HTMLGenerator()).create_report()


EXAMPLES = {
    "srp": run_srp,
    "ocp": run_ocp,
    "lsp": run_lsp,
    "isp": run_isp,
    "dip": run_dip,
}

TITLES = {
    "srp": "Single Responsibility Principle",
    "ocp": "Open/Closed Principle",
    "lsp": "Liskov Substitution Principle",
    "isp": "Interface Segregation Principle",
    "dip": "Dependency Inversion Principle",
}


def run_example(name: str) -> None:
    """Print the banner for an example and run it."""
    runner = EXAMPLES.get(name)
    if not runner:
        raise KeyError(f"Unknown example: {name}")
    print(config.BANNER_CHAR * config.BANNER_WIDTH)
    print(f"[{name.upper()}] {TITLES[name]}")
    print(config.BANNER_CHAR * config.BANNER_WIDTH)
    runner()
