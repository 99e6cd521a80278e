# solid/payments.py
import math
from numbers import Real
from solid.interfaces import IPaymentMethod


class CreditCardPayment(IPaymentMethod):
    label = "credit card"

    def process(self, amount: float) -> bool:
        print(f"Processing {self.label} payment of {amount}")
        return True


class PayPalPayment(IPaymentMethod):
    label = "PayPal"

    def process(self, amount: float) -> bool:
        print(f"Processing {self.label} payment of {amount}")
        return True


class UpiPayment(IPaymentMethod):
    label = "UPI"

    def process(self, amount: float) -> bool:
        print(f"Processing {self.label} payment of {amount}")
        return True


def process_payment(method: IPaymentMethod, amount: float) -> bool:
    """
    Charge an amount with any payment method.
    A new method is a new IPaymentMethod subclass; this function stays as is.
    """
    if isinstance(amount, bool) or not isinstance(amount, Real):
        raise ValueError(f"amount must be a number, got {amount!r}")
    if not math.isfinite(amount) or amount <= 0:
        raise ValueError(f"amount must be a positive finite number, got {amount}")
    return method.process(amount)


# Construction only. Callers still dispatch through IPaymentMethod.
_REGISTRY = {
    "credit": CreditCardPayment,
    "paypal": PayPalPayment,
    "upi": UpiPayment,
}


def get_payment_method(name: str) -> IPaymentMethod:
    cls = _REGISTRY.get(name)
    if not cls:
        raise KeyError(f"Unknown payment method: {name}")
    return cls()


def list_payment_methods() -> list:
    return sorted(_REGISTRY.keys())
