# solid/notifiers.py
from typing import List
from solid.interfaces import INotifier
import config


class EmailService(INotifier):
    """Email notification channel."""
    def send(self, message: str) -> bool:
        print(f"Sending email... {message}")
        return True


class SmsService(INotifier):
    """SMS notification channel."""
    def send(self, message: str) -> bool:
        print(f"Sending SMS... {message}")
        return True


class SlackService(INotifier):
    """
    [OCP] Added after EmailService and SmsService.
    Neither INotifier nor the coordinators below changed to support it.
    """
    def send(self, message: str) -> bool:
        print(f"Sending slack notification... {message}")
        return True


def send_notification(notifier: INotifier, message: str = config.DEFAULT_NOTIFICATION) -> bool:
    """Send one message through any notifier."""
    return notifier.send(message)


class NotificationCenter:
    """
    Fans a message out to every injected notifier.
    """
    def __init__(self, notifiers: List[INotifier]):
        self.notifiers = list(notifiers)

    def notify_all(self, message: str = config.DEFAULT_NOTIFICATION) -> List[bool]:
        """
        [OCP] Delegate the message to all notifiers, in registration order.
        Adding a notifier does not require changing this method.
        """
        results = []
        for notifier in self.notifiers:
            results.append(notifier.send(message))
        return results


# --- Extension example (comment) ---
# class PushNotifier(INotifier):
#     def __init__(self, device_token):
#         ...
#     def send(self, message: str) -> bool:
#         # push gateway call
#         ...
