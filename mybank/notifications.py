"""
Notification Module

Delivery of large-transaction alerts. Account only depends on the
NotificationService interface; concrete services log the alert, keep it in
memory or POST it to a webhook.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional, Tuple
import logging

import requests

from .exceptions import NotificationDeliveryError
from .logging_config import log_action

logger = logging.getLogger("mybank.notifications")


class NotificationService(ABC):
    """Abstract base class for notification delivery"""

    @abstractmethod
    def send_notification(self, account_id: str, message: str) -> None:
        """Deliver `message` to the owner of `account_id`"""
        pass


class LogNotificationService(NotificationService):
    """Simple logging notifier for development"""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.logger = log or logger

    def send_notification(self, account_id: str, message: str) -> None:
        log_action(
            self.logger, "info", message,
            account_id=account_id, action="notify", resource="account"
        )


class InMemoryNotificationService(NotificationService):
    """Keeps sent notifications for inspection"""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []

    def send_notification(self, account_id: str, message: str) -> None:
        self.sent.append((account_id, message))

    def messages_for(self, account_id: str) -> List[str]:
        """Messages sent to a single account, oldest first"""
        return [message for sent_to, message in self.sent if sent_to == account_id]


class WebhookNotificationService(NotificationService):
    """Webhook notifier for external integrations"""

    def __init__(self, url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        if not url:
            raise ValueError("Webhook URL is required")
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def send_notification(self, account_id: str, message: str) -> None:
        """
        POST the notification as JSON

        Raises:
            NotificationDeliveryError: On transport errors or non-2xx responses
        """
        payload = {
            "account_id": account_id,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        try:
            response = self.session.post(
                self.url,
                json=payload,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"}
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Webhook send failed for account {account_id}: {e}")
            raise NotificationDeliveryError(f"Webhook delivery to {self.url} failed: {e}") from e

        logger.debug(f"Webhook notification delivered for account {account_id}")


def create_notification_service(config=None) -> NotificationService:
    """Build the notifier selected by configuration"""
    if config is None:
        from .config import get_config
        config = get_config()

    if config.webhook_url:
        return WebhookNotificationService(config.webhook_url, timeout=config.webhook_timeout)
    return LogNotificationService()
