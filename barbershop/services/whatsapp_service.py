"""
WhatsApp Message Service
Sends plain-text WhatsApp messages through the Meta Cloud API.

Delivery is best effort: every failure is logged and reported as False,
nothing is raised to the caller and nothing is retried.
"""

import logging
import re
from typing import Optional

import httpx

from ..config import META_API_VERSION, META_PHONE_ID, META_TOKEN, NOTIFICATION_TIMEOUT
from ..errors import NotificationError

logger = logging.getLogger(__name__)

GRAPH_API_BASE = "https://graph.facebook.com"


def format_whatsapp_number(phone: Optional[str]) -> str:
    """Strip everything but digits; the Cloud API wants the bare international number"""
    return re.sub(r"\D", "", str(phone or ""))


class WhatsAppSender:
    """Outbound WhatsApp sender with a send(to, body) contract"""

    def __init__(
        self,
        phone_id: Optional[str] = META_PHONE_ID,
        token: Optional[str] = META_TOKEN,
        api_version: str = META_API_VERSION,
        timeout: float = NOTIFICATION_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.phone_id = phone_id
        self.token = token
        self.api_version = api_version
        self.timeout = timeout
        self.transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.phone_id and self.token)

    @property
    def messages_url(self) -> str:
        return f"{GRAPH_API_BASE}/{self.api_version}/{self.phone_id}/messages"

    async def send(self, to: Optional[str], body: str) -> bool:
        """
        Send a text message.

        Args:
            to: Destination phone number in any formatting
            body: Message text

        Returns:
            True if the API accepted the message, False otherwise
        """
        number = format_whatsapp_number(to)
        if not number:
            logger.debug("No destination number provided, skipping WhatsApp message")
            return False

        if not self.configured:
            logger.debug(f"WhatsApp not configured, skipping message to {number}")
            return False

        try:
            await self._post(number, body)
            logger.info(f"✅ WhatsApp sent to {number}")
            return True
        except (NotificationError, httpx.HTTPError) as e:
            logger.error(f"❌ WhatsApp Failed for {number}: {e}")
            return False

    async def _post(self, number: str, body: str) -> None:
        payload = {
            "messaging_product": "whatsapp",
            "to": number,
            "type": "text",
            "text": {"body": body},
        }
        headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            response = await client.post(self.messages_url, json=payload, headers=headers)

        logger.debug(f"📡 WhatsApp API response status: {response.status_code}")
        if response.status_code not in (200, 201):
            raise NotificationError(f"[{response.status_code}] {response.text}")
