# The module defines a tool that sends email through an SMTP account.
# Date: 2026-10-16
# Version: 0.1.0

import asyncio
import base64
import binascii
import smtplib
from email.message import EmailMessage
from typing import List, Optional, Type

import httpx
from pydantic import BaseModel, EmailStr, Field

from .base_tool import BaseTool
from toolhub.core.config import get_settings
from toolhub.core.errors import ToolExecutionError
from toolhub.utils.logger import console


class EmailSenderInput(BaseModel):
    """
    Input model for the Email Sender tool.
    Attributes:
        recipients (List[str]): Email addresses to send the email to.
        subject (str): The subject line of the email.
        body (str): The plain text content of the email.
        attachment (Optional[str]): A URL or a base64 encoded string to attach.
    """
    recipients: List[EmailStr] = Field(..., min_length=1, description="An array of email addresses to send the email to.")
    subject: str = Field(..., description="The subject line of the email.")
    body: str = Field(..., description="The content of the email.")
    attachment: Optional[str] = Field(default=None, description="File to be attached, must be a URL or a base64 encoded string.")


class EmailSenderTool(BaseTool):
    """
    Sends a plain text email, optionally with one attachment, using the
    SMTP account configured by EMAIL_USER and EMAIL_PASSWORD.
    """
    name: str = "emailSender"
    description: str = "Sends an email to one or more recipients."
    args_schema: Type[BaseModel] = EmailSenderInput

    async def run(self, recipients: List[str], subject: str, body: str,
                  attachment: Optional[str] = None) -> str:
        console.info(f"Executing tool '{self.name}'", {"recipients": recipients, "subject": subject})
        settings = get_settings()
        if not settings.EMAIL_USER or not settings.EMAIL_PASSWORD:
            raise ToolExecutionError("Failed to send email: EMAIL_USER and EMAIL_PASSWORD are not configured.")

        message = EmailMessage()
        message["From"] = settings.EMAIL_USER
        message["To"] = ", ".join(recipients)
        message["Subject"] = subject
        message.set_content(body)
        if attachment:
            content = await self._load_attachment(attachment, settings.HTTP_TIMEOUT_SECONDS)
            message.add_attachment(content, maintype="application", subtype="octet-stream",
                                   filename="attachment")

        try:
            # smtplib blocks, keep it off the event loop.
            await asyncio.to_thread(
                self._send, message, settings.SMTP_HOST, settings.SMTP_PORT,
                settings.EMAIL_USER, settings.EMAIL_PASSWORD, settings.HTTP_TIMEOUT_SECONDS,
            )
        except (smtplib.SMTPException, OSError) as e:
            console.error(f"Tool '{self.name}' failed", e)
            raise ToolExecutionError(f"Failed to send email: {e}") from e

        result = (f"Email sent to {', '.join(recipients)} with subject: {subject}. "
                  f"Attachment: {'yes' if attachment else 'none'}")
        console.success(result)
        return result

    @staticmethod
    def _send(message: EmailMessage, host: str, port: int,
              user: str, password: str, timeout: float) -> None:
        with smtplib.SMTP_SSL(host, port, timeout=timeout) as smtp:
            smtp.login(user, password)
            smtp.send_message(message)

    @staticmethod
    async def _load_attachment(attachment: str, timeout: float) -> bytes:
        """Downloads a URL attachment or decodes a base64 one."""
        if attachment.startswith(("http://", "https://")):
            try:
                async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
                    response = await client.get(attachment)
                    response.raise_for_status()
                    return response.content
            except httpx.HTTPError as e:
                raise ToolExecutionError(f"Failed to download attachment: {e}") from e
        try:
            return base64.b64decode(attachment, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ToolExecutionError("Attachment must be a URL or a base64 encoded string.") from e
