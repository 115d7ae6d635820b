"""
Email and notification infrastructure.
Handles email templates and transactional delivery through Resend.
"""

from .resend_sender import ResendEmailSender
from .template_loader import EmailTemplateLoader

__all__ = [
    "ResendEmailSender",
    "EmailTemplateLoader",
]
