"""
Default HTML bodies for outbound emails.

Each builder returns (subject, html_body).
"""

from datetime import datetime
from html import escape
from typing import Optional, Tuple


def welcome(app_name: str, frontend_url: str, name: str) -> Tuple[str, str]:
    html = f"""
<h2>Welcome {escape(name)}!</h2>
<p>Your account has been successfully created.</p>
<p>You can now login to your account.</p>
<p><a href="{escape(frontend_url)}/login">Click here to login</a></p>
"""
    return f"Welcome to {app_name}!", html


def password_reset(reset_link: str, name: str, expires_minutes: int) -> Tuple[str, str]:
    html = f"""
<h2>Password Reset Request</h2>
<p>Hi {escape(name)},</p>
<p>You requested to reset your password. Click the link below to proceed:</p>
<p><a href="{escape(reset_link)}">Reset Password</a></p>
<p>This link will expire in {expires_minutes} minutes.</p>
<p>If you didn't request this, please ignore this email.</p>
"""
    return "Password Reset Request", html


def password_changed(app_name: str, name: str) -> Tuple[str, str]:
    html = f"""
<h2>Your password has been changed</h2>
<p>Hi {escape(name)},</p>
<p>The password for your {escape(app_name)} account was just changed.</p>
<p>If you did not make this change, reset your password immediately and contact support.</p>
"""
    return "Your Password Has Been Changed", html


def contact_confirmation(app_name: str, name: str, message: str) -> Tuple[str, str]:
    html = f"""
<h2>Thank You for Contacting Us</h2>
<p>Dear {escape(name)},</p>
<p>We have received your message and will get back to you within 24-48 hours.</p>
<p><strong>Your Message:</strong></p>
<p>{escape(message)}</p>
<p>Best regards,<br>{escape(app_name)} Support Team</p>
"""
    return f"Thank You for Contacting {app_name}", html


def contact_notification(
    name: str,
    email: str,
    subject: str,
    message: str,
    phone: Optional[str],
    created_at: datetime,
) -> Tuple[str, str]:
    phone_line = f"<p><strong>Phone:</strong> {escape(phone)}</p>" if phone else ""
    html = f"""
<h2>New Contact Form Submission</h2>
<p><strong>From:</strong> {escape(name)} ({escape(email)})</p>
<p><strong>Subject:</strong> {escape(subject)}</p>
{phone_line}
<p><strong>Message:</strong><br>{escape(message)}</p>
<p><strong>Submitted:</strong> {created_at.isoformat(timespec="seconds")} UTC</p>
"""
    return f"New Contact Form: {subject}", html
