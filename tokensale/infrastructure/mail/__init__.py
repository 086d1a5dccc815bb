"""Mail notification implementations.

Renders the welcome and confirmation emails and hands them to a mail
transport (SMTP via aiosmtplib).
Bounded Context: Notification
"""
