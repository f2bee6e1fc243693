from apps.storefront.infrastructure.mail.logging_mail_sender import LoggingMailSender

__all__ = ["LoggingMailSender"]
