"""
SMTP 어댑터

SMTP를 통한 첨부 파일 메일 전송.
IMailer Protocol 준수.
"""

from adapters.smtp.mailer import SmtpMailer, create_mailer

__all__ = [
    "SmtpMailer",
    "create_mailer",
]
