"""Verification and password-reset emails sent during the account lifecycle."""

from literacy.constants.constants import EmailSubject
from literacy.core.config import settings
from literacy.services.EmailClient import EmailClient


def _html_page(greeting: str, intro: str, action_text: str, url: str, button: str) -> str:
    return f"""
    <!DOCTYPE html>
    <html>
    <head>
      <meta charset="utf-8">
      <style>
        body {{ font-family: Arial, sans-serif; line-height: 1.6; color: #333; }}
        .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
        .button {{ display: inline-block; padding: 12px 24px; background-color: #007bff; color: white; text-decoration: none; border-radius: 5px; margin: 20px 0; }}
        .footer {{ margin-top: 30px; font-size: 12px; color: #666; }}
      </style>
    </head>
    <body>
      <div class="container">
        <h2>{greeting}</h2>
        <p>{intro}</p>
        <p>{action_text}</p>
        <a href="{url}" class="button">{button}</a>
        <p>Немесе мына сілтемені көшіріп, браузерге қойыңыз:</p>
        <p style="word-break: break-all;">{url}</p>
        <p>Егер сіз бұл әрекетті жасамаған болсаңыз, бұл хатты елемеңіз.</p>
        <div class="footer">
          <p>Бұл хат автоматты түрде жіберілді. Оған жауап бермеңіз.</p>
        </div>
      </div>
    </body>
    </html>
    """


class AccountMailer:
    """Builds account emails and hands them to an EmailClient."""

    def __init__(self, client: EmailClient, base_url: str):
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def send_verification_email(self, email: str, token: str, first_name: str) -> dict:
        verification_url = f"{self.base_url}/verify-email?token={token}"
        greeting = f"Сәлем, {first_name}!"
        intro = "Компьютерлік сауаттылық платформасына қош келдіңіз!"

        html_content = _html_page(
            greeting,
            intro,
            "Тіркелуді аяқтау үшін төмендегі батырманы басыңыз немесе сілтемені ашыңыз:",
            verification_url,
            "Email растау",
        )
        text_content = (
            f"{greeting}\n\n{intro}\n\n"
            f"Тіркелуді аяқтау үшін мына сілтемені ашыңыз:\n{verification_url}\n\n"
            "Егер сіз тіркелмеген болсаңыз, бұл хатты елемеңіз.\n"
        )

        return await self.client.send_email(
            to_email=email,
            subject=EmailSubject.verification.value,
            body_text=text_content,
            body_html=html_content,
        )

    async def send_password_reset_email(self, email: str, token: str, first_name: str) -> dict:
        reset_url = f"{self.base_url}/reset-password?token={token}"
        greeting = f"Сәлем, {first_name}!"
        intro = "Құпия сөзді қалпына келтіру сұрауы алынды."

        html_content = _html_page(
            greeting,
            intro,
            "Жаңа құпия сөз орнату үшін төмендегі батырманы басыңыз:",
            reset_url,
            "Құпия сөзді қалпына келтіру",
        )
        text_content = (
            f"{greeting}\n\n{intro}\n\n"
            f"Жаңа құпия сөз орнату үшін мына сілтемені ашыңыз:\n{reset_url}\n"
        )

        return await self.client.send_email(
            to_email=email,
            subject=EmailSubject.password_reset.value,
            body_text=text_content,
            body_html=html_content,
        )


def build_account_mailer() -> AccountMailer:
    client = EmailClient(api_key=settings.SENDGRID_API_KEY, default_sender=settings.EMAIL_FROM)
    return AccountMailer(client, base_url=settings.BASE_URL)
