"""Constants for quiz scoring, token sizes and user-facing messages."""

from enum import Enum


# Fraction of questions that must be answered correctly to pass a quiz.
PASS_THRESHOLD = 0.60

MIN_PASSWORD_LENGTH = 8

# Bytes of randomness in verification and reset tokens (hex-encoded, so 64 chars).
TOKEN_BYTES = 32


class Message(str, Enum):
    """Localized (Kazakh) messages returned to clients."""

    # Validation
    invalid_data = "Деректер дұрыс емес"
    invalid_email = "Жарамсыз email мекенжайы"
    password_too_short = "Құпия сөз кемінде 8 таңбадан тұруы керек"
    password_required = "Құпия сөзді енгізіңіз"
    first_name_required = "Атыңызды енгізіңіз"
    last_name_required = "Тегіңізді енгізіңіз"
    token_missing = "Токен табылмады"

    # Registration
    email_taken = "Бұл email бойынша тіркелген пайдаланушы бар"
    registered = "Тіркелу сәтті! Растау хатын тексеріңіз."

    # Login / session
    invalid_credentials = "Email немесе құпия сөз дұрыс емес"
    email_not_verified_login = "Email расталмаған. Растау хатын тексеріңіз."
    email_not_verified = "Email расталмаған"
    login_success = "Кіру сәтті"
    logout_success = "Шығу сәтті"
    auth_required = "Авторизация қажет"

    # Tokens
    invalid_token = "Жарамсыз немесе мерзімі өткен токен"
    token_expired = "Токен мерзімі өткен"
    email_verified = "Email сәтті расталды"

    # Password reset
    reset_requested = "Егер бұл email тіркелген болса, құпия сөзді қалпына келтіру хаты жіберілді"
    password_reset = "Құпия сөз сәтті өзгертілді"

    # Catalog / quiz
    module_not_found = "Модуль табылмады"
    questions_not_found = "Бұл модуль үшін сұрақтар табылмады"

    # Server
    internal_error = "Серверде қате орын алды"


class EmailSubject(str, Enum):
    """Subjects of outgoing account emails."""

    verification = "Email растау - Компьютерлік сауаттылық"
    password_reset = "Құпия сөзді қалпына келтіру - Компьютерлік сауаттылық"
