from email_validator import EmailNotValidError, validate_email

from literacy.constants.constants import MIN_PASSWORD_LENGTH


def is_valid_email(email: str) -> bool:
    """Syntax check only; the address is stored exactly as the user typed it."""
    if not email:
        return False
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_valid_password(password: str) -> bool:
    return password is not None and len(password) >= MIN_PASSWORD_LENGTH
