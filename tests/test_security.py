import json
from datetime import timedelta

import httpx
import jwt
import pytest
from fastapi import Response

from literacy.core.security import (
    clear_auth_cookie,
    create_jwt_token,
    decode_jwt_token,
    generate_token,
    hash_password,
    hash_password_sync,
    set_auth_cookie,
    verify_password,
    verify_password_sync,
)
from literacy.services.AccountEmails import AccountMailer
from literacy.services.EmailClient import EmailClient, EmailDeliveryError


def test_password_hash_is_salted_and_verifiable():
    first = hash_password_sync("correct-horse", rounds=4)
    second = hash_password_sync("correct-horse", rounds=4)

    assert first != second
    assert verify_password_sync("correct-horse", first)
    assert not verify_password_sync("wrong-horse", first)


def test_verify_against_garbage_hash_is_false():
    assert verify_password_sync("anything", "not-a-bcrypt-hash") is False


def test_passwords_longer_than_bcrypt_limit_are_accepted():
    digest = hash_password_sync("x" * 100, rounds=4)

    assert verify_password_sync("x" * 100, digest)


async def test_async_hashing_round_trip():
    digest = await hash_password("async-password", rounds=4)

    assert await verify_password("async-password", digest)


def test_tokens_are_random_hex():
    tokens = {generate_token() for _ in range(10)}

    assert len(tokens) == 10
    assert all(len(token) == 64 and int(token, 16) >= 0 for token in tokens)


def test_jwt_round_trip_and_expiry():
    token = create_jwt_token({"sub": "user-1", "sid": "session-1"}, expires_delta=timedelta(minutes=5))
    expired = create_jwt_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-10))

    assert decode_jwt_token(token)["sid"] == "session-1"
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_jwt_token(expired)
    assert decode_jwt_token(expired, verify_exp=False)["sub"] == "user-1"


def test_session_cookie_attributes():
    response = Response()
    set_auth_cookie(response, "token-value", timedelta(days=7))

    cookie = response.headers["set-cookie"]
    assert "auth_token=token-value" in cookie
    assert "HttpOnly" in cookie
    assert "SameSite=lax" in cookie
    assert "Max-Age=604800" in cookie
    assert "Secure" not in cookie


def test_clear_cookie_expires_immediately():
    response = Response()
    clear_auth_cookie(response)

    assert "Max-Age=0" in response.headers["set-cookie"]


async def test_email_client_logs_in_development_mode():
    client = EmailClient(api_key="", default_sender="noreply@example.com")

    result = await client.send_email("a@example.com", "Subject", "text", "<p>html</p>")

    assert result["status"] == "logged"


async def test_email_client_posts_to_provider():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["auth"] = request.headers["Authorization"]
        captured["payload"] = json.loads(request.content)
        return httpx.Response(202)

    client = EmailClient(api_key="key-123", default_sender="noreply@example.com", transport=httpx.MockTransport(handler))
    mailer = AccountMailer(client, base_url="https://learn.example.com/")

    result = await mailer.send_verification_email("a@example.com", "abc123", "Aigerim")

    assert result["status"] == "sent"
    assert captured["auth"] == "Bearer key-123"
    payload = captured["payload"]
    assert payload["personalizations"][0]["to"][0]["email"] == "a@example.com"
    assert payload["from"]["email"] == "noreply@example.com"
    assert [part["type"] for part in payload["content"]] == ["text/plain", "text/html"]
    assert "https://learn.example.com/verify-email?token=abc123" in payload["content"][0]["value"]


async def test_email_client_raises_on_rejection():
    client = EmailClient(
        api_key="key-123",
        default_sender="noreply@example.com",
        transport=httpx.MockTransport(lambda request: httpx.Response(401, text="bad key")),
    )

    with pytest.raises(EmailDeliveryError):
        await client.send_email("a@example.com", "Subject", "text", "<p>html</p>")
