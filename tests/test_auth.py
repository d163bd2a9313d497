from datetime import timedelta

import pytest
from sqlalchemy import delete, select

from conftest import PASSWORD, register, register_verified_and_login
from literacy.constants.constants import Message
from literacy.models.base import utcnow
from literacy.models.user import User


async def test_register_creates_unverified_user_and_sends_token(client, mailer, db):
    response = await register(client)

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == Message.registered.value
    assert body["userId"]

    assert len(mailer.verifications) == 1
    assert len(mailer.verifications[0]["token"]) == 64

    user = await db.scalar(select(User).where(User.user_id == body["userId"]))
    assert user.email_verified is False
    assert user.password_hash != PASSWORD


async def test_duplicate_email_is_rejected_and_first_user_untouched(client, mailer, db):
    first = await register(client)
    second = await client.post("/api/auth/register", json={
        "email": "learner@example.com",
        "password": "another-password",
        "firstName": "Someone",
        "lastName": "Else",
    })

    assert second.status_code == 400
    assert second.json()["message"] == Message.email_taken.value

    users = (await db.execute(select(User))).scalars().all()
    assert len(users) == 1
    assert users[0].user_id == first.json()["userId"]
    assert users[0].first_name == "Aigerim"


@pytest.mark.parametrize("payload", [
    {"email": "not-an-email", "password": PASSWORD, "firstName": "A", "lastName": "B"},
    {"email": "a@example.com", "password": "short", "firstName": "A", "lastName": "B"},
    {"email": "a@example.com", "password": PASSWORD, "firstName": "", "lastName": "B"},
    {"email": "a@example.com", "password": PASSWORD},
])
async def test_register_validation_errors(client, payload):
    response = await client.post("/api/auth/register", json=payload)

    assert response.status_code == 400
    assert response.json()["message"] == Message.invalid_data.value


async def test_register_succeeds_when_email_delivery_fails(client, mailer):
    mailer.fail = True

    response = await register(client)

    assert response.status_code == 201


async def test_verify_email_is_single_use(client, mailer):
    await register(client)
    token = mailer.token_for("learner@example.com")

    first = await client.post("/api/auth/verify-email", json={"token": token})
    second = await client.post("/api/auth/verify-email", json={"token": token})

    assert first.status_code == 200
    assert first.json()["message"] == Message.email_verified.value
    assert second.status_code == 400
    assert second.json()["message"] == Message.invalid_token.value


async def test_verify_email_rejects_expired_token(client, mailer, db):
    response = await register(client)
    user = await db.scalar(select(User).where(User.user_id == response.json()["userId"]))
    user.verification_token_expires = utcnow() - timedelta(minutes=1)
    await db.commit()

    result = await client.post("/api/auth/verify-email", json={"token": mailer.token_for("learner@example.com")})

    assert result.status_code == 400
    assert result.json()["message"] == Message.token_expired.value


async def test_login_failures_are_indistinguishable(client, mailer):
    await register_verified_and_login(client, mailer)
    await client.post("/api/auth/logout")

    wrong_password = await client.post("/api/auth/login", json={
        "email": "learner@example.com", "password": "not-the-password",
    })
    unknown_email = await client.post("/api/auth/login", json={
        "email": "nobody@example.com", "password": "not-the-password",
    })

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": Message.invalid_credentials.value}


async def test_login_with_empty_password(client):
    response = await client.post("/api/auth/login", json={"email": "learner@example.com", "password": ""})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == Message.invalid_data.value
    assert any(Message.password_required.value in error["msg"] for error in body["errors"])


async def test_login_refused_until_email_verified(client):
    await register(client)

    response = await client.post("/api/auth/login", json={"email": "learner@example.com", "password": PASSWORD})

    assert response.status_code == 403
    assert response.json()["message"] == Message.email_not_verified_login.value


async def test_unverified_wrong_password_gets_generic_error(client):
    await register(client)

    response = await client.post("/api/auth/login", json={"email": "learner@example.com", "password": "nope-nope"})

    assert response.status_code == 401
    assert response.json()["message"] == Message.invalid_credentials.value


@pytest.mark.parametrize("require_verification", [False])
async def test_login_without_verification_when_not_required(client):
    await register(client)

    response = await client.post("/api/auth/login", json={"email": "learner@example.com", "password": PASSWORD})
    me = await client.get("/api/auth/user")

    assert response.status_code == 200
    assert me.status_code == 200
    assert me.json()["emailVerified"] is False


async def test_login_sets_session_cookie_and_returns_summary(client, mailer):
    response = await register_verified_and_login(client, mailer)

    body = response.json()
    assert body["message"] == Message.login_success.value
    assert body["user"]["email"] == "learner@example.com"
    assert body["user"]["firstName"] == "Aigerim"
    assert "password" not in body["user"]
    set_cookie = response.headers["set-cookie"]
    assert "auth_token=" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "Max-Age=604800" in set_cookie


async def test_current_user_hides_password_hash_and_tokens(client, mailer):
    await register_verified_and_login(client, mailer)

    response = await client.get("/api/auth/user")

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "learner@example.com"
    assert body["emailVerified"] is True
    assert not {"password", "passwordHash", "verificationToken", "resetPasswordToken"} & set(body)


async def test_current_user_requires_session(client):
    response = await client.get("/api/auth/user")

    assert response.status_code == 401
    assert response.json()["message"] == Message.auth_required.value


async def test_forged_cookie_is_rejected(client):
    response = await client.get("/api/auth/user", headers={"Cookie": "auth_token=not-a-jwt"})

    assert response.status_code == 401


async def test_logout_is_idempotent_and_revokes_session(client, mailer):
    await register_verified_and_login(client, mailer)
    token = client.cookies.get("auth_token")

    first = await client.post("/api/auth/logout")
    second = await client.post("/api/auth/logout")

    assert first.status_code == second.status_code == 200
    assert first.json()["message"] == Message.logout_success.value

    reused = await client.get("/api/auth/user", headers={"Cookie": f"auth_token={token}"})
    assert reused.status_code == 401


async def test_session_of_deleted_user_is_rejected(client, mailer, db):
    await register_verified_and_login(client, mailer)
    await db.execute(delete(User).where(User.email == "learner@example.com"))
    await db.commit()

    response = await client.get("/api/auth/user")

    assert response.status_code == 401


async def test_password_reset_flow(client, mailer):
    await register_verified_and_login(client, mailer)
    old_token = client.cookies.get("auth_token")

    requested = await client.post("/api/auth/forgot-password", json={"email": "learner@example.com"})
    assert requested.status_code == 200
    reset_token = mailer.resets[-1]["token"]

    reset = await client.post("/api/auth/reset-password", json={"token": reset_token, "password": "brand-new-password"})
    assert reset.status_code == 200
    assert reset.json()["message"] == Message.password_reset.value

    revoked = await client.get("/api/auth/user", headers={"Cookie": f"auth_token={old_token}"})
    assert revoked.status_code == 401

    old_login = await client.post("/api/auth/login", json={"email": "learner@example.com", "password": PASSWORD})
    new_login = await client.post("/api/auth/login", json={"email": "learner@example.com", "password": "brand-new-password"})
    assert old_login.status_code == 401
    assert new_login.status_code == 200

    reused = await client.post("/api/auth/reset-password", json={"token": reset_token, "password": "another-password"})
    assert reused.status_code == 400


async def test_forgot_password_does_not_reveal_unknown_email(client, mailer):
    await register(client)

    known = await client.post("/api/auth/forgot-password", json={"email": "learner@example.com"})
    unknown = await client.post("/api/auth/forgot-password", json={"email": "nobody@example.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json()
    assert [sent["email"] for sent in mailer.resets] == ["learner@example.com"]
