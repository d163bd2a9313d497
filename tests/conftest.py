import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["SENDGRID_API_KEY"] = ""

import pytest
from httpx import ASGITransport, AsyncClient

from literacy.core.database import DatabaseSessionManager, aget_db
from literacy.core.dependencies import get_session_authority
from literacy.main import app
from literacy.services.CredentialStore import CredentialStore
from literacy.services.SessionAuthority import SessionAuthority
from literacy.utils.seed.seed_catalog import seed_catalog

# Module "m1": five questions whose correct indices are [0, 1, 2, 3, 0].
TEST_CATALOG = [
    {
        "id": "m1",
        "title": "Module One",
        "description": "First module",
        "content": "Read me first.",
        "icon": "monitor",
        "order_index": 1,
        "questions": [
            {"question_text": f"Question {n}", "options": ["a", "b", "c", "d"], "correct_answer": answer}
            for n, answer in enumerate([0, 1, 2, 3, 0], start=1)
        ],
    },
    {
        "id": "m2",
        "title": "Module Two",
        "description": "Module without a quiz",
        "content": "Nothing to answer here.",
        "icon": "folder",
        "order_index": 2,
        "questions": [],
    },
]

M1_QUESTION_IDS = [f"m1-q{n}" for n in range(1, 6)]
PASSWORD = "correct-horse-battery"


class FakeMailer:
    """Captures outgoing account emails instead of sending them."""

    def __init__(self):
        self.verifications = []
        self.resets = []
        self.fail = False

    async def send_verification_email(self, email, token, first_name):
        if self.fail:
            raise RuntimeError("mail provider down")
        self.verifications.append({"email": email, "token": token, "first_name": first_name})
        return {"success": True}

    async def send_password_reset_email(self, email, token, first_name):
        if self.fail:
            raise RuntimeError("mail provider down")
        self.resets.append({"email": email, "token": token, "first_name": first_name})
        return {"success": True}

    def token_for(self, email):
        return [sent["token"] for sent in self.verifications if sent["email"] == email][-1]


@pytest.fixture
async def db_manager(tmp_path):
    manager = DatabaseSessionManager()
    await manager.init(f"sqlite+aiosqlite:///{tmp_path / 'test.sqlite'}")
    async with manager.get_session() as session:
        await seed_catalog(session, TEST_CATALOG)
    yield manager
    await manager.close()


@pytest.fixture
async def db(db_manager):
    async with db_manager.session_factory() as session:
        yield session


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def require_verification():
    return True


@pytest.fixture
def authority(mailer, require_verification):
    return SessionAuthority(
        credential_store=CredentialStore(),
        mailer=mailer,
        require_email_verification=require_verification,
        bcrypt_rounds=4,
    )


@pytest.fixture
async def client(db_manager, authority):
    async def override_db():
        async with db_manager.get_session() as session:
            yield session

    app.dependency_overrides[aget_db] = override_db
    app.dependency_overrides[get_session_authority] = lambda: authority
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()


async def register(client, email="learner@example.com", password=PASSWORD):
    return await client.post("/api/auth/register", json={
        "email": email,
        "password": password,
        "firstName": "Aigerim",
        "lastName": "Nurlanovna",
    })


async def register_verified_and_login(client, mailer, email="learner@example.com", password=PASSWORD):
    await register(client, email, password)
    await client.post("/api/auth/verify-email", json={"token": mailer.token_for(email)})
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response
