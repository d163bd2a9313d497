import asyncio

import pytest
from sqlalchemy import func, select

from conftest import register, register_verified_and_login
from literacy.models.user import User
from literacy.models.userprogress import UserProgress
from literacy.services.ProgressAggregator import ProgressAggregator


@pytest.fixture
async def user_id(client, db):
    response = await register(client)
    return response.json()["userId"]


@pytest.fixture
def aggregator():
    return ProgressAggregator()


async def test_first_upsert_inserts_patch(db, aggregator, user_id):
    row = await aggregator.upsert(db, user_id, "m1", content_completed=True)
    await db.commit()

    assert row.content_completed is True
    assert row.quiz_completed is False
    assert row.best_score is None
    assert row.updated_at is not None


async def test_best_score_never_decreases(db, aggregator, user_id):
    await aggregator.upsert(db, user_id, "m1", best_score=3)
    row = await aggregator.upsert(db, user_id, "m1", best_score=1)
    await db.commit()

    assert row.best_score == 3


async def test_best_score_rises(db, aggregator, user_id):
    await aggregator.upsert(db, user_id, "m1", best_score=1)
    row = await aggregator.upsert(db, user_id, "m1", best_score=4)

    assert row.best_score == 4


async def test_zero_score_over_missing_best_score(db, aggregator, user_id):
    await aggregator.upsert(db, user_id, "m1", content_completed=True)
    row = await aggregator.upsert(db, user_id, "m1", best_score=0)

    assert row.best_score == 0


async def test_flags_do_not_regress_when_omitted(db, aggregator, user_id):
    await aggregator.upsert(db, user_id, "m1", quiz_completed=True, best_score=2)
    row = await aggregator.upsert(db, user_id, "m1", content_completed=True)

    assert row.quiz_completed is True
    assert row.content_completed is True
    assert row.best_score == 2


async def test_upsert_refreshes_updated_at(db, aggregator, user_id):
    first = await aggregator.upsert(db, user_id, "m1", content_completed=True)
    first_updated = first.updated_at
    second = await aggregator.upsert(db, user_id, "m1", content_completed=True)

    assert second.updated_at >= first_updated


async def test_one_row_per_user_and_module(db, aggregator, user_id):
    for score in (1, 2, 3):
        await aggregator.upsert(db, user_id, "m1", best_score=score)
    await aggregator.upsert(db, user_id, "m2", content_completed=True)
    await db.commit()

    count = await db.scalar(select(func.count()).select_from(UserProgress))
    rows = await aggregator.list_for_user(db, user_id)
    assert count == 2
    assert {row.module_id for row in rows} == {"m1", "m2"}


async def test_concurrent_upserts_keep_the_maximum(db_manager, aggregator, user_id):
    async def upsert(score, **flags):
        async with db_manager.session_factory() as session:
            await aggregator.upsert(session, user_id, "m1", best_score=score, **flags)
            await session.commit()

    await asyncio.gather(
        upsert(2, quiz_completed=True),
        upsert(5),
        upsert(3, content_completed=True),
    )

    async with db_manager.session_factory() as session:
        row = await aggregator.get_for_user(session, user_id, "m1")
    assert row.best_score == 5
    assert row.quiz_completed is True
    assert row.content_completed is True


async def test_content_completed_endpoint(client, mailer):
    await register_verified_and_login(client, mailer)

    response = await client.post("/api/progress/m1/content-completed")

    assert response.status_code == 200
    body = response.json()
    assert body["moduleId"] == "m1"
    assert body["contentCompleted"] is True
    assert body["quizCompleted"] is False
    assert body["bestScore"] is None

    listed = (await client.get("/api/progress")).json()
    assert [row["moduleId"] for row in listed] == ["m1"]


async def test_content_completed_for_unknown_module(client, mailer):
    await register_verified_and_login(client, mailer)

    response = await client.post("/api/progress/nope/content-completed")

    assert response.status_code == 404


async def test_progress_requires_authentication(client):
    assert (await client.get("/api/progress")).status_code == 401
    assert (await client.post("/api/progress/m1/content-completed")).status_code == 401


async def test_progress_is_private_to_each_user(client, mailer, db):
    await register_verified_and_login(client, mailer, email="first@example.com")
    await client.post("/api/progress/m1/content-completed")
    await client.post("/api/auth/logout")

    await register_verified_and_login(client, mailer, email="second@example.com")
    listed = (await client.get("/api/progress")).json()

    assert listed == []
    assert await db.scalar(select(func.count()).select_from(User)) == 2
