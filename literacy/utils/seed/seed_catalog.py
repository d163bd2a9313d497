import logging
from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from literacy.models.module import Module, Question
from literacy.utils.seed.catalog import CATALOG

logger = logging.getLogger(__name__)


def question_id(module_id: str, position: int) -> str:
    """Stable question ids so submitted answers survive a restart."""
    return f"{module_id}-q{position}"


async def seed_catalog(db: AsyncSession, catalog: List[dict] = CATALOG, force: bool = False) -> int:
    """
    Load the catalog into the database.

    Modules are upserted by id. A module's questions are written only when it
    has none yet, or when ``force`` is set (existing questions are replaced).

    Returns the number of questions written.
    """
    written = 0
    for entry in catalog:
        module_fields = {key: value for key, value in entry.items() if key != "questions"}
        await db.merge(Module(**module_fields))

        existing = await db.scalar(
            select(func.count()).select_from(Question).where(Question.module_id == entry["id"])
        )
        if existing and not force:
            continue
        if existing:
            await db.execute(delete(Question).where(Question.module_id == entry["id"]))

        for position, question in enumerate(entry.get("questions", []), start=1):
            db.add(Question(
                id=question_id(entry["id"], position),
                module_id=entry["id"],
                question_text=question["question_text"],
                options=list(question["options"]),
                correct_answer=question["correct_answer"],
                order_index=question.get("order_index", position),
            ))
            written += 1

    await db.commit()
    logger.info(f"Catalog seeded: {len(catalog)} modules, {written} questions written")
    return written
