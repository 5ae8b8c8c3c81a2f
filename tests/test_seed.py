from sqlalchemy import func, select

from registry_api.db.models import EquipmentComponentSparePart
from registry_api.db.seed import seed_all


async def test_seed_runs_once(db_session, seeded):
    assert await seed_all(db_session) is False
    count = (
        await db_session.execute(select(func.count()).select_from(EquipmentComponentSparePart))
    ).scalar_one()
    assert count == 16
