import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import Settings
from src.api.app import create_app
from src.domain.entities import Role


@pytest.mark.asyncio
async def test_lifespan_uses_database_from_settings(tmp_path):
    db_uri = f"sqlite+aiosqlite:///{tmp_path / 'factory.db'}"
    app = create_app(Settings(DB_URI=db_uri, SMTP_HOST=""))

    assert str(app.state.engine.url) == db_uri

    async with app.router.lifespan_context(app):
        pass

    engine = create_async_engine(db_uri)
    async with AsyncSession(engine) as session:
        names = {role.name for role in (await session.exec(select(Role))).all()}
    await engine.dispose()

    assert {"admin", "editor", "user"} <= names
