import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import Settings
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.roles import SeedRolesUseCase
from src.depends import get_email_sender, get_unit_of_work
from tests.fixtures.email_outbox import RecordingEmailSender
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.api_client import bearer, register


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
def settings():
    return Settings(
        BCRYPT_ROUNDS=4,
        JWT_SECRET="test-secret",
        ADMIN_EMAIL="office@example.com",
        FRONTEND_URL="http://frontend.test",
        SMTP_HOST="",
    )


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        await SeedRolesUseCase(SqlAlchemyUnitOfWork(session)).execute()
        yield session


@pytest_asyncio.fixture
def outbox():
    return RecordingEmailSender()


@pytest_asyncio.fixture
async def client(db_session, settings, outbox):
    from src.api.app import create_app

    app = create_app(settings)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_email_sender] = lambda: outbox

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_headers(client, test_data):
    data = await register(client, test_data.get_copy("admin"))
    return bearer(data["token"])


@pytest_asyncio.fixture
async def editor_headers(client, test_data):
    data = await register(client, test_data.get_copy("editor"))
    return bearer(data["token"])


@pytest_asyncio.fixture
async def user_headers(client, test_data):
    data = await register(client, test_data.get_copy("alice"))
    return bearer(data["token"])
