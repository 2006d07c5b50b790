"""Service test fixtures — async DB, seeded catalog rows, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - db_manager patched so the readiness probe hits the test engine
    - Tokens are issued with the same settings the app verifies them with

Design Decisions:
    - SQLite in-memory over StaticPool: every session shares the one connection
      that holds the schema
    - Catalog fixtures build on each other (roles → users, categories → items)
      so a test asks only for what it reads
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from game_catalog.config import get_settings
from game_catalog.core.domain_types import Role
from game_catalog.db.base import Base
from game_catalog.infrastructure.database import get_db, DatabaseSessionManager
from game_catalog.infrastructure.security import hash_password, issue_token
from game_catalog.models.category import Category
from game_catalog.models.item import Item
from game_catalog.models.rarity import Rarity
from game_catalog.models.role import RoleModel
from game_catalog.models.user import User
import game_catalog.infrastructure.database as db_module
from game_catalog.main import app

TEST_PASSWORD = "secret123"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Accounts ────────────────────────────────────────────────────

@pytest.fixture
async def roles(test_db):
    admin = RoleModel(name=Role.ADMIN.value, description="Administrator")
    player = RoleModel(name=Role.PLAYER.value, description="Player")
    test_db.add_all([admin, player])
    await test_db.commit()
    return {Role.ADMIN: admin, Role.PLAYER: player}


async def _make_user(db, username: str, role: RoleModel) -> User:
    user = User(
        username=username,
        email=f"{username}@example.com",
        password_hash=hash_password(TEST_PASSWORD, rounds=4),
        role_id=role.id,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user, ["role"])
    return user


@pytest.fixture
async def admin_user(test_db, roles):
    return await _make_user(test_db, "admin", roles[Role.ADMIN])


@pytest.fixture
async def player_user(test_db, roles):
    return await _make_user(test_db, "player", roles[Role.PLAYER])


@pytest.fixture
async def other_player(test_db, roles):
    return await _make_user(test_db, "other", roles[Role.PLAYER])


@pytest.fixture
def user_password():
    return TEST_PASSWORD


def bearer_for(user: User, role: Role) -> dict:
    settings = get_settings()
    token = issue_token(
        user.id, user.username, role,
        secret=settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(admin_user):
    return bearer_for(admin_user, Role.ADMIN)


@pytest.fixture
def player_headers(player_user):
    return bearer_for(player_user, Role.PLAYER)


@pytest.fixture
def other_headers(other_player):
    return bearer_for(other_player, Role.PLAYER)


# ─── Catalog ─────────────────────────────────────────────────────

@pytest.fixture
async def rarities(test_db):
    common = Rarity(name="Common", color_code="#AAAAAA", drop_chance=70)
    rare = Rarity(name="Rare", color_code="#0000AA", drop_chance=8)
    test_db.add_all([common, rare])
    await test_db.commit()
    return {"Common": common, "Rare": rare}


@pytest.fixture
async def categories(test_db):
    """Weapons ─ Swords ─ Longswords, plus a standalone Armor root."""
    weapons = Category(name="Weapons", description="Items used to deal damage")
    armor = Category(name="Armor", description="Items used for protection")
    test_db.add_all([weapons, armor])
    await test_db.flush()
    swords = Category(name="Swords", description="Melee weapons", parent_id=weapons.id)
    test_db.add(swords)
    await test_db.flush()
    longswords = Category(name="Longswords", parent_id=swords.id)
    test_db.add(longswords)
    await test_db.commit()
    return {
        "Weapons": weapons, "Armor": armor,
        "Swords": swords, "Longswords": longswords,
    }


@pytest.fixture
async def items(test_db, categories, rarities):
    rows = [
        Item(
            name="Iron Sword", description="A basic sword made of iron",
            price=100, level_requirement=1,
            category_id=categories["Swords"].id, rarity_id=rarities["Common"].id,
            stats={"attack": 10, "durability": 100},
        ),
        Item(
            name="Steel Sword", description="A well-crafted sword made of steel",
            price=250, level_requirement=5,
            category_id=categories["Swords"].id, rarity_id=rarities["Common"].id,
            stats={"attack": 20, "durability": 150},
        ),
        Item(
            name="Flaming Blade", description="A magical sword imbued with fire",
            price=1000, level_requirement=15,
            category_id=categories["Swords"].id, rarity_id=rarities["Rare"].id,
            stats={"attack": 35, "fire_damage": 15, "enchanted": True},
        ),
        Item(
            name="Iron Helmet", description="Basic head protection",
            price=80, level_requirement=1,
            category_id=categories["Armor"].id, rarity_id=rarities["Common"].id,
            stats={"defense": 5},
        ),
        Item(
            name="Health Potion", description="Restores 50 health points",
            price=25, level_requirement=1,
            stats={"restore_health": 50, "instant": True},
        ),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return {item.name: item for item in rows}
