"""Development Seed — roles, admin account, rarities, category tree, sample items.

Invariants:
    - Idempotent: rows are matched by their unique name and only missing ones are inserted
    - Sample items are inserted only into an empty items table
    - Runs outside FastAPI: uses db/session.py's factory, not DatabaseSessionManager

Usage:
    python -m game_catalog.db.seed
"""

import asyncio
import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.config import get_settings
from game_catalog.core.domain_types import Role
from game_catalog.db.session import create_session_factory
from game_catalog.infrastructure.observability import setup_logging
from game_catalog.infrastructure.security import hash_password
from game_catalog.models.category import Category
from game_catalog.models.item import Item
from game_catalog.models.rarity import Rarity
from game_catalog.models.role import RoleModel
from game_catalog.models.user import User

logger = logging.getLogger(__name__)

ROLES = [
    (Role.ADMIN.value, "Administrator with full access"),
    (Role.PLAYER.value, "Regular player account"),
]

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"

RARITIES = [
    ("Common", "#AAAAAA", Decimal("70.00")),
    ("Uncommon", "#00AA00", Decimal("20.00")),
    ("Rare", "#0000AA", Decimal("8.00")),
    ("Epic", "#AA00AA", Decimal("1.50")),
    ("Legendary", "#FFA500", Decimal("0.50")),
]

# parent name -> (description, [(child name, child description)])
CATEGORY_TREE = {
    "Weapons": ("Items used to deal damage", [
        ("Swords", "Melee weapons"),
        ("Bows", "Ranged weapons"),
        ("Staves", "Magic weapons"),
    ]),
    "Armor": ("Items used for protection", [
        ("Helmets", "Head protection"),
        ("Chestplates", "Body protection"),
    ]),
    "Consumables": ("Items that can be used once", [
        ("Potions", "Magical brews"),
        ("Scrolls", "Magical writings"),
    ]),
    "Materials": ("Crafting materials", [
        ("Ores", "Metal materials"),
        ("Gems", "Precious stones"),
    ]),
}

# (name, description, price, level, category, rarity, stats)
SAMPLE_ITEMS = [
    ("Iron Sword", "A basic sword made of iron", 100, 1, "Swords", "Common",
     {"attack": 10, "durability": 100}),
    ("Steel Sword", "A well-crafted sword made of steel", 250, 5, "Swords", "Uncommon",
     {"attack": 20, "durability": 150}),
    ("Flaming Blade", "A magical sword imbued with fire", 1000, 15, "Swords", "Rare",
     {"attack": 35, "fire_damage": 15, "durability": 200}),
    ("Elven Bow", "A finely crafted bow from elven woods", 250, 5, "Bows", "Uncommon",
     {"attack": 15, "range": 30, "durability": 80}),
    ("Staff of Fireballs", "Shoots powerful fireballs", 500, 10, "Staves", "Rare",
     {"attack": 8, "magic": 25, "durability": 60}),
    ("Iron Helmet", "Basic head protection", 80, 1, "Helmets", "Common",
     {"defense": 5, "durability": 100}),
    ("Steel Chestplate", "Solid chest protection", 200, 5, "Chestplates", "Uncommon",
     {"defense": 20, "durability": 150}),
    ("Health Potion", "Restores 50 health points", 25, 1, "Potions", "Common",
     {"restore_health": 50, "instant": True}),
    ("Mana Potion", "Restores 50 mana points", 25, 1, "Potions", "Common",
     {"restore_mana": 50, "instant": True}),
    ("Scroll of Teleportation", "Teleports to a saved location", 100, 10, "Scrolls", "Rare",
     {"uses": 1}),
    ("Iron Ore", "Used for crafting iron items", 10, 1, "Ores", "Common",
     {"purity": 0.8}),
    ("Ruby", "A precious red gemstone", 150, 1, "Gems", "Rare",
     {"quality": 0.9, "size": "medium"}),
]


async def _by_name(db: AsyncSession, model, name: str):
    return await db.scalar(select(model).where(model.name == name))


async def seed_roles(db: AsyncSession) -> dict[str, RoleModel]:
    roles = {}
    for name, description in ROLES:
        role = await _by_name(db, RoleModel, name)
        if role is None:
            role = RoleModel(name=name, description=description)
            db.add(role)
            logger.info(f"Seeding role '{name}'")
        roles[name] = role
    await db.flush()
    return roles


async def seed_admin(db: AsyncSession, admin_role: RoleModel, rounds: int) -> None:
    existing = await db.scalar(select(User).where(User.username == ADMIN_USERNAME))
    if existing is not None:
        logger.info("Admin user already exists, skipping")
        return
    password_hash = await asyncio.to_thread(hash_password, ADMIN_PASSWORD, rounds)
    db.add(User(
        username=ADMIN_USERNAME,
        email=ADMIN_EMAIL,
        password_hash=password_hash,
        role_id=admin_role.id,
    ))
    logger.info("Seeding admin user")


async def seed_rarities(db: AsyncSession) -> dict[str, Rarity]:
    rarities = {}
    for name, color_code, drop_chance in RARITIES:
        rarity = await _by_name(db, Rarity, name)
        if rarity is None:
            rarity = Rarity(name=name, color_code=color_code, drop_chance=drop_chance)
            db.add(rarity)
            logger.info(f"Seeding rarity '{name}'")
        rarities[name] = rarity
    await db.flush()
    return rarities


async def seed_categories(db: AsyncSession) -> dict[str, Category]:
    categories = {}
    for parent_name, (description, children) in CATEGORY_TREE.items():
        parent = await _by_name(db, Category, parent_name)
        if parent is None:
            parent = Category(name=parent_name, description=description)
            db.add(parent)
            await db.flush()
            logger.info(f"Seeding category '{parent_name}'")
        categories[parent_name] = parent
        for child_name, child_description in children:
            child = await _by_name(db, Category, child_name)
            if child is None:
                child = Category(
                    name=child_name, description=child_description,
                    parent_id=parent.id,
                )
                db.add(child)
            categories[child_name] = child
    await db.flush()
    return categories


async def seed_items(
    db: AsyncSession,
    categories: dict[str, Category],
    rarities: dict[str, Rarity],
) -> None:
    count = await db.scalar(select(func.count(Item.id)))
    if count:
        logger.info("Items already exist, skipping")
        return
    for name, description, price, level, category, rarity, stats in SAMPLE_ITEMS:
        db.add(Item(
            name=name,
            description=description,
            price=price,
            level_requirement=level,
            category_id=categories[category].id,
            rarity_id=rarities[rarity].id,
            stats=stats,
            is_tradable=True,
        ))
    logger.info(f"Seeding {len(SAMPLE_ITEMS)} sample items")


async def seed(db: AsyncSession, bcrypt_rounds: int = 12) -> None:
    """Insert every missing seed row and commit once."""
    roles = await seed_roles(db)
    await seed_admin(db, roles[Role.ADMIN.value], bcrypt_rounds)
    rarities = await seed_rarities(db)
    categories = await seed_categories(db)
    await seed_items(db, categories, rarities)
    await db.commit()


async def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    session_factory = create_session_factory(settings.database_url)
    async with session_factory() as db:
        await seed(db, settings.bcrypt_rounds)
        await db.bind.dispose()
    logger.info("Database seeding completed")


if __name__ == "__main__":
    asyncio.run(main())
