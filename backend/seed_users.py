"""
Database seeding script for staff users.

SALE users cannot register through the API, so the first one is created here.
Run this script after the database is set up but before first use.

Environment:
    SEED_SALE_EMAIL     (default: sale@deliveries.com)
    SEED_SALE_PASSWORD  (default: sale123)
"""

import asyncio
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.app.db.session import AsyncSessionLocal, engine, Base
# Import models to ensure they are registered with Base
from backend.app.models.user import User
from backend.app.models.delivery import Delivery
from backend.app.models.delivery_log import DeliveryLog
from backend.app.models.audit_log import AuditLog
from backend.app.models.enums import UserRole
from backend.app.core.security import get_password_hash
from sqlalchemy import select


async def seed_users():
    """
    Seed the initial SALE user if it does not exist yet.
    """
    email = os.getenv("SEED_SALE_EMAIL", "sale@deliveries.com")
    password = os.getenv("SEED_SALE_PASSWORD", "sale123")
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    async with AsyncSessionLocal() as db:
        print("🌱 Starting user seeding...")
        
        result = await db.execute(select(User).where(User.email == email))
        if result.scalar_one_or_none():
            print(f"ℹ️  {email} already exists, skipping seeding")
            return
        
        sale_user = User(
            name="Sale Staff",
            email=email,
            password=get_password_hash(password),
            role=UserRole.SALE
        )
        db.add(sale_user)
        await db.commit()
        
        print(f"✅ Created SALE user ({email})")
        print("\nNote: CUSTOMER users register via POST /users")
    
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_users())
