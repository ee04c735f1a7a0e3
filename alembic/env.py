from alembic import context
from sqlalchemy import pool

from guest_order.core.config import settings
from guest_order.db.session import Base, create_db_engine
import guest_order.db.models  # noqa: F401  (registers tables on Base.metadata)

# Shares the database with other services; keep our own revision history.
VERSION_TABLE = "alembic_version_guest_order"

def run_migrations_offline():
    context.configure(
        url=settings.POSTGRES_DSN,
        target_metadata=Base.metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        version_table=VERSION_TABLE,
    )
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    engine = create_db_engine(settings.POSTGRES_DSN, poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=Base.metadata, version_table=VERSION_TABLE)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
