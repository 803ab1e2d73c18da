#!/usr/bin/env python3
"""
Database Reset Script
Reset PostgreSQL database structure

Features:
1. Drop & Recreate Database - completely wipe the database
2. Run Alembic Migrations - create the latest schema

Notes:
- This script only resets database structure, does not seed test data
- To seed test data, run `python -m script.seed_data`
"""

import asyncio
import os
import subprocess

import asyncpg

from src.platform.config.core_setting import settings
from src.platform.constant.path import ALEMBIC_INI, BASE_DIR


DB_WAIT_SECONDS = 1


def _admin_dsn() -> str:
    """DSN of the maintenance database on the same server"""
    return (
        f'postgresql://{settings.POSTGRES_USER}:{settings.POSTGRES_PASSWORD.get_secret_value()}'
        f'@{settings.POSTGRES_SERVER}:{settings.POSTGRES_PORT}/postgres'
    )


async def _drop_and_create_db(db_name: str) -> None:
    """Drop and recreate database"""
    conn = await asyncpg.connect(_admin_dsn())

    try:
        await conn.execute(
            """
            SELECT pg_terminate_backend(pid)
            FROM pg_stat_activity
            WHERE datname = $1 AND pid <> pg_backend_pid()
            """,
            db_name,
        )

        await conn.execute(f'DROP DATABASE IF EXISTS "{db_name}"')
        print(f"   ✅ Database '{db_name}' dropped")

        await asyncio.sleep(DB_WAIT_SECONDS)

        await conn.execute(f'CREATE DATABASE "{db_name}"')
        print(f"   ✅ Database '{db_name}' created")
    finally:
        await conn.close()


def _run_alembic_migrations() -> None:
    """Run Alembic migrations"""
    print("   🔄 Running 'alembic upgrade head'...")

    result = subprocess.run(
        ['alembic', '-c', str(ALEMBIC_INI), 'upgrade', 'head'],
        cwd=BASE_DIR,
        capture_output=True,
        text=True,
        env=os.environ.copy(),
    )

    if result.returncode != 0:
        print(f'   ❌ Migration failed (return code: {result.returncode})')
        if result.stdout:
            print(f'   📋 STDOUT: {result.stdout}')
        if result.stderr:
            print(f'   📋 STDERR: {result.stderr}')
        raise RuntimeError(f'Alembic migration failed with return code {result.returncode}')

    print('   ✅ Database migrations completed')


async def main():
    print('🔄 Starting database reset...')
    print('=' * 50)

    db_name = settings.POSTGRES_DB
    print(f'Server: {settings.POSTGRES_SERVER}:{settings.POSTGRES_PORT}')
    print(f'Database name: {db_name}')

    try:
        print('🗑️ Dropping database...')
        await _drop_and_create_db(db_name)

        print('🏗️ Running database migrations...')
        _run_alembic_migrations()

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed test data, run: python -m script.seed_data')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        exit(1)


if __name__ == '__main__':
    asyncio.run(main())
