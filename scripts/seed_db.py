from __future__ import annotations

import importlib

from dotenv import load_dotenv

from employee_management.core.logging_config import setup_logging
from employee_management.database.bootstrap import apply_seed_sql, ensure_demo_user
from employee_management.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    setup_logging("INFO")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config)
    ensure_demo_user(db_config)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
