from __future__ import annotations

import argparse
import getpass
import importlib

from dotenv import load_dotenv

from church_admin.config import get_settings_module
from church_admin.database.bootstrap import ensure_admin


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())

    parser = argparse.ArgumentParser(description="Create the admin account, or reset its password.")
    parser.add_argument("--username", default=getattr(settings, "ADMIN_USERNAME", "admin"))
    parser.add_argument("--password", default=None, help="Defaults to ADMIN_PASSWORD, or prompts when unset.")
    args = parser.parse_args()

    password = args.password or getattr(settings, "ADMIN_PASSWORD", None) or getpass.getpass("Password: ")
    admin_id = ensure_admin(dict(settings.DB_CONFIG), username=args.username, password=password)
    print(f"OK: admin '{args.username}' ready (id={admin_id})")


if __name__ == "__main__":
    main()
