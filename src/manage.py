"""Pizza Planet database management CLI.

Usage:
    python src/manage.py setup-db         # Create all tables
    python src/manage.py drop-db          # Drop all tables
    python src/manage.py seed-catalogue   # Insert the catalogue pizzas
"""

import argparse
import sys


def _domain():
    from pizzeria.domain import pizzeria

    print("Initializing pizzeria domain...")
    pizzeria.init()
    return pizzeria


def setup_database():
    """Create tables for accounts, customers, pizzas and orders."""
    from pizzeria.utils.db import setup_db

    domain = _domain()
    print("Creating pizzeria database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from pizzeria.utils.db import drop_db

    domain = _domain()
    print("Dropping pizzeria database schema...")
    drop_db(domain)
    print("Done.")


def seed():
    """Insert any catalogue pizza that is not stored yet."""
    from pizzeria.catalogue.seed import seed_catalogue

    domain = _domain()
    with domain.domain_context():
        inserted = seed_catalogue()
    print(f"Seeded {len(inserted)} catalogue pizza(s).")


def main():
    parser = argparse.ArgumentParser(description="Pizza Planet database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-catalogue", help="Insert the catalogue pizzas")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-catalogue":
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
