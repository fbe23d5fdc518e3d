"""Creates the administrator account used to log in to the panel."""
import argparse
import getpass

import models
from database import SessionLocal, engine
from errors import Conflict
from services.auth_service import AuthService


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("email", help="administrator e-mail (login)")
    args = parser.parse_args()

    models.Base.metadata.create_all(bind=engine)

    password = getpass.getpass("Administrator password: ")
    if not password:
        print("No password given, aborting.")
        return

    db = SessionLocal()
    try:
        admin = AuthService(db).create_admin(args.email, password)
        print(f"Administrator '{admin.email}' created.")
    except Conflict:
        print(f"Administrator '{args.email}' already exists.")
    finally:
        db.close()


if __name__ == "__main__":
    main()
