from carrental import create_app
from carrental.controllers.cli import DEMO_ACCOUNT, ensure_customer


def main():
    app = create_app()
    with app.app_context():
        store = app.extensions["carrental.store"]

        # ---- Demo account ----
        ensure_customer(store, *DEMO_ACCOUNT)

        # ---- Default fleet (existing vehicles are kept) ----
        added = store.catalog.seed()

        store.save()

        print(f"Seed complete ({added} vehicle(s) added).")
        print(f"Demo login: {DEMO_ACCOUNT[0]} / {DEMO_ACCOUNT[2]}")


if __name__ == "__main__":
    main()
