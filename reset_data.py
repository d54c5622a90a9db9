"""
reset_data.py
-------------
Utility script to clear all stored data (vehicles, customers and their
rental histories) from the local data.json snapshot.

Usage:
    $ python reset_data.py

After running this script, you can repopulate sample data by executing:
    $ python seeds.py
"""

from carrental import create_app


def main():
    """
    Clear all vehicles and accounts from the snapshot file.

    The app is built without seeding so the cleared state is what gets saved.
    """
    app = create_app({"SEED_ON_EMPTY": False})
    store = app.extensions["carrental.store"]

    store.clear()

    # Persist the cleared state to disk
    store.save()

    print(f"{store.path} has been successfully cleared.")
    print("Tip: Run `python seeds.py` to regenerate demo data.")


if __name__ == "__main__":
    main()
