import json
import logging
import os
from decimal import InvalidOperation
from pathlib import Path

from carrental.exceptions import RentalAppError
from carrental.services.accounts import AccountDirectory
from carrental.services.catalog import VehicleCatalog
from carrental.utils.constants import SNAPSHOT_VERSION

logger = logging.getLogger(__name__)

# ---- Paths ----
BASE_DIR = Path(__file__).resolve().parents[2]
DEFAULT_DATA_PATH = BASE_DIR / "data.json"


class Store:
    """
    Owns the vehicle catalog and the account directory, and reads/writes
    them as one versioned JSON snapshot.
    """

    def __init__(self, path: str | os.PathLike | None = None, seed: bool = True):
        self.path = str(path or DEFAULT_DATA_PATH)
        self.catalog = VehicleCatalog()
        self.directory = AccountDirectory()

        logger.info("Using file: %s", self.path)
        self._load()

        # Default fleet only when nothing was loaded
        if seed and not len(self.catalog) and not len(self.directory):
            self.catalog.seed()

    # ---------- Snapshot ----------
    def snapshot(self) -> dict:
        return {
            "version": SNAPSHOT_VERSION,
            "vehicles": self.catalog.to_snapshot(),
            "customers": self.directory.to_snapshot(),
        }

    def restore(self, data: dict) -> None:
        """Replace catalog and directory with the contents of a snapshot dict."""
        if not isinstance(data, dict) or data.get("version") != SNAPSHOT_VERSION:
            found = data.get("version") if isinstance(data, dict) else type(data).__name__
            raise ValueError(f"Unsupported snapshot version: {found!r}")
        catalog = VehicleCatalog.from_snapshot(data.get("vehicles") or [])
        directory = AccountDirectory.from_snapshot(data.get("customers") or [])
        self.catalog, self.directory = catalog, directory

    # ---------- Persistence ----------
    def _load(self):
        """Load the snapshot file, or start empty if unavailable or invalid."""
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.restore(data)
        except OSError as e:
            logger.warning("Load failed (%s); starting empty.", e)
            return
        except (ValueError, KeyError, TypeError, AttributeError, InvalidOperation, RentalAppError) as e:
            # Incompatible or corrupt snapshot: back up the old file and start empty
            bak = self.path + ".bak"
            try:
                os.replace(self.path, bak)
                logger.warning("Incompatible store (%s); backed up to %s. Starting empty.", e, bak)
            except OSError as err:
                logger.error("Backup failed: %s", err)
            return

        logger.info("Loaded: customers=%d, vehicles=%d", len(self.directory), len(self.catalog))

    def _dump(self):
        """Write the snapshot to disk safely (atomic replace)."""
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self.snapshot(), f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, self.path)

    def save(self):
        logger.info("Saving to %s ...", self.path)
        self._dump()

    def clear(self):
        self.catalog.clear()
        self.directory.clear()
