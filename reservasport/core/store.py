"""JSON document store holding the whole application state."""
import asyncio
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Union

from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from reservasport.core.config import settings
from reservasport.core.exceptions import StoreError
from reservasport.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


SEED_DATA = {
    "courts": [
        {
            "id": 1,
            "nombre": "Cancha 1",
            "tipo": "Fútbol 5",
            "tarifa": 25000,
            "activa": True,
            "time_slots": ["08:00", "09:00", "10:00", "11:00", "17:00", "18:00", "19:00", "20:00", "21:00"],
        },
        {
            "id": 2,
            "nombre": "Cancha 2",
            "tipo": "Pádel",
            "tarifa": 18000,
            "activa": True,
            "time_slots": ["09:00", "10:00", "11:00", "18:00", "19:00", "20:00"],
        },
        {
            "id": 3,
            "nombre": "Cancha 3",
            "tipo": "Tenis",
            "tarifa": 15000,
            "activa": False,
            "time_slots": ["08:00", "09:00", "10:00"],
        },
    ],
    "time_slots": [
        {"id": f"{hour:02d}:00", "label": f"{hour:02d}:00 - {hour + 1:02d}:00"}
        for hour in range(8, 22)
    ],
    "reservations": [],
    "nextReservationId": 1,
    "adminTokens": {},
}


class JsonStore:
    """
    Loads and persists a Snapshot as one JSON document.

    Mutating requests go through `transaction()`, which holds a single
    in-process lock across load, check and write so that concurrent
    requests cannot interleave between reading the ledger and saving it.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def initialize(self) -> None:
        """Write the seed document if the data file does not exist yet."""
        if self.path.exists():
            return
        logger.info(f"Data file {self.path} not found, writing seed data")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.save(Snapshot.model_validate(SEED_DATA))

    def load(self) -> Snapshot:
        """
        Read the full snapshot from disk.

        Raises:
            StoreError: If the file cannot be read or is not a valid document
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Error reading data file {self.path}: {e}", exc_info=True)
            raise StoreError("No se pudo leer el archivo de datos.") from e

        try:
            return Snapshot.model_validate_json(raw)
        except ValidationError as e:
            logger.error(f"Data file {self.path} is corrupt: {e}")
            raise StoreError("El archivo de datos está corrupto.") from e

    def save(self, snapshot: Snapshot) -> None:
        """
        Write the full snapshot to disk.

        The document is written to a temporary file in the same directory
        and renamed over the data file.

        Raises:
            StoreError: If the file cannot be written
        """
        document = snapshot.model_dump_json(by_alias=True, indent=2)
        try:
            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(document)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Error writing data file {self.path}: {e}", exc_info=True)
            raise StoreError("No se pudo guardar el archivo de datos.") from e

    async def read(self) -> Snapshot:
        """Load a snapshot for a read-only request, off the event loop."""
        return await run_in_threadpool(self.load)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Snapshot]:
        """
        Serialize a load-modify-save cycle.

        The snapshot is saved when the block exits normally and its content
        changed. An exception leaves the data file untouched. Disk access
        runs in the threadpool while the lock is held.
        """
        async with self._lock:
            snapshot = await run_in_threadpool(self.load)
            before = snapshot.model_dump(by_alias=True)
            yield snapshot
            if snapshot.model_dump(by_alias=True) != before:
                await run_in_threadpool(self.save, snapshot)


store = JsonStore(settings.DATA_FILE)


def get_store() -> JsonStore:
    """Dependency for getting the application store."""
    return store
