import logging
import os
import tempfile
from pathlib import Path

from blobvault.domain.errors import IOFailure

logger = logging.getLogger(__name__)

TMP_PREFIX = ".tmp-"


class BlobStore:
    def __init__(self, root: Path) -> None:
        self._root = Path(root)

    def ensure_root(self) -> None:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure(e) from e
        logger.info("Storage init done: %s", self._root)

    def persist(self, path: Path, data: bytes) -> bool:
        """Store `data` at `path` unless something is already there.

        Returns True if this call published the file, False if it already
        existed. The bytes go to a temp file in the same directory first and
        are published with a hard link, which fails instead of overwriting,
        so the final path only ever holds complete content.
        """
        tmp_name: str | None = None
        try:
            # exists() re-raises stat errors such as ENAMETOOLONG or EACCES.
            if path.exists():
                return False
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                dir=path.parent, prefix=TMP_PREFIX, delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            try:
                os.link(tmp_name, path)
            except FileExistsError:
                # Lost the race to a concurrent upload of the same content.
                return False
            return True
        except OSError as e:
            raise IOFailure(e) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except FileNotFoundError:
                    pass
