from __future__ import annotations
import os
from pathlib import Path

def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(tmp, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        # pas de fichier partiel : ni la cible ni le .tmp
        tmp.unlink(missing_ok=True)
        raise

def atomic_write_text(path: Path | str, text: str) -> None:
    atomic_write(path, text.encode("utf-8"))
