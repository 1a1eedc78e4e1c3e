"""Sample database provisioning for the SQL tutorial."""

from pathlib import Path

import requests

from .settings import get_setting

# Caminho centralizado do banco. Mantemos no diretório data/raw para
# separar dados de código e facilitar backup.
DATA_DIR = Path(__file__).resolve().parents[2] / "data" / "raw"
DB_PATH = Path(get_setting("SQL_TUTOR_DB_PATH") or DATA_DIR / "northwind.db")
SAMPLE_DB_URL = get_setting(
    "SQL_TUTOR_DB_URL",
    "https://raw.githubusercontent.com/jpwhite3/northwind-SQLite3/main/dist/northwind.db",
)
SQLITE_MAGIC = b"SQLite format 3\x00"


def download_sample_db(url: str = None, dest: Path = None, timeout: int = 60) -> Path:
    """Stream the sample database to disk, replacing dest only on success."""
    url = url or SAMPLE_DB_URL
    dest = Path(dest or DB_PATH)
    dest.parent.mkdir(parents=True, exist_ok=True)
    partial = dest.with_name(dest.name + ".part")

    try:
        with requests.get(url, stream=True, timeout=timeout) as resp:
            if resp.status_code >= 400:
                raise RuntimeError(f"Download do banco respondeu {resp.status_code}: {resp.text[:200]}")
            with open(partial, "wb") as fh:
                for chunk in resp.iter_content(chunk_size=64 * 1024):
                    if chunk:
                        fh.write(chunk)

        with open(partial, "rb") as fh:
            header = fh.read(len(SQLITE_MAGIC))
        if header != SQLITE_MAGIC:
            raise RuntimeError(f"Arquivo baixado de {url} não é um banco SQLite.")
    except Exception:
        partial.unlink(missing_ok=True)
        raise

    partial.replace(dest)
    return dest


def ensure_db() -> Path:
    """Return the sample database path, downloading it once if it is missing."""
    if DB_PATH.exists():
        return DB_PATH
    print(f"⬇️  Banco de exemplo não encontrado, baixando de {SAMPLE_DB_URL}...")
    path = download_sample_db(SAMPLE_DB_URL, DB_PATH)
    print(f"✅ Banco salvo em {path}")
    return path


__all__ = ["ensure_db", "download_sample_db", "DB_PATH", "DATA_DIR", "SAMPLE_DB_URL"]
