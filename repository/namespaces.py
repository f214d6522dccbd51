# repository/namespaces.py
from typing import Final

ROOT: Final[str] = "filelock"

FILENAMES: Final[str] = f"{ROOT}:filenames"  # JSON array, the claimable universe
CLAIMS: Final[str] = f"{ROOT}:claims"  # JSON array of claim records
SERVER_CONFIG: Final[str] = f"{ROOT}:server-config"  # hash, guild id -> JSON config
