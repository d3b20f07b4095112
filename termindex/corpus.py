from __future__ import annotations

from pathlib import Path


def load_docs_from_dir(directory: str | Path) -> list[tuple[str, str]]:
    """Load all .txt files (non-recursive, sorted by name) as (stem, text)."""
    folder = Path(directory)
    if not folder.is_dir():
        raise FileNotFoundError(f"Not a directory: {folder}")
    files = sorted(folder.glob("*.txt"))
    return [(p.stem, p.read_text(encoding="utf-8", errors="ignore")) for p in files]
