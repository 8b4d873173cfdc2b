from __future__ import annotations

from pathlib import Path
from typing import List, Union


def load_inputs(path: Union[str, Path]) -> List[str]:
    """
    Read Steam IDs from a text file, one per line.

    Blank lines and lines starting with ``#`` are skipped.
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    out = []
    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        out.append(text)
    return out
