import os
from pathlib import Path
from typing import Optional

# checkout root; the bundled WifiScanner.app sits next to the package
PROJECT_DIR = Path(__file__).resolve().parents[2]

def to_abs_path(p: Optional[str | os.PathLike]) -> Optional[Path]:
    """Resolve a config file or scanner path.

    Absolute paths are taken as given; relative ones are looked up in the
    CWD first, then in PROJECT_DIR.
    """
    if not p:
        return None
    pp = Path(p).expanduser()
    if pp.is_absolute():
        return pp.resolve()
    for base in (Path.cwd(), PROJECT_DIR):
        if (base / pp).exists():
            return (base / pp).resolve()
    return (PROJECT_DIR / pp).resolve()
