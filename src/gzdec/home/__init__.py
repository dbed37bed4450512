"""Home layer: config path resolution and file I/O (no Pydantic dependencies)."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

CONFIG_ENV = "GZDEC_CONFIG"
CONFIG_NAMES = (".gzdec.json", "gzdec.json")


def resolve_config_path(cli_path: Optional[Path] = None) -> Optional[Path]:
    """
    Resolve gzdec.json config file path with precedence:
    1. CLI --config path
    2. GZDEC_CONFIG env var
    3. CWD: .gzdec.json or gzdec.json (prefer .gzdec.json)

    Returns None when nothing is configured, meaning built-in defaults apply.
    """
    if cli_path:
        return cli_path

    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env).expanduser()

    cwd = Path.cwd()
    for name in CONFIG_NAMES:
        p = cwd / name
        if p.exists():
            return p

    return None


def load_json(path: Path) -> Dict[str, Any]:
    """Load and parse JSON file."""
    return json.loads(path.read_text(encoding="utf-8"))


def save_json(path: Path, data: Dict[str, Any]) -> None:
    """Save data to JSON file with pretty formatting."""
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
    )
