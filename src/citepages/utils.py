import json
from pathlib import Path
from typing import Any, Dict, List, Union


def read_page_fields(filepath: Path) -> List[str]:
    """Read one page field per line, skipping blank lines."""
    content = filepath.read_text(encoding="utf-8")
    return [line.strip() for line in content.splitlines() if line.strip()]


def write_json(data: Union[Dict[str, Any], List[Any]], filepath: Path) -> None:
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=4)
