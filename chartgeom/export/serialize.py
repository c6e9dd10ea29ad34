"""Scene serialization for hosts outside Python."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from ..config.chart_config import ExportError
from ..models.data_types import Scene


def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    return scene.to_dict()


def scene_to_json(scene: Scene, indent: int = 2) -> str:
    return json.dumps(scene.to_dict(), indent=indent, ensure_ascii=False)


def write_scene_json(scene: Scene, path: Union[str, Path]) -> Path:
    """
    Write the scene as UTF-8 JSON.

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_text(scene_to_json(scene), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to write scene JSON '{path}': {exc}") from exc
    return path
