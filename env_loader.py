"""Загрузка переменных окружения из .env-файла.

Файл ищется по путям: явно переданные, ``TRACKR_ENV_FILE``,
``.env`` в текущем каталоге и в корне проекта. Загружается только
первый найденный файл; уже заданные переменные не перезаписываются.
"""

from __future__ import annotations

import os
from pathlib import Path


def parse_env_line(raw: str) -> tuple[str, str] | None:
    """Разобрать строку KEY=VALUE; None для комментариев и мусора."""
    line = raw.strip()
    if not line or line.startswith("#"):
        return None
    if line.lower().startswith("export "):
        line = line[7:].strip()
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip('"').strip("'")


def _candidates(explicit: tuple[str, ...]) -> list[Path]:
    paths = [Path(c) for c in explicit if c]
    env_file = os.environ.get("TRACKR_ENV_FILE", "").strip()
    if env_file:
        paths.append(Path(env_file))
    proj_root = Path(__file__).resolve().parent
    paths.extend([Path.cwd() / ".env", proj_root / ".env"])
    return paths


def load_dotenv_like(*candidates: str) -> str | None:
    """Load the first existing .env file into os.environ.

    Returns the path that was loaded, or None if nothing found.
    """
    for path in _candidates(candidates):
        if not path.is_file():
            continue
        for raw in path.read_text(encoding="utf-8").splitlines():
            parsed = parse_env_line(raw)
            if parsed is not None:
                os.environ.setdefault(*parsed)
        return str(path)
    return None
