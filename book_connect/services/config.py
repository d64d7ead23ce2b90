"""
Runtime settings for Book Connect.
Values come from a local .env file (if any) and then the process environment.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from book_connect.utils.errors import ValidationError

DEFAULT_CATALOG = Path(__file__).resolve().parent.parent / "data" / "catalog.json"
DEFAULT_LOG_DIR = "~/.config/book_connect/logs"


@dataclass
class Settings:
    catalog_path: Path = DEFAULT_CATALOG
    page_size: Optional[int] = None  # None keeps the catalog's own value
    log_dir: str = DEFAULT_LOG_DIR
    log_level: str = "INFO"


def _parse_page_size(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"BOOK_CONNECT_PAGE_SIZE must be an integer, got {raw!r}")
    if value < 1:
        raise ValidationError(f"BOOK_CONNECT_PAGE_SIZE must be positive, got {value}")
    return value


def load_settings(env_file: Optional[Path] = None) -> Settings:
    load_dotenv(dotenv_path=env_file, override=False)
    catalog = os.environ.get("BOOK_CONNECT_CATALOG")
    return Settings(
        catalog_path=Path(catalog).expanduser() if catalog else DEFAULT_CATALOG,
        page_size=_parse_page_size(os.environ.get("BOOK_CONNECT_PAGE_SIZE")),
        log_dir=os.environ.get("BOOK_CONNECT_LOG_DIR") or DEFAULT_LOG_DIR,
        log_level=os.environ.get("BOOK_CONNECT_LOG_LEVEL") or "INFO",
    )
