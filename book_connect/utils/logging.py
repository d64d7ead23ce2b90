import logging, os
from datetime import datetime
from typing import Optional

logger = logging.getLogger("book_connect")

def init(log_dir: Optional[str] = None, level: str = "INFO") -> None:
    if logger.handlers:
        return
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(ch)

    log_dir = os.path.expanduser(log_dir or "~/.config/book_connect/logs")
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.FileHandler(os.path.join(log_dir, f"book_connect_{datetime.now():%Y%m%d}.log"))
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(fh)

    logger.info("Book Connect logging initialized (%s)", log_dir)
