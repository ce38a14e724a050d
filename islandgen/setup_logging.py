import logging
import sys
from pathlib import Path
from typing import Optional, Union


def setup_logging(level: int = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Настраивает глобальный логгер.
    - Формат сообщений с временем, модулем и строкой.
    - Вывод в консоль (stdout) и, если задан log_file, в файл.
    """
    handlers: list = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(log_path, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # убирает старые хендлеры, чтобы не было дублей
    )

    # подробные логи генерации только на DEBUG
    logging.getLogger("islandgen").setLevel(level)
    logging.getLogger("PIL").setLevel(logging.WARNING)
