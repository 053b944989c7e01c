# oxr/core/logger.py
import logging
import sys

from oxr.config.settings import settings

ROOT_LOGGER_NAME = "oxr"


def _resolve_level() -> int:
    level_name = (settings.log_level or "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _ensure_console_output() -> None:
    """
    Консольный хендлер добавляется на root, только если приложение не
    настроило свои. Записи "oxr.*" всегда уходят в root-хендлеры хоста.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.NOTSET)
    ch.setFormatter(fmt)
    root.addHandler(ch)


def setup_logger(name: str = "client") -> logging.Logger:
    """
    Возвращает логгер "oxr.<name>".

    - Уровень берётся из settings.log_level (INFO, если значение неизвестно).
      Уровень root не трогаем: это настройка приложения.
    - Своих хендлеров у логгеров пакета нет, пишем через root.
    - Снимаем NullHandler'ы и флаг disabled (dictConfig с
      disable_existing_loggers=True мог его выставить).
    """
    level = _resolve_level()
    _ensure_console_output()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.propagate = True
    package_logger.disabled = False

    full_name = name if name.startswith(f"{ROOT_LOGGER_NAME}.") else f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(full_name)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    logger.setLevel(level)
    logger.propagate = True
    logger.disabled = False

    return logger
