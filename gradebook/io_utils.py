# gradebook/io_utils.py
"""Модуль для операций ввода/вывода в консоли: меню, выбор пунктов, пауза."""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

MENU_PROMPT = "> "
PAUSE_PROMPT = "Press Enter to continue..."

def print_menu(title: str, login: str, options: str):
    """Выводит заголовок меню роли и строку с пунктами."""
    print(f"\n--- {title} ({login}) ---")
    print(options)

def read_number(prompt: str = MENU_PROMPT) -> Optional[int]:
    """Читает целое число. Для нечислового ввода возвращает None (неверный выбор)."""
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        logger.debug(f"Ignoring non-numeric input {raw!r}")
        return None

def pause():
    """Пауза до нажатия Enter."""
    input(PAUSE_PROMPT)
