# gradebook/main.py
"""Главный модуль: цикл авторизации и точка входа консольного приложения."""
import logging
import sys
from typing import Optional

from .directory import Directory
from .errors import GradebookError
from .roster import RosterConfig, default_roster

EXIT_SENTINEL = "exit"
LOGIN_PROMPT = "\nLogin(exit=quit): "
PASSWORD_PROMPT = "Password: "

def main_cli(directory: Directory):
    """Основной цикл: запрос логина/пароля и передача управления меню роли."""
    while True:
        login = input(LOGIN_PROMPT).strip()
        if login == EXIT_SENTINEL:
            break
        password = input(PASSWORD_PROMPT).strip()

        if not directory.authenticate(login, password):
            print("Wrong credentials!")

def main(roster: Optional[RosterConfig] = None) -> int:
    """Собирает пользователей и запускает цикл авторизации. Возвращает код выхода."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        directory = (roster or default_roster()).build()
    except GradebookError as e:
        print(f"Error: {e}")
        return 1

    try:
        main_cli(directory)
    except (KeyboardInterrupt, EOFError):
        print("\nStopped.")
    return 0

if __name__ == '__main__':
    sys.exit(main())
