# gradebook/directory.py
"""Модуль со списком всех зарегистрированных пользователей и авторизацией."""
import logging
from typing import Iterable, Iterator, List

from .models import User

logger = logging.getLogger(__name__)


class Directory:
    """Простейшая «БД» пользователей в порядке регистрации.

    Уникальность логинов не проверяется. По умолчанию authenticate() запускает
    меню каждого пользователя с совпавшими логином и паролем, по очереди.
    С first_match_only=True поиск останавливается на первом совпадении.
    """
    def __init__(self, users: Iterable[User] = (), first_match_only: bool = False):
        self._users: List[User] = []
        self.first_match_only = first_match_only
        for user in users:
            self.register(user)

    def register(self, user: User):
        """Добавляет пользователя в конец списка (без проверки дубликатов)."""
        self._users.append(user)

    def find(self, login: str, password: str) -> List[User]:
        """Возвращает всех пользователей с совпавшими логином и паролем."""
        return [u for u in self._users if u.authenticate(login, password)]

    def authenticate(self, login: str, password: str) -> bool:
        """Авторизует пользователя и передаёт управление его меню.

        Возвращает True, если нашлось хотя бы одно совпадение.
        """
        matches = self.find(login, password)
        if not matches:
            # На консоль пользователь видит только "Wrong credentials!"
            logger.info(f"Failed login attempt for {login!r}")
            return False

        if self.first_match_only:
            matches = matches[:1]
        for user in matches:
            logger.info(f"{login} logged in as {user.role.value}")
            user.interact()
        return True

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)
