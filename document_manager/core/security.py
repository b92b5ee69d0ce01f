import secrets
from typing import Optional

from document_manager.core.config import Settings, settings

# Один криптостойкий источник на весь процесс; SystemRandom читает из ОС
# и безопасен при одновременных вызовах из разных потоков
_secure_random = secrets.SystemRandom()


class IdGenerator:
    """Генератор криптостойких идентификаторов документов"""

    def __init__(self, length: int = 16, lower_bound: str = "!", upper_bound: str = "z"):
        if length < 1:
            raise ValueError("Identifier length must be positive")
        if len(lower_bound) != 1 or len(upper_bound) != 1:
            raise ValueError("Bounds must be single characters")
        if ord(lower_bound) >= ord(upper_bound):
            raise ValueError("Lower bound must be lower than upper bound")
        self.length = length
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "IdGenerator":
        """Создание генератора по настройкам"""
        config = config or settings
        return cls(
            length=config.id_length,
            lower_bound=config.id_lower_bound,
            upper_bound=config.id_upper_bound
        )

    def make_id(self) -> str:
        """Создание нового идентификатора.

        Каждый символ выбирается независимо и равномерно из диапазона
        [lower_bound, upper_bound), верхняя граница не включается.
        """
        start, stop = ord(self.lower_bound), ord(self.upper_bound)
        return "".join(chr(_secure_random.randrange(start, stop)) for _ in range(self.length))

    def is_valid_id(self, value: Optional[str]) -> bool:
        """Проверка, что строка могла быть выдана этим генератором"""
        if not value or len(value) != self.length:
            return False
        start, stop = ord(self.lower_bound), ord(self.upper_bound)
        return all(start <= ord(char) < stop for char in value)


id_generator = IdGenerator.from_settings()


def make_id() -> str:
    """Создание идентификатора общим генератором"""
    return id_generator.make_id()
