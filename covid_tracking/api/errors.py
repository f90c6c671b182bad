"""
Исключения слоя доступа к COVID Tracking API.
"""


class CovidApiError(Exception):
    """Базовая ошибка при получении данных из API."""


class HttpStatusError(CovidApiError):
    """Сервер вернул код ответа вне диапазона 2xx."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP Status Code {status_code}")


class DecodeError(CovidApiError):
    """Ответ сервера не удалось разобрать."""
