"""
Фоновое выполнение запросов с отменой устаревших.

Каждый слот (например, "daily" или "states") хранит не больше одного
активного запроса. Новый запрос в тот же слот отменяет предыдущий: его
результат или ошибка будут отброшены, даже если HTTP-вызов уже идет.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Callable, Dict, Optional

from loguru import logger


class RequestHandle:
    """
    Дескриптор запроса в слоте.
    """

    def __init__(self, slot: str, request_id: int):
        self.slot = slot
        self.request_id = request_id
        self.future: Optional[Future] = None
        self._cancelled = False
        self._lock = Lock()

    def cancel(self):
        """Помечает запрос как отмененный и пытается снять его из очереди."""
        with self._lock:
            self._cancelled = True
        if self.future is not None:
            self.future.cancel()

    @property
    def is_cancelled(self) -> bool:
        with self._lock:
            return self._cancelled

    def __repr__(self):
        return f"RequestHandle(slot={self.slot!r}, id={self.request_id}, cancelled={self.is_cancelled})"


class RequestSlots:
    """
    Запускает функции в пуле потоков и доставляет результат колбэкам.

    Колбэки вызываются в рабочем потоке; GUI обязан сам перенести
    обработку в главный поток (например, через сигнал Qt).
    """

    def __init__(self, max_workers: int = 2, executor: Optional[ThreadPoolExecutor] = None):
        self.executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="covid-fetch")
        self._handles: Dict[str, RequestHandle] = {}
        self._next_id = 0
        self._lock = Lock()

    def submit(self, slot: str, func: Callable, on_success: Callable, on_error: Callable,
               *args, **kwargs) -> RequestHandle:
        """
        Запускает func(*args, **kwargs) в слоте slot.

        Параметры:
            slot: Имя слота представления.
            func: Функция, выполняющая запрос.
            on_success: Вызывается с результатом func, если запрос не отменен.
            on_error: Вызывается с исключением, если запрос не отменен.

        Возвращает:
            RequestHandle: Дескриптор нового запроса.
        """
        with self._lock:
            self._next_id += 1
            handle = RequestHandle(slot, self._next_id)
            previous = self._handles.get(slot)
            self._handles[slot] = handle

        if previous is not None:
            logger.debug(f"Отмена устаревшего запроса {previous!r}")
            previous.cancel()

        def run():
            if handle.is_cancelled:
                return
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                if handle.is_cancelled:
                    logger.debug(f"Ошибка отмененного запроса {handle!r} отброшена: {e}")
                    return
                self._release(handle)
                on_error(e)
                return
            if handle.is_cancelled:
                logger.debug(f"Результат отмененного запроса {handle!r} отброшен")
                return
            self._release(handle)
            on_success(result)

        handle.future = self.executor.submit(run)
        return handle

    def _release(self, handle: RequestHandle):
        with self._lock:
            if self._handles.get(handle.slot) is handle:
                del self._handles[handle.slot]

    def active(self, slot: str) -> Optional[RequestHandle]:
        """Возвращает активный запрос слота или None."""
        with self._lock:
            return self._handles.get(slot)

    def cancel_all(self):
        with self._lock:
            handles = list(self._handles.values())
            self._handles.clear()
        for handle in handles:
            handle.cancel()

    def shutdown(self):
        """Отменяет все запросы и останавливает пул потоков."""
        self.cancel_all()
        self.executor.shutdown(wait=False)
