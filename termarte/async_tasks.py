"""Run callables on background threads with join/detach handles."""

from __future__ import annotations

import argparse
import threading
import time
from typing import Any, Callable, Optional, Sequence


class AsyncTask:
    """Handle to a callable running on its own thread.

    Every handle must be released exactly once, either by :meth:`join`
    (wait for the result) or by :meth:`detach` (let it run on its own).
    Threads never keep the process alive once the main program ends.
    """

    def __init__(self, func: Callable[..., Any], args: tuple[Any, ...]) -> None:
        self._func = func
        self._args = args
        self._result: Any = None
        self._error: Optional[BaseException] = None
        self._released = False
        self._thread = threading.Thread(target=self._invoke, daemon=True)

    def _invoke(self) -> None:
        try:
            self._result = self._func(*self._args)
        except BaseException as exc:  # re-raised in the joining thread
            self._error = exc

    def _release(self) -> None:
        if self._released:
            raise RuntimeError("task handle has already been joined or detached")
        self._released = True

    @property
    def running(self) -> bool:
        """Whether the callable is still executing."""
        return self._thread.is_alive()

    def join(self) -> Any:
        """Wait for the callable to finish and return its result.

        An exception raised by the callable is raised again here.
        """
        self._release()
        self._thread.join()
        if self._error is not None:
            raise self._error
        return self._result

    def detach(self) -> None:
        """Release the handle without waiting; the callable keeps running."""
        self._release()


def run(func: Callable[..., Any], *args: Any) -> AsyncTask:
    """Start ``func(*args)`` on a new thread and return its handle."""
    task = AsyncTask(func, args)
    task._thread.start()
    return task


def _greet_without_argument() -> None:
    print("Olá de uma thread sem argumento!", flush=True)


def _greet_name(name: str) -> None:
    print(f"Olá, {name}!", flush=True)


def _show_number(number: int) -> None:
    print(f"Número: {number} da thread com argumento!", flush=True)


def _long_pause(seconds: float) -> None:
    print(f"Iniciando função que pausa o programa por {seconds:g} segundos...", flush=True)
    time.sleep(seconds)
    print(f"Pause de {seconds:g} segundos finalizado.", flush=True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start a few threads, join the important ones and leave the slow one behind."""
    parser = argparse.ArgumentParser(
        prog="termarte-async",
        description="Demonstrate joined and detached background tasks.",
    )
    parser.add_argument("--name", default="Arthur", help="name greeted by a task")
    parser.add_argument("--number", type=int, default=4, help="number shown by a task")
    parser.add_argument(
        "--pause", type=float, default=10.0, help="seconds slept by the detached task"
    )
    args = parser.parse_args(argv)

    first = run(_greet_without_argument)
    second = run(_greet_name, args.name)
    third = run(_show_number, args.number)
    slow = run(_long_pause, args.pause)
    slow.detach()

    first.join()
    second.join()
    third.join()

    print(
        "Todas as threads importantes acabaram! "
        "Encerrando sem esperar a função func_pausar10segundos ...",
        flush=True,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())