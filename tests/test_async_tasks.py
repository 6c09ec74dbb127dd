import threading

import pytest

from termarte.async_tasks import AsyncTask, main, run


def test_join_returns_result_of_callable():
    task = run(lambda a, b: a + b, 2, 3)
    assert task.join() == 5


def test_runs_on_another_thread():
    caller = threading.get_ident()
    task = run(threading.get_ident)
    worker = task.join()
    assert isinstance(task, AsyncTask)
    assert worker != caller


def test_no_argument_callable():
    seen = []
    task = run(lambda: seen.append("done"))
    task.join()
    assert seen == ["done"]


def test_exception_is_reraised_on_join():
    def boom(message):
        raise ValueError(message)

    task = run(boom, "bad")
    with pytest.raises(ValueError, match="bad"):
        task.join()


def test_detached_task_keeps_running():
    started = threading.Event()
    finish = threading.Event()
    done = threading.Event()

    def work():
        started.set()
        finish.wait(5)
        done.set()

    task = run(work)
    assert started.wait(5)
    assert task.running is True
    task.detach()
    assert not done.is_set()
    finish.set()
    assert done.wait(5)


def test_join_after_detach_is_rejected():
    task = run(lambda: None)
    task.detach()
    with pytest.raises(RuntimeError):
        task.join()


def test_join_twice_is_rejected():
    task = run(lambda: 1)
    assert task.join() == 1
    with pytest.raises(RuntimeError):
        task.join()


def test_detach_after_join_is_rejected():
    task = run(lambda: 1)
    task.join()
    with pytest.raises(RuntimeError):
        task.detach()


def test_running_is_false_after_join():
    task = run(lambda: 7)
    assert task.join() == 7
    assert task.running is False


def test_main_prints_joined_task_output(capsys):
    status = main(["--pause", "0", "--name", "Arthur", "--number", "4"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Olá de uma thread sem argumento!" in out
    assert "Olá, Arthur!" in out
    assert "Número: 4 da thread com argumento!" in out
    assert out.rstrip().endswith("func_pausar10segundos ...")