import time

from polybench.util import consume, time_function


def test_consume_returns_same_object():
    data = [1.0, 2.0]
    assert consume(data) is data


def test_consume_silent_by_default(capsys):
    consume([1, 2])
    assert capsys.readouterr().out == ""


def test_consume_echo_prints(capsys):
    result = consume([1, 2], echo=True)
    assert result == [1, 2]
    assert capsys.readouterr().out == "[1, 2]\n"


def test_time_function_calls_once():
    calls = []
    elapsed = time_function(lambda: calls.append(1))
    assert calls == [1]
    assert elapsed >= 0.0


def test_time_function_measures_duration():
    elapsed = time_function(lambda: time.sleep(0.01))
    assert elapsed >= 0.01