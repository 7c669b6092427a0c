import io

import pytest

from sysdrills.ordering import main, print_in_order


@pytest.mark.parametrize("count", [1, 2, 5, 20])
def test_ids_are_printed_in_order(count):
    out = io.StringIO()
    assert print_in_order(count, out) == list(range(count))
    numbers = [int(line) for line in out.getvalue().splitlines() if line.isdigit()]
    assert numbers == list(range(count))


def test_each_thread_wakes_its_successor():
    out = io.StringIO()
    print_in_order(6, out)
    lines = out.getvalue().splitlines()
    wakes = [line for line in lines if line.startswith("wake up next thread")]
    assert wakes == [f"wake up next thread {tid}" for tid in range(1, 6)]
    for tid in range(1, 6):
        assert lines.index(f"wake up next thread {tid}") < lines.index(str(tid))


def test_every_thread_announces_start():
    out = io.StringIO()
    print_in_order(8, out)
    starts = {line for line in out.getvalue().splitlines() if line.endswith(" starts")}
    assert starts == {f"thread {tid} starts" for tid in range(8)}


def test_zero_threads_prints_nothing():
    out = io.StringIO()
    assert print_in_order(0, out) == []
    assert out.getvalue() == ""


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        print_in_order(-1, io.StringIO())


def test_main_prints_default_sequence(capsys):
    assert main([]) == 0
    numbers = [int(line) for line in capsys.readouterr().out.splitlines() if line.isdigit()]
    assert numbers == list(range(20))