import io
import random

import pytest

from sysdrills.rooms import main, use_blocks


def test_every_user_is_counted_once():
    out = io.StringIO()
    counts = use_blocks(32, 8, random.Random(7), out)
    assert len(counts) == 8
    assert sum(counts) == 32
    lines = out.getvalue().splitlines()
    assert sum(" uses block " in line for line in lines) == 32
    assert lines[-8:] == [f"block {block} used {used} times" for block, used in enumerate(counts)]


def test_same_seed_gives_same_counts():
    first = use_blocks(40, 5, random.Random(123), io.StringIO())
    second = use_blocks(40, 5, random.Random(123), io.StringIO())
    assert first == second


def test_single_block_takes_everyone():
    assert use_blocks(12, 1, random.Random(1), io.StringIO()) == [12]


def test_each_user_waits_before_using():
    out = io.StringIO()
    use_blocks(10, 3, random.Random(5), out)
    lines = out.getvalue().splitlines()
    for user in range(10):
        waiting = next(i for i, line in enumerate(lines) if line.startswith(f"user {user} waiting"))
        using = next(i for i, line in enumerate(lines) if line.startswith(f"user {user} uses"))
        assert waiting < using


def test_rejects_bad_sizes():
    with pytest.raises(ValueError):
        use_blocks(5, 0, random.Random(), io.StringIO())
    with pytest.raises(ValueError):
        use_blocks(-1, 3, random.Random(), io.StringIO())


def test_main_prints_block_summary(capsys):
    assert main(["--users", "4", "--blocks", "2", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "block 0 used" in out and "block 1 used" in out