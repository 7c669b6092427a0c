"""Philosophers sharing curtains: each needs its own and its neighbour's."""

import argparse
import sys
import threading

PHILOSOPHERS = 10


def use_curtains(philosophers=PHILOSOPHERS, out=None):
    """Let each philosopher use curtains ``i`` and ``i + 1`` (wrapping round).

    Curtains are locked in ascending index order so the ring cannot
    deadlock. Returns the philosopher ids in the order they used curtains.
    """
    if philosophers < 2:
        raise ValueError("at least two philosophers are needed")
    out = sys.stdout if out is None else out
    locks = [threading.Lock() for _ in range(philosophers)]
    used = []

    def dine(pid):
        right = (pid + 1) % philosophers
        print(f"philospher {pid} waiting for curtains {pid} and {pid + 1}", file=out)
        first, second = sorted((pid, right))
        locks[first].acquire()
        locks[second].acquire()
        try:
            print(f"philospher {pid} uses curtains {pid} and {pid + 1}", file=out)
            used.append(pid)
        finally:
            print(f"philospher {pid} unlocks curtain {pid}", file=out)
            locks[pid].release()
            print(f"philospher {pid} unlocks curtain {pid + 1}", file=out)
            locks[right].release()

    threads = [threading.Thread(target=dine, args=(pid,)) for pid in range(philosophers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return used


def main(argv=None):
    parser = argparse.ArgumentParser(description="Philosophers sharing curtains.")
    parser.add_argument("--philosophers", type=int, default=PHILOSOPHERS)
    args = parser.parse_args(argv)
    use_curtains(args.philosophers)
    return 0


if __name__ == "__main__":
    sys.exit(main())