"""A main thread that reaps worker threads as they report completion."""

import argparse
import enum
import sys
import threading

THREADS = 10


class _State(enum.Enum):
    RUNNING = 0
    DONE = 1
    REAPED = 2


def reap_threads(count=THREADS, out=None):
    """Start ``count`` workers and join each one after it signals completion.

    Returns the worker ids in the order they were reaped.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    out = sys.stdout if out is None else out
    condition = threading.Condition()
    states = [_State.RUNNING] * count
    pending = 0

    def work(tid):
        nonlocal pending
        print(f"starting thread {tid}", file=out)
        with condition:
            print(f"thread {tid} is doing some work.", file=out)
            print(f"thread {tid} finishes", file=out)
            pending += 1
            states[tid] = _State.DONE
            condition.notify()
        print("signal main thread", file=out)

    threads = [threading.Thread(target=work, args=(tid,)) for tid in range(count)]
    for thread in threads:
        thread.start()

    reaped = []
    while len(reaped) != count:
        with condition:
            condition.wait_for(lambda: pending > 0)
            for tid, thread in enumerate(threads):
                if states[tid] is _State.DONE:
                    thread.join()
                    states[tid] = _State.REAPED
                    print(f"Reaped thread {tid}", file=out)
                    pending -= 1
                    reaped.append(tid)
                    print(f"{count - len(reaped)} remaining threads.", file=out)
    return reaped


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reap worker threads as they finish.")
    parser.add_argument("--threads", type=int, default=THREADS)
    args = parser.parse_args(argv)
    reap_threads(args.threads)
    return 0


if __name__ == "__main__":
    sys.exit(main())