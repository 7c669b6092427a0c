"""Threads started together that print their ids strictly in order."""

import argparse
import sys
import threading

THREADS = 20


def print_in_order(count=THREADS, out=None):
    """Start ``count`` threads that print their ids in ascending order.

    Each thread waits for its predecessor to wake it. Returns the ids in
    the order they were printed.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    out = sys.stdout if out is None else out
    conditions = [threading.Condition() for _ in range(count)]
    flags = [False] * count
    printed = []

    def work(tid):
        print(f"thread {tid} starts", file=out)
        with conditions[tid]:
            if tid == 0:
                if not flags[tid]:
                    flags[tid] = True
                    print(tid, file=out)
                    printed.append(tid)
            else:
                conditions[tid].wait_for(lambda: flags[tid])
                print(tid, file=out)
                printed.append(tid)
            following = tid + 1
            if following < count:
                with conditions[following]:
                    flags[following] = True
                    print(f"wake up next thread {following}", file=out)
                    conditions[following].notify()

    threads = [threading.Thread(target=work, args=(tid,)) for tid in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return printed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print thread ids in order.")
    parser.add_argument("--threads", type=int, default=THREADS)
    args = parser.parse_args(argv)
    print_in_order(args.threads)
    return 0


if __name__ == "__main__":
    sys.exit(main())