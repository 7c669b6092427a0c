"""Shared-state drills: a locked counter and a thread that returns a value."""

import argparse
import sys
import threading
from concurrent.futures import ThreadPoolExecutor

LOOPS = 10_000_000
WORKERS = 2
MESSAGE = "Hello world\n"


class _SharedCounter:
    def __init__(self):
        self.value = 0
        self._lock = threading.Lock()

    def bump(self, times):
        for _ in range(times):
            with self._lock:
                local = self.value
                local += 1
                self.value = local


def increment_shared(loops=LOOPS, workers=WORKERS):
    """Let ``workers`` threads each add one ``loops`` times to a shared total."""
    if loops < 0:
        raise ValueError("loops must not be negative")
    if workers < 1:
        raise ValueError("at least one worker is needed")
    counter = _SharedCounter()
    threads = [threading.Thread(target=counter.bump, args=(loops,)) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter.value


def _say(message, out):
    out.write(message)
    return len(message.encode())


def run_message_thread(message=MESSAGE, out=None):
    """Print ``message`` from a worker thread and return its length in bytes."""
    out = sys.stdout if out is None else out
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(_say, message, out)
        print("message from main()", file=out)
        length = future.result()
    print(f"value returned from thread {length}", file=out)
    return length


def main(argv=None):
    parser = argparse.ArgumentParser(description="Shared-state thread drills.")
    commands = parser.add_subparsers(dest="command", required=True)
    counter = commands.add_parser("counter", help="increment a shared counter from two threads")
    counter.add_argument("--loops", type=int, default=LOOPS)
    message = commands.add_parser("message", help="print a message from a thread")
    message.add_argument("text", nargs="?", default=MESSAGE)
    args = parser.parse_args(argv)

    if args.command == "counter":
        print(f"value of glob = {increment_shared(args.loops)}")
    else:
        run_message_thread(args.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())