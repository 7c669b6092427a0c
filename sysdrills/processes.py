"""Process drills: fan-out by repeated forking and watching a child's state changes.

Processes are modelled in-process: every simulated process runs on its own
thread and is identified by a pid-like number, so no new operating-system
process is ever created.
"""

import argparse
import collections
import os
import queue
import signal
import sys
import threading

_STOP_SIGNALS = frozenset(
    {signal.SIGSTOP, signal.SIGTSTP, signal.SIGTTIN, signal.SIGTTOU}
)
_IGNORED_SIGNALS = frozenset({signal.SIGCHLD, signal.SIGURG, signal.SIGWINCH})
_FORWARDED_SIGNALS = (signal.SIGINT, signal.SIGTERM, signal.SIGHUP, signal.SIGTSTP)

_children = {}
_children_lock = threading.Lock()


def fork_hello(forks=3, out=None):
    """Simulate forking ``forks`` times in a row so every process greets once.

    Each fork doubles the number of processes, so ``2 ** forks`` greetings
    are produced. The caller is identified by its own pid, every simulated
    child by the native id of the thread it runs on. All of them stay alive
    until every one has reported, so the ids are distinct. A greeting line is
    printed for each and the list of ids is returned.
    """
    if forks < 0:
        raise ValueError("forks must not be negative")
    out = sys.stdout if out is None else out

    barrier = threading.Barrier(2**forks)
    pids = []
    lock = threading.Lock()

    def live(remaining, pid):
        children = []
        try:
            for left in range(remaining - 1, -1, -1):
                child = threading.Thread(target=spawned, args=(left,))
                child.start()
                children.append(child)
        except BaseException:
            barrier.abort()
            raise
        with lock:
            pids.append(pid)
        barrier.wait()
        for child in children:
            child.join()

    def spawned(remaining):
        try:
            live(remaining, threading.get_native_id())
        except threading.BrokenBarrierError:
            pass

    live(forks, os.getpid())

    for pid in pids:
        print(f"Hello from pid {pid}", file=out)
    return pids


def describe_status(pid, status):
    """Describe a raw wait status in the layout used by ``os.waitpid``."""
    if os.WIFSTOPPED(status):
        return f"process {pid} stops."
    if os.WIFEXITED(status):
        return f"process {pid} exits normally."
    if os.WIFSIGNALED(status):
        return f"process {pid} killed by signal {os.WTERMSIG(status)}"
    raise ValueError(f"unrecognised wait status {status!r}")


class _Child:
    """An idle simulated child that reacts to signals like a paused process."""

    def __init__(self):
        self.pid = None
        self.inbox = queue.Queue()
        self.statuses = queue.Queue()

    def run(self, out):
        self.pid = threading.get_native_id()
        with _children_lock:
            _children[self.pid] = self
        print(f"child {self.pid} doing some work", file=out)
        out.flush()

        stopped = False
        pending = []
        work = collections.deque()
        while True:
            if not work:
                work.append(self.inbox.get())
            signum = work.popleft()
            if signum == signal.SIGKILL:
                return self._terminate(signum)
            if signum == signal.SIGCONT:
                stopped = False
                work.extendleft(reversed(pending))
                pending.clear()
            elif signum == 0 or signum in _IGNORED_SIGNALS:
                continue
            elif stopped:
                pending.append(signum)
            elif signum in _STOP_SIGNALS:
                stopped = True
                self.statuses.put((signum << 8) | 0x7F)
            else:
                return self._terminate(signum)

    def _terminate(self, signum):
        with _children_lock:
            _children.pop(self.pid, None)
        self.statuses.put(signum)


def _send_signal(pid, signum):
    """Deliver ``signum`` to the simulated child ``pid``."""
    with _children_lock:
        child = _children.get(pid)
    if child is None:
        raise ProcessLookupError(f"no such process: {pid}")
    child.inbox.put(int(signum))


def _forward_signal(signum, frame):
    with _children_lock:
        pids = list(_children)
    for pid in pids:
        try:
            _send_signal(pid, signum)
        except ProcessLookupError:
            pass


def watch_child(out=None):
    """Start an idle child and report each stop until it exits or is killed.

    Returns the final description line.
    """
    out = sys.stdout if out is None else out
    print(f"Main process here {os.getpid()}", file=out)
    out.flush()

    child = _Child()
    worker = threading.Thread(target=child.run, args=(out,), daemon=True)
    worker.start()

    while True:
        status = child.statuses.get()
        message = describe_status(child.pid, status)
        print(message, file=out)
        out.flush()
        if not os.WIFSTOPPED(status):
            worker.join()
            return message


def main(argv=None):
    parser = argparse.ArgumentParser(description="Process creation drills.")
    commands = parser.add_subparsers(dest="command", required=True)
    hello = commands.add_parser("hello", help="fork repeatedly and greet from every process")
    hello.add_argument("--forks", type=int, default=3)
    commands.add_parser("watch", help="watch a child until it exits or is killed")
    args = parser.parse_args(argv)

    if args.command == "hello":
        fork_hello(args.forks)
        return 0

    previous = {signum: signal.signal(signum, _forward_signal) for signum in _FORWARDED_SIGNALS}
    try:
        watch_child()
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)
    return 0


if __name__ == "__main__":
    sys.exit(main())