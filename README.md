# sysdrills

Small programs for seeing operating-system ideas in action: a model of
repeated forking and of watching a child's state changes, a one-shot
file-writing server and its client, and several thread synchronisation
exercises built on locks and condition variables.

It has no dependencies beyond the standard library and needs a POSIX system
(the process drills use `os.WIFSTOPPED` and friends and POSIX signals).

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Commands

| Command | What it does |
| --- | --- |
| `sysdrills-fork hello [--forks N]` | Models forking N times (default 3): `2 ** N` simulated processes each print `Hello from pid ...` |
| `sysdrills-fork watch` | Starts an idle simulated child and reports each stop until it exits or is killed |
| `sysdrills-serve [--host H] [--port P] [--directory D]` | Accepts one client (port 3000 by default), creates the file it names in `D`, writes the content it sends, and echoes both back |
| `sysdrills-send [--host H] [--port P] [filename] [content]` | Connects (default `127.0.0.1:3000`), sends `file.txt` and then `new content` unless told otherwise, printing each echo |
| `sysdrills-sharing counter [--loops N]` | Two threads each increment a shared counter N times (default 10,000,000) under a lock and print the total |
| `sysdrills-sharing message [text]` | A worker thread prints a message and hands back its length in bytes |
| `sysdrills-curtains [--philosophers N]` | N philosophers (default 10) each take curtain `i` and its neighbour, in a ring |
| `sysdrills-rooms [--users U] [--blocks B] [--seed S]` | U users (default 32) pick one of B blocks (default 8) at random and count their uses under per-block locks |
| `sysdrills-reaper [--threads N]` | N workers (default 10) report completion through a condition variable and the main thread joins each one |
| `sysdrills-ordering [--threads N]` | N threads (default 20) start together and print their ids in order, each waking the next |

Start the server in one terminal and the client in another:

    sysdrills-serve
    sysdrills-send

### Watching a child

While `sysdrills-fork watch` runs, SIGINT, SIGTERM, SIGHUP and SIGTSTP sent to
the command are passed on to the simulated child. Ctrl-Z (SIGTSTP) is
reported as `process ... stops.`; Ctrl-C (SIGINT) ends the watch with
`process ... killed by signal 2`. Once the child is stopped, further
signals are held until it is continued, and the command never passes on
SIGCONT, so a stopped child stays stopped.

## Library use

Each drill can be called from Python, with output written to any text
stream:

```python
import io
from sysdrills.sharing import increment_shared
from sysdrills.ordering import print_in_order

print(increment_shared(1000, 2))   # 2000

buf = io.StringIO()
print(print_in_order(5, buf))      # [0, 1, 2, 3, 4]
```

- `sysdrills.processes`: `fork_hello(forks, out)` returns the list of ids
  that greeted; `describe_status(pid, status)` turns a raw wait status into
  a line such as `process 42 exits normally.`; `watch_child(out)` returns the
  final description line.
- `sysdrills.filetransfer`: `serve_once(host, port, directory, out)` returns
  the path it wrote; `send_file_request(host, port, filename, content, out)`
  returns the two echoes.
- `sysdrills.sharing`: `increment_shared(loops, workers)` returns the total;
  `run_message_thread(message, out)` returns the message length in bytes.
- `sysdrills.curtains.use_curtains(philosophers, out)` returns the order in
  which philosophers used their curtains. Curtains are locked in ascending
  index order, so the ring cannot deadlock.
- `sysdrills.rooms.use_blocks(users, blocks, rng, out)` returns the use count
  of each block; pass a seeded `random.Random` for repeatable choices.
- `sysdrills.reaper.reap_threads(count, out)` returns worker ids in the order
  they were reaped.

Invalid sizes (negative counts, fewer than two philosophers, no blocks, no
workers) raise `ValueError`.

## What it does not do

- The process drills never create operating-system processes. Each
  simulated process runs on a thread of the current program and is known by
  that thread's native id (the first by the program's own pid), and signals
  reach the simulated child only through the forwarding described above.
- The server handles exactly one client and then exits. It reads at most
  100 bytes for the file name and 100 for the content, and refuses names
  that contain a path separator or are `.` or `..`.