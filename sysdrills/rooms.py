"""Users picking random blocks, each block guarded by its own lock."""

import argparse
import random
import sys
import threading

BLOCKS = 8
USERS = 32


def use_blocks(users=USERS, blocks=BLOCKS, rng=None, out=None):
    """Send each user to a random block and count the visits per block."""
    if users < 0:
        raise ValueError("users must not be negative")
    if blocks < 1:
        raise ValueError("at least one block is needed")
    rng = random.Random() if rng is None else rng
    out = sys.stdout if out is None else out

    assignments = [rng.randrange(blocks) for _ in range(users)]
    counts = [0] * blocks
    locks = [threading.Lock() for _ in range(blocks)]

    def visit(user, block):
        print(f"user {user} waiting to use block {block}", file=out)
        with locks[block]:
            print(f"user {user} uses block {block}", file=out)
            counts[block] += 1

    threads = [
        threading.Thread(target=visit, args=(user, block))
        for user, block in enumerate(assignments)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    for block, used in enumerate(counts):
        print(f"block {block} used {used} times", file=out)
    return counts


def main(argv=None):
    parser = argparse.ArgumentParser(description="Users sharing locked blocks.")
    parser.add_argument("--users", type=int, default=USERS)
    parser.add_argument("--blocks", type=int, default=BLOCKS)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)
    use_blocks(args.users, args.blocks, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())