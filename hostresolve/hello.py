"""Start several threads that each greet a few times, then wait for them."""

import random
import sys
import threading
import time

NUM_THREADS = 5
PRINTS_PER_THREAD = 3

_write_lock = threading.Lock()


def _write_line(out, text):
    with _write_lock:
        out.write(text + "\n")
        out.flush()


def print_hello(thread_id, times=PRINTS_PER_THREAD, out=None):
    """Write a greeting ``times`` times, sleeping one to two seconds after each."""
    stream = sys.stdout if out is None else out
    for number in range(1, times + 1):
        _write_line(
            stream,
            f"Hello World! It's me, thread #{thread_id}! "
            f"This is printout {number} of {times}",
        )
        time.sleep(1.0 + random.randrange(100) / 100)


def main(argv=None):
    """Run the greeting threads and report when all have finished."""
    del argv
    out = sys.stdout
    threads = []
    for thread_id in range(NUM_THREADS):
        _write_line(out, f"In main: creating thread {thread_id}")
        worker = threading.Thread(
            target=print_hello, args=(thread_id, PRINTS_PER_THREAD, out)
        )
        try:
            worker.start()
        except RuntimeError as exc:
            _write_line(out, f"ERROR; could not start thread: {exc}")
            return 1
        threads.append(worker)
    for worker in threads:
        worker.join()
    _write_line(out, "All of the threads were completed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())