# hostresolve

Resolve hostnames read from text files to their first IP address and write
the results as `hostname,address` lines.

## Installation

```
pip install .
```

## Looking up hostnames

Give one or more input files followed by the output file:

```
hostresolve-lookup names1.txt names2.txt results.txt
```

The same command is available as `python -m hostresolve.lookup`.

Each input file holds hostnames separated by whitespace. A word longer than
1024 characters is split into pieces of at most 1024 characters, each looked
up on its own. Every hostname produces one line in the output file:

```
localhost,127.0.0.1
no-such-host.invalid,
```

- When a hostname does not resolve, the resolver's message and a
  `dnslookup error: <hostname>` line go to standard error, and the address
  field is left empty.
- When the first address the system reports is not IPv4, the field reads
  `UNHANDELED`.
- The output file is opened (and truncated) first; if it cannot be opened,
  an error is printed and the command exits with status 1.
- If an input file cannot be opened, an error is reported and the files
  after it are not read; the command still exits with status 0.
- With fewer than two arguments, usage is printed and the command exits
  with status 1.

The same work can be done from Python. `lookup_files` returns the number of
lines it wrote:

```python
from hostresolve.lookup import lookup_files
from hostresolve.resolver import first_address, LookupFailure

with open("results.txt", "w") as out:
    count = lookup_files(["names1.txt"], out)

try:
    print(first_address("localhost"))
except LookupFailure as exc:
    print("failed:", exc.hostname, exc.reason)
```

`first_address` returns an empty string if the system resolver reports no
addresses at all.

## Bounded queue

`hostresolve.fifo.BoundedQueue` is a fixed-capacity FIFO queue. It holds 50
items when no positive size is given; its capacity is in `max_size`.

```python
from hostresolve.fifo import BoundedQueue, QueueFullError, QueueEmptyError

q = BoundedQueue(2)
q.push("a")
q.push("b")
q.is_full()      # True
q.pop()          # "a"
len(q)           # 1
q.clear()
q.is_empty()     # True
```

Pushing onto a full queue raises `QueueFullError`. Popping from an empty
queue raises `QueueEmptyError`.

## Threading demo

```
hostresolve-hello
```

This starts five threads. Each one prints a greeting three times and sleeps
between one and two seconds after each greeting. A final line is printed
once every thread has finished. `hostresolve.hello.print_hello(thread_id,
times, out)` runs one thread's greetings and can be given any text stream.

## What it does not do

Lookups are made one hostname at a time, in the order they are read. The
package has no multi-threaded resolver: the bounded queue and the threading
demo are separate pieces and are not used by `hostresolve-lookup`. IPv6
results are not formatted; they are reported as `UNHANDELED`.