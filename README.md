# xinulibc

A compact library of classic C runtime behaviour in Python, keeping the
quirks, limits and return conventions of a small C library: 32-bit
wrap-around in number conversions, NUL-terminated strings, and indices
(or `None`) where C would return pointers.

## Installing

```
pip install .
pip install ".[test]"   # with the test tools
```

## What is inside

- `xinulibc.chartype`: the ASCII character-class table (`CharClass`,
  `classify`) and the predicates `isupper`, `islower`, `isdigit`,
  `isxdigit`, `isspace`, `ispunct`, `iscntrl`, `isalpha`, `isalnum`.
  They take a one-character string or an integer code; codes outside
  0..127 have no class.
- `xinulibc.strings`: `strlen`, `strnlen`, `strcmp`, `strncmp`, `strchr`,
  `strrchr`, `strstr`, `strcpy`, `strncpy`, `strncat` on Python strings
  (an embedded `"\0"` ends the string); `memchr`, `memcmp`, `memcpy`,
  `memset`, `bzero` on bytes-like objects, writing into a `bytearray` in
  place; `atoi` and `atol`, which parse a leading decimal number and wrap
  to 32 bits; and `iabs`.
- `xinulibc.fmt`: the formatter `doprnt(fmt, args, putc)` with `sprintf`
  (returns a string), `fprintf` (writes to a text stream) and `printf`
  (writes to standard output). It understands `%c %s %d %u %o %x %X %b`
  and `%H` / `%h`, which take two values and print them in hexadecimal.
  Flags are `-` (left justify) and `0` (zero fill), followed by a width
  and a `.` precision, either of which may be `*`. Widths and precisions
  outside 0..80 are ignored. Numbers are handled as 32-bit values.
- `xinulibc.scan`: `doscan(fmt, reader)` and `sscanf(text, fmt)`, which
  return a list with one entry per storing conversion (`None` where a
  conversion matched nothing). Conversions are `%d %o %x %c %s` and
  `%[set]` / `%[^set]`, with optional `*`, width and `l` / `h` size.
  `EOFError` is raised when input runs out before anything matched;
  `ValueError` for a malformed format. `StringReader` is the character
  source over a string; `doscan` accepts any object with `getch()` and
  `ungetch()` methods.
- `xinulibc.qsort`: `qsort(items, cmp)`, sorting a mutable sequence in
  place with a three-way comparison function. The sort is not stable.
- `xinulibc.rand`: the linear congruential generator `Rand` (methods
  `srand` and `rand`, results in 0..32767) and the module-level `srand` /
  `rand` on a shared generator.
- `xinulibc.deadlock`: `ResourceAllocationGraph(nlocks, nprocs=20,
  on_recover=None)` with `request`, `alloc`, `dealloc`, `detect` and
  `recover`. `detect` finds the first cycle, removes the victim
  process's edges and returns a `Deadlock` (the cycle, the killed pid and
  the released lock id), or `None` when there is no deadlock.

## Examples

```python
from xinulibc.fmt import sprintf
from xinulibc.strings import atoi, strncmp

sprintf("%-5d|%05d|%x", 42, -7, 255)   # '42   |-0007|ff'
atoi("  -123abc")                      # -123
strncmp("abcdef", "abcxyz", 3)         # 0
```

```python
from xinulibc.scan import sscanf

sscanf("12 abc", "%d %s")              # [12, 'abc']
```

```python
from xinulibc.rand import Rand

gen = Rand()
gen.srand(1)
values = [gen.rand() for _ in range(3)]   # numbers in 0..32767
```

```python
from xinulibc.deadlock import ResourceAllocationGraph

rag = ResourceAllocationGraph(nlocks=2)
rag.alloc(pid=1, lockid=0)
rag.alloc(pid=2, lockid=1)
rag.request(pid=1, lockid=1)
rag.request(pid=2, lockid=0)
deadlock = rag.detect()      # a Deadlock, or None when deadlock-free
print(deadlock)
```

## What it does not do

There are no devices, file descriptors or processes here. Output goes to
Python text streams and input is scanned from strings or from a reader
object you supply. Deadlock recovery only updates the graph; releasing
the lock and stopping the process is left to the `on_recover` callback.

## Running the tests

```
pytest
```