# sacheatfinder

Searches ranges of alphabetic sequences for strings whose JAMCRC value
matches one of the known cheat hashes, and reports each hit together with
the name of the cheat it triggers.

Sequences are numbered in bijective base 26 and built least significant
letter first: index 0 is `A`, 25 is `Z`, 26 is `AA`, 255 is `UI`, and so
on. The finder walks every index in `[min, max]`, hashes the generated
sequence with JAMCRC (CRC-32 without the final inversion) and, when the
hash is in the cheat list, records a result whose code is the sequence
reversed.

## Installation

```
pip install .
```

## Command line

```
sacheatfinder --min 20810700 --max 20810800 --calc-mode 0
```

Options:

- `--min N` – first index of the search range (default 0)
- `--max N` – last index of the search range, inclusive (default 0)
- `--calc-mode M` – 0: thread pool, 1: process pool, 2: reported as not
  supported (exit status 1); any other value falls back to the thread pool
- `--cli` – accepted and ignored; the search always runs in the terminal
- `-h`, `--help` – print the syntax and exit

A value that does not start with a number prints
`Error, non-numeric character !` and exits with status 1. Unknown
arguments are reported and skipped. A range whose minimum is greater than
its maximum, or which is empty, is reported and the command exits with
status 0.

The output is a table of index, code, JAMCRC value and associated cheat,
followed by the time taken, the throughput and the number of results.

## Library use

```python
from sacheatfinder.backends import create_finder
from sacheatfinder.finder import jamcrc, generate_string

finder = create_finder(0)
finder.min_range = 20810700
finder.max_range = 20810800
finder.run()
for result in finder.results:
    print(result.index, result.code, hex(result.jamcrc), result.associated_code)

print(generate_string(255))            # "UI"
print(hex(jamcrc(b"BEANSA", 0)))       # 0x555fc201
```

- `sacheatfinder.finder` – `jamcrc`, `generate_string`,
  `max_thread_support`, the `ComputeType` enum and `CheatFinder`, which
  checks the range on the calling thread. `CheatFinder.run` raises
  `ValueError` for an invalid range.
- `sacheatfinder.backends` – `ThreadFinder`, `ProcessFinder` and
  `create_finder(mode)`; modes 2 and 3 raise `UnsupportedModeError`.
- `sacheatfinder.result` – the frozen `Result` dataclass.
- `sacheatfinder.tablemodel` – `TableModel`, rows of strings with the
  first row as heading, queried by `TableRole`.
- `sacheatfinder.controller` – `FinderController`, which wraps a finder,
  refuses setting changes while a search runs, switches compute mode with
  `set_calc_mode`, notifies `listeners` of changes, and fills a
  `TableModel` from `run_search` or from a background search started with
  `start` and awaited with `join`.

## What it does not do

There is no graphical interface: `FinderController` and `TableModel` hold
the state a front end would display, but no window is provided. There is
no GPU computation; the GPU compute modes are reported as not supported.

## Tests

```
pip install .[test]
pytest
```