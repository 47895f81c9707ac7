# shadowvfs

Small building blocks with C library semantics:

- `shadowvfs.fmtspec`: parses one printf conversion specification
  (`parse_spec`, `FormatSpec`, `Conversion`, `LengthModifier`, `Opt`).
- `shadowvfs.intconv`: converts one argument and lays it out with precision
  and field width (`convert`, `render`, `digits`, `Converted`). Integers are
  truncated to the width their length modifier names, as on a 64-bit machine.
- `shadowvfs.format`: `sprintf` and `snprintf` built on the two modules above.
- `shadowvfs.cstr`: `strtol` and `tokenize`.
- `shadowvfs.log`: `Logger`, which writes coloured, levelled log lines, and
  `KernelAssertionError`, raised by `Logger.check`.

There are no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Formatting

Supported conversions are `%d %i %o %u %x %X %c %s %p %%`, with the flags
`- 0 + space #`, field width and precision (literal or `*`), and the length
modifiers `hh h l ll j z t`. Floating-point conversions are not supported.
A `%` that does not start a valid specification is printed as is.

```python
from shadowvfs.format import sprintf, snprintf

sprintf("%-5s|%05d|%#x", "ab", 42, 255)   # 'ab   |00042|0xff'
snprintf(4, "%s", "abcdef")                # ('abc', 6)
```

`snprintf` returns the text that fits into a buffer of the given size,
leaving room for the terminator, and the length of the untruncated text.
Too few arguments, or an argument of the wrong kind, raise `TypeError`.

## Parsing

```python
from shadowvfs.cstr import strtol, tokenize

strtol("0x1f", 0)         # (31, 4)  value and index where parsing stopped
strtol("  -12abc")        # (-12, 5)
tokenize("/a//b/", "/")   # ['a', 'b']
```

Out-of-range values from `strtol` are clamped to `LONG_MAX` or `LONG_MIN`.

## Logging

```python
from shadowvfs.log import Logger, KernelAssertionError

lines = []
log = Logger(sink=lines.append, trace_enabled=True)
log.info("booted in %d ms", 12)
log.warning("low memory")              # numbered, with file and line
log.trace("value=%#x", 255)
try:
    log.check(False, "ptr != NULL", "no modules")
except KernelAssertionError as exc:
    print(exc)
```

Errors go to the sink and, when given, to `error_sink` as well. Trace and
debug lines, including `block_start` and `block_end`, are dropped unless
enabled. Without a sink, lines go to standard error.

## What this package does not do

It holds no filesystem, device layer or console, and it installs no
command: it is a library of formatting, parsing and logging helpers only.