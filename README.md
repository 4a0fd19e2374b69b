# ftkit

A small library of helpers: ASCII character tests, integer parsing and
formatting with C integer semantics, C-style string and byte-buffer
operations, a singly linked list, a minimal `printf`, a chunked line reader,
and a two-stack sorter that records the operations it performs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each accepts a one-character string or an integer code. The
predicates return booleans; the converters return the same kind of value
they were given and change ASCII letters only.

### `ftkit.numbers`

- `atoi(text)` parses a leading integer leniently: leading whitespace and
  one sign are accepted, parsing stops at the first non-digit, and the
  result is truncated to 32 bits.
- `atoi_long(text)` parses strictly as a 64-bit integer and raises
  `InvalidNumberError` (a `ValueError`) for blank text, for a character
  other than a space after the digits, and for out-of-range values.
- `itoa(n)` formats a 32-bit integer and raises `OverflowError` outside that
  range.

### `ftkit.strings`

`strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`,
`strtrim`, `split`, `strmapi`, `striteri`, `strldup`. Searches return an
index, or `None` when nothing is found; searching for `"\0"` finds the end
of the string. `strlcpy(src, size)` and `strlcat(dst, src, size)` return a
pair of the resulting text and the length the result was meant to have.
`split` drops empty pieces. `striteri` works in place on a mutable sequence
of characters.

### `ftkit.memory`

`memchr`, `memcmp`, `memcpy`, `memmove`, `memset`, `bzero`, `calloc`. They
work on bytes-like buffers; writing functions need a mutable one such as a
`bytearray`. `memmove(buf, dst, src, n)` moves bytes between offsets of one
buffer. Ranges past the end of a buffer raise `ValueError`; `calloc` raises
`OverflowError` when the size does not fit.

### `ftkit.lists`

`Node` and `LinkedList`. A list is built from an optional iterable and has
`push_front`, `push_back`, `last`, `clear` (with an optional delete
callback), `for_each`, `map`, `len()` and iteration over the contents.

### `ftkit.output`

- `sprintf(fmt, *args)` supports `%c %s %p %d %i %u %x %X %%`, with no
  flags, widths or precisions. `%s` of `None` renders `(null)`. An unknown
  conversion, a lone trailing `%` or a missing argument raises
  `FormatError`.
- `printf(fmt, *args, stream=None)` writes the same text and returns its
  length.
- `put_char`, `put_str`, `put_endl`, `put_nbr` write to a text stream
  (standard output by default) and return the number of characters written.
- `number_in_base(n, base)` writes a non-negative integer using the digits
  of `base`.

### `ftkit.linereader`

`LineReader(stream, buffer_size=42)` reads a text or binary stream in
fixed-size chunks. `read_line()` returns the next line, newline included,
or `None` at the end; iterating yields every line. `get_next_line(stream)`
keeps one reader per stream and returns its next line.

### `ftkit.arguments`

- `validate_args(argv)` parses `argv[1:]` (the first item is the program
  name) as distinct 32-bit integers and raises `ArgumentError` otherwise.
- `compress(values)` replaces each value by its rank, starting at 1.
- `find_min_index(values)` returns the position of the first smallest value
  below `INT_MAX`, or `None`.

### `ftkit.ring`

`Ring(name, values=(), log=None)` is a circular stack whose first value is
the top. It has `pop`, `push`, `push_to`, `rotate`, `reverse_rotate`,
`rotate_by` and `swap`. Moves are reported to `log` as `p<dest>`,
`r<name>`, `rr<name>` and `s<name>`; by default they are printed.

### `ftkit.sorter`

`sort(values)` takes a permutation of 1..n, listed from the top of the
stack, and returns the list of instructions that sorts it using two rings
`a` and `b`. It raises `ValueError` for anything else. Lower-level helpers
include `sort_short`, `long_sort`, `shortest_path`, `seek_smaller`,
`seek_larger`, `find_forward`, `find_backward`, `find_min`, `find_max`,
`is_sorted`, `is_reverse_sorted`, `any_rotation_sorted` and
`any_rotation_reverse_sorted`.

## Example

```python
from ftkit.arguments import compress, validate_args
from ftkit.output import sprintf
from ftkit.sorter import sort

ranks = compress(validate_args(["prog", "3", "1", "2"]))
for op in sort(ranks):
    print(op)

print(sprintf("%s is %x in hex", "255", 255))
```

## What it does not do

ftkit is a library only. It installs no command: there is no interactive
shell and no command-line sorting program; the functions above are called
from your own code.