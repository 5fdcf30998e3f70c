# ftkit

Small helpers for ASCII characters, strings, byte buffers, 32-bit integers
and singly linked lists, plus a minimal `printf`-style formatter.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

### `ftkit.chars`

ASCII classification and case conversion. Each function accepts a
one-character string or an integer code.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
- `to_upper`, `to_lower` change only ASCII letters and return the same kind of
  value they were given (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `ftkit.memory`

Operations on `bytes`, `bytearray` and `memoryview` objects. Ranges that run
past the end of a buffer, or negative counts, raise `ValueError`.

- `memset(buffer, value, n)` fills the first `n` bytes with `value & 0xFF`.
- `bzero(buffer, n)` zeroes the first `n` bytes.
- `memcpy(dest, src, n)` copies `n` bytes to the start of `dest`; with both
  arguments `None` it returns `None`, with only one `None` it raises `TypeError`.
- `memmove(buffer, dest, src, n)` copies `n` bytes between two offsets of the
  same buffer, overlapping or not.
- `memchr(data, value, n)` returns the index of the first matching byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or `0`.
- `calloc(count, size)` returns a zero-filled `bytearray`; it raises
  `MemoryError` when `count * size` would overflow a machine size.

### `ftkit.numbers`

- `atoi(text)` skips leading whitespace, accepts one sign (more than one sign
  character gives `0`), reads digits up to the first non-digit and wraps the
  result to a signed 32-bit value.
- `itoa(n)` returns the decimal text of a signed 32-bit integer and raises
  `OverflowError` outside that range.

### `ftkit.strings`

Positions come back as indices, or `None` when nothing is found. The end of
a string counts as holding `"\0"`, so `strchr(s, "\0") == len(s)`.

- `strchr`, `strrchr`: first / last index of a character.
- `strncmp(s1, s2, n)`: `0` or the difference of the first differing codes.
- `strnstr(big, little, length)`: index of `little` within the first `length`
  characters of `big`; an empty `little` is found at `0`.
- `strlcpy(src, size)` returns `(copied_text, len(src))`.
- `strlcat(dst, src, size)` returns `(result_text, full_length)`.
- `substr`, `strjoin`, `strtrim`, `split` (empty pieces dropped).
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, char)` on each character; a returned
  character replaces the original. Mutable sequences are updated in place, a
  `str` gives a new `str`, `None` is passed back.

### `ftkit.linkedlist`

`LinkedList` is a singly linked list of `Node` objects (`content`, `next`).
It supports `len()`, iteration, `push_front`, `push_back` (both return the new
node), `last()` (the final node or `None`), `clear(delete)` (hands each value
to `delete` first), `for_each(f)` and `map(f, delete)`. If `f` raises during
`map`, the values already produced are passed to `delete` and the exception
propagates.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream
(standard output by default) and return the number of characters written.

### `ftkit.printf`

`format_string(fmt, *args)` returns the formatted text; `printf(fmt, *args)`
writes it to standard output and returns its length.

| Conversion | Argument | Output |
|---|---|---|
| `%d`, `%i` | int | signed 32-bit decimal |
| `%u` | int | unsigned 32-bit decimal |
| `%x`, `%X` | int | unsigned 32-bit hexadecimal, lower / upper case |
| `%s` | str or `None` | the string, or `(null)` |
| `%c` | one-character str or int | the character |
| `%p` | int, object or `None` | `0x` and the address in hex (an object's `id()`), or `(nil)` for `None` or zero |
| `%%` | none | `%` |

An unrecognised conversion letter writes nothing and uses no argument; a lone
`%` at the end of the format is ignored. Too few arguments raise `TypeError`;
extra ones are ignored.

## Examples

```python
from ftkit.printf import format_string, printf
from ftkit.strings import split, strtrim
from ftkit.numbers import atoi, itoa
from ftkit.linkedlist import LinkedList

format_string("%d items, %s, %x", 42, "ok", 255)   # '42 items, ok, ff'
count = printf("%c%c\n", "h", "i")                 # writes "hi\n", returns 3

split("  a b  c ", " ")        # ['a', 'b', 'c']
strtrim("xxhixx", "x")         # 'hi'
atoi("  -123abc")              # -123
itoa(-2147483648)              # '-2147483648'

items = LinkedList([1, 2, 3])
items.push_back(4)
len(items)                            # 4
list(items.map(lambda x: x * 2))      # [2, 4, 6, 8]
```

## Limitations

The formatter handles only the conversions listed above. It has no flags,
field widths, precisions or length modifiers, and no floating-point
conversions. The package is a library only; it installs no command.

## Running the tests

```
pytest
```