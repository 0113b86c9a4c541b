# negi

A small collection of text, buffer and filesystem helpers.

## Modules

- `negi.chartype`: byte classification tables. `ctype_of(byte)` returns the
  `CType` class bits of a byte (control, space, punctuation, digit, upper,
  lower, hex digit). `mb_type(byte)` returns the byte's `MbType` role in a
  UTF-8 sequence. `is_surrogate`, `is_high_surrogate` and `is_low_surrogate`
  test UTF-16 code units.
- `negi.unicode`: `iseoc(c)` is true for clause-ending punctuation (comma,
  period, question mark, their ideographic and fullwidth forms, and the
  ellipsis). `iswide(c)` is true for characters that take two terminal
  columns.
- `negi.strutil`: `strskip(s1, s2)` removes a prefix or returns `None`.
  `mbslen` counts the characters of UTF-8 bytes, and `mbtowc` decodes the
  first sequence. `mbsws` gives the byte offset of the first whitespace
  character. `wcsws` gives the index of the first whitespace UTF-16 unit and
  steps over surrogate pairs.
- `negi.hex`: `hex_to_bin` converts one digit and returns -1 for a non-digit.
  `hex2bin(src, count)` decodes `count` bytes and raises `ValueError` on bad or
  missing digits. `bin2hex` encodes bytes as lower-case hex.
- `negi.levenshtein`: `levenshtein(s1, s2, weight)` gives a weighted edit
  distance that counts adjacent transpositions. The costs come from
  `LevWeight(add, delete, sub, swp)`, and each defaults to 1.
- `negi.strbuf`: `StrBuf` is a mutable string with a working-space offset
  `ws`. It offers `puts`/`putc`/`printf` and their `_at` and `_at_ws` forms,
  plus `trim`, `trunc`, `trunc_to_ws`, `init_ws`, `reinit_ws`, `pth_append`,
  `pth_append_at_ws` and `pth_to_dirname`. With `sanitize_paths=True` it warns
  about mixed or trailing path separators.
- `negi.strlist`: `StrList` is an ordered list of strings. `push` adds at the
  front, `push_back` adds at the end and `pop` removes from the front. It also
  has `read_line` and `to_argv`. `wrap_text(text, wrap)` splits text into lines
  of about `wrap` columns (default 80) and breaks at whitespace or
  clause-ending punctuation.
- `negi.exitchain`: `ExitChain` holds callbacks and runs them last-in
  first-out with `run`. The chain `default_chain` runs at interpreter exit.
- `negi.fiter`: `fiter(root, flags)` walks a directory depth-first and yields
  `File` entries. `FiterFlag` options control it: `LIST_DIR` and `RECUR_DIR`
  yield directories before or after their contents, `NO_REG`, `NO_LNK` and
  `NO_UNK` filter entries, `USE_STAT` fills in `st`, and `USE_FD` opens
  regular files.
- `negi.help`: option descriptions are `Opt` values built with `opt_group`,
  `opt_switch`, `opt_bit`, `opt_number`, `opt_string`, `opt_filename`,
  `opt_command`, `opt_cmdmode` and `opt_choice`. `format_help(usage, opts)`
  builds a help screen. `show_help(usage, opts, is_err)` prints it and raises
  `SystemExit`.

## What it does not do

`negi.help` only describes options and formats their help text. It does not
parse command lines. The package has no command-line program, and it does not
locate credential files or the running executable.

## Installation

```
pip install .
```

## Example

```python
from negi.hex import bin2hex, hex2bin
from negi.levenshtein import LevWeight, levenshtein
from negi.strlist import wrap_text

print(levenshtein("version", "verison", LevWeight(add=1, delete=1, sub=1, swp=1)))

print(bin2hex(b"\x01\xab"))   # '01ab'
print(hex2bin("01ab", 2))     # b'\x01\xab'

for line in wrap_text("a fairly long sentence that needs wrapping", 16):
    print(line)
```

## Running the tests

```
pip install .[test]
pytest
```