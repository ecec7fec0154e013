# enginekit

enginekit is a small standard library for game-engine code. It holds the everyday helpers an engine leans on. It uses only the Python standard library.

## Modules

- `enginekit.strutil` has the string helpers:
  - padding and truncation with `Padding` and `pad_string`, plus `spaces`
  - trimming with `trim_string`, `trim_quotes`, `trim_start`, `trim_end` and `erase_chars`
  - splitting with `tokenize`, `split_string`, `split_path`, `split_filename` and `get_quoted_string`
  - case-insensitive comparison with `str_icmp`, `starts_with` and `ends_with`
  - `hash_str`, a 32-bit hash that folds case
  - `write_binary_string` and `read_binary_string` for strings ending in a zero byte
  - `to_string`, which formats scalars and 2–4 element vectors
  - `lexical_cast` and `to_bool`. `lexical_cast` raises `ValueError` when the text cannot be converted.
- `enginekit.crc32` computes a reflected CRC-32 with polynomial `0x04C11DB7`.
  - `CRC32` is incremental: call `update`, then `digest`, and `reset` to start again.
  - `get_crc(text)` returns 0 for the empty string.
- `enginekit.args` provides `AppArgs`, a cache of command-line options.
  - Tokens before the first `-option` are default arguments.
  - Each `-option` collects the tokens that follow it.
  - Option lookups ignore case.
- `enginekit.log` contains the logging pieces:
  - `Logger` sends every message to the callbacks you register. It has the helpers `info`, `warning` and `error`.
  - `get_logger()` returns the process-wide logger.
  - `logger_time()` and `logger_stamp(file, line)` format a time and a source location.
  - `ReferenceCounter` counts object creations and deletions and produces a status table.
- `enginekit.mathutil` contains the math helpers:
  - the float constants `PI`, `FLOAT_EPSILON` and the like
  - `clamp`, `is_between`, `is_power_of_2`, `round_int`, `fast_sqrt`, `to_radian` and `to_degree`
  - `BitField`, a set of flags
  - `Random`, a seedable generator with 32-bit wrap-around, and the module-level `float_random` and `int_random`
  - `Color`, an RGB named tuple with named colours such as `Color.RED` and `Color.DARK_GOLDEN_ROD`
- `enginekit.parser` provides `Parser`, which keeps or drops `#if PC` / `#if XBOX` / `#else` / `#endif` blocks.
  - Nesting goes at most three levels deep.
  - Malformed or unbalanced directives raise `ParserSyntaxError`. The error carries `message`, `context` and `line_number`.
- `enginekit.timer` holds the timing tools:
  - `Timer` is a stopwatch with a clock you can inject, and it can be used as a context manager.
  - `Profiler` holds one `Profile` per `ProfileID`, plus a `RenderProfile`. Each averages its values over 0.2-second windows.
- `enginekit.files` provides named file databases under one base path:
  - `FileSystemManager` sets the base path and holds the databases. `add_database` raises `ValueError` when the name is already taken.
  - `FileDatabase` offers `list_files`, `list_paths`, `make_file_handle` and `find_file_handle`.
  - `FileHandle` is a file name within a database.
  - `file_is_up_to_date` and `find_file_in_path` are module-level helpers.
- `enginekit.system` holds the threading primitives:
  - `Thread` runs `func(arg)`, and its `join` returns the result or raises the error again.
  - `Event` is an auto-reset event. Its timeouts are in milliseconds.
  - `Mutex` is a recursive mutex and a context manager.
  - `sleep` and `wait_for_multiple` take milliseconds.
  - `get_counter`, `get_counter_frequency` and `calculate_time_difference` work with nanosecond ticks.

## Install

```
pip install .
```

## Examples

```python
from enginekit.crc32 import get_crc
from enginekit.args import AppArgs
from enginekit.strutil import tokenize

print(hex(get_crc("123456789")))        # 0xcbf43926

args = AppArgs()
args.append("level1 -width 800 -fullscreen")
args.has_option("-WIDTH")               # True
args.option_args("-width")              # ['800']
args.default_args()                     # ['level1']

tokenize("a  b c")                      # ['a', 'b', 'c']
```

```python
from enginekit.parser import Parser

text = "#if PC\npc\n#else\nxbox\n#endif"
Parser(compile_for_pc=True).process(text)    # 'pc\n'
Parser(compile_for_pc=False).process(text)   # 'xbox\n'
```

```python
from enginekit.log import get_logger

messages = []
get_logger().add_callback(messages.append)
get_logger().info("loaded ", 3, " levels")
# messages == ['** INFO  **   loaded 3 levels']
```

## What it does not do

enginekit is a library only. It has:

- no command-line program
- no rendering, windowing, input or sound
- no scene or object model
- no debug UI

## Tests

```
pip install .[test]
pytest
```