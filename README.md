# eglibpy

A small collection of general-purpose utilities. None of them needs anything beyond the standard library.

## Modules

- `eglibpy.slist.SList` is an ordered list with the operations of a singly linked list. It offers `append`, `prepend`, `concat`, `copy`, `find`, `find_custom`, `index`, `nth`, `last`, `remove`, `remove_all`, `remove_at`, `insert_before`, `insert_sorted`, `reverse`, `foreach` and a stable `sort` driven by a three-way comparison function. Membership tests compare items with `==`.
- `eglibpy.queue.Queue` is a double-ended queue with `push_head`, `push_tail`, `pop_head`, `is_empty` and `foreach`. `pop_head` on an empty queue raises `IndexError`.
- `eglibpy.ptrarray.PtrArray` is a growable array. It supports indexing, `add` and `set_size`. `remove` and `remove_index` keep the order of the remaining items. `remove_fast` and `remove_index_fast` move the last item into the freed slot. `sort(compare)` sorts with a comparison function, and `sort_with_data(compare, user_data)` sorts with the quicksort below.
- `eglibpy.qsort.qsort_with_data(items, compare, user_data)` sorts a mutable sequence in place using `compare(a, b, user_data)`. The sort is not stable.
- `eglibpy.pattern.PatternSpec` is a glob matcher for `*` (any run of characters) and `?` (any single character). `pattern_match_string(spec, string)` does the same as `spec.match(string)`. A trailing `*` needs at least one character to match. An empty pattern matches nothing.
- `eglibpy.shell` provides three functions for POSIX-style command lines. `parse_argv` splits a line into arguments. `quote` wraps a string in single quotes. `unquote` removes shell quoting. Unfinished quotes or escapes, and empty input to `parse_argv`, raise `ShellError`, a subclass of `ValueError`.
- `eglibpy.path` provides `build_path`, `path_get_dirname`, `path_get_basename` and `find_program_in_path`. `find_program_in_path` searches `PATH`, or the current directory when `PATH` is unset or empty. It also provides the program-name helpers `set_prgname` and `get_prgname`.
- `eglibpy.module.module_build_path(directory, module_name, windows=None)` builds the file name of a shared library. On Unix it gives `libNAME.so`; a name that already starts with `lib` gets no extra prefix. On Windows it gives `NAME.dll`.
- `eglibpy.output.MessageSink` routes print and log messages to handlers you can replace:
  - `print` and `printerr` format messages printf-style.
  - `log` passes messages to the log handler. The default handler writes `domain: message` to standard output.
  - Levels come from `LogLevel`. `ERROR` is always fatal, and `set_always_fatal` adds more fatal levels.
  - A message at a fatal level raises `FatalLogError`, and so does `assertion_message`.

## Installation

```
pip install eglibpy
```

To also install the test dependencies:

```
pip install eglibpy[test]
```

## Examples

```python
from eglibpy.pattern import PatternSpec
from eglibpy.shell import parse_argv, quote
from eglibpy.path import build_path, path_get_basename

PatternSpec("*.txt").match("notes.txt")       # True
parse_argv("ls -l 'my dir'")                  # ['ls', '-l', 'my dir']
quote("it's")                                 # "'it'\\''s'"
build_path("/", "usr/", "/local", "bin")      # 'usr/local/bin'
path_get_basename("/home/user/")              # 'user'
```

```python
from eglibpy.slist import SList

items = SList([3, 1, 2])
items.sort(lambda a, b: (a > b) - (a < b))
list(items)                                   # [1, 2, 3]
```

```python
from eglibpy.output import MessageSink, LogLevel

sink = MessageSink()
captured = []
sink.set_print_handler(captured.append)
sink.print("%s=%d", "x", 1)                   # captured == ['x=1']
```

## What it does not do

- `eglibpy.module` only builds library file names. It does not load shared libraries or look up symbols in them.
- `eglibpy.shell` parses and quotes command lines but never runs them. The package starts no other programs.
- There is no command-line tool. The package is used only as a library.