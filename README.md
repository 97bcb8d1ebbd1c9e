# loghier

Building blocks for logging in plain Python. It needs nothing outside the
standard library.

## What is inside

- `loghier.formatting`: `sprintf(fmt, *args)` and `snprintf(size, fmt, *args)`
  do C-style formatting. They handle the `s`, `c`, `d`, `u`, `o`, `x`, `X` and
  `p` conversions, the synonyms `i`, `D`, `U` and `O`, and `%%`. Flags
  `- + space # 0`, field widths and precisions work, and `*` takes a width or
  precision from the arguments. Integers wrap to 32 bits by default, to 16 bits
  with `h` and to 64 bits with `l` or `ll`. An unknown conversion prints only
  its conversion character. When the arguments run out or have the wrong type,
  a `TypeError` is raised. `snprintf` returns a pair: the text that fits in
  `size - 1` characters and the length of the full output.
- `loghier.printfspec.parse_format(fmt)` breaks a format string into `Literal`
  and `ConversionSpec` items. Joining their `raw` text gives back the format.
- `loghier.stringutil`:
  - `vform(fmt, args)` formats with a sequence of arguments.
  - `trim(s)` strips spaces, tabs, CRs and LFs from both ends.
  - `split(s, delimiter, max_segments)` splits into at most `max_segments`
    pieces, scanning from the left.
- `loghier.timestamp`: `TimeStamp(seconds, micro_seconds)`. `TimeStamp.now()`
  gives the current time and `milliseconds()` gives the sub-second part.
  `start_stamp()` returns the stamp taken when the package was loaded.
- `loghier.loggingevent.LoggingEvent(category_name, message, ndc, priority)` is
  one logging event. Its thread name and time stamp are filled in when it is
  made.
- `loghier.filter`: `Filter` is the base class for filter chains. A subclass
  implements `_decide(event)` and returns a `Decision`, which is `DENY`,
  `NEUTRAL` or `ACCEPT`. `decide(event)` walks the chain until a filter gives
  an answer that is not neutral.
- `loghier.appender` has these classes:
  - `Appender` keeps a registry of live appenders by name. Use
    `Appender.get_appender(name)`, `Appender.reopen_all()` and
    `Appender.close_all()` with it.
  - `AppenderSkeleton` drops events that are less severe than the threshold
    (`set_threshold`) or that the filter chain denies (`set_filter`). It then
    calls `_append`.
  - `LayoutAppender` formats events with a `Layout` and defaults to
    `BasicLayout`.
  - `BasicLayout` writes `"seconds PRIORITY category ndc: message\n"`.
- `loghier.ndc`: nested diagnostic contexts, one stack per thread. It has
  `push`, `pop`, `get`, `get_depth`, `clear`, `clone_stack`, `inherit` and
  `set_max_depth`. The maximum depth is recorded but not enforced.
  `get_ndc()` returns the current thread's `NDC` object.
- `loghier.stringqueue.StringQueueAppender` keeps formatted messages in a
  first-in, first-out queue in memory. Use `queue_size()` and `pop_message()`
  to read it.
- `loghier.syslogappender`:
  - `SyslogAppender(name, syslog_name, facility)` sends formatted events to the
    system log with the `syslog` module. Where that module is missing it raises
    `OSError`.
  - `to_syslog_priority(priority)` maps a priority to a syslog level.
  - `create_syslog_appender(params)` builds an appender from `FactoryParams`.
- `loghier.evaluator`:
  - `LevelEvaluator(level)` triggers on events at `level` or a more severe
    level.
  - `TriggeringEventEvaluatorFactory.get_instance()` is a shared factory with
    the `"level"` type registered.
  - `create_level_evaluator(params)` reads `level` as a name such as `"ERROR"`
    or as a number.
- `loghier.factoryparams`: `FactoryParams` is a dict of string parameters.
  `get_for(tag)` returns a `ParameterValidator`. Its `required` and `optional`
  methods raise `ConfigurationError` when a parameter is missing or invalid.

Priorities are integers. Smaller numbers are more severe: 0 is
FATAL/EMERG, 100 ALERT, 200 CRIT, 300 ERROR, 400 WARN, 500 NOTICE, 600 INFO,
700 DEBUG and 800 NOTSET.

## Example

```python
from loghier.formatting import sprintf
from loghier.stringutil import split, trim

sprintf("%-5s|%05d|%#x", "ab", 42, 255)   # 'ab   |00042|0xff'
trim("  hello\t\n")                       # 'hello'
split("a:b:c", ":", 2)                    # ['a', 'b:c']
```

Collect messages in memory:

```python
from loghier.loggingevent import LoggingEvent
from loghier.stringqueue import StringQueueAppender

appender = StringQueueAppender("memory")
appender.do_append(LoggingEvent("app.db", "connected", "", 600))
appender.queue_size()    # 1
appender.pop_message()   # '<seconds> INFO app.db : connected\n'
```

Each thread has its own nested diagnostic contexts:

```python
from loghier import ndc

ndc.push("request-1")
ndc.push("db")
ndc.get()     # 'request-1 db'
ndc.pop()     # 'db'
ndc.clear()
```

## What it does not do

- There is no category or logger hierarchy. Events are made by hand and
  passed to an appender's `do_append`.
- The only appenders are the in-memory queue and syslog. There are no file,
  console or network appenders.
- `BasicLayout` is the only layout. There is no pattern layout.
- There is no configuration-file loader and no command-line tool.

## Tests

```
pip install -e ".[test]"
pytest
```