# omnicode

A small structured-logging core. It grades alignment scores on several
severity scales, builds typed log entries, and writes each entry both as a
human-readable "scroll" line and as a JSON line, in per-day files.

No third-party dependencies; Python 3.10 or later.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Severity scales

`omnicode.severity` holds five string enums. Scores are integers from 0 to
255 (anything else raises `TypeError` or `ValueError`); 100 is perfectly
aligned and the level falls as the score drops. Scores above 100 land on
the lowest level of the scale.

| Scale            | Levels |
|------------------|--------|
| `SeverityBase10` | 10 levels, `Perfect` (91–100) to `Fatal` (0–10) |
| `SeverityBase5`  | 20 levels, `Perfect` (96–100) to `Fatal` (0–5) |
| `SeverityBase20` | 5 levels, `Perfect` (81–100) to `Fatal` (0–20) |
| `SeverityBase25` | 4 levels, `AnchorPerfect` (76–100) to `AnchorFatal` (0–25) |
| `SeverityBase50` | `Pass` (51–100), `Warning` (1–50), `Fail` (0) |

Each enum's `derive_from(score)` picks the level. `omnicode.alignment`
offers the same as functions: `evaluate_base10`, `evaluate_base5`,
`evaluate_base20` and `evaluate_base25` agree with `derive_from`, while
`evaluate_base50` is strict pass/fail: `Pass` for 51–100, `Fail` for
everything else.

```python
from omnicode.severity import SeverityBase10, SeverityBase50
from omnicode.alignment import evaluate_base5, evaluate_base50

SeverityBase10.derive_from(96)    # SeverityBase10.PERFECT ("Perfect")
evaluate_base5(42)                # SeverityBase5.TENSE ("Tense")
SeverityBase50.derive_from(20)    # SeverityBase50.WARNING
evaluate_base50(20)               # SeverityBase50.FAIL
```

## Log entries

`omnicode.log_entries` provides the `BaseLogEntry` dataclass and three
entries built on it: `CriticalLogEntry`, `DebugLogEntry` and
`SpiritualLogEntry`.

- `BaseLogEntry.create(timestamp, level, message, source, category, alignment_score)`
  derives the entry's `SeverityBase10` from the score.
- `CriticalLogEntry.create(...)`, `DebugLogEntry.create(...)` and
  `SpiritualLogEntry.create(...)` stamp the entry with the current UTC time
  (ISO 8601) and set the level to `ERROR`, `DEBUG` and `INFO` respectively.
- `CriticalLogEntry.escalate()` always returns `SeverityBase10.FATAL`.
- `DebugLogEntry.verbosity()` returns `"low"`.
- `SpiritualLogEntry.quote()` returns the scripture reference or a
  placeholder; `is_highly_weighted()` is true for a weight of 8 or more.
- Every entry has `to_dict()`, a JSON-ready mapping.

```python
from omnicode.log_entries import CriticalLogEntry, SpiritualLogEntry

crit = CriticalLogEntry.create(
    "Fatal exception in core module.", "Gate", "runtime", "E-CORE-001", 3
)
crit.escalate()          # SeverityBase10.FATAL

note = SpiritualLogEntry.create(
    "A shift was felt in system alignment.", "NovaAI", "spiritual",
    "Isaiah 58:12", 3, 91,
)
note.quote()               # "Isaiah 58:12"
note.is_highly_weighted()  # False
note.to_dict()             # {"base": {...}, "scripture_reference": ..., ...}
```

`omnicode.log_type.LogType` enumerates log kinds (heartbeat, runtime,
fatal, insight, ...); `LogType.category()` names the group a kind belongs
to: `Info`, `Warning`, `Error`, `Debug`, `Critical` or `Spiritual`.

`omnicode.scoring.LogTypeScoringProfile(log_type, severity_level, alignment_score)`
computes `base_score` as the level's multiplier (`Perfect` 100 down to
`Fatal` 10, unknown names 0) times the alignment score, divided by 100.

## Writing and routing

- `omnicode.log_writer.write_scroll(text, root=None)` appends a text line to
  `<root>/scrolls/<YYYY-MM-DD>.log` and returns the file path.
- `omnicode.log_writer.write_json(log, root=None)` appends one compact JSON
  line (using `to_dict()` when the object has one) to
  `<root>/json/<YYYY-MM-DD>.json` and returns the file path.

  The root defaults to `/app/logs`, and dates are UTC. Both writers are best
  effort: on failure they print a warning to standard error and return
  `None` instead of raising.
- `omnicode.log_router.format_scroll(entry)` renders any of the four entry
  types as its scroll line (other types raise `TypeError`), and
  `omnicode.log_router.route(entry, root=None)` writes it both ways and
  returns the scroll text.
- `omnicode.event_log.log_event(event, path="watchtower.log")` appends a
  `[<unix seconds>] - <event>` line to a plain event log; unlike the
  writers above, it raises `OSError` if the file cannot be written.

## Command line

```
omnicode
omnicode --log-root ./logs
```

Prints a boot message, then `omnicode.watchtower.monitor_and_log` routes
one base, one critical, one debug and one spiritual start-up entry to the
log files under `--log-root` (default `/app/logs`), and prints a
confirmation. `monitor_and_log(root=None)` can also be called directly and
returns the entries it logged.

## What it does not do

The command only records the fixed set of start-up entries; it does not
watch anything afterwards, take commands, rotate or prune log files, or
read logs back.