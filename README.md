# bettery

`bettery` keeps track of how long a battery lasts and estimates how much
runtime is left. It records how long each 10% drop in charge takes, keeps
the eleven most recent measurements in a ring, and derives a remaining-time
estimate from their median. Once a full charge has been recorded, the time
since that charge is also taken into account. It also tracks a Bluetooth
connection state and renders a compact text screen with the clock, the date,
the connection state, the charge level, the time since the last full charge
and the estimated time remaining.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `bettery` command:

```
bettery
```

It opens the stored battery history, prints the screen, and then prints it
again every `--interval` seconds (60 by default) until interrupted or until
`--ticks` refreshes have been printed. The history is written back on exit.

Each screen has four lines:

```
<time>
<weekday>, <day>. <month>
out <time since last full charge> | <bt ok / no bt>
in <estimated time remaining> | <charge label>
```

Options:

- `--storage PATH` — file holding the settings and battery history
  (default `~/.bettery.json`).
- `--bluetooth` / `--no-bluetooth` — whether Bluetooth counts as connected
  (default connected).
- `--charge N` — charge percent, 0 to 100 (default 100).
- `--charging`, `--plugged` — the battery is charging / the charger is
  plugged in.
- `--12h` — use a 12-hour clock instead of a 24-hour one.
- `--ticks N` — number of refreshes after the first screen.
- `--interval SECONDS` — seconds between refreshes.

### What the command does not do

The command does not read battery or Bluetooth state from the machine. The
charge level, charging and plugged flags and the Bluetooth state come from
the options above and stay fixed while it runs. Live state can be supplied
from Python by passing your own `bluetooth_peek` and `battery_peek`
callables to `WatchfaceBase` and calling the monitors' `handle_event`
methods when the state changes.

## Library use

Time intervals are shown in a short form: minutes alone below an hour,
hours and minutes below a day, days and hours beyond that.

```python
from bettery.formatting import format_interval

format_interval(300)      # "5m"
format_interval(7500)     # "2h5"
format_interval(90000)    # "1d1"
```

The battery history lives in a `Storage`, a JSON file that gets defaults
for any missing entries when opened and is written back on `persist()` or
when closed:

```python
from bettery.storage import Storage

with Storage("bettery.json") as storage:
    print(storage.last_full_timestamp)   # -1 until a full charge is recorded
```

Putting the parts together:

```python
from bettery.estimate_data import BatteryChargeState
from bettery.watchface import WatchfaceBase
from bettery.window import WatchWindow

base = WatchfaceBase(
    "bettery.json",
    None,
    lambda: True,                          # Bluetooth connected
    lambda: BatteryChargeState(80),        # 80%, not charging, not plugged
)
window = WatchWindow(base)
base.on_change = window.update_time
base.start()
window.show()
print(window.render())
window.hide()
base.stop()
```

The modules are:

- `bettery.formatting` — `StringBuffer`, a bounded text buffer that
  silently truncates once full, and `format_interval`.
- `bettery.quicksort` — `quicksort`, used to take the median of the
  recorded samples.
- `bettery.logsupport` — `LogCategory` flags and `log`, which emits debug
  messages through the `bettery` logger for enabled categories only.
- `bettery.estimate_data` — `BatteryChargeState`, `BatteryEstimateData`
  (both convertible with `to_dict` / `from_dict`) and
  `default_estimate_data()`, the initial history.
- `bettery.storage` — `Storage` and `BatteryDisplay`, the flags choosing
  which battery details `BatteryMonitor.state_string()` and
  `BatteryEstimator.estimate_string()` include.
- `bettery.estimate` — `BatteryEstimator`, which updates the history from
  new charge states and computes the remaining seconds.
- `bettery.hardware` — `BluetoothMonitor` and `BatteryMonitor`, which
  record state changes and call a callback.
- `bettery.watchface` — `WatchfaceBase`, which opens the storage and starts
  and stops both monitors.
- `bettery.window` — `WatchWindow`, the text screen, and
  `format_battery_label()`, the five-character charge label.
- `bettery.main` — `main()`, the `bettery` command.