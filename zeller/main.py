#main.py
"""

CLI entrypoint:
- Reads date strings, one per line (file path arg or stdin)
- Applies env run settings (ZELLER_ISO, ZELLER_CALENDAR, ZELLER_DAY_NAMES, ZELLER_DAYFIRST)
- Writes "Date,Weekday" CSV rows to stdout
- Emits concise log messages and exit codes

Exit codes:
 0 = success
 1 = one or more lines could not be computed, or no lines at all
 2 = input error (e.g., file missing, no stdin)
"""

import sys
from pathlib import Path

from zeller.core.errors import WeekdayError
from zeller.infra.logger import LoggerFactory
from zeller.infra.settings import RunSettings
from zeller.patterns.patterns import COMMENT_LINE
from zeller.pdio.writer import ResultWriter
from zeller.utils.dateparse import weekday_from_string

log = LoggerFactory.get_logger("zeller.main")


def _read_input_text(argv):
    """File path via argv[1] or stdin; error if neither."""
    if len(argv) >= 2:
        p = Path(argv[1])
        if not p.exists():
            raise FileNotFoundError(f"Input file not found: {p}")
        return p.read_text(encoding="utf-8")
    if sys.stdin.isatty():
        raise RuntimeError("No input provided. Pass a file path or pipe dates via stdin.")
    return sys.stdin.read()


def _compute_lines(raw, settings):
    """Return ([(date_text, weekday), ...], failure_count) for the non-blank lines."""
    rows, failures = [], 0
    for line in raw.splitlines():
        text = line.strip()
        if not text or COMMENT_LINE.match(text):
            continue
        try:
            rows.append((text, weekday_from_string(text, **settings.as_kwargs())))
        except WeekdayError as e:
            log.error("%s: %s", text, e.message)
            failures += 1
    return rows, failures


def main(argv, stream=None):
    LoggerFactory.configure()
    try:
        raw = _read_input_text(argv)
    except (OSError, RuntimeError) as e:
        log.error(str(e))
        return 2

    settings = RunSettings.from_env()
    rows, failures = _compute_lines(raw, settings)

    if not rows and not failures:
        log.error("No dates found in input. Nothing to compute.")
        return 1

    written = ResultWriter(stream).write(rows)
    log.info("Computed %d weekday(s), %d failed", written, failures)
    return 1 if failures else 0


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
