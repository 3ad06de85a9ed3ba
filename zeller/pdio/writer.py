"""
pdio/writer.py
CSV writer for computed weekday rows.

Responsibilities:
- Write a header row
- Write one "Date,Weekday" row per computed input
"""

import csv
import sys


class ResultWriter:
    """CSV writer targeting a text stream (stdout by default)."""

    header = ("Date", "Weekday")

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, rows):
        """Write (date_text, weekday) pairs; returns the number of rows written."""
        w = csv.writer(self.stream, lineterminator="\n")
        w.writerow(self.header)
        count = 0
        for date_text, weekday in rows:
            w.writerow([date_text, weekday])
            count += 1
        return count
