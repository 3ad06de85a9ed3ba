#zeller\patterns\patterns.py

import re

# ---------- Env flags ----------
FLAG_TRUE = re.compile(r"^\s*(?:1|true|yes|y|on)\s*$", re.IGNORECASE)
FLAG_FALSE = re.compile(r"^\s*(?:0|false|no|n|off)\s*$", re.IGNORECASE)

# ---------- Lists ----------
LIST_SEP = re.compile(r"\s*,\s*")

# ---------- Input lines ----------
COMMENT_LINE = re.compile(r"^\s*#")
