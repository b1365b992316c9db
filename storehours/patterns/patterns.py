#storehours\patterns\patterns.py

import re

# ---------- Time ranges ----------
# "08:00-18:00", "08:00 – 18:00", "08:00 às 18:00"
RANGE_SEPARATOR = re.compile(r"\s*[-–às]+\s*")

# "08:00" / "8:" / "8"
CLOCK_SEPARATOR = ":"
CLOCK_COMPONENT = re.compile(r"[0-9]+")

# ---------- Periods ----------
# "08:00-12:00 / 14:00-18:00"
PERIOD_SEPARATOR = "/"
