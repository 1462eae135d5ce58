# university_admission/logger.py
import logging
import sys

from university_admission.config import settings

LOG_LEVEL = logging.DEBUG if settings.env == "dev" else logging.INFO

# package-wide logger
logger = logging.getLogger("university_admission")
logger.setLevel(LOG_LEVEL)

# handler writing to stderr
handler = logging.StreamHandler(sys.stderr)
handler.setLevel(LOG_LEVEL)

# formatter: time, level, [logger name], message
fmt = logging.Formatter(
    "%(asctime)s %(levelname)-5s [university_admission] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
handler.setFormatter(fmt)
logger.addHandler(handler)
