"""Project defaults."""

PROG_NAME = "qfsadmin"

# Upper bound on response content accepted from the meta server (bytes).
MAX_CONTENT_LENGTH = 512 << 20

BACKEND_ENV = "QFSADMIN_BACKEND"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
