import sys

import structlog

# Route structlog output to stderr during the test session so log lines don't leak into doctest output.
structlog.configure(logger_factory=structlog.PrintLoggerFactory(sys.stderr))
