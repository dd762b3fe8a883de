"""HTTP middleware: timeout and request ID.

Applied in main app; order matters (last added = outermost).
"""

from orgchart.middleware.request_id import RequestIDMiddleware
from orgchart.middleware.timeout import TimeoutMiddleware

__all__ = ["RequestIDMiddleware", "TimeoutMiddleware"]
