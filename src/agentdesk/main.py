"""Main application entry point.

Run with ``uvicorn agentdesk.main:app``.
"""

from agentdesk.core.application import create_application
from agentdesk.core.logging import configure_logging

configure_logging()

app = create_application()
