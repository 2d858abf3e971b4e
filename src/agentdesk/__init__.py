"""agentdesk - authenticated request gateway for the agent logistics console."""

__version__ = "0.1.0"
