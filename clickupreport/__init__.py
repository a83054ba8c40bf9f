"""clickup-report: console reports over the tasks of a ClickUp space."""

__version__ = "0.1.0"
