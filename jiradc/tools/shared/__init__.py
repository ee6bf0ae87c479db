"""Helpers shared by the Jira service and tools."""
