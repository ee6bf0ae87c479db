"""
Configuration for the jiradc package.
"""

from jiradc.config.settings import JiraSettings, validate_config

__all__ = ["JiraSettings", "validate_config"]
