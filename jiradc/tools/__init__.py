"""
Tools package for jiradc.

This package provides the Jira agent tools and the MCP server exposing them.
"""
