"""Worklog personal productivity API.

The package exposes nothing at import time; the presence of this file keeps
``worklog`` a regular package instead of a namespace package.
"""
