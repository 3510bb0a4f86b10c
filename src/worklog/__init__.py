"""Work Log Tracker package.

This package is organized by feature modules (employees, tags, breaks, logs, ...)
with a thin Flask controller layer on top of service/repository layers.
"""
