"""HR Records package.

Organized by feature modules (validation, compliance, employees, timesheets, ...)
with a thin Flask controller layer and service/repository layers.
"""
