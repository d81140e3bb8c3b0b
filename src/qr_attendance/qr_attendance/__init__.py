"""QR attendance kiosk package.

This package is organized by feature modules (employees, attendance, reports, ...)
with a thin Flask controller layer over service/repository layers.
"""
