"""Sunday Attendance package.

This package is organized by feature modules (students, attendance, export, ...)
with a thin Flask controller layer and service/repository layers underneath.
"""
