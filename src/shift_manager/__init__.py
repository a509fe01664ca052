"""Shift Manager package.

Web tier for a small-business shift scheduling and payroll system. It is
organized by feature modules (employees, shifts, attendance, payroll, ...)
with a thin Flask controller layer over service and repository layers. The
repositories talk to the persistence backend through its REST API.
"""
