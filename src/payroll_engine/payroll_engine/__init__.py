"""Payroll Engine package.

Feature modules (schedules, attendance, payroll) turn a day's clock events into
credited work hours and derive period payroll figures from those hours. Every
calculation is a pure function over frozen dataclasses; I/O stays with callers.
"""
