"""Yeri — fare and payment status display for transit validator terminals."""

__version__ = "0.1.0"
