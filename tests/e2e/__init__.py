"""
Browser test package for the practice form.

Tests share one suite-scoped browser session and run in file order:
first name, gender, date of birth, submit.
"""
