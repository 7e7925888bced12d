"""Follow-Up System package.

This package is organized by feature modules (people, members, attendance,
assignments) with a thin Flask controller layer over service/repository layers.
"""
