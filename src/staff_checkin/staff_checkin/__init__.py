"""Staff check-in package.

Organized by feature modules (checkin, attendance, staff) with a thin Flask
controller layer over service/repository layers.
"""
