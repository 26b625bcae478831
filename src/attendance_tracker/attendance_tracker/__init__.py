"""Attendance Tracker package.

Organized by feature modules (subjects, timetable, attendance, analytics) with a
thin Flask controller layer over service and repository layers. Each
repository has a MySQL (remote) and a JSON-file (local) implementation.
"""
