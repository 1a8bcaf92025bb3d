"""Boundary adapters: persistence for courses, students and registrations."""
