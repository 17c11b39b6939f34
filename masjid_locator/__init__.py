"""Masjid location resolution and prayer-time schedules for UK cities."""
