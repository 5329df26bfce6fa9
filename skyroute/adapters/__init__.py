"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Timetable storage (CSV files)
- Earliest-arrival itinerary solving
- Generic graph path solving (DAG, Bellman-Ford)
- Caching (in-memory, null)
"""
