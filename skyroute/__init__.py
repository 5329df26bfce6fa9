"""SkyRoute - shortest paths on weighted graphs and earliest-arrival
routing over weekly recurring flight schedules."""

__version__ = "0.1.0"
