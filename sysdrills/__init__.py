"""Runnable drills on simulated processes, sockets and thread synchronisation."""

__version__ = "0.1.0"