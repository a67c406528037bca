"""Signals, buffers, intrusive lists and queues, fixed-size arrays, error tracing, debug output and an I2C scanner."""

__version__ = "0.1.0"