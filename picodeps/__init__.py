"""Pico SDK library detection and CMake link glue for generated C sources."""

__version__ = "0.1.0"
