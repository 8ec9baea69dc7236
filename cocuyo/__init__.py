"""Settings, regions, frames, recording states and backend choice for screen-driven ambient lighting."""

__version__ = "0.4.2"