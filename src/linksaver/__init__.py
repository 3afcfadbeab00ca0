"""Link Saver: bookmark capture client with automatic summaries."""

__version__ = "0.1.0"
