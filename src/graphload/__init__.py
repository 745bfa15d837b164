"""graphload: bulk loader pipeline coordinator for triple/quad stores."""

__version__ = "0.1.0"
