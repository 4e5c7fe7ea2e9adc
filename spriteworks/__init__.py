"""Building blocks for 2D sprite games: vector maths and collision, actors and components, timed events, input, images and sprites."""

__version__ = "0.1.0"