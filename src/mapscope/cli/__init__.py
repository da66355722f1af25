"""Terminal front end for the map viewer."""
