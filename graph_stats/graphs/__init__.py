"""Edge-list loading and the graph statistics algorithms."""
