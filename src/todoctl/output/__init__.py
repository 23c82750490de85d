"""Output layer: Rich rendering, result formatting, and the list view."""
