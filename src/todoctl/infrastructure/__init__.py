"""Infrastructure layer: store, change notification, persistence, wiring."""
