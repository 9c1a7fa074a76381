"""Request helpers: error bodies, route guards and service wiring."""
