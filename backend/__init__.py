"""QuickHire Flask backend."""
