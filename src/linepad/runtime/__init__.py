"""Runtime services shared by every layer."""
